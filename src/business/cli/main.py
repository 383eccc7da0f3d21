"""
CLI Main Entry Point - 命令行主入口

使用 Click 库构建命令行工具。
"""

import click

from src.business.cli.commands.payoff import payout, scenarios
from src.business.cli.commands.tournament import rank, score


@click.group()
@click.version_option(version="0.1.0", prog_name="optixel")
def cli() -> None:
    """Optixel 期权游戏 - 收益与锦标赛计算工具

    提供结算赔付、交易预览、锦标赛计分等功能。
    """
    pass


# 注册子命令
cli.add_command(payout)
cli.add_command(scenarios)
cli.add_command(score)
cli.add_command(rank)


if __name__ == "__main__":
    cli()
