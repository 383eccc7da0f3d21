"""
Tournament Commands - 锦标赛计分命令

- score: 根据聚合输入计算单个得分
- rank: 从索引器历史导出文件计算排行榜
"""

import json
import logging
from dataclasses import replace
from datetime import timezone
from pathlib import Path

import click

from src.business.config.tournament_config import TournamentConfig
from src.business.tournament.scorer import TournamentScorer, rank_participants
from src.engine.tournament.score import calc_score_breakdown


logger = logging.getLogger(__name__)


class TournamentDateTime(click.DateTime):
    """UTC 时间参数；end_of_day 时纯日期输入取当天 23:59:59"""

    def __init__(self, end_of_day: bool = False) -> None:
        super().__init__()
        self.end_of_day = end_of_day

    def convert(self, value, param, ctx):
        is_date_only = isinstance(value, str) and len(value.strip()) == 10
        result = super().convert(value, param, ctx)
        if self.end_of_day and is_date_only:
            result = result.replace(hour=23, minute=59, second=59)
        return result.replace(tzinfo=timezone.utc)


@click.command()
@click.option("--premium", type=float, required=True, help="已付权利金总额")
@click.option("--profit", type=float, required=True, help="已实现盈亏总额（可为负）")
@click.option("--trades", type=click.IntRange(min=0), required=True, help="已结算交易笔数")
@click.option("--streak", type=click.IntRange(min=0), default=0, help="最长连续交易天数")
def score(premium: float, profit: float, trades: int, streak: int) -> None:
    """计算锦标赛得分

    \b
    示例：
      optixel score --premium 1000 --profit 500 --trades 16 --streak 9
    """
    breakdown = calc_score_breakdown(premium, profit, trades, streak)

    click.echo(f"权利金:   {breakdown.normalized_premium:6.2f}")
    click.echo(f"收益率:   {breakdown.normalized_profit:6.2f}")
    click.echo(f"交易笔数: {breakdown.normalized_trades:6.2f}")
    click.echo(f"连续天数: {breakdown.normalized_streak:6.2f}")
    click.echo("-" * 20)
    click.echo(f"得分:     {breakdown.score:6.2f}")


@click.command()
@click.argument("history_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--start",
    type=TournamentDateTime(),
    required=True,
    help="锦标赛开始时间 (UTC)",
)
@click.option(
    "--end",
    type=TournamentDateTime(end_of_day=True),
    required=True,
    help="锦标赛结束时间 (UTC，纯日期表示当天结束)",
)
@click.option(
    "--day-length",
    type=float,
    default=None,
    help="连续天数计算的每天小时数（默认取配置，旧版为 26）",
)
@click.option(
    "--output",
    "-o",
    type=click.Choice(["text", "json"]),
    default="text",
    help="输出格式",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="显示详细日志",
)
def rank(
    history_file: Path,
    start,
    end,
    day_length: float | None,
    output: str,
    verbose: bool,
) -> None:
    """根据交易历史计算排行榜

    HISTORY_FILE 为 JSON 对象：{钱包地址: [索引器历史记录, ...]}

    \b
    示例：
      optixel rank histories.json --start 2025-01-01 --end 2025-01-31
    """
    log_level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        histories = json.loads(history_file.read_text(encoding="utf-8"))
        if not isinstance(histories, dict):
            raise ValueError("文件顶层必须是 {钱包地址: [...]} 对象")

        config = TournamentConfig.load()
        if day_length is not None:
            config = replace(config, day_length_hours=day_length)

        scorer = TournamentScorer(start, end, config)
    except ValueError as e:
        click.echo(f"❌ 输入错误: {e}", err=True)
        raise SystemExit(1)

    leaderboard = rank_participants(scorer.score_all(histories))

    if output == "json":
        click.echo(json.dumps([p.to_dict() for p in leaderboard], indent=2))
        return

    click.echo(f"🏆 排行榜 ({len(leaderboard)} 人)")
    click.echo("-" * 60)
    for p in leaderboard:
        click.echo(
            f"#{p.rank:<3} {p.wallet:<44} {p.score:6.2f}  "
            f"({p.inputs.trade_count} 笔, 连续 {p.inputs.streak_days} 天)"
        )
