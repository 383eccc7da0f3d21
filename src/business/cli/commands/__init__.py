"""
CLI Commands - 命令行子命令
"""

from src.business.cli.commands.payoff import payout, scenarios
from src.business.cli.commands.tournament import rank, score

__all__ = ["payout", "scenarios", "score", "rank"]
