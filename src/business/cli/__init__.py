"""
Business Layer CLI - 业务层命令行工具

提供命令：
- payout: 计算结算赔付
- scenarios: 交易预览情景表
- score: 计算锦标赛得分
- rank: 计算锦标赛排行榜
"""

from src.business.cli.main import cli

__all__ = ["cli"]
