"""
Configuration Management - 配置管理

加载和管理业务层配置：
- PayoffConfig: 收益预览配置
- TournamentConfig: 锦标赛计分配置
"""

from src.business.config.payoff_config import ChartConfig, PayoffConfig
from src.business.config.tournament_config import TournamentConfig

__all__ = ["ChartConfig", "PayoffConfig", "TournamentConfig"]
