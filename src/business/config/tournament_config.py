"""
Tournament Configuration - 锦标赛配置管理

加载和管理锦标赛计分参数：
- referrer_address: 平台 referrer 地址，只统计经本平台下单的交易
- collateral_decimals: 交易记录缺少 collateralDecimals 时的默认精度
- day_length_hours: 计算连续交易天数时每"天"的小时数

配置来源: 环境变量 > YAML 文件 > dataclass 默认值
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

from src.data.utils.units import USDC_DECIMALS
from src.engine.tournament.streak import DAY_LENGTH_HOURS

logger = logging.getLogger(__name__)

DEFAULT_REFERRER_ADDRESS = "0x46dc9557573efad018cf98f8d4e14a6da71e546c"
REFERRER_ENV_VAR = "OPTIXEL_REFERRER_ADDRESS"


@dataclass
class TournamentConfig:
    """锦标赛计分配置"""

    referrer_address: str = DEFAULT_REFERRER_ADDRESS
    collateral_decimals: int = USDC_DECIMALS
    day_length_hours: float = DAY_LENGTH_HOURS

    def __post_init__(self) -> None:
        if self.day_length_hours <= 0:
            raise ValueError(f"day_length_hours 必须为正数: {self.day_length_hours}")
        if self.collateral_decimals < 0:
            raise ValueError(f"collateral_decimals 不能为负: {self.collateral_decimals}")

    @classmethod
    def from_yaml(cls, path: str | Path) -> "TournamentConfig":
        """从 YAML 文件加载配置"""
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TournamentConfig":
        """从字典创建配置"""
        defaults = cls()
        scoring = data.get("scoring") or {}
        streak = data.get("streak") or {}

        return cls(
            referrer_address=str(data.get("referrer_address", defaults.referrer_address)),
            collateral_decimals=int(
                scoring.get("collateral_decimals", defaults.collateral_decimals)
            ),
            day_length_hours=float(
                streak.get("day_length_hours", defaults.day_length_hours)
            ),
        )

    def apply_env_overrides(self) -> "TournamentConfig":
        """用环境变量覆盖配置（先加载 .env 文件）"""
        load_dotenv()
        referrer = os.getenv(REFERRER_ENV_VAR)
        if referrer:
            logger.debug(f"Referrer address overridden by {REFERRER_ENV_VAR}")
            self.referrer_address = referrer.strip()
        return self

    @classmethod
    def load(cls) -> "TournamentConfig":
        """加载锦标赛配置"""
        config_file = Path(__file__).parent.parent.parent.parent / "config" / "tournament.yaml"
        if config_file.exists():
            config = cls.from_yaml(config_file)
        else:
            config = cls()
        return config.apply_env_overrides()
