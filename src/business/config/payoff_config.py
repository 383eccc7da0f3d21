"""
Payoff Configuration - 收益预览配置

交易预览（收益曲线、情景表、最佳收益价位）使用的参数。
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from src.data.utils.units import STRIKE_DECIMALS
from src.engine.payoff.profit import (
    DEFAULT_CHART_RANGE,
    DEFAULT_CHART_STEPS,
    DEFAULT_SCENARIO_OFFSETS,
    DEFAULT_VANILLA_TARGET_MOVE,
)


@dataclass
class ChartConfig:
    """收益曲线配置

    Attributes:
        range_pct: 以行权价为中心的价格范围 (0.2 = ±20%)
        steps: 采样区间数（采样点数 = steps + 1）
    """

    range_pct: float = DEFAULT_CHART_RANGE
    steps: int = DEFAULT_CHART_STEPS


@dataclass
class PayoffConfig:
    """收益预览配置"""

    chart: ChartConfig = field(default_factory=ChartConfig)
    scenario_offsets: tuple[float, ...] = DEFAULT_SCENARIO_OFFSETS
    vanilla_target_move: float = DEFAULT_VANILLA_TARGET_MOVE
    strike_decimals: int = STRIKE_DECIMALS

    @classmethod
    def from_yaml(cls, path: str | Path) -> "PayoffConfig":
        """从 YAML 文件加载配置"""
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PayoffConfig":
        """从字典创建配置"""
        config = cls()

        if "chart" in data:
            chart = data["chart"] or {}
            config.chart = ChartConfig(
                range_pct=float(chart.get("range_pct", config.chart.range_pct)),
                steps=int(chart.get("steps", config.chart.steps)),
            )
        if "scenario_offsets" in data:
            config.scenario_offsets = tuple(float(o) for o in data["scenario_offsets"])
        if "vanilla_target_move" in data:
            config.vanilla_target_move = float(data["vanilla_target_move"])
        if "strike_decimals" in data:
            config.strike_decimals = int(data["strike_decimals"])

        return config

    @classmethod
    def load(cls) -> "PayoffConfig":
        """加载收益预览配置"""
        config_file = Path(__file__).parent.parent.parent.parent / "config" / "payoff.yaml"
        if config_file.exists():
            return cls.from_yaml(config_file)
        return cls()
