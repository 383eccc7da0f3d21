"""
Tournament Models - 锦标赛数据模型
"""

from dataclasses import dataclass, field
from typing import Any, Optional

from src.engine.models.result import ScoreInputs


@dataclass
class ParticipantScore:
    """参与者得分

    Attributes:
        wallet: 钱包地址（小写）
        inputs: 聚合后的计分输入
        score: 综合得分 (0-100)
        rank: 排名（排序后填充）
        skipped_records: 无法解析而被跳过的历史记录数
    """

    wallet: str
    inputs: ScoreInputs = field(default_factory=ScoreInputs)
    score: float = 0.0
    rank: Optional[int] = None
    skipped_records: int = 0

    def to_dict(self) -> dict[str, Any]:
        """转换为字典（字段名与 tournament_scores 表一致）"""
        return {
            "wallet_address": self.wallet,
            "total_premium_paid": self.inputs.total_premium,
            "total_profit": self.inputs.total_profit,
            "trade_count": self.inputs.trade_count,
            "streak_days": self.inputs.streak_days,
            "score": self.score,
            "rank": self.rank,
        }
