"""
卖方风险等级相关值对象

定义风险等级枚举、风险等级阈值配置以及对应的卖出建议。
"""
from dataclasses import dataclass
from enum import Enum


class RiskLevel(str, Enum):
    """期权卖方风险等级"""
    SAFE = "safe"
    CAUTION = "caution"
    DANGER = "danger"

    @property
    def severity(self) -> int:
        """严重程度: danger > caution > safe"""
        return _SEVERITY[self]

    @classmethod
    def worst(cls, *levels: "RiskLevel") -> "RiskLevel":
        """返回若干风险等级中最严重的一个"""
        return max(levels, key=lambda level: level.severity)


_SEVERITY = {
    RiskLevel.SAFE: 0,
    RiskLevel.CAUTION: 1,
    RiskLevel.DANGER: 2,
}


@dataclass(frozen=True)
class RiskLevelConfig:
    """
    风险等级判定阈值

    阈值为经验调校的领域常量, 默认值需保持不变。

    Attributes:
        danger_days: 剩余天数 <= 该值 → danger
        caution_days: 剩余天数 <= 该值 → caution
        caution_gamma: gamma 高于该值 → caution
        caution_theta: theta 高于该值 (衰减不足) → caution
        weak_greeks_days: 剩余天数 <= 该值时检查 theta/vega 强度
        weak_theta: theta 低于该值视为偏弱
        weak_vega: |vega| 低于该值视为偏弱
    """
    danger_days: int = 7
    caution_days: int = 14
    caution_gamma: float = 0.008
    caution_theta: float = -0.5
    weak_greeks_days: int = 20
    weak_theta: float = 0.3
    weak_vega: float = 0.3


@dataclass(frozen=True)
class SellAdvice:
    """
    面向卖方的操作建议

    Attributes:
        risk_level: 风险等级
        badge: 面板徽标文字
        action: 操作建议
    """
    risk_level: RiskLevel
    badge: str
    action: str
