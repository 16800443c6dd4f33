"""
Risk 子模块 - 风控相关值对象

包含卖方风险等级、判定阈值和卖出建议。
"""
from .risk_level import RiskLevel, RiskLevelConfig, SellAdvice

__all__ = [
    "RiskLevel",
    "RiskLevelConfig",
    "SellAdvice",
]
