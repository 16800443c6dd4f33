"""
Combination 子模块 - 组合策略相关值对象

包含组合策略类型和组合级 Greeks 结果。
"""
from .combination import CombinationType, CombinedGreeksResult

__all__ = [
    "CombinationType",
    "CombinedGreeksResult",
]
