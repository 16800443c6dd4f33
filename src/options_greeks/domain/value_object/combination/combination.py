"""
Combination 组合策略值对象

定义双腿卖方组合相关的枚举、值对象：
- CombinationType: 组合策略类型枚举
- CombinedGreeksResult: 组合级 Greeks 结果 (combined + ce + pe)
"""
from dataclasses import dataclass
from enum import Enum

from ..pricing.options_greeks import OptionsGreeksResult


class CombinationType(Enum):
    """组合策略类型"""
    STRADDLE = "straddle"  # 同一行权价 CE + PE
    STRANGLE = "strangle"  # 不同行权价 CE + PE


@dataclass(frozen=True)
class CombinedGreeksResult:
    """
    双腿组合 Greeks 结果

    combined 的各项 Greeks 为 ce 与 pe 对应字段之和。
    """
    combination_type: CombinationType
    combined: OptionsGreeksResult
    ce: OptionsGreeksResult
    pe: OptionsGreeksResult
