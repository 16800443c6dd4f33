"""
隐含波动率相关值对象

定义 IV 求解的报价输入 (不含 sigma)、求解结果以及回退类型。
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .greeks import OptionType


class FallbackType(str, Enum):
    """IV 求解失败时使用的回退波动率来源"""
    HISTORICAL = "historical"
    INITIAL = "initial"


@dataclass(frozen=True)
class IVQuote:
    """
    IV 求解的单个报价输入

    Attributes:
        market_price: 期权市场价格
        spot_price: 标的价格
        strike_price: 行权价
        time_to_expiry: 剩余到期时间（年化）
        risk_free_rate: 无风险利率
        option_type: 期权类型
    """
    market_price: float
    spot_price: float
    strike_price: float
    time_to_expiry: float
    risk_free_rate: float
    option_type: OptionType


@dataclass(frozen=True)
class IVSolverResult:
    """
    隐含波动率求解结果

    implied_volatility 为 None 表示输入校验失败, 该腿无法定价;
    converged 为 True 时 error_message 必为 None 且 used_fallback 为 False。

    Attributes:
        implied_volatility: 求解得到的 IV, 或回退波动率
        iterations: 迭代次数
        converged: 牛顿法是否收敛
        error_message: 失败原因
        used_fallback: 是否使用了回退波动率
        fallback_type: 回退来源
    """
    implied_volatility: Optional[float] = None
    iterations: int = 0
    converged: bool = False
    error_message: Optional[str] = None
    used_fallback: bool = False
    fallback_type: Optional[FallbackType] = None
