"""
Greeks 相关值对象

定义 Black-Scholes 定价输入、单腿 Greeks 结果以及期权类型枚举。
"""
from dataclasses import dataclass
from enum import Enum


class OptionType(str, Enum):
    """期权类型"""
    CALL = "call"
    PUT = "put"


@dataclass(frozen=True)
class BlackScholesInput:
    """
    Black-Scholes 定价输入参数

    Attributes:
        spot_price: 标的价格
        strike_price: 行权价
        time_to_expiry: 剩余到期时间 (年化, 如 5/365)
        risk_free_rate: 无风险利率 (小数, 如 0.07)
        volatility: 波动率 (隐含或历史, 小数)
        option_type: 期权类型
    """
    spot_price: float
    strike_price: float
    time_to_expiry: float
    risk_free_rate: float
    volatility: float
    option_type: OptionType


@dataclass(frozen=True)
class BlackScholesGreeks:
    """
    单腿理论价格与 Greeks

    Attributes:
        price: 理论价格 (>= 0)
        delta: ∂V/∂S
        gamma: ∂²V/∂S² (call/put 相同, >= 0)
        theta: 每日时间衰减 (年化值 / 365)
        vega: 波动率每变动 1% 的价格变化 (>= 0)
        rho: 利率每变动 1% 的价格变化
    """
    price: float = 0.0
    delta: float = 0.0
    gamma: float = 0.0
    theta: float = 0.0
    vega: float = 0.0
    rho: float = 0.0
