"""
单腿期权 Greeks 计算的输入与结果值对象

OptionsGreeksInput 以 "天" 为单位描述到期时间, 由计算服务换算为年化时间。
OptionsGreeksResult 额外携带波动率来源、定价偏差和卖方风险等级。
"""
from dataclasses import dataclass, replace
from typing import Optional, Sequence

from ..risk.risk_level import RiskLevel
from .greeks import OptionType
from .iv import FallbackType


@dataclass(frozen=True)
class OptionsGreeksInput:
    """
    单腿 Greeks 计算输入

    Attributes:
        spot_price: 当前标的 (指数) 价格
        strike_price: 行权价
        market_price: 当前期权权利金
        option_type: 期权类型
        days_to_expiry: 距到期天数
        risk_free_rate: 无风险利率, None 时使用配置默认值 (7%)
        historical_spot_prices: 历史标的价格 (旧 → 新), 用于 HV 回退
        use_implied_volatility: 是否求解 IV, 关闭时直接使用 HV
    """
    spot_price: float
    strike_price: float
    market_price: float
    option_type: OptionType
    days_to_expiry: int
    risk_free_rate: Optional[float] = None
    historical_spot_prices: Optional[Sequence[float]] = None
    use_implied_volatility: bool = True

    def with_option_type(self, option_type: OptionType) -> "OptionsGreeksInput":
        """返回替换期权类型后的新输入"""
        return replace(self, option_type=option_type)


@dataclass(frozen=True)
class OptionsGreeksResult:
    """
    单腿 (或组合) Greeks 计算结果

    Attributes:
        delta / gamma / theta / vega / rho: Greeks
        implied_volatility: 市场隐含波动率 (输入被拒绝时为 None)
        historical_volatility: 30 日历史波动率 (数据不足时为 None)
        volatility_used: 实际用于定价的波动率, 永不为 None
        iv_converged: 牛顿法是否收敛
        iv_used_fallback: 是否使用了回退波动率
        fallback_type: 回退来源
        theoretical_price: BS 理论价格
        market_price: 市场价格
        price_difference: 市场价格 - 理论价格
        risk_level: 卖方风险等级
        error_message: 输入非法时的错误描述
    """
    delta: float
    gamma: float
    theta: float
    vega: float
    rho: float
    implied_volatility: Optional[float]
    historical_volatility: Optional[float]
    volatility_used: float
    iv_converged: bool
    iv_used_fallback: bool
    theoretical_price: float
    market_price: float
    price_difference: float
    risk_level: RiskLevel
    fallback_type: Optional[FallbackType] = None
    error_message: str = ""
