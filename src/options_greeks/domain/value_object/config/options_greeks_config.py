"""OptionsGreeksConfig 配置值对象"""

from dataclasses import dataclass


@dataclass(frozen=True)
class OptionsGreeksConfig:
    """单腿 Greeks 计算服务配置"""

    default_risk_free_rate: float = 0.07  # 印度市场无风险利率
    default_volatility: float = 0.2  # IV 与 HV 均不可用时的波动率
    historical_lookback_days: int = 30  # HV 回看天数
    days_per_year: int = 365  # DTE → 年化时间的换算基数
