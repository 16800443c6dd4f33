"""波动率计算子模块。"""

from .historical_volatility import TRADING_DAYS_PER_YEAR, calculate_historical_volatility

__all__ = ["TRADING_DAYS_PER_YEAR", "calculate_historical_volatility"]
