"""
历史波动率计算

对数收益率标准差年化: σ_annual = stdev(ln(Pₜ / Pₜ₋₁)) × √252
"""
import math
from typing import Optional, Sequence

import pandas as pd

TRADING_DAYS_PER_YEAR = 252


def calculate_historical_volatility(
    prices: Sequence[float],
    lookback_days: int = 30,
) -> Optional[float]:
    """
    计算年化历史波动率

    Args:
        prices: 收盘价序列 (旧 → 新)
        lookback_days: 回看价格个数, 不足时使用全部价格

    Returns:
        年化历史波动率; 少于 2 个价格或没有有效收益率时返回 None
    """
    if prices is None or len(prices) < 2 or lookback_days < 2:
        return None

    window = pd.Series(list(prices), dtype="float64").tail(lookback_days)
    previous = window.shift(1)

    # 任一端价格非正的相邻对不参与计算
    valid = (previous > 0) & (window > 0)
    if not valid.any():
        return None

    log_returns = (window[valid] / previous[valid]).map(math.log)

    # 总体标准差 (除以 n)
    daily_volatility = float(log_returns.std(ddof=0))
    return daily_volatility * math.sqrt(TRADING_DAYS_PER_YEAR)
