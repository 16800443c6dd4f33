"""
GreeksSeriesBuilder 领域服务

对组合权利金 K 线逐根计算组合 Greeks, 供图表叠加 Greeks 曲线使用。

输入 DataFrame 列:
- datetime: K 线时间
- ce_close: CE 收盘价
- pe_close: PE 收盘价
- spot (可选): 同一时刻的标的价格, 缺失时使用固定 spot_price

每根 K 线的剩余天数按 K 线日期到到期日的日历天数计算。
"""
from datetime import date
from typing import List, Optional, Sequence

import pandas as pd

from src.options_greeks.domain.domain_service.combination.combination_greeks_calculator import (
    CombinationGreeksCalculator,
)
from src.options_greeks.domain.domain_service.selection.expiry_resolver import ExpiryResolver
from src.options_greeks.domain.value_object.pricing import OptionsGreeksInput, OptionType

SERIES_COLUMNS = [
    "datetime",
    "premium",
    "days_to_expiry",
    "delta",
    "gamma",
    "theta",
    "vega",
    "rho",
    "implied_volatility",
    "risk_level",
]

_REQUIRED_COLUMNS = ("datetime", "ce_close", "pe_close")


class GreeksSeriesBuilder:
    """逐 K 线组合 Greeks 序列构建器"""

    def __init__(
        self,
        combination_calculator: Optional[CombinationGreeksCalculator] = None,
    ) -> None:
        self._combination_calculator = combination_calculator or CombinationGreeksCalculator()

    def build(
        self,
        candles: pd.DataFrame,
        ce_strike: float,
        pe_strike: float,
        expiry_date: date,
        spot_price: Optional[float] = None,
        risk_free_rate: Optional[float] = None,
        historical_spot_prices: Optional[Sequence[float]] = None,
    ) -> pd.DataFrame:
        """
        构建组合 Greeks 序列

        Args:
            candles: 组合 K 线
            ce_strike: CE 行权价
            pe_strike: PE 行权价 (Straddle 时与 ce_strike 相同)
            expiry_date: 到期日
            spot_price: 固定标的价格, candles 含 spot 列时可省略
            risk_free_rate: 无风险利率, None 时使用计算服务的默认值
            historical_spot_prices: 历史标的价格, 用于 HV 回退

        Returns:
            列为 SERIES_COLUMNS 的 DataFrame, 行序与输入一致

        Raises:
            ValueError: 缺少必需列, 或既无 spot 列也未给出 spot_price
        """
        missing = [col for col in _REQUIRED_COLUMNS if col not in candles.columns]
        if missing:
            raise ValueError(f"K 线缺少必需列: {missing}")
        has_spot_column = "spot" in candles.columns
        if not has_spot_column and spot_price is None:
            raise ValueError("需要提供 spot 列或 spot_price")

        straddle = ce_strike == pe_strike
        rows: List[dict] = []

        for candle in candles.itertuples(index=False):
            timestamp = pd.Timestamp(candle.datetime)
            days = ExpiryResolver.days_between(timestamp.date(), expiry_date)
            spot = float(candle.spot) if has_spot_column else spot_price

            ce_input = OptionsGreeksInput(
                spot_price=spot,
                strike_price=ce_strike,
                market_price=float(candle.ce_close),
                option_type=OptionType.CALL,
                days_to_expiry=days,
                risk_free_rate=risk_free_rate,
                historical_spot_prices=historical_spot_prices,
            )
            pe_input = OptionsGreeksInput(
                spot_price=spot,
                strike_price=pe_strike,
                market_price=float(candle.pe_close),
                option_type=OptionType.PUT,
                days_to_expiry=days,
                risk_free_rate=risk_free_rate,
                historical_spot_prices=historical_spot_prices,
            )

            if straddle:
                result = self._combination_calculator.calculate_straddle(ce_input, pe_input)
            else:
                result = self._combination_calculator.calculate_strangle(ce_input, pe_input)
            combined = result.combined

            rows.append({
                "datetime": candle.datetime,
                "premium": combined.market_price,
                "days_to_expiry": days,
                "delta": combined.delta,
                "gamma": combined.gamma,
                "theta": combined.theta,
                "vega": combined.vega,
                "rho": combined.rho,
                "implied_volatility": combined.implied_volatility,
                "risk_level": combined.risk_level.value,
            })

        return pd.DataFrame(rows, columns=SERIES_COLUMNS)
