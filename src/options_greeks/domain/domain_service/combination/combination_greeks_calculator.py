"""
CombinationGreeksCalculator 领域服务

计算双腿卖方组合 (Straddle / Strangle) 的 Greeks：
- ce、pe 分别按单腿计算 (期权类型强制为 call / put)
- delta、gamma、theta、vega、rho 以及各项价格直接相加
- implied_volatility、volatility_used 取两腿平均
- 风险等级取两腿中最严重者

Strangle 与 Straddle 算法相同, 仅行权价由调用方给出不同值。
"""
from typing import Optional

from src.options_greeks.domain.domain_service.greeks.options_greeks_calculator import (
    OptionsGreeksCalculator,
)
from src.options_greeks.domain.value_object.combination import (
    CombinationType,
    CombinedGreeksResult,
)
from src.options_greeks.domain.value_object.pricing import (
    OptionsGreeksInput,
    OptionsGreeksResult,
    OptionType,
)
from src.options_greeks.domain.value_object.risk import RiskLevel


class CombinationGreeksCalculator:
    """组合级 Greeks 计算服务"""

    def __init__(self, calculator: Optional[OptionsGreeksCalculator] = None) -> None:
        self._calculator = calculator or OptionsGreeksCalculator()

    def calculate_straddle(
        self,
        ce_input: OptionsGreeksInput,
        pe_input: OptionsGreeksInput,
    ) -> CombinedGreeksResult:
        """同一行权价 CE + PE"""
        return self._calculate(CombinationType.STRADDLE, ce_input, pe_input)

    def calculate_strangle(
        self,
        ce_input: OptionsGreeksInput,
        pe_input: OptionsGreeksInput,
    ) -> CombinedGreeksResult:
        """不同行权价 CE (较高) + PE (较低)"""
        return self._calculate(CombinationType.STRANGLE, ce_input, pe_input)

    def _calculate(
        self,
        combination_type: CombinationType,
        ce_input: OptionsGreeksInput,
        pe_input: OptionsGreeksInput,
    ) -> CombinedGreeksResult:
        ce = self._calculator.calculate(ce_input.with_option_type(OptionType.CALL))
        pe = self._calculator.calculate(pe_input.with_option_type(OptionType.PUT))

        return CombinedGreeksResult(
            combination_type=combination_type,
            combined=self.combine(ce, pe),
            ce=ce,
            pe=pe,
        )

    @staticmethod
    def combine(ce: OptionsGreeksResult, pe: OptionsGreeksResult) -> OptionsGreeksResult:
        """
        合并两腿结果。

        Args:
            ce: 看涨腿结果
            pe: 看跌腿结果

        Returns:
            组合级 OptionsGreeksResult
        """
        if ce.implied_volatility is not None and pe.implied_volatility is not None:
            implied_volatility = (ce.implied_volatility + pe.implied_volatility) / 2
        else:
            implied_volatility = None

        error_message = "; ".join(msg for msg in (ce.error_message, pe.error_message) if msg)

        return OptionsGreeksResult(
            delta=ce.delta + pe.delta,
            gamma=ce.gamma + pe.gamma,
            theta=ce.theta + pe.theta,
            vega=ce.vega + pe.vega,
            rho=ce.rho + pe.rho,
            implied_volatility=implied_volatility,
            historical_volatility=ce.historical_volatility,
            volatility_used=(ce.volatility_used + pe.volatility_used) / 2,
            iv_converged=ce.iv_converged and pe.iv_converged,
            iv_used_fallback=ce.iv_used_fallback or pe.iv_used_fallback,
            theoretical_price=ce.theoretical_price + pe.theoretical_price,
            market_price=ce.market_price + pe.market_price,
            price_difference=ce.price_difference + pe.price_difference,
            risk_level=RiskLevel.worst(ce.risk_level, pe.risk_level),
            error_message=error_message,
        )
