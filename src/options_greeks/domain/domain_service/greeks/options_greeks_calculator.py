"""
OptionsGreeksCalculator 领域服务

单腿期权 (CE 或 PE) Greeks 计算的统一入口:
1. 计算历史波动率 (若提供历史标的价格)
2. 求解隐含波动率 (牛顿法, 失败时回退到 HV 或默认值)
3. 以确定的波动率计算 BS 理论价格与 Greeks
4. 判定卖方风险等级

所有失败情形都体现在结果字段中, 不抛出异常。
"""
import logging
from typing import Optional

from src.options_greeks.domain.domain_service.pricing.bs_pricer import BlackScholesPricer
from src.options_greeks.domain.domain_service.pricing.iv.iv_solver import IVSolver
from src.options_greeks.domain.domain_service.pricing.volatility.historical_volatility import (
    calculate_historical_volatility,
)
from src.options_greeks.domain.domain_service.risk.risk_level_classifier import RiskLevelClassifier
from src.options_greeks.domain.value_object.config import OptionsGreeksConfig
from src.options_greeks.domain.value_object.pricing import (
    BlackScholesInput,
    IVQuote,
    OptionsGreeksInput,
    OptionsGreeksResult,
)
from src.options_greeks.domain.value_object.risk import RiskLevel

logger = logging.getLogger(__name__)


class OptionsGreeksCalculator:
    """单腿期权 Greeks 计算服务"""

    def __init__(
        self,
        iv_solver: Optional[IVSolver] = None,
        pricer: Optional[BlackScholesPricer] = None,
        risk_classifier: Optional[RiskLevelClassifier] = None,
        config: Optional[OptionsGreeksConfig] = None,
    ) -> None:
        self._pricer = pricer or BlackScholesPricer()
        self._iv_solver = iv_solver or IVSolver(pricer=self._pricer)
        self._risk_classifier = risk_classifier or RiskLevelClassifier()
        self._config = config or OptionsGreeksConfig()

    def calculate(self, params: OptionsGreeksInput) -> OptionsGreeksResult:
        """
        计算单腿期权的 Greeks 与元数据

        Args:
            params: 单腿 Greeks 计算输入

        Returns:
            OptionsGreeksResult, volatility_used 始终有值
        """
        validation_error = self._validate(params)
        if validation_error:
            logger.debug("单腿 Greeks 输入非法: %s", validation_error)
            return self._rejected(params, validation_error)

        cfg = self._config
        T = params.days_to_expiry / cfg.days_per_year
        r = (
            params.risk_free_rate
            if params.risk_free_rate is not None
            else cfg.default_risk_free_rate
        )

        historical_volatility = None
        if params.historical_spot_prices is not None and len(params.historical_spot_prices) >= 2:
            historical_volatility = calculate_historical_volatility(
                params.historical_spot_prices, cfg.historical_lookback_days
            )

        implied_volatility = None
        iv_converged = False
        iv_used_fallback = False
        fallback_type = None

        if params.use_implied_volatility:
            iv_result = self._iv_solver.solve_with_fallback(
                IVQuote(
                    market_price=params.market_price,
                    spot_price=params.spot_price,
                    strike_price=params.strike_price,
                    time_to_expiry=T,
                    risk_free_rate=r,
                    option_type=params.option_type,
                ),
                params.historical_spot_prices,
                lookback_days=cfg.historical_lookback_days,
            )
            implied_volatility = iv_result.implied_volatility
            iv_converged = iv_result.converged
            iv_used_fallback = iv_result.used_fallback
            fallback_type = iv_result.fallback_type
            volatility_used = self._first_positive(
                implied_volatility, historical_volatility, cfg.default_volatility
            )
        else:
            volatility_used = self._first_positive(
                historical_volatility, cfg.default_volatility
            )

        greeks = self._pricer.calculate_all_greeks(
            BlackScholesInput(
                spot_price=params.spot_price,
                strike_price=params.strike_price,
                time_to_expiry=T,
                risk_free_rate=r,
                volatility=volatility_used,
                option_type=params.option_type,
            )
        )
        risk_level = self._risk_classifier.classify(params.days_to_expiry, greeks)

        return OptionsGreeksResult(
            delta=greeks.delta,
            gamma=greeks.gamma,
            theta=greeks.theta,
            vega=greeks.vega,
            rho=greeks.rho,
            implied_volatility=implied_volatility,
            historical_volatility=historical_volatility,
            volatility_used=volatility_used,
            iv_converged=iv_converged,
            iv_used_fallback=iv_used_fallback,
            fallback_type=fallback_type,
            theoretical_price=greeks.price,
            market_price=params.market_price,
            price_difference=params.market_price - greeks.price,
            risk_level=risk_level,
        )

    # ------------------------------------------------------------------
    # 内部辅助
    # ------------------------------------------------------------------

    @staticmethod
    def _first_positive(*candidates: Optional[float]) -> float:
        """返回第一个大于 0 的波动率, 0 与 None 均视为不可用"""
        for value in candidates[:-1]:
            if value:
                return value
        return candidates[-1]

    @staticmethod
    def _validate(params: OptionsGreeksInput) -> str:
        """校验输入参数，返回错误信息或空字符串"""
        if params.spot_price <= 0 or params.strike_price <= 0:
            return "spot_price 和 strike_price 必须大于 0"
        if params.days_to_expiry < 0:
            return "days_to_expiry 不能为负数"
        return ""

    def _rejected(self, params: OptionsGreeksInput, error: str) -> OptionsGreeksResult:
        return OptionsGreeksResult(
            delta=0.0,
            gamma=0.0,
            theta=0.0,
            vega=0.0,
            rho=0.0,
            implied_volatility=None,
            historical_volatility=None,
            volatility_used=self._config.default_volatility,
            iv_converged=False,
            iv_used_fallback=False,
            theoretical_price=0.0,
            market_price=params.market_price,
            price_difference=params.market_price,
            risk_level=RiskLevel.DANGER,
            error_message=error,
        )
