"""
IVSolver 隐含波动率求解器

从市场价格反推隐含波动率 (牛顿法), 并提供带回退链的求解入口:
牛顿法 → 以历史波动率为初值重试 → 历史波动率 → 默认初始猜测。

校验失败与不收敛均以 IVSolverResult 返回, 不抛出异常。
"""
import logging
from dataclasses import replace
from typing import List, Optional, Sequence

from ....value_object.config.iv_solver_config import IVSolverConfig
from ....value_object.pricing.greeks import BlackScholesInput, OptionType
from ....value_object.pricing.iv import FallbackType, IVQuote, IVSolverResult
from ..bs_pricer import BlackScholesPricer
from ..volatility.historical_volatility import calculate_historical_volatility

logger = logging.getLogger(__name__)

# vega 低于该值时停止迭代, 避免除零
_MIN_VEGA = 1e-10
# 市场价格允许低于内在价值的比例 (报价取整误差)
_INTRINSIC_TOLERANCE = 0.99
_DEFAULT_HV_LOOKBACK_DAYS = 30


class IVSolver:
    """隐含波动率求解器"""

    def __init__(
        self,
        config: Optional[IVSolverConfig] = None,
        pricer: Optional[BlackScholesPricer] = None,
    ):
        self._config = config or IVSolverConfig()
        self._pricer = pricer or BlackScholesPricer()

    @property
    def config(self) -> IVSolverConfig:
        return self._config

    # ------------------------------------------------------------------
    # 公开接口
    # ------------------------------------------------------------------

    def solve(
        self,
        quote: IVQuote,
        config: Optional[IVSolverConfig] = None,
    ) -> IVSolverResult:
        """
        牛顿法求解单个期权的隐含波动率。

        σₙ₊₁ = σₙ - (V(σₙ) - 市场价) / (vega × 100), 并限制在
        [min_volatility, max_volatility] 内。达到最大迭代次数仍未收敛时返回最后的 σ,
        converged=False。
        """
        cfg = config or self._config

        # ---- 输入校验 ----
        validation_error = self._validate(quote)
        if validation_error:
            logger.debug("IV 求解输入被拒绝: %s (%s)", validation_error, quote)
            return IVSolverResult(error_message=validation_error)

        try:
            return self._solve_newton(quote, cfg)
        except (OverflowError, ValueError, ZeroDivisionError) as e:
            return IVSolverResult(error_message=f"计算异常: {e}")

    def solve_batch(
        self,
        quotes: List[IVQuote],
        config: Optional[IVSolverConfig] = None,
    ) -> List[IVSolverResult]:
        """
        批量求解隐含波动率。

        每个报价独立求解，单个失败不影响其他。
        返回列表与输入列表保持相同顺序和长度。
        """
        return [self.solve(quote, config) for quote in quotes]

    def solve_with_fallback(
        self,
        quote: IVQuote,
        historical_prices: Optional[Sequence[float]] = None,
        config: Optional[IVSolverConfig] = None,
        lookback_days: int = _DEFAULT_HV_LOOKBACK_DAYS,
    ) -> IVSolverResult:
        """
        带回退链的 IV 求解。

        历史波动率取最近 lookback_days 个价格计算。

        1. 默认初始猜测求解, 收敛则返回
        2. 输入校验失败 (implied_volatility 为 None) 时原样返回
        3. 有历史波动率时以其为初值重试, 收敛则返回
        4. 仍未收敛: 返回历史波动率 (fallback_type=historical)
        5. 无历史波动率: 返回初始猜测 (fallback_type=initial)
        """
        cfg = config or self._config

        first_attempt = self.solve(quote, cfg)
        if first_attempt.converged or first_attempt.implied_volatility is None:
            return first_attempt

        historical_volatility = None
        if historical_prices is not None and len(historical_prices) >= 2:
            historical_volatility = calculate_historical_volatility(
                historical_prices, lookback_days
            )

        if historical_volatility is not None and historical_volatility > 0:
            second_attempt = self.solve(
                quote, replace(cfg, initial_guess=historical_volatility)
            )
            if second_attempt.converged:
                return second_attempt

            logger.debug(
                "牛顿法未收敛, 使用历史波动率 %.4f 作为回退 (%s)",
                historical_volatility, quote,
            )
            return IVSolverResult(
                implied_volatility=historical_volatility,
                iterations=second_attempt.iterations,
                converged=False,
                error_message="牛顿法未收敛, 使用历史波动率作为回退",
                used_fallback=True,
                fallback_type=FallbackType.HISTORICAL,
            )

        logger.debug(
            "牛顿法未收敛且无历史波动率, 使用初始猜测 %.4f 作为回退 (%s)",
            cfg.initial_guess, quote,
        )
        return IVSolverResult(
            implied_volatility=cfg.initial_guess,
            iterations=first_attempt.iterations,
            converged=False,
            error_message="牛顿法未收敛且无历史波动率, 使用初始猜测作为回退",
            used_fallback=True,
            fallback_type=FallbackType.INITIAL,
        )

    # ------------------------------------------------------------------
    # 内部实现
    # ------------------------------------------------------------------

    @staticmethod
    def _validate(quote: IVQuote) -> str:
        """校验输入参数，返回错误信息或空字符串"""
        if quote.market_price <= 0:
            return "市场价格必须大于 0"
        if quote.time_to_expiry <= 0:
            return "剩余到期时间必须大于 0"
        if quote.spot_price <= 0 or quote.strike_price <= 0:
            return "spot_price 和 strike_price 必须大于 0"

        if quote.option_type == OptionType.CALL:
            intrinsic = max(0.0, quote.spot_price - quote.strike_price)
        else:
            intrinsic = max(0.0, quote.strike_price - quote.spot_price)

        if quote.market_price < intrinsic * _INTRINSIC_TOLERANCE:
            return "市场价格低于期权内在价值 (intrinsic value), 存在套利或数据错误"
        return ""

    def _solve_newton(self, quote: IVQuote, cfg: IVSolverConfig) -> IVSolverResult:
        sigma = cfg.initial_guess
        iterations = 0

        for _ in range(cfg.max_iterations):
            iterations += 1

            params = BlackScholesInput(
                spot_price=quote.spot_price,
                strike_price=quote.strike_price,
                time_to_expiry=quote.time_to_expiry,
                risk_free_rate=quote.risk_free_rate,
                volatility=sigma,
                option_type=quote.option_type,
            )
            diff = self._pricer.price(params) - quote.market_price

            if abs(diff) < cfg.tolerance:
                return IVSolverResult(
                    implied_volatility=sigma,
                    iterations=iterations,
                    converged=True,
                )

            vega = self._pricer.vega(params)
            if abs(vega) < _MIN_VEGA:
                break

            # vega 为每 1% 波动率的值, 乘 100 还原为 dPrice/dSigma
            sigma = sigma - diff / (vega * 100.0)
            sigma = max(cfg.min_volatility, min(cfg.max_volatility, sigma))

        return IVSolverResult(
            implied_volatility=sigma,
            iterations=iterations,
            converged=False,
            error_message=f"在 {cfg.max_iterations} 次迭代内未收敛",
        )
