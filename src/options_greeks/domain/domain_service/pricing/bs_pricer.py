"""
BlackScholesPricer 领域服务

基于 Black-Scholes 模型的欧式期权定价器, 计算单腿理论价格及五个 Greeks。
纯计算服务，无副作用。

单位约定:
- theta: 每日 (年化值 / 365)
- vega: 波动率每变动 1% (原始值 / 100)
- rho: 利率每变动 1% (原始值 / 100)
"""
import math

from ...value_object.pricing.greeks import BlackScholesGreeks, BlackScholesInput, OptionType
from .normal_distribution import calculate_d1, calculate_d2, norm_cdf, norm_pdf


class BlackScholesPricer:
    """Black-Scholes 定价器"""

    # ------------------------------------------------------------------
    # 价格
    # ------------------------------------------------------------------

    def call_price(self, params: BlackScholesInput) -> float:
        """看涨期权价格 S·Φ(d1) - K·e^(-rT)·Φ(d2), 下限为 0"""
        S, K, T, r, sigma = self._unpack(params)
        if T <= 0:
            return max(0.0, S - K)

        d1 = calculate_d1(S, K, T, r, sigma)
        d2 = calculate_d2(d1, sigma, T)
        price = S * norm_cdf(d1) - K * math.exp(-r * T) * norm_cdf(d2)
        return max(0.0, price)

    def put_price(self, params: BlackScholesInput) -> float:
        """看跌期权价格 K·e^(-rT)·Φ(-d2) - S·Φ(-d1), 下限为 0"""
        S, K, T, r, sigma = self._unpack(params)
        if T <= 0:
            return max(0.0, K - S)

        d1 = calculate_d1(S, K, T, r, sigma)
        d2 = calculate_d2(d1, sigma, T)
        price = K * math.exp(-r * T) * norm_cdf(-d2) - S * norm_cdf(-d1)
        return max(0.0, price)

    def price(self, params: BlackScholesInput) -> float:
        """按期权类型分派定价"""
        if params.option_type == OptionType.CALL:
            return self.call_price(params)
        return self.put_price(params)

    # ------------------------------------------------------------------
    # Greeks
    # ------------------------------------------------------------------

    def delta(self, params: BlackScholesInput) -> float:
        S, K, T, r, sigma = self._unpack(params)
        if T <= 0:
            return self._expiry_delta(S, K, params.option_type)

        d1 = calculate_d1(S, K, T, r, sigma)
        if params.option_type == OptionType.CALL:
            return norm_cdf(d1)
        return norm_cdf(d1) - 1.0

    def gamma(self, params: BlackScholesInput) -> float:
        """gamma = φ(d1) / (S·σ·√T), call 与 put 相同"""
        S, K, T, r, sigma = self._unpack(params)
        if T <= 0:
            return 0.0

        denominator = S * sigma * math.sqrt(T)
        if denominator == 0:
            return 0.0
        d1 = calculate_d1(S, K, T, r, sigma)
        return norm_pdf(d1) / denominator

    def theta(self, params: BlackScholesInput) -> float:
        """每日 theta"""
        S, K, T, r, sigma = self._unpack(params)
        if T <= 0:
            return 0.0

        d1 = calculate_d1(S, K, T, r, sigma)
        d2 = calculate_d2(d1, sigma, T)
        return self._theta_annual(S, K, T, r, sigma, d1, d2, params.option_type) / 365.0

    def vega(self, params: BlackScholesInput) -> float:
        """每 1% 波动率变动的 vega, call 与 put 相同"""
        S, K, T, r, sigma = self._unpack(params)
        if T <= 0:
            return 0.0

        d1 = calculate_d1(S, K, T, r, sigma)
        return S * norm_pdf(d1) * math.sqrt(T) / 100.0

    def rho(self, params: BlackScholesInput) -> float:
        """每 1% 利率变动的 rho"""
        S, K, T, r, sigma = self._unpack(params)
        if T <= 0:
            return 0.0

        d1 = calculate_d1(S, K, T, r, sigma)
        d2 = calculate_d2(d1, sigma, T)
        discount = math.exp(-r * T)
        if params.option_type == OptionType.CALL:
            return K * T * discount * norm_cdf(d2) / 100.0
        return -K * T * discount * norm_cdf(-d2) / 100.0

    def calculate_all_greeks(self, params: BlackScholesInput) -> BlackScholesGreeks:
        """
        一次性计算理论价格与全部 Greeks

        d1、d2 只计算一次。到期时价格取内在价值, delta 按 S - K 的符号取值,
        其余 Greeks 为 0。
        """
        S, K, T, r, sigma = self._unpack(params)
        opt = params.option_type

        if T <= 0:
            intrinsic = max(0.0, S - K) if opt == OptionType.CALL else max(0.0, K - S)
            return BlackScholesGreeks(price=intrinsic, delta=self._expiry_delta(S, K, opt))

        d1 = calculate_d1(S, K, T, r, sigma)
        d2 = calculate_d2(d1, sigma, T)
        sqrt_T = math.sqrt(T)
        discount = math.exp(-r * T)
        pdf_d1 = norm_pdf(d1)

        if opt == OptionType.CALL:
            price = S * norm_cdf(d1) - K * discount * norm_cdf(d2)
            delta = norm_cdf(d1)
            rho = K * T * discount * norm_cdf(d2)
        else:
            price = K * discount * norm_cdf(-d2) - S * norm_cdf(-d1)
            delta = norm_cdf(d1) - 1.0
            rho = -K * T * discount * norm_cdf(-d2)

        gamma_denominator = S * sigma * sqrt_T
        gamma = pdf_d1 / gamma_denominator if gamma_denominator != 0 else 0.0
        theta = self._theta_annual(S, K, T, r, sigma, d1, d2, opt)

        return BlackScholesGreeks(
            price=max(0.0, price),
            delta=delta,
            gamma=gamma,
            theta=theta / 365.0,
            vega=S * pdf_d1 * sqrt_T / 100.0,
            rho=rho / 100.0,
        )

    # ------------------------------------------------------------------
    # 内部辅助
    # ------------------------------------------------------------------

    @staticmethod
    def _unpack(params: BlackScholesInput):
        return (
            params.spot_price,
            params.strike_price,
            params.time_to_expiry,
            params.risk_free_rate,
            params.volatility,
        )

    @staticmethod
    def _expiry_delta(S: float, K: float, opt: OptionType) -> float:
        """到期时的 delta: call ∈ {0, 0.5, 1}, put ∈ {-1, -0.5, 0}"""
        if opt == OptionType.CALL:
            if S > K:
                return 1.0
            return 0.0 if S < K else 0.5
        if S < K:
            return -1.0
        return 0.0 if S > K else -0.5

    @staticmethod
    def _theta_annual(
        S: float,
        K: float,
        T: float,
        r: float,
        sigma: float,
        d1: float,
        d2: float,
        opt: OptionType,
    ) -> float:
        """年化 theta = 衰减项 + 利率项"""
        decay = -(S * norm_pdf(d1) * sigma) / (2.0 * math.sqrt(T))
        discount = math.exp(-r * T)
        if opt == OptionType.CALL:
            return decay - r * K * discount * norm_cdf(d2)
        return decay + r * K * discount * norm_cdf(-d2)
