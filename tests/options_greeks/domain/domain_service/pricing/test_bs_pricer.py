"""
BlackScholesPricer 单元测试

覆盖参考价格、Put-Call 平价、Delta 取值区间、Gamma/Vega 的对称性与峰值,
以及到期边界。
"""
import math

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from src.options_greeks.domain.domain_service.pricing.bs_pricer import BlackScholesPricer
from src.options_greeks.domain.value_object.pricing.greeks import (
    BlackScholesGreeks,
    BlackScholesInput,
    OptionType,
)


def _make_input(
    spot: float = 100.0,
    strike: float = 100.0,
    t: float = 1.0,
    r: float = 0.05,
    sigma: float = 0.2,
    option_type: OptionType = OptionType.CALL,
) -> BlackScholesInput:
    return BlackScholesInput(
        spot_price=spot,
        strike_price=strike,
        time_to_expiry=t,
        risk_free_rate=r,
        volatility=sigma,
        option_type=option_type,
    )


@pytest.fixture
def pricer():
    return BlackScholesPricer()


class TestPrices:
    """理论价格"""

    def test_reference_call_price(self, pricer):
        assert pricer.call_price(_make_input()) == pytest.approx(10.45, abs=0.01)

    def test_reference_put_price(self, pricer):
        params = _make_input(option_type=OptionType.PUT)
        assert pricer.put_price(params) == pytest.approx(5.57, abs=0.01)

    def test_price_dispatches_on_option_type(self, pricer):
        call = _make_input()
        put = _make_input(option_type=OptionType.PUT)
        assert pricer.price(call) == pricer.call_price(call)
        assert pricer.price(put) == pricer.put_price(put)

    def test_put_call_parity(self, pricer):
        call = pricer.call_price(_make_input())
        put = pricer.put_price(_make_input(option_type=OptionType.PUT))
        assert call - put == pytest.approx(100.0 - 100.0 * math.exp(-0.05), abs=0.1)

    def test_prices_at_expiry_are_intrinsic(self, pricer):
        assert pricer.call_price(_make_input(spot=110, t=0.0)) == 10.0
        assert pricer.call_price(_make_input(spot=90, t=0.0)) == 0.0
        assert pricer.put_price(_make_input(spot=90, t=0.0)) == 10.0
        assert pricer.put_price(_make_input(spot=110, t=-1.0)) == 0.0

    def test_prices_never_negative(self, pricer):
        deep_otm = _make_input(spot=50.0, strike=200.0, t=0.01)
        assert pricer.call_price(deep_otm) >= 0.0
        deep_otm_put = _make_input(spot=200.0, strike=50.0, t=0.01, option_type=OptionType.PUT)
        assert pricer.put_price(deep_otm_put) >= 0.0


class TestDelta:
    """Delta"""

    def test_atm_short_dated_call_near_half(self, pricer):
        params = _make_input(t=5 / 365, r=0.07)
        assert pricer.delta(params) == pytest.approx(0.5, abs=0.05)

    def test_deep_itm_call(self, pricer):
        assert pricer.delta(_make_input(spot=150.0)) > 0.95

    def test_deep_otm_call(self, pricer):
        assert pricer.delta(_make_input(spot=50.0)) < 0.05

    def test_put_delta_is_call_delta_minus_one(self, pricer):
        call = pricer.delta(_make_input())
        put = pricer.delta(_make_input(option_type=OptionType.PUT))
        assert put == pytest.approx(call - 1.0)

    @pytest.mark.parametrize(
        "spot, option_type, expected",
        [
            (110.0, OptionType.CALL, 1.0),
            (90.0, OptionType.CALL, 0.0),
            (100.0, OptionType.CALL, 0.5),
            (90.0, OptionType.PUT, -1.0),
            (110.0, OptionType.PUT, 0.0),
            (100.0, OptionType.PUT, -0.5),
        ],
    )
    def test_expiry_delta(self, pricer, spot, option_type, expected):
        params = _make_input(spot=spot, t=0.0, option_type=option_type)
        assert pricer.delta(params) == expected


class TestGammaVega:
    """Gamma / Vega"""

    def test_gamma_same_for_call_and_put(self, pricer):
        call = pricer.gamma(_make_input())
        put = pricer.gamma(_make_input(option_type=OptionType.PUT))
        assert call == pytest.approx(put)

    def test_vega_same_for_call_and_put(self, pricer):
        call = pricer.vega(_make_input())
        put = pricer.vega(_make_input(option_type=OptionType.PUT))
        assert call == pytest.approx(put)

    def test_gamma_peaks_near_the_money(self, pricer):
        atm = pricer.gamma(_make_input(t=0.25))
        assert atm > pricer.gamma(_make_input(spot=80.0, t=0.25))
        assert atm > pricer.gamma(_make_input(spot=120.0, t=0.25))

    def test_vega_peaks_near_the_money(self, pricer):
        atm = pricer.vega(_make_input(t=0.25))
        assert atm > pricer.vega(_make_input(spot=80.0, t=0.25))
        assert atm > pricer.vega(_make_input(spot=120.0, t=0.25))

    def test_vega_is_per_one_percent(self, pricer):
        # S·φ(0.35)·√1 / 100
        assert pricer.vega(_make_input()) == pytest.approx(0.3752, abs=1e-3)

    def test_zero_at_expiry(self, pricer):
        params = _make_input(t=0.0)
        assert pricer.gamma(params) == 0.0
        assert pricer.vega(params) == 0.0
        assert pricer.theta(params) == 0.0
        assert pricer.rho(params) == 0.0


class TestThetaRho:
    """Theta / Rho"""

    def test_call_theta_negative_and_daily(self, pricer):
        theta = pricer.theta(_make_input())
        assert theta < 0
        # 年化约 -6.41, 按日约 -0.0176
        assert theta == pytest.approx(-6.414 / 365, abs=1e-3)

    def test_call_rho_positive_put_rho_negative(self, pricer):
        assert pricer.rho(_make_input()) > 0
        assert pricer.rho(_make_input(option_type=OptionType.PUT)) < 0


class TestCalculateAllGreeks:
    """calculate_all_greeks 与单项计算一致"""

    @pytest.mark.parametrize("option_type", [OptionType.CALL, OptionType.PUT])
    def test_matches_individual_methods(self, pricer, option_type):
        params = _make_input(spot=105.0, t=0.5, option_type=option_type)
        greeks = pricer.calculate_all_greeks(params)
        assert greeks.price == pytest.approx(pricer.price(params))
        assert greeks.delta == pytest.approx(pricer.delta(params))
        assert greeks.gamma == pytest.approx(pricer.gamma(params))
        assert greeks.theta == pytest.approx(pricer.theta(params))
        assert greeks.vega == pytest.approx(pricer.vega(params))
        assert greeks.rho == pytest.approx(pricer.rho(params))

    def test_expired_itm_put(self, pricer):
        params = _make_input(spot=90.0, t=0.0, option_type=OptionType.PUT)
        assert pricer.calculate_all_greeks(params) == BlackScholesGreeks(price=10.0, delta=-1.0)

    def test_expired_otm_call(self, pricer):
        params = _make_input(spot=90.0, t=0.0)
        assert pricer.calculate_all_greeks(params) == BlackScholesGreeks(price=0.0, delta=0.0)


# ----------------------------------------------------------------------
# 属性测试
# ----------------------------------------------------------------------

_spot = st.floats(min_value=10.0, max_value=500.0)
_moneyness = st.floats(min_value=0.5, max_value=1.5)
_time = st.floats(min_value=0.01, max_value=3.0)
_rate = st.floats(min_value=0.0, max_value=0.15)
_vol = st.floats(min_value=0.05, max_value=1.5)


class TestPricerProperties:
    """Black-Scholes 定价性质"""

    @given(spot=_spot, moneyness=_moneyness, t=_time, r=_rate, sigma=_vol)
    @settings(max_examples=200)
    def test_put_call_parity(self, spot, moneyness, t, r, sigma):
        pricer = BlackScholesPricer()
        strike = spot * moneyness
        call = pricer.call_price(_make_input(spot, strike, t, r, sigma))
        put = pricer.put_price(_make_input(spot, strike, t, r, sigma, OptionType.PUT))
        assert call - put == pytest.approx(spot - strike * math.exp(-r * t), abs=1e-3)

    @given(spot=_spot, moneyness=_moneyness, t=_time, r=_rate, sigma=_vol)
    @settings(max_examples=200)
    def test_delta_bounds(self, spot, moneyness, t, r, sigma):
        pricer = BlackScholesPricer()
        strike = spot * moneyness
        call_delta = pricer.delta(_make_input(spot, strike, t, r, sigma))
        put_delta = pricer.delta(_make_input(spot, strike, t, r, sigma, OptionType.PUT))
        assert 0.0 <= call_delta <= 1.0
        assert -1.0 <= put_delta <= 0.0

    @given(spot=_spot, moneyness=_moneyness, t=_time, r=_rate, sigma=_vol)
    @settings(max_examples=200)
    def test_gamma_vega_non_negative_and_type_independent(self, spot, moneyness, t, r, sigma):
        pricer = BlackScholesPricer()
        strike = spot * moneyness
        call = pricer.calculate_all_greeks(_make_input(spot, strike, t, r, sigma))
        put = pricer.calculate_all_greeks(
            _make_input(spot, strike, t, r, sigma, OptionType.PUT)
        )
        assert call.gamma >= 0.0
        assert call.vega >= 0.0
        assert call.gamma == pytest.approx(put.gamma)
        assert call.vega == pytest.approx(put.vega)
