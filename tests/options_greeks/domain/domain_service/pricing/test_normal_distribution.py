"""
标准正态分布函数单元测试

验证 PDF/CDF 的参考值、对称性、单调性以及 d1/d2 的到期边界处理。
"""
import math

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from src.options_greeks.domain.domain_service.pricing.normal_distribution import (
    calculate_d1,
    calculate_d2,
    norm_cdf,
    norm_pdf,
)


_x = st.floats(min_value=-10.0, max_value=10.0, allow_nan=False, allow_infinity=False)


class TestNormPdf:
    """概率密度函数"""

    def test_peak_at_zero(self):
        assert norm_pdf(0.0) == pytest.approx(0.3989, abs=1e-4)

    def test_reference_values(self):
        assert norm_pdf(1.0) == pytest.approx(0.2420, abs=1e-4)
        assert norm_pdf(2.0) == pytest.approx(0.0540, abs=1e-4)

    def test_symmetric(self):
        for x in (0.5, 1.0, 2.5, 4.0):
            assert norm_pdf(-x) == pytest.approx(norm_pdf(x))

    def test_decreases_away_from_zero(self):
        values = [norm_pdf(x) for x in (0.0, 0.5, 1.0, 2.0, 3.0)]
        assert values == sorted(values, reverse=True)

    def test_strictly_positive(self):
        assert norm_pdf(8.0) > 0


class TestNormCdf:
    """累积分布函数 (Abramowitz-Stegun 逼近)"""

    def test_half_at_zero(self):
        assert norm_cdf(0.0) == pytest.approx(0.5, abs=1e-9)

    @pytest.mark.parametrize(
        "x, expected",
        [
            (1.0, 0.8413),
            (-1.0, 0.1587),
            (2.0, 0.9772),
            (3.0, 0.9987),
        ],
    )
    def test_reference_values(self, x, expected):
        assert norm_cdf(x) == pytest.approx(expected, abs=1e-4)

    def test_limits(self):
        assert norm_cdf(-10.0) == pytest.approx(0.0, abs=1e-12)
        assert norm_cdf(10.0) == pytest.approx(1.0, abs=1e-12)

    def test_infinite_arguments(self):
        assert norm_cdf(math.inf) == 1.0
        assert norm_cdf(-math.inf) == 0.0

    def test_max_error_against_erf(self):
        """与 erf 精确值的误差不超过 7.5e-8"""
        for i in range(-800, 801):
            x = i / 100.0
            exact = 0.5 * (1.0 + math.erf(x / math.sqrt(2.0)))
            assert abs(norm_cdf(x) - exact) <= 7.5e-8

    @given(x=_x)
    @settings(max_examples=200)
    def test_complement_symmetry(self, x):
        assert norm_cdf(x) + norm_cdf(-x) == pytest.approx(1.0, abs=1e-12)

    @given(x=_x, step=st.floats(min_value=0.01, max_value=2.0))
    @settings(max_examples=200)
    def test_monotonic(self, x, step):
        assert norm_cdf(x + step) >= norm_cdf(x)

    def test_strictly_increasing_in_body(self):
        grid = [i / 10.0 for i in range(-40, 41)]
        values = [norm_cdf(x) for x in grid]
        assert all(b > a for a, b in zip(values, values[1:]))


class TestD1D2:
    """Black-Scholes d1 / d2 参数"""

    def test_d1_reference(self):
        # ln(1) = 0, (0.05 + 0.02) * 1 / 0.2 = 0.35
        assert calculate_d1(100, 100, 1.0, 0.05, 0.2) == pytest.approx(0.35)

    def test_d2_reference(self):
        assert calculate_d2(0.35, 0.2, 1.0) == pytest.approx(0.15)

    def test_d1_at_expiry(self):
        assert calculate_d1(110, 100, 0.0, 0.05, 0.2) == math.inf
        assert calculate_d1(90, 100, 0.0, 0.05, 0.2) == -math.inf
        assert calculate_d1(100, 100, 0.0, 0.05, 0.2) == 0.0
        assert calculate_d1(110, 100, -0.1, 0.05, 0.2) == math.inf

    def test_d1_zero_volatility(self):
        assert calculate_d1(110, 100, 0.5, 0.05, 0.0) == 0.0

    def test_d2_at_expiry_returns_d1(self):
        assert calculate_d2(1.23, 0.2, 0.0) == 1.23
        assert calculate_d2(math.inf, 0.2, 0.0) == math.inf
