"""
Тести числового шару: округлення, лінивий корінь, тригонометрія,
вибір моделі точності.
"""
import math
from decimal import ROUND_CEILING, ROUND_DOWN, ROUND_FLOOR, ROUND_HALF_DOWN, ROUND_HALF_EVEN, ROUND_HALF_UP, ROUND_UP
from fractions import Fraction

import pytest

from geom3d import Approx, Exact, Point, RatSqrt, as_precision, round_rat


# =============================================================================
# round_rat
# =============================================================================

class TestRoundRat:
    """Округлення раціональних чисел до 10**oom."""

    def test_third_to_hundredths(self):
        assert round_rat(Fraction(1, 3), -2) == Fraction(33, 100)

    @pytest.mark.parametrize("rm, expected", [
        (ROUND_HALF_UP, 3),
        (ROUND_HALF_DOWN, 2),
        (ROUND_HALF_EVEN, 2),
        (ROUND_FLOOR, 2),
        (ROUND_CEILING, 3),
        (ROUND_DOWN, 2),
        (ROUND_UP, 3),
    ])
    def test_positive_tie(self, rm, expected):
        assert round_rat(Fraction(5, 2), 0, rm) == expected

    @pytest.mark.parametrize("rm, expected", [
        (ROUND_HALF_UP, -3),
        (ROUND_HALF_DOWN, -2),
        (ROUND_FLOOR, -3),
        (ROUND_CEILING, -2),
        (ROUND_DOWN, -2),
        (ROUND_UP, -3),
    ])
    def test_negative_tie(self, rm, expected):
        assert round_rat(Fraction(-5, 2), 0, rm) == expected

    def test_unknown_mode(self):
        with pytest.raises(ValueError):
            round_rat(1, 0, "sideways")


# =============================================================================
# RatSqrt
# =============================================================================

class TestRatSqrt:
    """Корінь точний, якщо раціональний; інакше — лише до запитаного oom."""

    def test_rational_root(self):
        assert RatSqrt(Fraction(9, 4)).sqrt() == Fraction(3, 2)

    def test_irrational_root(self):
        r = RatSqrt(2)
        assert r.sqrt() is None
        assert r.to_rat(-3) == Fraction(1414, 1000)
        assert r.to_rat(-3, ROUND_UP) == Fraction(1415, 1000)

    def test_float_value(self):
        assert float(RatSqrt(2)) == pytest.approx(math.sqrt(2))

    def test_negative(self):
        with pytest.raises(ValueError):
            RatSqrt(-1)


class TestRoot:
    """Корінь-дільник: точний або з відносною точністю, ніколи не нуль."""

    def test_rational_root_is_exact(self):
        assert Exact(-3).root(Fraction(1, 10 ** 40)) == Fraction(1, 10 ** 20)

    def test_irrational_root_keeps_digits(self):
        x = Fraction(2, 10 ** 40)
        assert Exact(-6).sqrt(x) == 0
        r = Exact(-6).root(x)
        assert abs(r * 10 ** 20 - Fraction(1414214, 10 ** 6)) < Fraction(1, 10 ** 6)

    def test_approx(self):
        assert Approx().root(4.0) == 2.0


# =============================================================================
# Тригонометрія
# =============================================================================

class TestExactTrig:

    def test_pi(self):
        assert Exact(-6).pi() == Fraction(3141593, 10 ** 6)

    def test_acos_zero(self):
        assert Exact(-6).acos(0) == Fraction(1570796, 10 ** 6)

    def test_acos_out_of_range(self):
        with pytest.raises(ValueError):
            Exact().acos(2)

    def test_sin_cos_zero(self):
        assert Exact().sin_cos(0) == (0, 1)

    def test_sin_cos_one(self):
        s, c = Exact(-6).sin_cos(1)
        assert s == Fraction(841471, 10 ** 6)
        assert c == Fraction(540302, 10 ** 6)


# =============================================================================
# Вибір моделі точності
# =============================================================================

class TestAsPrecision:
    """None — за типом координат; int — oom; float — epsilon."""

    def test_auto_exact(self):
        assert isinstance(as_precision(None, Point(1, 2, 3)), Exact)

    def test_auto_approx(self):
        assert isinstance(as_precision(None, Point(1.0, 2, 3)), Approx)

    def test_int_is_oom(self):
        assert as_precision(-5) == Exact(-5)

    def test_float_is_epsilon(self):
        assert as_precision(1e-6) == Approx(1e-6)

    def test_precision_passthrough(self):
        tol = Approx(1e-3)
        assert as_precision(tol, Point(1, 2, 3)) is tol

    def test_bool_rejected(self):
        with pytest.raises(TypeError):
            as_precision(True)

    def test_bad_rounding_mode(self):
        with pytest.raises(ValueError):
            Exact(rm="bogus")

    def test_approx_sign_threshold(self):
        tol = Approx(1e-6)
        assert tol.sign(1e-7) == 0
        assert tol.sign(-1e-5) == -1
        # поріг масштабується нормою
        assert tol.sign(1e-5, 1e4) == 0
