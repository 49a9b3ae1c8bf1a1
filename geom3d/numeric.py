# geom3d/numeric.py
"""
Числовий шар: раціональні числа, ліниві корені та дві моделі точності.

Exact(oom, rm) — точна раціональна арифметика (fractions.Fraction); округлення
до 10**oom лише там, де результат вимагає кореня чи тригонометрії.
Approx(epsilon) — звичайні float, рівність з абсолютною похибкою epsilon.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import (
    Decimal,
    ROUND_05UP,
    ROUND_CEILING,
    ROUND_DOWN,
    ROUND_FLOOR,
    ROUND_HALF_DOWN,
    ROUND_HALF_EVEN,
    ROUND_HALF_UP,
    ROUND_UP,
    localcontext,
)
from fractions import Fraction
from typing import Dict, Iterable, Optional, Tuple, Union

Rat = Fraction
Number = Union[int, float, Fraction, Decimal]

EPS = 1e-10          # епсилон за замовчуванням для Approx
OOM = -12            # порядок величини за замовчуванням для Exact
RM = ROUND_HALF_UP   # режим округлення за замовчуванням
GUARD = 3            # запасні цифри для проміжних ірраціональних значень

ROUNDING_MODES = (
    ROUND_05UP, ROUND_CEILING, ROUND_DOWN, ROUND_FLOOR,
    ROUND_HALF_DOWN, ROUND_HALF_EVEN, ROUND_HALF_UP, ROUND_UP,
)


def rat(x: Number) -> Fraction:
    """Точне перетворення у Fraction (float теж точно, без округлення)."""
    if isinstance(x, Fraction):
        return x
    if isinstance(x, bool):
        raise TypeError("bool is not a coordinate")
    return Fraction(x)


def _pow10(oom: int) -> Fraction:
    return Fraction(10) ** oom


def _round_int(q: Fraction, rm: str) -> int:
    """Округлити раціональне q до цілого за режимом rm (точно)."""
    fl = math.floor(q)
    rem = q - fl
    if rem == 0:
        return fl
    neg = q < 0
    if rm == ROUND_FLOOR:
        return fl
    if rm == ROUND_CEILING:
        return fl + 1
    if rm == ROUND_DOWN:
        return fl + 1 if neg else fl
    if rm == ROUND_UP:
        return fl if neg else fl + 1
    if rm == ROUND_05UP:
        t = fl + 1 if neg else fl
        if abs(t) % 10 in (0, 5):
            return t - 1 if neg else t + 1
        return t
    half = Fraction(1, 2)
    if rem < half:
        return fl
    if rem > half:
        return fl + 1
    # рівно посередині
    if rm == ROUND_HALF_UP:
        return fl if neg else fl + 1
    if rm == ROUND_HALF_DOWN:
        return fl + 1 if neg else fl
    if rm == ROUND_HALF_EVEN:
        return fl if fl % 2 == 0 else fl + 1
    raise ValueError(f"Unknown rounding mode: {rm!r}")


def round_rat(x: Number, oom: int, rm: str = RM) -> Fraction:
    """Округлити x до кратного 10**oom."""
    if rm not in ROUNDING_MODES:
        raise ValueError(f"Unknown rounding mode: {rm!r}")
    scale = _pow10(oom)
    return _round_int(rat(x) / scale, rm) * scale


class RatSqrt:
    """
    Корінь з раціонального підкореневого виразу x >= 0.

    Точне значення повертається, якщо воно раціональне; інакше наближення
    обчислюється лише до запитаного oom і кешується за (oom, rm).
    """

    __slots__ = ("x", "_sqrt", "_cache")

    def __init__(self, x: Number):
        x = rat(x)
        if x < 0:
            raise ValueError(f"Negative radicand: {x}")
        self.x: Fraction = x
        self._sqrt: Optional[Fraction] = None
        n, d = x.numerator, x.denominator
        rn, rd = math.isqrt(n), math.isqrt(d)
        if rn * rn == n and rd * rd == d:
            self._sqrt = Fraction(rn, rd)
        self._cache: Dict[Tuple[int, str], Fraction] = {}

    def sqrt(self) -> Optional[Fraction]:
        """Точний корінь або None, якщо він ірраціональний."""
        return self._sqrt

    def to_rat(self, oom: int, rm: str = RM) -> Fraction:
        key = (oom, rm)
        r = self._cache.get(key)
        if r is not None:
            return r
        if self._sqrt is not None:
            r = round_rat(self._sqrt, oom, rm)
        else:
            if rm not in ROUNDING_MODES:
                raise ValueError(f"Unknown rounding mode: {rm!r}")
            # sqrt(x) / 10**oom == sqrt(y); y ірраціонального кореня, тож нічиїх немає
            y = self.x / _pow10(2 * oom)
            k = math.isqrt(math.floor(y))
            if rm in (ROUND_DOWN, ROUND_FLOOR):
                n = k
            elif rm in (ROUND_UP, ROUND_CEILING):
                n = k + 1
            elif rm == ROUND_05UP:
                n = k + 1 if k % 10 in (0, 5) else k
            else:
                n = k + 1 if y > (k + Fraction(1, 2)) ** 2 else k
            r = n * _pow10(oom)
        self._cache[key] = r
        return r

    def __float__(self) -> float:
        return math.sqrt(self.x)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, RatSqrt):
            return self.x == other.x
        return NotImplemented

    def __hash__(self) -> int:
        return hash(("RatSqrt", self.x))

    def __repr__(self) -> str:
        return f"RatSqrt(x={self.x}, sqrt={self._sqrt})"


# ---------- тригонометрія у Decimal (рецепти з документації decimal) ----------
def _dec(x: Fraction) -> Decimal:
    return Decimal(x.numerator) / Decimal(x.denominator)


def _digits(oom: int, magnitude: int = 1) -> int:
    return max(-oom, 0) + max(len(str(abs(magnitude))), 1) + 2 * GUARD


def _pi_dec() -> Decimal:
    """pi з поточною точністю контексту."""
    with localcontext() as ctx:
        ctx.prec += 2
        three = Decimal(3)
        lasts, t, s, n, na, d, da = 0, three, 3, 1, 0, 0, 24
        while s != lasts:
            lasts = s
            n, na = n + na, na + 8
            d, da = d + da, da + 32
            t = (t * n) / d
            s += t
    return +s


def _cos_dec(x: Decimal) -> Decimal:
    with localcontext() as ctx:
        ctx.prec += 2
        i, lasts, s, fact, num, sign = 0, 0, Decimal(1), 1, Decimal(1), 1
        while s != lasts:
            lasts = s
            i += 2
            fact *= i * (i - 1)
            num *= x * x
            sign *= -1
            s += num / fact * sign
    return +s


def _sin_dec(x: Decimal) -> Decimal:
    with localcontext() as ctx:
        ctx.prec += 2
        i, lasts, s, fact, num, sign = 1, 0, x, 1, x, 1
        while s != lasts:
            lasts = s
            i += 2
            fact *= i * (i - 1)
            num *= x * x
            sign *= -1
            s += num / fact * sign
    return +s


def _atan_dec(x: Decimal) -> Decimal:
    """arctan через три зведення аргументу і ряд Тейлора."""
    with localcontext() as ctx:
        ctx.prec += 4
        one = Decimal(1)
        for _ in range(3):
            x = x / (one + (one + x * x).sqrt())
        lasts, s, num, i = 0, x, x, 1
        while s != lasts:
            lasts = s
            num *= -x * x
            i += 2
            s += num / i
        s *= 8
    return +s


@dataclass(frozen=True)
class Precision:
    """Спільний протокол обох моделей точності."""

    exact = False

    def num(self, x: Number):
        raise NotImplementedError

    def is_zero(self, x, norm2=1) -> bool:
        return self.sign(x, norm2) == 0

    def sign(self, x, norm2=1) -> int:
        raise NotImplementedError

    def eq(self, a, b, norm2=1) -> bool:
        return self.is_zero(a - b, norm2)

    def is_zero_sq(self, d2) -> bool:
        raise NotImplementedError

    def sqrt(self, x):
        raise NotImplementedError

    def root(self, x):
        """Корінь для ділення: для x > 0 ніколи не округлюється до нуля."""
        return self.sqrt(x)

    def round(self, x):
        raise NotImplementedError

    def sin_cos(self, theta):
        raise NotImplementedError

    def acos(self, x):
        raise NotImplementedError

    def pi(self):
        raise NotImplementedError

    def finer(self, digits: int = GUARD) -> "Precision":
        return self


@dataclass(frozen=True)
class Exact(Precision):
    """
    Точна модель. Знаки й орієнтації точні; oom і rm діють на рівність точок
    та на значення, які потребують кореня або тригонометрії.
    """

    oom: int = OOM
    rm: str = RM
    exact = True

    def __post_init__(self):
        if self.rm not in ROUNDING_MODES:
            raise ValueError(f"Unknown rounding mode: {self.rm!r}")

    def num(self, x: Number) -> Fraction:
        return rat(x)

    def sign(self, x, norm2=1) -> int:
        return (x > 0) - (x < 0)

    def is_zero_sq(self, d2) -> bool:
        return d2 == 0

    def sqrt(self, x) -> Fraction:
        return RatSqrt(x).to_rat(self.oom, self.rm)

    def root(self, x) -> Fraction:
        """
        Точний корінь, якщо він раціональний; інакше округлений до oom,
        зсунутого на порядок самого кореня, тож відносна точність не гірша
        за 10**oom.
        """
        r = RatSqrt(x)
        exact = r.sqrt()
        if exact is not None:
            return exact
        # log10(x) лежить в (e10 - 1, e10 + 1)
        e10 = len(str(r.x.numerator)) - len(str(r.x.denominator))
        oom = min(self.oom, (e10 - 1) // 2 - 2 + min(self.oom, 0))
        return r.to_rat(oom, self.rm)

    def round(self, x) -> Fraction:
        return round_rat(x, self.oom, self.rm)

    def sin_cos(self, theta) -> Tuple[Fraction, Fraction]:
        theta = rat(theta)
        if theta == 0:
            return Fraction(0), Fraction(1)
        with localcontext() as ctx:
            ctx.prec = _digits(self.oom, math.floor(theta))
            t = _dec(theta)
            two_pi = 2 * _pi_dec()
            t = t % two_pi
            s, c = _sin_dec(t), _cos_dec(t)
        return self.round(Fraction(s)), self.round(Fraction(c))

    def acos(self, x) -> Fraction:
        x = rat(x)
        if x > 1 or x < -1:
            raise ValueError(f"acos argument out of range: {x}")
        with localcontext() as ctx:
            ctx.prec = _digits(self.oom)
            if x == -1:
                r = _pi_dec()
            else:
                # acos(x) = 2 * atan(sqrt((1 - x) / (1 + x)))
                r = 2 * _atan_dec(_dec((1 - x) / (1 + x)).sqrt())
        return self.round(Fraction(r))

    def pi(self) -> Fraction:
        with localcontext() as ctx:
            ctx.prec = _digits(self.oom)
            p = _pi_dec()
        return self.round(Fraction(p))

    def finer(self, digits: int = GUARD) -> "Exact":
        return Exact(self.oom - digits, self.rm)


@dataclass(frozen=True)
class Approx(Precision):
    """Наближена модель на float з абсолютною похибкою epsilon."""

    epsilon: float = EPS

    def num(self, x: Number) -> float:
        return float(x)

    def sign(self, x, norm2=1) -> int:
        x = float(x)
        if abs(x) < self.epsilon * math.sqrt(norm2):
            return 0
        return 1 if x > 0 else -1

    def is_zero_sq(self, d2) -> bool:
        return float(d2) < self.epsilon * self.epsilon

    def sqrt(self, x) -> float:
        return math.sqrt(max(float(x), 0.0))

    def round(self, x) -> float:
        return float(x)

    def sin_cos(self, theta) -> Tuple[float, float]:
        theta = float(theta)
        return math.sin(theta), math.cos(theta)

    def acos(self, x) -> float:
        return math.acos(min(1.0, max(-1.0, float(x))))

    def pi(self) -> float:
        return math.pi


def has_float(values: Iterable) -> bool:
    return any(isinstance(v, float) for v in values)


def as_precision(tol=None, *geometries) -> Precision:
    """
    Звести аргумент tol до моделі точності.
      None      — Approx(EPS), якщо хоч одна координата float, інакше Exact(OOM, RM);
      int       — Exact(tol, RM);
      float     — Approx(tol);
      Precision — як є.
    """
    if isinstance(tol, Precision):
        return tol
    if tol is None:
        if any(g.is_float for g in geometries):
            return Approx(EPS)
        return Exact(OOM, RM)
    if isinstance(tol, bool):
        raise TypeError("tol must be an int oom, a float epsilon or a Precision")
    if isinstance(tol, int):
        return Exact(tol, RM)
    if isinstance(tol, float):
        return Approx(tol)
    raise TypeError(f"Cannot interpret {tol!r} as a precision")
