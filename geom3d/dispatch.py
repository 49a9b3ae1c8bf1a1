# geom3d/dispatch.py
"""
Парний диспетчер: get_intersection / get_distance[_squared] / intersects.

Реалізації реєструються на невпорядковану пару типів і завжди викликаються
в канонічному порядку операндів (за рангом типу), тому a∩b та b∩a — один і
той самий результат.
"""
from __future__ import annotations

from typing import Callable, Dict, Tuple

from .numeric import as_precision

Key = Tuple[type, type]

_INTERSECTION: Dict[Key, Callable] = {}
_DISTANCE_SQ: Dict[Key, Callable] = {}
_INTERSECTS: Dict[Key, Callable] = {}


def _rank(g) -> int:
    rank = getattr(type(g), "rank", -1)
    if rank < 0:
        raise TypeError(f"Not a geometry: {type(g).__name__}")
    return rank


def _operands(a, b, tol):
    """Звести tol до моделі точності й упорядкувати операнди за рангом."""
    ra, rb = _rank(a), _rank(b)
    tol = as_precision(tol, a, b)
    if rb < ra:
        a, b = b, a
    return a, b, tol


def _register(table: Dict[Key, Callable], ka: type, kb: type):
    if kb.rank < ka.rank:
        raise ValueError(f"Register ({ka.__name__}, {kb.__name__}) in rank order")

    def deco(fn: Callable) -> Callable:
        table[(ka, kb)] = fn
        return fn
    return deco


def intersection(ka: type, kb: type):
    """Декоратор: перетин пари (ka, kb); fn(a, b, tol) з a типу ka."""
    return _register(_INTERSECTION, ka, kb)


def distance_squared(ka: type, kb: type):
    return _register(_DISTANCE_SQ, ka, kb)


def intersects_test(ka: type, kb: type):
    return _register(_INTERSECTS, ka, kb)


def _lookup(table: Dict[Key, Callable], a, b) -> Callable:
    for ta in type(a).__mro__:
        for tb in type(b).__mro__:
            fn = table.get((ta, tb))
            if fn is not None:
                return fn
    raise TypeError(
        f"No implementation for ({type(a).__name__}, {type(b).__name__})")


def _envelopes_disjoint(a, b, tol) -> bool:
    if not (a.finite and b.finite):
        return False
    return not a.envelope.intersects(b.envelope, tol)


def get_intersection(a, b, tol=None):
    """Перетин a і b: None або геометрія найменшої розмірності."""
    a, b, tol = _operands(a, b, tol)
    if _envelopes_disjoint(a, b, tol):
        return None
    return _lookup(_INTERSECTION, a, b)(a, b, tol)


def intersects(a, b, tol=None) -> bool:
    a, b, tol = _operands(a, b, tol)
    if _envelopes_disjoint(a, b, tol):
        return False
    fn = _INTERSECTS.get((type(a), type(b)))
    if fn is not None:
        return fn(a, b, tol)
    return _lookup(_INTERSECTION, a, b)(a, b, tol) is not None


def get_distance_squared(a, b, tol=None):
    """Квадрат мінімальної відстані; у точній моделі — точне раціональне."""
    a, b, tol = _operands(a, b, tol)
    return _lookup(_DISTANCE_SQ, a, b)(a, b, tol)


def get_distance(a, b, tol=None):
    """Відстань = sqrt(get_distance_squared), округлена лише тут."""
    a, b, tol = _operands(a, b, tol)
    return tol.sqrt(_lookup(_DISTANCE_SQ, a, b)(a, b, tol))
