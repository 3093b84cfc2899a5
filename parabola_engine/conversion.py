"""Closed-form conversion between vertex form and normal form.

``f(x) = a(x - d)² + e`` expands to ``f(x) = ax² + bx + c`` with

* ``b = -2ad``
* ``c = ad² + e``

and the inverse direction is

* ``d = -b / (2a)``
* ``e = c - b² / (4a)``

Both directions reject ``a = 0`` (not a parabola). Results never carry a
negative zero.
"""
from __future__ import annotations

from .models import NormalFormParams, VertexFormParams
from .utils import normalize_zero

__all__ = [
    "DegenerateParabolaError",
    "DEGENERATE_MESSAGE",
    "vertex_to_normal",
    "normal_to_vertex",
]

DEGENERATE_MESSAGE = 'Parameter "a" must not be zero: a = 0 does not define a parabola.'


class DegenerateParabolaError(ValueError):
    """Raised when ``a = 0`` is passed where a parabola is required."""

    def __init__(self, message: str = DEGENERATE_MESSAGE) -> None:
        super().__init__(message)


def vertex_to_normal(params: VertexFormParams) -> NormalFormParams:
    a, d, e = params.a, params.d, params.e
    if a == 0:
        raise DegenerateParabolaError()

    b = -2 * a * d
    c = a * d * d + e
    return NormalFormParams(a=a, b=normalize_zero(b), c=normalize_zero(c))


def normal_to_vertex(params: NormalFormParams) -> VertexFormParams:
    a, b, c = params.a, params.b, params.c
    if a == 0:
        raise DegenerateParabolaError()

    d = -b / (2 * a)
    e = c - (b * b) / (4 * a)
    return VertexFormParams(a=a, d=normalize_zero(d), e=normalize_zero(e))
