"""Textbook-style rendering of parabola equations.

Examples
--------
>>> format_vertex_form(VertexFormParams(2, 3, 1))
'f(x) = 2(x - 3)² + 1'
>>> format_normal_form(NormalFormParams(-1, 4, -7))
'f(x) = -x² + 4x - 7'
"""
from __future__ import annotations

from .models import NormalFormParams, VertexFormParams
from .utils import format_number, signed_term

__all__ = ["format_vertex_form", "format_normal_form", "coefficient_prefix", "constant_suffix"]


def coefficient_prefix(a: float) -> str:
    """Leading factor text: omitted for 1, a bare minus for -1."""
    if a == 1:
        return ""
    if a == -1:
        return "-"
    return format_number(a)


def constant_suffix(value: float) -> str:
    """Trailing ``" + n"``/``" - n"`` term; empty for zero."""
    if value == 0:
        return ""
    sign, magnitude = signed_term(value)
    return f" {sign} {magnitude}"


def format_vertex_form(params: VertexFormParams) -> str:
    a, d, e = params.a, params.d, params.e
    result = "f(x) = " + coefficient_prefix(a)

    if d == 0:
        result += "x²"
    else:
        # (x - d): a positive d shows as minus, a negative d as plus
        inner_sign = "-" if d > 0 else "+"
        result += f"(x {inner_sign} {format_number(abs(d))})²"

    return result + constant_suffix(e)


def format_normal_form(params: NormalFormParams) -> str:
    a, b, c = params.a, params.b, params.c
    result = "f(x) = " + coefficient_prefix(a) + "x²"

    if b != 0:
        sign, magnitude = signed_term(b)
        if abs(b) == 1:
            magnitude = ""
        result += f" {sign} {magnitude}x"

    return result + constant_suffix(c)
