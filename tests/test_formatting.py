from __future__ import annotations

import pytest

from parabola_engine.formatting import constant_suffix, format_normal_form, format_vertex_form
from parabola_engine.models import NormalFormParams, VertexFormParams
from parabola_engine.utils import format_number, signed_term


@pytest.mark.parametrize("params, expected", [
    (VertexFormParams(2, 3, 1), "f(x) = 2(x - 3)² + 1"),
    (VertexFormParams(-1, -2, 0), "f(x) = -(x + 2)²"),
    (VertexFormParams(1, 0, -4), "f(x) = x² - 4"),
    (VertexFormParams(0.5, 1.5, -2.5), "f(x) = 0.5(x - 1.5)² - 2.5"),
    (VertexFormParams(1.0, 0.0, 0.0), "f(x) = x²"),
])
def test_format_vertex_form(params: VertexFormParams, expected: str) -> None:
    assert format_vertex_form(params) == expected


@pytest.mark.parametrize("params, expected", [
    (NormalFormParams(-1, 4, -7), "f(x) = -x² + 4x - 7"),
    (NormalFormParams(2, -12, 19), "f(x) = 2x² - 12x + 19"),
    (NormalFormParams(1, -1, 0), "f(x) = x² - x"),
    (NormalFormParams(3, 0, 0), "f(x) = 3x²"),
    (NormalFormParams(-2.0, 1.0, 0.25), "f(x) = -2x² + x + 0.25"),
])
def test_format_normal_form(params: NormalFormParams, expected: str) -> None:
    assert format_normal_form(params) == expected


def test_format_number() -> None:
    assert format_number(3.0) == "3"
    assert format_number(-0.0) == "0"
    assert format_number(-4.5) == "-4.5"
    assert format_number(7) == "7"


def test_signed_term() -> None:
    assert signed_term(-3) == ("-", "3")
    assert signed_term(2.5) == ("+", "2.5")
    assert signed_term(0) == ("+", "0")


def test_constant_suffix() -> None:
    assert constant_suffix(0) == ""
    assert constant_suffix(-0.0) == ""
    assert constant_suffix(3) == " + 3"
    assert constant_suffix(-2.5) == " - 2.5"
