from __future__ import annotations

import math

import pytest

from parabola_engine.models import NormalFormParams, VertexFormParams
from parabola_engine.validation import (
    clamp,
    validate_normal_form_params,
    validate_vertex_form_params,
)


def test_valid_mapping_and_dataclass() -> None:
    assert validate_vertex_form_params({"a": 2, "d": -3, "e": 1.5}).valid
    result = validate_vertex_form_params(VertexFormParams(a=-0.5, d=10, e=-10))
    assert result.valid
    assert result.errors == ()


def test_zero_a_has_its_own_message() -> None:
    result = validate_vertex_form_params({"a": 0, "d": 0, "e": 0})
    assert not result.valid
    assert result.errors == ('"a" must not be zero: a = 0 does not define a parabola.',)


@pytest.mark.parametrize("value", [None, 42, "a=1", [1, 2, 3]])
def test_non_object_input(value) -> None:
    result = validate_vertex_form_params(value)
    assert not result.valid
    assert result.errors == ("Input must be a non-null object.",)


def test_missing_and_non_numeric_fields() -> None:
    result = validate_vertex_form_params({"a": 1, "d": "3"})
    assert result.errors == (
        '"d" must be a finite number.',
        '"e" must be a finite number.',
    )


@pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf, True])
def test_rejects_non_finite_and_bool(bad) -> None:
    result = validate_vertex_form_params({"a": 1, "d": bad, "e": 0})
    assert result.errors == ('"d" must be a finite number.',)


def test_out_of_range_message() -> None:
    result = validate_vertex_form_params({"a": 6, "d": 0, "e": -10.5})
    assert result.errors == (
        '"a" must be between -5 and 5, got 6.',
        '"e" must be between -10 and 10, got -10.5.',
    )


def test_all_errors_are_reported() -> None:
    result = validate_vertex_form_params({"a": 0, "d": 11, "e": None})
    assert not result.valid
    assert len(result.errors) == 3
    assert result.errors[-1].startswith('"a" must not be zero')


def test_bounds_are_inclusive() -> None:
    assert validate_vertex_form_params({"a": -5, "d": -10, "e": 10}).valid


def test_normal_form_validation() -> None:
    assert validate_normal_form_params(NormalFormParams(a=2, b=-12, c=19)).valid
    result = validate_normal_form_params({"a": 0, "b": 101, "c": 0})
    assert result.errors == (
        '"b" must be between -100 and 100, got 101.',
        '"a" must not be zero: a = 0 does not define a parabola.',
    )


def test_clamp() -> None:
    assert clamp(7, -5, 5) == 5
    assert clamp(-7, -5, 5) == -5
    assert clamp(2.5, -5, 5) == 2.5
    assert clamp(5, -5, 5) == 5
