"""Gatekeeping for untyped parameter input (sliders, CLI flags, stored state).

Validation never raises: every detected problem is collected into a
:class:`~parabola_engine.models.ValidationResult` so the caller can show all of
them at once.
"""
from __future__ import annotations

import dataclasses
import math
from collections.abc import Mapping
from typing import Any

from .constants import NORMAL_FORM_BOUNDS, PARAMETER_BOUNDS
from .models import ValidationResult
from .utils import format_number, is_real_number

__all__ = [
    "validate_vertex_form_params",
    "validate_normal_form_params",
    "clamp",
]

_NOT_AN_OBJECT = "Input must be a non-null object."
_A_IS_ZERO = '"a" must not be zero: a = 0 does not define a parabola.'


def _as_mapping(value: Any) -> Mapping[str, Any] | None:  # noqa: ANN401
    if isinstance(value, Mapping):
        return value
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    return None


def _check_fields(
    value: Any, bounds: Mapping[str, Mapping[str, float]]  # noqa: ANN401
) -> ValidationResult:
    obj = _as_mapping(value)
    if obj is None:
        return ValidationResult(valid=False, errors=(_NOT_AN_OBJECT,))

    errors: list[str] = []
    for name, limits in bounds.items():
        field_value = obj.get(name)
        if not is_real_number(field_value) or not math.isfinite(field_value):
            errors.append(f'"{name}" must be a finite number.')
            continue

        lo, hi = limits["min"], limits["max"]
        if field_value < lo or field_value > hi:
            errors.append(
                f'"{name}" must be between {format_number(lo)} and {format_number(hi)}, '
                f"got {format_number(field_value)}."
            )

    # a = 0 is its own semantic error, independent of the range check
    a = obj.get("a")
    if is_real_number(a) and a == 0:
        errors.append(_A_IS_ZERO)

    return ValidationResult(valid=not errors, errors=tuple(errors))


def validate_vertex_form_params(value: Any) -> ValidationResult:  # noqa: ANN401
    """Check that *value* holds finite, in-range ``a``, ``d``, ``e`` with ``a ≠ 0``."""
    return _check_fields(value, PARAMETER_BOUNDS)


def validate_normal_form_params(value: Any) -> ValidationResult:  # noqa: ANN401
    """Same policy as :func:`validate_vertex_form_params` for ``a``, ``b``, ``c``."""
    return _check_fields(value, NORMAL_FORM_BOUNDS)


def clamp(value: float, lo: float, hi: float) -> float:
    return min(hi, max(lo, value))
