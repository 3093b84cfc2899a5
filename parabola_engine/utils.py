"""Internal numeric helpers shared across the engine."""
from __future__ import annotations

import math
from numbers import Real
from typing import Any

__all__ = ["normalize_zero", "is_real_number", "format_number", "signed_term"]


def normalize_zero(value: float) -> float:
    """Return *value* with a negative zero turned into ``0``."""
    return abs(value) if value == 0 else value


def is_real_number(value: Any) -> bool:  # noqa: ANN401 – arbitrary input
    # bool is a Real subclass but never a valid parameter
    return isinstance(value, Real) and not isinstance(value, bool)


def format_number(value: float) -> str:
    """Render *value* the way it is shown to students.

    Integral values drop the trailing ``.0`` and ``-0`` prints as ``0``; all
    other values use Python's shortest round-trip representation.
    """
    value = normalize_zero(value)
    if isinstance(value, int):
        return str(value)
    f = float(value)
    if math.isfinite(f) and f.is_integer() and abs(f) < 1e21:
        return str(int(f))
    return repr(f)


def signed_term(value: float) -> tuple[str, str]:
    """Split *value* into an operator (``"+"``/``"-"``) and its magnitude text."""
    return ("+" if value >= 0 else "-"), format_number(abs(value))
