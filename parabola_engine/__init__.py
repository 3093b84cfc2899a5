"""Public package interface for the parabola engine.

Importing this package gives you easy access to the conversion, geometry,
validation and exercise helpers without having to know the internal module
layout.

Typical usage
-------------
>>> from parabola_engine import VertexFormParams, vertex_to_normal, generate
>>> vertex_to_normal(VertexFormParams(a=2, d=3, e=1))
NormalFormParams(a=2, b=-12, c=19)
>>> exercise = generate("binomial-expansion", "medium", seed=42)
"""
from importlib.metadata import version as _version  # type: ignore

from .conversion import DegenerateParabolaError, normal_to_vertex, vertex_to_normal
from .exercises import TOPICS, generate
from .formatting import format_normal_form, format_vertex_form
from .geometry import describe, evaluate, sample_points, vertex, y_intercept, zeros
from .models import (
    Exercise,
    ExerciseBlank,
    ExerciseStep,
    NormalFormParams,
    Point,
    ValidationResult,
    VertexFormParams,
)
from .session import ExerciseSession, check_answer
from .validation import clamp, validate_normal_form_params, validate_vertex_form_params

__all__ = [
    "DegenerateParabolaError",
    "vertex_to_normal",
    "normal_to_vertex",
    "evaluate",
    "sample_points",
    "vertex",
    "zeros",
    "y_intercept",
    "describe",
    "validate_vertex_form_params",
    "validate_normal_form_params",
    "clamp",
    "format_vertex_form",
    "format_normal_form",
    "TOPICS",
    "generate",
    "check_answer",
    "ExerciseSession",
    "VertexFormParams",
    "NormalFormParams",
    "Point",
    "ValidationResult",
    "Exercise",
    "ExerciseStep",
    "ExerciseBlank",
    "__version__",
]

try:
    __version__ = _version("parabola_engine")
except Exception:  # pragma: no cover – package not installed yet
    __version__ = "0.0.0"
