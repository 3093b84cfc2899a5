"""Evaluation and feature extraction for parabolas in vertex form."""
from __future__ import annotations

import math
from dataclasses import asdict
from typing import Any

import numpy as np

from .conversion import DegenerateParabolaError, vertex_to_normal
from .formatting import format_normal_form, format_vertex_form
from .models import Point, VertexFormParams

__all__ = [
    "evaluate",
    "sample_points",
    "vertex",
    "zeros",
    "y_intercept",
    "describe",
]


def evaluate(params: VertexFormParams, x: float) -> float:
    """Return ``a(x - d)² + e``. Defined for any ``a``, including zero."""
    dx = x - params.d
    return params.a * dx * dx + params.e


def sample_points(
    params: VertexFormParams, x_min: float, x_max: float, steps: int
) -> list[Point]:
    """Return ``steps + 1`` evenly spaced points from *x_min* to *x_max*.

    Parameters
    ----------
    params:
        Vertex form parameters of the curve.
    x_min, x_max:
        Inclusive bounds of the sampled interval.
    steps:
        Number of intervals; must be at least 1.
    """
    if steps < 1:
        raise ValueError(f'"steps" must be at least 1, got {steps}.')

    step_size = (x_max - x_min) / steps
    xs = x_min + np.arange(int(steps) + 1, dtype=float) * step_size
    dx = xs - params.d
    ys = params.a * dx * dx + params.e
    return [Point(x=float(x), y=float(y)) for x, y in zip(xs, ys)]


def vertex(params: VertexFormParams) -> Point:
    return Point(x=params.d, y=params.e)


def zeros(params: VertexFormParams) -> list[Point]:
    """Return the x-intercepts sorted by ascending ``x`` (0, 1 or 2 points).

    From ``a(x - d)² + e = 0`` follows ``(x - d)² = -e / a``; the sign of that
    right-hand side decides how many real zeros exist.
    """
    a, d, e = params.a, params.d, params.e
    if a == 0:
        raise DegenerateParabolaError()

    discriminant = -e / a
    if discriminant < 0:
        return []
    if discriminant == 0:
        return [Point(x=d, y=0)]

    root = math.sqrt(discriminant)
    return [Point(x=d - root, y=0), Point(x=d + root, y=0)]


def y_intercept(params: VertexFormParams) -> Point:
    return Point(x=0, y=evaluate(params, 0))


def describe(params: VertexFormParams) -> dict[str, Any]:
    """Bundle both algebraic forms and the feature points of a parabola."""
    normal = vertex_to_normal(params)
    return {
        "vertex_form": asdict(params),
        "normal_form": asdict(normal),
        "vertex_form_text": format_vertex_form(params),
        "normal_form_text": format_normal_form(normal),
        "vertex": asdict(vertex(params)),
        "zeros": [asdict(p) for p in zeros(params)],
        "y_intercept": asdict(y_intercept(params)),
        "opens": "up" if params.a > 0 else "down",
    }
