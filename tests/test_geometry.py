from __future__ import annotations

import pytest

from parabola_engine.conversion import DegenerateParabolaError
from parabola_engine.geometry import (
    describe,
    evaluate,
    sample_points,
    vertex,
    y_intercept,
    zeros,
)
from parabola_engine.models import Point, VertexFormParams


def test_evaluate() -> None:
    params = VertexFormParams(a=2, d=3, e=1)
    assert evaluate(params, 3) == 1
    assert evaluate(params, 0) == 19
    # a = 0 is allowed here; the curve is the constant e
    assert evaluate(VertexFormParams(a=0, d=1, e=5), 10) == 5


@pytest.mark.parametrize("params", [
    VertexFormParams(a=1, d=0, e=0),
    VertexFormParams(a=-2, d=3, e=-4),
    VertexFormParams(a=0.5, d=-1.5, e=2.5),
    VertexFormParams(a=-4.5, d=4.5, e=-0.5),
])
def test_vertex_lies_on_curve(params: VertexFormParams) -> None:
    top = vertex(params)
    assert top == Point(x=params.d, y=params.e)
    assert evaluate(params, top.x) == top.y


def test_sample_points_inclusive_range() -> None:
    points = sample_points(VertexFormParams(a=1, d=0, e=0), 0, 3, 3)
    assert len(points) == 4
    assert [p.x for p in points] == [0, 1, 2, 3]
    assert [p.y for p in points] == [0, 1, 4, 9]


def test_sample_points_matches_scalar_evaluation() -> None:
    params = VertexFormParams(a=-1.5, d=0.5, e=2)
    points = sample_points(params, -10, 10, 40)
    assert len(points) == 41
    assert points[0].x == -10
    assert points[-1].x == 10
    step = (10 - -10) / 40
    for i, point in enumerate(points):
        assert point.x == -10 + i * step
        assert point.y == evaluate(params, point.x)


@pytest.mark.parametrize("steps", [0, -1])
def test_sample_points_rejects_bad_step_count(steps: int) -> None:
    with pytest.raises(ValueError, match='"steps" must be at least 1'):
        sample_points(VertexFormParams(a=1, d=0, e=0), 0, 1, steps)


def test_two_zeros_sorted_ascending() -> None:
    assert zeros(VertexFormParams(a=1, d=0, e=-4)) == [Point(x=-2, y=0), Point(x=2, y=0)]
    assert zeros(VertexFormParams(a=-1, d=3, e=1)) == [Point(x=2, y=0), Point(x=4, y=0)]


def test_single_zero_at_vertex() -> None:
    assert zeros(VertexFormParams(a=1, d=3, e=0)) == [Point(x=3, y=0)]


def test_no_zeros() -> None:
    assert zeros(VertexFormParams(a=1, d=0, e=1)) == []
    assert zeros(VertexFormParams(a=-2, d=1, e=-3)) == []


def test_zeros_degenerate() -> None:
    with pytest.raises(DegenerateParabolaError):
        zeros(VertexFormParams(a=0, d=1, e=-1))


def test_y_intercept() -> None:
    assert y_intercept(VertexFormParams(a=2, d=3, e=1)) == Point(x=0, y=19)


def test_describe_bundles_features() -> None:
    info = describe(VertexFormParams(a=2, d=3, e=-8))
    assert info["normal_form"] == {"a": 2, "b": -12, "c": 10}
    assert info["vertex_form_text"] == "f(x) = 2(x - 3)² - 8"
    assert info["normal_form_text"] == "f(x) = 2x² - 12x + 10"
    assert info["vertex"] == {"x": 3, "y": -8}
    assert info["zeros"] == [{"x": 1, "y": 0}, {"x": 5, "y": 0}]
    assert info["y_intercept"] == {"x": 0, "y": 10}
    assert info["opens"] == "up"
