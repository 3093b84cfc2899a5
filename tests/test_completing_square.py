from __future__ import annotations

import pytest
import sympy as sp

from parabola_engine.conversion import vertex_to_normal
from parabola_engine.exercises import generate_completing_square_exercise
from parabola_engine.models import DIFFICULTIES

x = sp.Symbol("x")


def test_step_counts_depend_on_leading_coefficient() -> None:
    for difficulty in DIFFICULTIES:
        for seed in range(30):
            exercise = generate_completing_square_exercise(difficulty, seed)
            a = exercise.parabola_params.a
            expected = 6 if a == 1 else 7
            assert len(exercise.steps) == expected
            assert (exercise.steps[0].id == "module2-factor") == (a != 1)


def test_easy_and_medium_are_monic_hard_is_not() -> None:
    for seed in range(30):
        assert generate_completing_square_exercise("easy", seed).parabola_params.a == 1
        assert generate_completing_square_exercise("medium", seed).parabola_params.a == 1
        assert generate_completing_square_exercise("hard", seed).parabola_params.a != 1


def test_easy_half_coefficient_is_integer() -> None:
    for seed in range(30):
        exercise = generate_completing_square_exercise("easy", seed)
        half = exercise.find_blank("bHalf").correct_answer
        assert float(half).is_integer()
        assert half != 0


@pytest.mark.parametrize("difficulty", DIFFICULTIES)
def test_answers_describe_the_same_parabola(difficulty: str) -> None:
    for seed in range(20):
        exercise = generate_completing_square_exercise(difficulty, seed)
        params = exercise.parabola_params
        d = exercise.find_blank("d").correct_answer
        e = exercise.find_blank("e").correct_answer
        assert exercise.find_blank("constant").correct_answer == e
        assert exercise.find_blank("halfAbs").correct_answer == abs(d)
        assert exercise.find_blank("bHalfSq").correct_answer == pytest.approx(d * d)

        normal = vertex_to_normal(params)
        vertex_form = params.a * (x - sp.nsimplify(d)) ** 2 + sp.nsimplify(e)
        normal_form = normal.a * x**2 + sp.nsimplify(normal.b) * x + sp.nsimplify(normal.c)
        assert sp.expand(vertex_form - normal_form) == 0


def test_blanks_share_tolerance() -> None:
    exercise = generate_completing_square_exercise("hard", 3)
    tolerances = {b.tolerance for step in exercise.steps for b in step.blanks}
    assert tolerances == {0.01}
    assert exercise.id == "module2-normal-to-vertex-hard-3"


def test_supplement_step_is_display_only() -> None:
    exercise = generate_completing_square_exercise("medium", 8)
    supplement = next(step for step in exercise.steps if step.id == "module2-supplement")
    assert supplement.blanks == ()


def test_negative_one_leading_coefficient_renders_as_minus() -> None:
    exercise = next(
        ex
        for ex in (generate_completing_square_exercise("hard", seed) for seed in range(500))
        if ex.parabola_params.a == -1
    )
    templates = {step.id: step.template for step in exercise.steps}
    assert templates["module2-factor"].startswith("f(x) = -(x² ")
    assert templates["module2-supplement"].startswith("f(x) = -(x² ")
    assert templates["module2-constants"].startswith("-(-")
    assert templates["module2-vertex-form"] == "f(x) = -(x - {d})² + {e}"
    assert not any("-1(" in t or "-1 ·" in t for t in templates.values())
