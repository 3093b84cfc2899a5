"""Normal → vertex form by completing the square.

For ``a = 1`` the exercise has six steps: halve, square, add and subtract,
form the binomial, combine constants, read off the vertex form. For
``a ≠ 1`` a leading step factors ``a`` out of the x terms first.

The generator never draws ``b = 0``, so the halving step always has a blank.
"""
from __future__ import annotations

from ..constants import COMPLETING_SQUARE_SEED_OFFSET, COMPLETING_SQUARE_TOLERANCE, DEFAULT_SEED
from ..conversion import normal_to_vertex, vertex_to_normal
from ..formatting import coefficient_prefix, constant_suffix, format_normal_form
from ..models import (
    Difficulty,
    Exercise,
    ExerciseBlank,
    ExerciseStep,
    NormalFormParams,
    VertexFormParams,
)
from ..utils import format_number as fmt
from ..utils import normalize_zero, signed_term
from .common import check_difficulty
from .seeded import SeededRandom

__all__ = ["generate_completing_square_exercise"]

_NONZERO_SMALL = (-5, -4, -3, -2, -1, 1, 2, 3, 4, 5)
_NONZERO_MEDIUM = (-9, -8, -7, -6, -5, -4, -3, -2, -1, 1, 2, 3, 4, 5, 6, 7, 8, 9)
_NONZERO_HARD = (-4, -3, -2, -1, 1, 2, 3, 4)
_HARD_A_VALUES = (-2, -1, 2, 3)


def _generate_normal_params(random: SeededRandom, difficulty: Difficulty) -> NormalFormParams:
    if difficulty == "easy":
        return NormalFormParams(a=1, b=2 * random.pick(_NONZERO_SMALL), c=random.random_int(-5, 5))
    if difficulty == "medium":
        return NormalFormParams(a=1, b=random.pick(_NONZERO_MEDIUM), c=random.random_int(-5, 5))
    # b is a multiple of a so that b/a stays an integer after factoring
    a = random.pick(_HARD_A_VALUES)
    return NormalFormParams(a=a, b=a * random.pick(_NONZERO_HARD), c=random.random_int(-5, 5))


def _blank(blank_id: str, value: float, label: str) -> ExerciseBlank:
    return ExerciseBlank(
        id=blank_id, correct_answer=value, tolerance=COMPLETING_SQUARE_TOLERANCE, label=label
    )


def generate_completing_square_exercise(
    difficulty: Difficulty, seed: int = DEFAULT_SEED
) -> Exercise:
    check_difficulty(difficulty)
    random = SeededRandom(seed + COMPLETING_SQUARE_SEED_OFFSET)
    normal = _generate_normal_params(random, difficulty)
    a, b, c = normal.a, normal.b, normal.c
    target = normal_to_vertex(normal)

    # inner bracket x² + px + (p/2)² is the unit parabola around the vertex
    unit = vertex_to_normal(VertexFormParams(a=1, d=target.d, e=0))
    p = unit.b
    half = normalize_zero(-target.d)
    half_sq = unit.c

    p_sign, p_abs = signed_term(p)
    half_sign = "+" if half >= 0 else "-"
    sq = fmt(half_sq)
    c_suffix = constant_suffix(c)
    coefficient_name = "b" if a == 1 else "p"
    prefix = coefficient_prefix(a)
    # a = -1 multiplies as a bare minus sign
    factor = "-" if a == -1 else f"{fmt(a)} · "

    steps: list[ExerciseStep] = []

    if a != 1:
        steps.append(
            ExerciseStep(
                id="module2-factor",
                instruction="Factor a out of the terms containing x.",
                explanation=(
                    f"Divide ax² + bx by a = {fmt(a)}: the bracket becomes x² + px with p = b / a."
                ),
                template=f"f(x) = {prefix}(x² {p_sign} " + "{pAbs}x)" + c_suffix,
                blanks=(_blank("pAbs", abs(p), "|p|"),),
                hint=f"Compute {fmt(b)} / {fmt(a)}.",
            )
        )

    steps.append(
        ExerciseStep(
            id="module2-halve",
            instruction="Halve the coefficient of x.",
            explanation=f"Completing the square needs half of {coefficient_name}.",
            template=f"{coefficient_name}/2 = {fmt(p)}/2 = " + "{bHalf}",
            blanks=(_blank("bHalf", half, f"{coefficient_name}/2"),),
            hint=f"Divide {fmt(p)} by 2 and keep the sign.",
        )
    )
    steps.append(
        ExerciseStep(
            id="module2-square",
            instruction="Square the half.",
            explanation=f"The quadratic supplement is ({coefficient_name}/2)².",
            template=f"({fmt(half)})² = " + "{bHalfSq}",
            blanks=(_blank("bHalfSq", half_sq, f"({coefficient_name}/2)²"),),
            hint="A square is never negative.",
        )
    )

    inner = f"x² {p_sign} {p_abs}x + {sq} - {sq}"
    supplemented = f"f(x) = {inner}{c_suffix}" if a == 1 else f"f(x) = {prefix}({inner}){c_suffix}"
    steps.append(
        ExerciseStep(
            id="module2-supplement",
            instruction="Add and subtract the quadratic supplement.",
            explanation=f"Adding {sq} and subtracting it again does not change the function.",
            template=supplemented,
            blanks=(),
            hint="This step is an overview; there is nothing to fill in.",
        )
    )
    steps.append(
        ExerciseStep(
            id="module2-binomial",
            instruction="Write the first three terms as a binomial.",
            explanation="x² + 2qx + q² = (x + q)² and x² - 2qx + q² = (x - q)².",
            template=f"x² {p_sign} {p_abs}x + {sq} = (x {half_sign} " + "{halfAbs})²",
            blanks=(_blank("halfAbs", abs(target.d), "|d|"),),
            hint=f"The number in the bracket is {coefficient_name}/2 without its sign.",
        )
    )

    if a == 1:
        constants = f"-{sq}{c_suffix} = " + "{constant}"
        explanation = "The subtracted supplement and c form the new constant term."
    else:
        constants = f"{factor}(-{sq}){c_suffix} = " + "{constant}"
        explanation = (
            f"Multiplying out, the subtracted supplement is multiplied by a = {fmt(a)} before adding c."
        )
    steps.append(
        ExerciseStep(
            id="module2-constants",
            instruction="Combine the constant terms.",
            explanation=explanation,
            template=constants,
            blanks=(_blank("constant", target.e, "e"),),
            hint="Pay attention to the signs.",
        )
    )
    steps.append(
        ExerciseStep(
            id="module2-vertex-form",
            instruction="State the vertex form.",
            explanation="The vertex form reads f(x) = a(x - d)² + e with vertex (d | e).",
            template=f"f(x) = {prefix}" + "(x - {d})² + {e}",
            blanks=(_blank("d", target.d, "d"), _blank("e", target.e, "e")),
            hint="d has the opposite sign of the number in the bracket.",
        )
    )

    return Exercise(
        id=f"module2-normal-to-vertex-{difficulty}-{seed}",
        title="Complete the square",
        description=f"Rewrite {format_normal_form(normal)} in vertex form by completing the square.",
        steps=tuple(steps),
        parabola_params=target,
    )
