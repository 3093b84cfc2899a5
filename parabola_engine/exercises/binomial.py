"""Detailed vertex → normal form exercise via the binomial formulas.

The exercise always has four steps:

1. apply the binomial formula to ``(x - d)²``
2. substitute the expansion back (display only)
3. distribute the factor ``a``
4. combine the constant terms into the normal form

The special cases ``d = 0``, ``e = 0`` and ``a = 1`` change which blanks a
step carries (possibly none), so each is its own branch below.
"""
from __future__ import annotations

from ..constants import DEFAULT_SEED
from ..conversion import vertex_to_normal
from ..formatting import coefficient_prefix, constant_suffix
from ..models import Difficulty, Exercise, ExerciseBlank, ExerciseStep, VertexFormParams
from ..utils import format_number as fmt
from ..utils import signed_term
from .common import check_difficulty, generate_vertex_params
from .seeded import SeededRandom

__all__ = ["generate_binomial_expansion_exercise"]


def _binomial_step(d: float, binomial: str, two_d: float, d_sq: float) -> ExerciseStep:
    instruction = f"Apply the binomial formula: ({binomial})² = ..."
    if d == 0:
        return ExerciseStep(
            id="module1-step1",
            instruction=instruction,
            explanation="Since d = 0, (x)² = x². The binomial formula is trivial here.",
            template=f"({binomial})² = x²",
            blanks=(),
            hint="With d = 0 only x² remains.",
        )

    abs_d = fmt(abs(d))
    if d > 0:
        explanation = (
            "The second binomial formula reads (a - b)² = a² - 2ab + b². "
            f"Here a = x and b = {abs_d}."
        )
        expansion_sign = "-"
    else:
        explanation = (
            "The first binomial formula reads (a + b)² = a² + 2ab + b². "
            f"Here a = x and b = {abs_d}."
        )
        expansion_sign = "+"

    return ExerciseStep(
        id="module1-step1",
        instruction=instruction,
        explanation=explanation,
        template=f"({binomial})² = x² {expansion_sign} " + "{twoD}x + {dSq}",
        blanks=(
            ExerciseBlank(id="twoD", correct_answer=two_d, label="2d"),
            ExerciseBlank(id="dSq", correct_answer=d_sq, label="d²"),
        ),
        hint=f"Compute 2 · {abs_d} and {abs_d}².",
    )


def _distribute_step(
    params: VertexFormParams, b: float, two_d: float, d_sq: float, ad2: float
) -> ExerciseStep:
    a, d, e = params.a, params.d, params.e
    e_suffix = constant_suffix(e)
    inner_sign = "-" if d > 0 else "+"

    if a == 1 and e == 0:
        template = f"f(x) = x² {inner_sign} {fmt(two_d)}x + {fmt(d_sq)}" if d != 0 else "f(x) = x²"
        return ExerciseStep(
            id="module1-step3",
            instruction="Multiply out the factor a.",
            explanation="Since a = 1, multiplying out changes nothing.",
            template=template,
            blanks=(),
            hint="With a = 1 the terms stay the same.",
        )

    a_text = fmt(a)
    if d == 0:
        template = "f(x) = {aCoeff}x²" + e_suffix
        blanks: tuple[ExerciseBlank, ...] = (
            ExerciseBlank(id="aCoeff", correct_answer=a, label="a"),
        )
        explanation = (
            f"Multiply a = {a_text} with every summand: {a_text} · x² and {a_text} · {fmt(d_sq)}."
        )
    else:
        b_sign = "+" if b >= 0 else "-"
        template = f"f(x) = {{aCoeff}}x² {b_sign} {{bAbs}}x + {{ad2}}{e_suffix}"
        blanks = (
            ExerciseBlank(id="aCoeff", correct_answer=a, label="a"),
            ExerciseBlank(id="bAbs", correct_answer=abs(b), label="|b|"),
            ExerciseBlank(id="ad2", correct_answer=ad2, label="ad²"),
        )
        explanation = (
            f"Multiply a = {a_text} with every summand: {a_text} · x², "
            f"{a_text} · {fmt(two_d)}x and {a_text} · {fmt(d_sq)}."
        )

    return ExerciseStep(
        id="module1-step3",
        instruction="Multiply the factor a with every term in the brackets.",
        explanation=explanation,
        template=template,
        blanks=blanks,
        hint=f"Multiply {a_text} with each term separately.",
    )


def _combine_step(params: VertexFormParams, a: float, b: float, c: float, ad2: float) -> ExerciseStep:
    d, e = params.d, params.e
    instruction = "Combine the constant terms and state the normal form."
    e_sign, e_abs = signed_term(e)
    c_sign, c_abs = signed_term(c)

    if d == 0 and e == 0:
        return ExerciseStep(
            id="module1-step4",
            instruction=instruction,
            explanation="Since d = 0 and e = 0, the normal form already is f(x) = ax².",
            template="f(x) = {finalA}x²",
            blanks=(ExerciseBlank(id="finalA", correct_answer=a, label="a"),),
            hint="Only a has to be filled in here.",
        )

    if d == 0:
        return ExerciseStep(
            id="module1-step4",
            instruction=instruction,
            explanation=f"Since d = 0 there is no linear term. The constant term is c = {fmt(c)}.",
            template=f"f(x) = {{finalA}}x² {c_sign} {{finalCabs}}",
            blanks=(
                ExerciseBlank(id="finalA", correct_answer=a, label="a"),
                ExerciseBlank(id="finalCabs", correct_answer=abs(c), label="|c|"),
            ),
            hint=f"Compute a · d² + e = {fmt(ad2)} {e_sign} {e_abs}.",
        )

    b_sign, b_abs = signed_term(b)
    return ExerciseStep(
        id="module1-step4",
        instruction=instruction,
        explanation=(
            f"Combine {fmt(ad2)} and {fmt(e)}: c = {fmt(ad2)} {e_sign} {e_abs} = {fmt(c)}. "
            f"The normal form is f(x) = {fmt(a)}x² {b_sign} {b_abs}x {c_sign} {c_abs}."
        ),
        template=f"f(x) = {{finalA}}x² {b_sign} {{finalBabs}}x {c_sign} {{finalCabs}}",
        blanks=(
            ExerciseBlank(id="finalA", correct_answer=a, label="a"),
            ExerciseBlank(id="finalBabs", correct_answer=abs(b), label="|b|"),
            ExerciseBlank(id="finalCabs", correct_answer=abs(c), label="|c|"),
        ),
        hint=f"Compute a · d² + e = {fmt(ad2)} {e_sign} {e_abs} = {fmt(c)}.",
    )


def generate_binomial_expansion_exercise(
    difficulty: Difficulty, seed: int = DEFAULT_SEED
) -> Exercise:
    check_difficulty(difficulty)
    random = SeededRandom(seed)
    params = generate_vertex_params(random, difficulty)
    a, d, e = params.a, params.d, params.e
    normal = vertex_to_normal(params)

    # (x - d)² = x² - 2dx + d² is the unit parabola shifted by d
    unit = vertex_to_normal(VertexFormParams(a=1, d=d, e=0))
    two_d = abs(unit.b)
    d_sq = unit.c
    ad2 = vertex_to_normal(VertexFormParams(a=a, d=d, e=0)).c

    binomial = "x" if d == 0 else f"x {'-' if d >= 0 else '+'} {fmt(abs(d))}"
    e_suffix = constant_suffix(e)

    expanded = "x²" if d == 0 else f"x² {'-' if d > 0 else '+'} {fmt(two_d)}x + {fmt(d_sq)}"
    if a == 1:
        a_factor = ""
    elif a == -1:
        a_factor = "-"
    else:
        a_factor = f"{fmt(a)} · "

    steps = (
        _binomial_step(d, binomial, two_d, d_sq),
        ExerciseStep(
            id="module1-step2",
            instruction="Substitute the result into the function equation.",
            explanation=f"The expression ({binomial})² is replaced by the result of the binomial formula.",
            template=f"f(x) = {a_factor}({expanded}){e_suffix}",
            blanks=(),
            hint="This step is an overview; there is nothing to fill in.",
        ),
        _distribute_step(params, normal.b, two_d, d_sq, ad2),
        _combine_step(params, normal.a, normal.b, normal.c, ad2),
    )

    return Exercise(
        id=f"module1-vertex-to-normal-{difficulty}-{seed}",
        title="Convert vertex form to normal form",
        description=(
            f"Convert f(x) = {coefficient_prefix(a)}({binomial})²{e_suffix} "
            "step by step into normal form."
        ),
        steps=steps,
        parabola_params=params,
    )
