"""Term manipulation drills: expanding, factoring and rearranging.

These exercises practise the algebra used by the parabola topics and carry no
parabola to plot, so ``parabola_params`` is always ``None``.
"""
from __future__ import annotations

from ..constants import (
    DEFAULT_SEED,
    EXPANDING_SEED_OFFSET,
    FACTORING_SEED_OFFSET,
    REARRANGING_SEED_OFFSET,
)
from ..conversion import vertex_to_normal
from ..formatting import coefficient_prefix
from ..geometry import zeros
from ..models import Difficulty, Exercise, ExerciseBlank, ExerciseStep, VertexFormParams
from ..utils import format_number as fmt
from ..utils import signed_term
from .common import check_difficulty
from .seeded import SeededRandom

__all__ = [
    "generate_expanding_exercise",
    "generate_factoring_exercise",
    "generate_rearranging_exercise",
]

_NONZERO_SHIFTS = (-6, -5, -4, -3, -2, -1, 1, 2, 3, 4, 5, 6)
_NONZERO_CONSTANTS = (-9, -8, -7, -6, -5, -4, -3, -2, -1, 1, 2, 3, 4, 5, 6, 7, 8, 9)
_SLOPES = (-5, -4, -3, -2, 2, 3, 4, 5)


def _binomial_text(d: float) -> str:
    # (x - d) written with the sign folded in
    return f"x {'-' if d > 0 else '+'} {fmt(abs(d))}"


def _binomial_expansion_step(step_id: str, d: float) -> ExerciseStep:
    unit = vertex_to_normal(VertexFormParams(a=1, d=d, e=0))
    b_sign, _ = signed_term(unit.b)
    return ExerciseStep(
        id=step_id,
        instruction=f"Expand ({_binomial_text(d)})² with a binomial formula.",
        explanation="(x + q)² = x² + 2qx + q² and (x - q)² = x² - 2qx + q².",
        template=f"({_binomial_text(d)})² = x² {b_sign} " + "{twoM}x + {mSq}",
        blanks=(
            ExerciseBlank(id="twoM", correct_answer=abs(unit.b), label="2q"),
            ExerciseBlank(id="mSq", correct_answer=unit.c, label="q²"),
        ),
        hint=f"Compute 2 · {fmt(abs(d))} and {fmt(abs(d))}².",
    )


def generate_expanding_exercise(difficulty: Difficulty, seed: int = DEFAULT_SEED) -> Exercise:
    check_difficulty(difficulty)
    random = SeededRandom(seed + EXPANDING_SEED_OFFSET)

    if difficulty == "easy":
        k = random.pick((2, 3, 4, 5, 6))
        m = random.pick(_NONZERO_CONSTANTS)
        sign, m_abs = signed_term(m)
        steps: tuple[ExerciseStep, ...] = (
            ExerciseStep(
                id="expanding-distribute",
                instruction="Multiply out the bracket.",
                explanation="Multiply the factor in front with every term in the bracket.",
                template=f"{k}(x {sign} {m_abs}) = " + "{coefX}x" + f" {sign} " + "{constAbs}",
                blanks=(
                    ExerciseBlank(id="coefX", correct_answer=k, label="x coefficient"),
                    ExerciseBlank(id="constAbs", correct_answer=abs(k * m), label="constant"),
                ),
                hint=f"Compute {k} · x and {k} · {m_abs}.",
            ),
        )
        description = f"Expand {k}(x {sign} {m_abs})."
    elif difficulty == "medium":
        d = random.pick(_NONZERO_SHIFTS)
        steps = (_binomial_expansion_step("expanding-binomial", d),)
        description = f"Expand ({_binomial_text(d)})²."
    else:
        k = random.pick((2, 3, 4, 5))
        d = random.pick(_NONZERO_SHIFTS)
        unit = vertex_to_normal(VertexFormParams(a=1, d=d, e=0))
        full = vertex_to_normal(VertexFormParams(a=k, d=d, e=0))
        b_sign, b_abs = signed_term(unit.b)
        full_sign, _ = signed_term(full.b)
        steps = (
            _binomial_expansion_step("expanding-nested-binomial", d),
            ExerciseStep(
                id="expanding-nested-distribute",
                instruction="Multiply the factor in front with the expanded bracket.",
                explanation=f"Every term in the bracket is multiplied by {k}.",
                template=(
                    f"{k}(x² {b_sign} {b_abs}x + {fmt(unit.c)}) = "
                    + "{kA}x²"
                    + f" {full_sign} "
                    + "{kBabs}x + {kC}"
                ),
                blanks=(
                    ExerciseBlank(id="kA", correct_answer=full.a, label="a"),
                    ExerciseBlank(id="kBabs", correct_answer=abs(full.b), label="|b|"),
                    ExerciseBlank(id="kC", correct_answer=full.c, label="c"),
                ),
                hint=f"Multiply {k} with x², with {b_abs}x and with {fmt(unit.c)}.",
            ),
        )
        description = f"Expand {k}({_binomial_text(d)})²."

    return Exercise(
        id=f"module3-expanding-{difficulty}-{seed}",
        title="Expanding brackets",
        description=description,
        steps=steps,
    )


def generate_factoring_exercise(difficulty: Difficulty, seed: int = DEFAULT_SEED) -> Exercise:
    check_difficulty(difficulty)
    random = SeededRandom(seed + FACTORING_SEED_OFFSET)

    if difficulty == "easy":
        k = random.pick((2, 3, 4, 5, 6, 7, 8, 9))
        m = random.pick(_NONZERO_CONSTANTS)
        sign, m_abs = signed_term(m)
        expression = f"{k}x {sign} {fmt(abs(k * m))}"
        step = ExerciseStep(
            id="factoring-constant",
            instruction="Factor out the common number.",
            explanation="Both terms share a common factor; divide each term by it.",
            template=f"{expression} = " + "{factor}(x" + f" {sign} " + "{innerAbs})",
            blanks=(
                ExerciseBlank(id="factor", correct_answer=k, label="factor"),
                ExerciseBlank(id="innerAbs", correct_answer=abs(m), label="constant"),
            ),
            hint="Look for the largest number dividing both coefficients.",
        )
    elif difficulty == "medium":
        k = random.pick((1, 2, 3, 4))
        m = random.pick(_NONZERO_CONSTANTS)
        sign, _ = signed_term(m)
        prefix = coefficient_prefix(k)
        linear = fmt(abs(k * m))
        expression = f"{prefix}x² {sign} {'' if abs(k * m) == 1 else linear}x"
        step = ExerciseStep(
            id="factoring-x",
            instruction="Factor out x together with the common number.",
            explanation="Every term contains x, so x can be written in front of a bracket.",
            template=f"{expression} = {prefix}x(x {sign} " + "{innerAbs})",
            blanks=(ExerciseBlank(id="innerAbs", correct_answer=abs(m), label="constant"),),
            hint=f"Divide {linear}x by {prefix}x.",
        )
    else:
        d = random.pick(_NONZERO_SHIFTS)
        unit = vertex_to_normal(VertexFormParams(a=1, d=d, e=0))
        b_sign, b_abs = signed_term(unit.b)
        expression = f"x² {b_sign} {b_abs}x + {fmt(unit.c)}"
        step = ExerciseStep(
            id="factoring-binomial",
            instruction="Recognise the binomial formula and factor the term.",
            explanation="x² ± 2qx + q² is a perfect square (x ± q)².",
            template=f"{expression} = (x {b_sign} " + "{root})²",
            blanks=(ExerciseBlank(id="root", correct_answer=abs(d), label="q"),),
            hint=f"Which number squared gives {fmt(unit.c)}?",
        )

    return Exercise(
        id=f"module3-factoring-{difficulty}-{seed}",
        title="Factoring",
        description=f"Factor {expression}.",
        steps=(step,),
    )


def generate_rearranging_exercise(difficulty: Difficulty, seed: int = DEFAULT_SEED) -> Exercise:
    check_difficulty(difficulty)
    random = SeededRandom(seed + REARRANGING_SEED_OFFSET)

    if difficulty == "easy":
        k = random.pick(_SLOPES)
        x = random.random_int(-9, 9)
        m = random.random_int(-9, 9)
        r = k * x + m
        if m == 0:
            equation = f"{k}x = {r}"
            hint = f"Divide both sides by {k}."
        else:
            sign, m_abs = signed_term(m)
            equation = f"{k}x {sign} {m_abs} = {r}"
            hint = f"Bring {m_abs} to the other side first, then divide by {k}."
        step = ExerciseStep(
            id="rearranging-linear",
            instruction="Solve the equation for x.",
            explanation="Isolate x with inverse operations on both sides.",
            template=f"{equation}  ⇒  x = " + "{x}",
            blanks=(ExerciseBlank(id="x", correct_answer=x, label="x"),),
            hint=hint,
        )
        description = f"Solve {equation}."
    elif difficulty == "medium":
        n = random.pick((1, 2, 3, 4, 5, 6, 7, 8, 9))
        parabola = VertexFormParams(a=1, d=0, e=-n * n)
        left, right = zeros(parabola)
        equation = f"x² - {n * n} = 0"
        step = ExerciseStep(
            id="rearranging-quadratic",
            instruction="Find both solutions of the equation.",
            explanation="Bring the constant to the right and take the square root; there are two signs.",
            template=f"{equation}  ⇒  x₁ = " + "{x1}, x₂ = {x2}",
            blanks=(
                ExerciseBlank(id="x1", correct_answer=left.x, label="x₁"),
                ExerciseBlank(id="x2", correct_answer=right.x, label="x₂"),
            ),
            hint=f"x² = {n * n}; enter the smaller solution first.",
        )
        description = f"Solve {equation}."
    else:
        m = random.pick((1, 2, 3, 4, 5, 6, 7, 8, 9))
        fraction = f"(x² - {m * m}) / (x - {m})"
        step = ExerciseStep(
            id="rearranging-fraction",
            instruction="Simplify the fraction.",
            explanation="The numerator is a third binomial formula: x² - q² = (x + q)(x - q).",
            template=f"{fraction} = x + " + "{m}",
            blanks=(ExerciseBlank(id="m", correct_answer=m, label="q"),),
            hint="Factor the numerator and cancel the common bracket.",
        )
        description = f"Simplify {fraction} for x ≠ {m}."

    return Exercise(
        id=f"module3-rearranging-{difficulty}-{seed}",
        title="Rearranging equations",
        description=description,
        steps=(step,),
    )
