"""Read shift, stretch and reflection parameters off a transformed parabola."""
from __future__ import annotations

from ..constants import DEFAULT_SEED, TRANSFORMATION_SEED_OFFSET
from ..models import Exercise, ExerciseBlank, ExerciseStep, TransformationType, VertexFormParams
from .seeded import SeededRandom

__all__ = ["TRANSFORMATION_TYPES", "generate_transformation_exercise"]

TRANSFORMATION_TYPES: tuple[str, ...] = ("shift", "stretch", "reflect")


def generate_transformation_exercise(
    kind: TransformationType, seed: int = DEFAULT_SEED
) -> Exercise:
    """One-step exercise on f(x) = x² transformed by *kind*.

    The parameters are drawn from fixed small ranges; there is no difficulty
    level for this topic.
    """
    random = SeededRandom(seed + TRANSFORMATION_SEED_OFFSET)

    if kind == "shift":
        params = VertexFormParams(a=1, d=random.random_int(-4, 4), e=random.random_int(-4, 4))
        description = "Determine the shift of the parabola f(x) = x²."
        instruction = "Enter the values d and e of the shift."
        template = "g(x) = (x - {d})² + {e}"
        blanks: tuple[ExerciseBlank, ...] = (
            ExerciseBlank(id="d", correct_answer=params.d, label="d"),
            ExerciseBlank(id="e", correct_answer=params.e, label="e"),
        )
    elif kind == "stretch":
        params = VertexFormParams(a=random.pick((2, 3, -2)), d=0, e=0)
        description = "Determine the stretch factor of the parabola f(x) = x²."
        instruction = "Enter the value a of the stretch."
        template = "g(x) = {a}x²"
        blanks = (ExerciseBlank(id="a", correct_answer=params.a, label="a"),)
    elif kind == "reflect":
        params = VertexFormParams(a=random.pick((-1, -2)), d=random.random_int(-3, 3), e=0)
        description = "Determine the reflection across the x axis."
        instruction = "Enter the value a of the reflection."
        template = "g(x) = {a}(x - {d})²"
        blanks = (
            ExerciseBlank(id="a", correct_answer=params.a, label="a"),
            ExerciseBlank(id="d", correct_answer=params.d, label="d"),
        )
    else:
        raise ValueError(
            f"Unknown transformation {kind!r}; expected one of {', '.join(TRANSFORMATION_TYPES)}."
        )

    step = ExerciseStep(
        id=f"term-transformation-{kind}",
        instruction=instruction,
        explanation="Read the parameters directly off the graph of g.",
        template=template,
        blanks=blanks,
        hint="Watch the signs and the direction of the shift.",
    )
    return Exercise(
        id=f"term-transformation-{kind}",
        title="Term transformation",
        description=description,
        steps=(step,),
        parabola_params=params,
    )
