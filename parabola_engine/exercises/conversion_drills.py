"""Short two-step drills for the conversion formulas themselves."""
from __future__ import annotations

from ..constants import DEFAULT_SEED, NORMAL_TO_VERTEX_SEED_OFFSET, VERTEX_TOLERANCE
from ..conversion import normal_to_vertex, vertex_to_normal
from ..formatting import format_normal_form, format_vertex_form
from ..models import Difficulty, Exercise, ExerciseBlank, ExerciseStep
from .common import check_difficulty, generate_vertex_params
from .seeded import SeededRandom

__all__ = ["generate_vertex_to_normal_exercise", "generate_normal_to_vertex_exercise"]


def generate_vertex_to_normal_exercise(
    difficulty: Difficulty, seed: int = DEFAULT_SEED
) -> Exercise:
    check_difficulty(difficulty)
    random = SeededRandom(seed)
    vertex_params = generate_vertex_params(random, difficulty)
    normal = vertex_to_normal(vertex_params)

    steps = (
        ExerciseStep(
            id="vertex-to-normal-b",
            instruction="Compute the b term of the normal form.",
            explanation="The b term follows from b = -2 · a · d.",
            template="b = -2 · a · d = {b}",
            blanks=(ExerciseBlank(id="b", correct_answer=normal.b, label="b"),),
            hint="Substitute a and d into b = -2 · a · d.",
        ),
        ExerciseStep(
            id="vertex-to-normal-c",
            instruction="Compute the c term of the normal form.",
            explanation="The c term follows from c = a · d² + e.",
            template="c = a · d² + e = {c}",
            blanks=(ExerciseBlank(id="c", correct_answer=normal.c, label="c"),),
            hint="Square d first, then multiply by a.",
        ),
    )

    return Exercise(
        id=f"vertex-to-normal-{difficulty}",
        title="Convert vertex form to normal form",
        description=(
            f"Find the coefficients b and c of the normal form of "
            f"{format_vertex_form(vertex_params)}."
        ),
        steps=steps,
        parabola_params=vertex_params,
    )


def generate_normal_to_vertex_exercise(
    difficulty: Difficulty, seed: int = DEFAULT_SEED
) -> Exercise:
    check_difficulty(difficulty)
    random = SeededRandom(seed + NORMAL_TO_VERTEX_SEED_OFFSET)
    normal = vertex_to_normal(generate_vertex_params(random, difficulty))
    restored = normal_to_vertex(normal)

    steps = (
        ExerciseStep(
            id="normal-to-vertex-d",
            instruction="Compute the x coordinate of the vertex (d).",
            explanation="The value d follows from d = -b / (2a).",
            template="d = -b / (2a) = {d}",
            blanks=(
                ExerciseBlank(
                    id="d", correct_answer=restored.d, tolerance=VERTEX_TOLERANCE, label="d"
                ),
            ),
            hint="Divide -b by 2a.",
        ),
        ExerciseStep(
            id="normal-to-vertex-e",
            instruction="Compute the y coordinate of the vertex (e).",
            explanation="The value e follows from e = c - b² / (4a).",
            template="e = c - b² / (4a) = {e}",
            blanks=(
                ExerciseBlank(
                    id="e", correct_answer=restored.e, tolerance=VERTEX_TOLERANCE, label="e"
                ),
            ),
            hint="Compute b² and divide it by 4a.",
        ),
    )

    return Exercise(
        id=f"normal-to-vertex-{difficulty}",
        title="Convert normal form to vertex form",
        description=f"Compute the vertex of {format_normal_form(normal)}.",
        steps=steps,
        parabola_params=restored,
    )
