"""Deterministic, seeded exercise generators.

Every generator is a pure function of ``(difficulty, seed)``; calling it twice
with the same arguments returns equal :class:`~parabola_engine.models.Exercise`
values. :func:`generate` dispatches by topic name.
"""
from __future__ import annotations

from typing import Callable

from ..constants import DEFAULT_SEED
from ..models import Difficulty, Exercise
from .binomial import generate_binomial_expansion_exercise
from .common import check_difficulty, generate_vertex_params
from .completing_square import generate_completing_square_exercise
from .conversion_drills import (
    generate_normal_to_vertex_exercise,
    generate_vertex_to_normal_exercise,
)
from .seeded import SeededRandom
from .term_practice import (
    generate_expanding_exercise,
    generate_factoring_exercise,
    generate_rearranging_exercise,
)
from .transformations import TRANSFORMATION_TYPES, generate_transformation_exercise

__all__ = [
    "TOPICS",
    "generate",
    "SeededRandom",
    "check_difficulty",
    "generate_vertex_params",
    "generate_vertex_to_normal_exercise",
    "generate_normal_to_vertex_exercise",
    "generate_binomial_expansion_exercise",
    "generate_completing_square_exercise",
    "generate_transformation_exercise",
    "generate_expanding_exercise",
    "generate_factoring_exercise",
    "generate_rearranging_exercise",
    "TRANSFORMATION_TYPES",
]


def _transformation(kind: str) -> Callable[[Difficulty, int], Exercise]:
    def _generate(difficulty: Difficulty, seed: int) -> Exercise:
        return generate_transformation_exercise(kind, seed)  # type: ignore[arg-type]

    return _generate


TOPICS: dict[str, Callable[[Difficulty, int], Exercise]] = {
    "vertex-to-normal": generate_vertex_to_normal_exercise,
    "normal-to-vertex": generate_normal_to_vertex_exercise,
    "binomial-expansion": generate_binomial_expansion_exercise,
    "completing-square": generate_completing_square_exercise,
    **{kind: _transformation(kind) for kind in TRANSFORMATION_TYPES},
    "expanding": generate_expanding_exercise,
    "factoring": generate_factoring_exercise,
    "rearranging": generate_rearranging_exercise,
}


def generate(topic: str, difficulty: Difficulty = "easy", seed: int = DEFAULT_SEED) -> Exercise:
    """Generate the exercise for *topic* at *difficulty* from *seed*.

    Transformation topics (``shift``, ``stretch``, ``reflect``) have a single
    level; *difficulty* is still checked but does not change their content.
    """
    try:
        builder = TOPICS[topic]
    except KeyError:
        raise ValueError(
            f"Unknown topic {topic!r}; expected one of {', '.join(TOPICS)}."
        ) from None
    check_difficulty(difficulty)
    return builder(difficulty, seed)
