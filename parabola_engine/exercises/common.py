"""Difficulty policy shared by the parabola exercise topics."""
from __future__ import annotations

from ..constants import EASY_RANGE, HARD_FRACTIONAL_VALUES, MEDIUM_A_VALUES
from ..models import DIFFICULTIES, Difficulty, VertexFormParams
from .seeded import SeededRandom

__all__ = ["check_difficulty", "generate_vertex_params"]


def check_difficulty(difficulty: str) -> Difficulty:
    if difficulty not in DIFFICULTIES:
        raise ValueError(
            f"Unknown difficulty {difficulty!r}; expected one of {', '.join(DIFFICULTIES)}."
        )
    return difficulty  # type: ignore[return-value]


def generate_vertex_params(random: SeededRandom, difficulty: Difficulty) -> VertexFormParams:
    """Draw vertex form parameters according to *difficulty*.

    * easy: ``a = 1``; ``d``, ``e`` integers in ``[-5, 5]``
    * medium: ``a`` from a small set of integers; ``d``, ``e`` as for easy
    * hard: ``a``, ``d``, ``e`` all half-integers
    """
    lo, hi = EASY_RANGE
    if difficulty == "easy":
        return VertexFormParams(a=1, d=random.random_int(lo, hi), e=random.random_int(lo, hi))

    if difficulty == "medium":
        return VertexFormParams(
            a=random.pick(MEDIUM_A_VALUES),
            d=random.random_int(lo, hi),
            e=random.random_int(lo, hi),
        )

    return VertexFormParams(
        a=random.pick(HARD_FRACTIONAL_VALUES),
        d=random.pick(HARD_FRACTIONAL_VALUES),
        e=random.pick(HARD_FRACTIONAL_VALUES),
    )
