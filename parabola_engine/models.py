"""Typed value objects shared by the engine, the session and the CLI."""
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Literal

Difficulty = Literal["easy", "medium", "hard"]
AnswerState = Literal["empty", "correct", "incorrect", "hint-shown"]
TransformationType = Literal["shift", "stretch", "reflect"]
TermCategory = Literal["expanding", "factoring", "rearranging"]

DIFFICULTIES: tuple[str, ...] = ("easy", "medium", "hard")

__all__ = [
    "Difficulty",
    "AnswerState",
    "TransformationType",
    "TermCategory",
    "DIFFICULTIES",
    "VertexFormParams",
    "NormalFormParams",
    "Point",
    "ValidationResult",
    "ExerciseBlank",
    "ExerciseStep",
    "Exercise",
]


@dataclass(frozen=True)
class VertexFormParams:
    """Parameters of ``f(x) = a(x - d)² + e``; the vertex is ``(d, e)``."""

    a: float
    d: float
    e: float


@dataclass(frozen=True)
class NormalFormParams:
    """Parameters of ``f(x) = ax² + bx + c``."""

    a: float
    b: float
    c: float


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of an input check; ``errors`` lists every problem found."""

    valid: bool
    errors: tuple[str, ...] = ()


@dataclass(frozen=True)
class ExerciseBlank:
    """A single fill-in slot; answers within ``tolerance`` count as correct."""

    id: str
    correct_answer: float
    tolerance: float = 0.0
    label: str | None = None


@dataclass(frozen=True)
class ExerciseStep:
    id: str
    instruction: str
    explanation: str
    template: str
    blanks: tuple[ExerciseBlank, ...] = ()
    hint: str | None = None

    def blank(self, blank_id: str) -> ExerciseBlank | None:
        for item in self.blanks:
            if item.id == blank_id:
                return item
        return None


@dataclass(frozen=True)
class Exercise:
    """A complete multi-step exercise as produced by the generators.

    ``parabola_params`` is set for topics that have a parabola to plot and is
    ``None`` for pure term-manipulation drills.
    """

    id: str
    title: str
    description: str
    steps: tuple[ExerciseStep, ...] = field(default_factory=tuple)
    parabola_params: VertexFormParams | None = None

    def find_blank(self, blank_id: str) -> ExerciseBlank | None:
        for step in self.steps:
            found = step.blank(blank_id)
            if found is not None:
                return found
        return None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
