"""Answer checking and the per-exercise answer state machine.

Every blank starts as ``"empty"``. Submitting moves it to ``"correct"`` or
``"incorrect"``; asking for a hint marks the unsolved blanks of the current
step as ``"hint-shown"``; resubmitting moves it on again. A step is finished
once all of its blanks are ``"correct"``.
"""
from __future__ import annotations

import re

from .models import AnswerState, Exercise, ExerciseBlank, ExerciseStep

__all__ = ["parse_number", "check_answer", "ExerciseSession"]

# plain decimal; no exponent, "inf", "nan" or digit separators
_DECIMAL = re.compile(r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)$")
# optional sign, then int/int, optionally wrapped in one pair of brackets
_FRACTION = re.compile(r"^([+-]?)\s*(\()?\s*([+-]?\d+)\s*/\s*([+-]?\d+)\s*(?(2)\))$")
_MAX_INPUT_LENGTH = 32


def parse_number(text: str) -> float | None:
    """Parse student input into a float, or ``None`` when it is not a number.

    Accepts plain decimals, a decimal comma (``1,5``) and a single fraction
    of integers such as ``-3/2`` or ``-(1/4)``, which is evaluated exactly
    with SymPy. Arithmetic expressions are rejected so that typing the
    formula never counts as the result.
    """
    cleaned = text.strip().replace(",", ".").replace("−", "-")
    if not cleaned or len(cleaned) > _MAX_INPUT_LENGTH:
        return None
    if _DECIMAL.match(cleaned):
        return float(cleaned)

    match = _FRACTION.match(cleaned)
    if match is None:
        return None
    sign, _, numerator, denominator = match.groups()
    if int(denominator) == 0:
        return None

    import sympy as sp

    value = sp.Rational(int(numerator), int(denominator))
    return float(-value if sign == "-" else value)


def check_answer(blank: ExerciseBlank, text: str) -> AnswerState:
    """Classify *text* against *blank*; blank input is ``"empty"``, not wrong."""
    if not text.strip():
        return "empty"

    value = parse_number(text)
    if value is None:
        return "incorrect"

    return "correct" if abs(value - blank.correct_answer) <= blank.tolerance else "incorrect"


class ExerciseSession:
    """Mutable answer tracking for one :class:`Exercise`.

    The exercise itself is immutable; the session owns the student's answers,
    the state of each blank and the current step.
    """

    def __init__(self, exercise: Exercise) -> None:
        if not exercise.steps:
            raise ValueError(f"Exercise {exercise.id!r} has no steps.")
        self.exercise = exercise
        self.reset()

    def reset(self) -> None:
        self.current_step_index = 0
        self.answers: dict[str, str] = {}
        self.answer_states: dict[str, AnswerState] = {}
        for step in self.exercise.steps:
            for blank in step.blanks:
                self.answers[blank.id] = ""
                self.answer_states[blank.id] = "empty"
        self.hint_shown = False
        self._mistakes = 0
        self._hints = 0

    @property
    def current_step(self) -> ExerciseStep:
        return self.exercise.steps[self.current_step_index]

    def set_answer(self, blank_id: str, value: str) -> None:
        self.answers[blank_id] = value

    def submit_answer(self, blank_id: str, value: str) -> AnswerState:
        """Check *value* for a blank of the current step and record the result.

        Ids that do not belong to the current step are ignored and report
        ``"empty"``.
        """
        blank = self.current_step.blank(blank_id)
        if blank is None:
            return "empty"

        state = check_answer(blank, value)
        self.answers[blank_id] = value
        self.answer_states[blank_id] = state
        if state == "incorrect":
            self._mistakes += 1
        return state

    def request_hint(self) -> str | None:
        self.hint_shown = True
        self._hints += 1
        for blank in self.current_step.blanks:
            if self.answer_states[blank.id] != "correct":
                self.answer_states[blank.id] = "hint-shown"
        return self.current_step.hint

    def next_step(self) -> None:
        self.current_step_index = min(self.current_step_index + 1, len(self.exercise.steps) - 1)
        self.hint_shown = False

    def go_to_step(self, index: int) -> None:
        if 0 <= index < len(self.exercise.steps):
            self.current_step_index = index

    def is_step_complete(self, index: int | None = None) -> bool:
        """True when every blank of step *index* (default: current) is correct.

        Raises :class:`IndexError` for an index outside ``0..len(steps) - 1``;
        negative indices are not counted from the end.
        """
        if index is None:
            step = self.current_step
        elif 0 <= index < len(self.exercise.steps):
            step = self.exercise.steps[index]
        else:
            raise IndexError(
                f"Step index {index} out of range for {len(self.exercise.steps)} steps."
            )
        return all(self.answer_states[blank.id] == "correct" for blank in step.blanks)

    @property
    def is_complete(self) -> bool:
        return all(self.is_step_complete(i) for i in range(len(self.exercise.steps)))

    @property
    def correct_first_try(self) -> bool:
        """True when no submission was wrong and no hint was requested."""
        return self._mistakes == 0 and self._hints == 0
