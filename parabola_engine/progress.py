"""Student progress record and its JSON file store.

The store keeps a single JSON object on disk keyed by
:data:`~parabola_engine.constants.STORAGE_KEY`. Loading never raises: a
missing, unreadable or malformed record falls back to a fresh default, and
failed writes are logged so practice can continue without persistence.
"""
from __future__ import annotations

import json
import logging
import math
import os
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from . import constants as C
from .models import Difficulty

__all__ = [
    "ModuleProgress",
    "AppProgress",
    "ProgressStore",
    "default_progress",
    "default_progress_path",
    "record_exercise_completion",
    "completion_percentage",
    "success_rate",
]

logger = logging.getLogger(__name__)


def _now() -> str:
    """UTC timestamp in ISO 8601 with millisecond precision and a ``Z`` suffix."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass(frozen=True)
class ModuleProgress:
    module_id: str
    exercises_completed: int = 0
    exercises_correct_first_try: int = 0
    last_difficulty: str = "easy"
    last_attempt_date: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "moduleId": self.module_id,
            "exercisesCompleted": self.exercises_completed,
            "exercisesCorrectFirstTry": self.exercises_correct_first_try,
            "lastDifficulty": self.last_difficulty,
            "lastAttemptDate": self.last_attempt_date,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ModuleProgress":
        return cls(
            module_id=data["moduleId"],
            exercises_completed=data["exercisesCompleted"],
            exercises_correct_first_try=data["exercisesCorrectFirstTry"],
            last_difficulty=data["lastDifficulty"],
            last_attempt_date=data["lastAttemptDate"],
        )


@dataclass(frozen=True)
class AppProgress:
    modules: dict[str, ModuleProgress] = field(default_factory=dict)
    total_exercises_completed: int = 0
    first_visit_date: str = ""
    last_visit_date: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "modules": {key: mod.to_dict() for key, mod in self.modules.items()},
            "totalExercisesCompleted": self.total_exercises_completed,
            "firstVisitDate": self.first_visit_date,
            "lastVisitDate": self.last_visit_date,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AppProgress":
        return cls(
            modules={key: ModuleProgress.from_dict(mod) for key, mod in data["modules"].items()},
            total_exercises_completed=data["totalExercisesCompleted"],
            first_visit_date=data["firstVisitDate"],
            last_visit_date=data["lastVisitDate"],
        )


def default_progress() -> AppProgress:
    now = _now()
    return AppProgress(first_visit_date=now, last_visit_date=now)


def _is_count(value: Any) -> bool:  # noqa: ANN401
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_valid_progress(data: Any) -> bool:  # noqa: ANN401
    """Structural check of a deserialised record before it is trusted."""
    if not isinstance(data, dict):
        return False
    if (
        not _is_count(data.get("totalExercisesCompleted"))
        or not isinstance(data.get("firstVisitDate"), str)
        or not isinstance(data.get("lastVisitDate"), str)
        or not isinstance(data.get("modules"), dict)
    ):
        return False

    for module in data["modules"].values():
        if not isinstance(module, dict):
            return False
        if (
            not isinstance(module.get("moduleId"), str)
            or not _is_count(module.get("exercisesCompleted"))
            or not _is_count(module.get("exercisesCorrectFirstTry"))
            or not isinstance(module.get("lastDifficulty"), str)
            or not isinstance(module.get("lastAttemptDate"), str)
        ):
            return False
    return True


def default_progress_path() -> Path:
    """Progress file location: ``$PARABOLA_PROGRESS_PATH`` or the home default."""
    raw = os.environ.get(C.PROGRESS_PATH_ENV) or C.DEFAULT_PROGRESS_FILE
    return Path(raw).expanduser()


class ProgressStore:
    """Key-value JSON file holding the serialised :class:`AppProgress`."""

    def __init__(self, path: str | os.PathLike[str] | None = None, key: str = C.STORAGE_KEY) -> None:
        self.path = Path(path) if path is not None else default_progress_path()
        self.key = key

    def _read_all(self) -> dict[str, Any]:
        text = self.path.read_text("utf-8")
        data = json.loads(text)
        if not isinstance(data, dict):
            raise ValueError("progress file does not contain a JSON object")
        return data

    def load(self) -> AppProgress:
        if not self.path.exists():
            return default_progress()
        try:
            stored = self._read_all().get(self.key)
        except (OSError, ValueError) as exc:
            logger.warning("Failed to load progress from %s: %s", self.path, exc)
            return default_progress()

        if stored is None:
            return default_progress()
        if not _is_valid_progress(stored):
            logger.warning("Invalid progress data found in %s, resetting to defaults", self.path)
            return default_progress()
        return AppProgress.from_dict(stored)

    def save(self, progress: AppProgress) -> None:
        try:
            try:
                data = self._read_all()
            except (OSError, ValueError):
                data = {}
            data[self.key] = progress.to_dict()
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(data, ensure_ascii=False, indent=2), "utf-8")
        except OSError as exc:
            logger.warning("Failed to save progress to %s: %s", self.path, exc)
            return
        logger.debug("Saved progress to %s", self.path)

    def reset(self) -> None:
        try:
            data = self._read_all()
        except FileNotFoundError:
            return
        except (OSError, ValueError) as exc:
            logger.warning("Failed to reset progress in %s: %s", self.path, exc)
            return
        if data.pop(self.key, None) is None:
            return
        try:
            self.path.write_text(json.dumps(data, ensure_ascii=False, indent=2), "utf-8")
        except OSError as exc:
            logger.warning("Failed to reset progress in %s: %s", self.path, exc)


def record_exercise_completion(
    progress: AppProgress,
    module_id: str,
    difficulty: Difficulty,
    correct_first_try: bool,
    *,
    now: str | None = None,
) -> AppProgress:
    """Return a new record with one more completed exercise in *module_id*."""
    now = now or _now()
    existing = progress.modules.get(module_id) or ModuleProgress(module_id=module_id)
    updated = ModuleProgress(
        module_id=module_id,
        exercises_completed=existing.exercises_completed + 1,
        exercises_correct_first_try=existing.exercises_correct_first_try + (1 if correct_first_try else 0),
        last_difficulty=difficulty,
        last_attempt_date=now,
    )
    return replace(
        progress,
        modules={**progress.modules, module_id: updated},
        total_exercises_completed=progress.total_exercises_completed + 1,
        last_visit_date=now,
    )


def completion_percentage(module: ModuleProgress | None, total_exercises: int) -> int:
    if module is None or total_exercises == 0:
        return 0
    return min(100, _round_half_up(module.exercises_completed / total_exercises * 100))


def success_rate(module: ModuleProgress | None) -> int:
    if module is None or module.exercises_completed == 0:
        return 0
    return _round_half_up(module.exercises_correct_first_try / module.exercises_completed * 100)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))
