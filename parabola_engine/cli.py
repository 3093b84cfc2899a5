"""Command‑line interface around the parabola engine.

Modes (mutually exclusive):

* ``--topic T`` prints a generated exercise as JSON (``--practice`` solves it
  interactively and records progress instead)
* ``--vertex A D E`` / ``--normal A B C`` prints both forms and the feature
  points of a parabola
* ``--demo`` is a shortcut for a medium binomial-expansion exercise
* ``--list-topics``, ``--show-progress``, ``--reset-progress``
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Callable

from . import constants as C
from .conversion import normal_to_vertex
from .exercises import TOPICS, generate
from .geometry import describe
from .models import DIFFICULTIES, Exercise, NormalFormParams, VertexFormParams
from .progress import (
    ProgressStore,
    completion_percentage,
    record_exercise_completion,
    success_rate,
)
from .session import ExerciseSession
from .validation import validate_normal_form_params, validate_vertex_form_params

__all__ = ["main"]

logger = logging.getLogger(__name__)

_HINT_COMMAND = "?"
# Nominal size of a module used for the completion percentage shown after practice
_EXERCISES_PER_MODULE = 10


def _parse_cli(argv: list[str] | None = None) -> argparse.Namespace:  # noqa: D401 – imperative mood
    parser = argparse.ArgumentParser(description="Quadratic function exercises and conversions")
    parser.add_argument("--topic", choices=sorted(TOPICS), help="Generate an exercise for this topic")
    parser.add_argument("--difficulty", choices=DIFFICULTIES, default="easy")
    parser.add_argument("--seed", type=int, default=C.DEFAULT_SEED, help="Seed for reproducible content")
    parser.add_argument("--practice", action="store_true", help="Solve the exercise interactively")
    parser.add_argument(
        "--vertex",
        nargs=3,
        type=float,
        metavar=("A", "D", "E"),
        help="Describe f(x) = a(x - d)² + e",
    )
    parser.add_argument(
        "--normal",
        nargs=3,
        type=float,
        metavar=("A", "B", "C"),
        help="Describe f(x) = ax² + bx + c",
    )
    parser.add_argument("--demo", action="store_true", help="Run demo exercise")
    parser.add_argument("--list-topics", action="store_true", help="List available topics")
    parser.add_argument("--show-progress", action="store_true", help="Print stored progress")
    parser.add_argument("--reset-progress", action="store_true", help="Delete stored progress")
    parser.add_argument(
        "--progress-file",
        help=f"Progress JSON file (default: ${C.PROGRESS_PATH_ENV} or {C.DEFAULT_PROGRESS_FILE})",
    )
    parser.add_argument("--out", help="Write JSON output to file")
    parser.add_argument(
        "--log-level",
        choices=["WARNING", "INFO", "DEBUG"],
        default="WARNING",
        help="Logging level for parabola_engine",
    )
    return parser.parse_args(argv)


def _configure_logging(level_name: str) -> None:
    logging.basicConfig(level=logging.WARNING)
    level = getattr(logging, level_name)
    pkg_logger = logging.getLogger("parabola_engine")
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(logging.BASIC_FORMAT))
    handler.setLevel(level)
    pkg_logger.addHandler(handler)
    pkg_logger.propagate = False
    pkg_logger.setLevel(level)


def _emit(payload: Any, out: str | None) -> None:  # noqa: ANN401 – JSON payload
    json_out = json.dumps(payload, ensure_ascii=False, separators=(",", ":"))
    if out:
        Path(out).write_text(json_out, "utf-8")
        print(f"✔ JSON written to {out}")
    else:
        print(json_out)


def _describe_vertex(values: list[float]) -> dict[str, Any]:
    raw = dict(zip("ade", values))
    result = validate_vertex_form_params(raw)
    if not result.valid:
        sys.exit("Error: " + " ".join(result.errors))
    return describe(VertexFormParams(**raw))


def _describe_normal(values: list[float]) -> dict[str, Any]:
    raw = dict(zip("abc", values))
    result = validate_normal_form_params(raw)
    if not result.valid:
        sys.exit("Error: " + " ".join(result.errors))
    return describe(normal_to_vertex(NormalFormParams(**raw)))


def _ask_blank(
    session: ExerciseSession,
    blank_id: str,
    label: str,
    read: Callable[[str], str],
    write: Callable[[str], None],
) -> None:
    while True:
        value = read(f"  {label} = ")
        if value.strip() == _HINT_COMMAND:
            hint = session.request_hint()
            write(f"  Hint: {hint}" if hint else "  No hint for this step.")
            continue
        state = session.submit_answer(blank_id, value)
        if state == "correct":
            write("  ✔ correct")
            return
        if state == "empty":
            write("  Please enter a number (or '?' for a hint).")
        else:
            write("  ✘ not quite, try again")


def run_practice(
    exercise: Exercise,
    read: Callable[[str], str] | None = None,
    write: Callable[[str], None] = print,
) -> ExerciseSession:
    """Walk through *exercise* step by step until every blank is correct.

    *read* defaults to :func:`input`; ``?`` at any prompt shows the step hint.
    """
    read = read or input
    session = ExerciseSession(exercise)
    write(exercise.title)
    write(exercise.description)

    for index, step in enumerate(exercise.steps):
        session.go_to_step(index)
        write("")
        write(f"Step {index + 1}/{len(exercise.steps)}: {step.instruction}")
        write(f"  {step.template}")
        for blank in step.blanks:
            _ask_blank(session, blank.id, blank.label or blank.id, read, write)
        write(f"  {step.explanation}")

    write("")
    write("✔ Exercise complete" + (" (first try!)" if session.correct_first_try else ""))
    return session


def _practice(ns: argparse.Namespace, topic: str, store: ProgressStore) -> None:
    exercise = generate(topic, ns.difficulty, ns.seed)
    try:
        session = run_practice(exercise)
    except (EOFError, KeyboardInterrupt):
        print()
        sys.exit("Practice aborted; progress not recorded.")

    progress = record_exercise_completion(
        store.load(), topic, ns.difficulty, session.correct_first_try
    )
    store.save(progress)
    module = progress.modules[topic]
    logger.info("Recorded %s completion for %s", ns.difficulty, topic)
    print(
        f"{topic}: {module.exercises_completed} completed, "
        f"{completion_percentage(module, _EXERCISES_PER_MODULE)}% of module, "
        f"{success_rate(module)}% first try"
    )


def main(argv: list[str] | None = None) -> None:  # noqa: D401 – imperative mood
    ns = _parse_cli(argv)
    _configure_logging(ns.log_level)

    modes = [bool(ns.topic), bool(ns.vertex), bool(ns.normal), ns.demo, ns.list_topics,
             ns.show_progress, ns.reset_progress]
    if sum(modes) > 1:
        sys.exit(
            "Error: choose only one of --topic/--vertex/--normal/--demo/--list-topics/"
            "--show-progress/--reset-progress."
        )
    if ns.practice and not (ns.topic or ns.demo):
        sys.exit("Error: --practice requires --topic or --demo.")

    store = ProgressStore(ns.progress_file)

    if ns.list_topics:
        print("\n".join(TOPICS))
        return
    if ns.show_progress:
        _emit(store.load().to_dict(), ns.out)
        return
    if ns.reset_progress:
        store.reset()
        print("✔ Progress reset")
        return
    if ns.vertex:
        _emit(_describe_vertex(ns.vertex), ns.out)
        return
    if ns.normal:
        _emit(_describe_normal(ns.normal), ns.out)
        return

    if ns.demo:
        topic = C.DEMO_TOPIC
        ns.difficulty = C.DEMO_DIFFICULTY
    elif ns.topic:
        topic = ns.topic
    else:
        sys.exit("Error: one of --topic, --vertex, --normal, --demo or --list-topics is required.")

    if ns.practice:
        _practice(ns, topic, store)
        return
    _emit(generate(topic, ns.difficulty, ns.seed).to_dict(), ns.out)


if __name__ == "__main__":  # pragma: no cover
    main()
