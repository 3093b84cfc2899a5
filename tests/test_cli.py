from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterator

import pytest

from parabola_engine import cli
from parabola_engine.exercises import generate
from parabola_engine.progress import ProgressStore
from parabola_engine.utils import format_number


@pytest.fixture(autouse=True)
def _restore_logging() -> Iterator[None]:
    root = logging.getLogger()
    root_handlers, root_level = root.handlers[:], root.level
    pkg_logger = logging.getLogger("parabola_engine")
    pkg_handlers, pkg_level, pkg_propagate = pkg_logger.handlers[:], pkg_logger.level, pkg_logger.propagate
    yield
    root.handlers[:] = root_handlers
    root.setLevel(root_level)
    pkg_logger.handlers[:] = pkg_handlers
    pkg_logger.setLevel(pkg_level)
    pkg_logger.propagate = pkg_propagate


@pytest.fixture
def progress_file(tmp_path: Path, monkeypatch: Any) -> Path:
    path = tmp_path / "progress.json"
    monkeypatch.setenv("PARABOLA_PROGRESS_PATH", str(path))
    return path


def _answers(topic: str, difficulty: str, seed: int) -> list[str]:
    exercise = generate(topic, difficulty, seed)
    return [format_number(b.correct_answer) for step in exercise.steps for b in step.blanks]


def test_log_level_is_isolated(monkeypatch: Any, capsys: Any) -> None:
    root = logging.getLogger()
    for h in root.handlers[:]:
        root.removeHandler(h)
    pkg_logger = logging.getLogger("parabola_engine")
    for h in pkg_logger.handlers[:]:
        pkg_logger.removeHandler(h)

    def fake_generate(*args, **kwargs):
        logging.getLogger().debug("root debug")
        logging.getLogger("parabola_engine").debug("pkg debug")
        return generate("shift", "easy", 1)

    monkeypatch.setattr(cli, "generate", fake_generate)
    cli.main(["--demo", "--log-level", "DEBUG"])
    err = capsys.readouterr().err
    assert "pkg debug" in err
    assert "root debug" not in err


def test_topic_prints_exercise_json(capsys: Any) -> None:
    cli.main(["--topic", "completing-square", "--difficulty", "hard", "--seed", "4"])
    payload = json.loads(capsys.readouterr().out)
    assert payload == json.loads(json.dumps(generate("completing-square", "hard", 4).to_dict()))
    assert payload["id"] == "module2-normal-to-vertex-hard-4"


def test_out_writes_file(tmp_path: Path, capsys: Any) -> None:
    target = tmp_path / "exercise.json"
    cli.main(["--topic", "shift", "--out", str(target)])
    assert "JSON written to" in capsys.readouterr().out
    assert json.loads(target.read_text("utf-8"))["id"] == "term-transformation-shift"


def test_vertex_description(capsys: Any) -> None:
    cli.main(["--vertex", "2", "3", "-8"])
    payload = json.loads(capsys.readouterr().out)
    assert payload["normal_form"] == {"a": 2, "b": -12, "c": 10}
    assert [p["x"] for p in payload["zeros"]] == [1, 5]


def test_normal_description(capsys: Any) -> None:
    cli.main(["--normal", "-1", "4", "-7"])
    payload = json.loads(capsys.readouterr().out)
    assert payload["vertex"] == {"x": 2, "y": -3}
    assert payload["zeros"] == []
    assert payload["opens"] == "down"


def test_invalid_parameters_exit() -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--vertex", "0", "1", "2"])
    assert '"a" must not be zero' in str(excinfo.value.code)


def test_modes_are_exclusive() -> None:
    with pytest.raises(SystemExit):
        cli.main(["--topic", "shift", "--list-topics"])
    with pytest.raises(SystemExit):
        cli.main(["--practice"])


def test_list_topics(capsys: Any) -> None:
    cli.main(["--list-topics"])
    lines = capsys.readouterr().out.split()
    assert "binomial-expansion" in lines
    assert "rearranging" in lines


def test_run_practice_first_try() -> None:
    answers = iter(_answers("binomial-expansion", "medium", 42))
    output: list[str] = []
    session = cli.run_practice(
        generate("binomial-expansion", "medium", 42),
        read=lambda prompt: next(answers),
        write=output.append,
    )
    assert session.is_complete
    assert session.correct_first_try
    assert output[-1] == "✔ Exercise complete (first try!)"


def test_run_practice_with_mistake_and_hint() -> None:
    replies = iter(["wrong", "?"] + _answers("stretch", "easy", 2))
    output: list[str] = []
    session = cli.run_practice(
        generate("stretch", "easy", 2), read=lambda prompt: next(replies), write=output.append
    )
    assert session.is_complete
    assert not session.correct_first_try
    assert "  ✘ not quite, try again" in output
    assert any(line.startswith("  Hint: ") for line in output)


def test_practice_records_progress(monkeypatch: Any, progress_file: Path, capsys: Any) -> None:
    replies = iter(_answers("reflect", "easy", 5))
    monkeypatch.setattr("builtins.input", lambda prompt="": next(replies))
    cli.main(["--topic", "reflect", "--seed", "5", "--practice"])
    assert "reflect: 1 completed" in capsys.readouterr().out

    progress = ProgressStore(progress_file).load()
    assert progress.modules["reflect"].exercises_correct_first_try == 1
    assert progress.total_exercises_completed == 1

    cli.main(["--show-progress"])
    shown = json.loads(capsys.readouterr().out)
    assert shown["modules"]["reflect"]["exercisesCompleted"] == 1

    cli.main(["--reset-progress"])
    assert ProgressStore(progress_file).load().modules == {}


def test_aborted_practice_is_not_recorded(monkeypatch: Any, progress_file: Path) -> None:
    def eof(prompt: str = "") -> str:
        raise EOFError

    monkeypatch.setattr("builtins.input", eof)
    with pytest.raises(SystemExit):
        cli.main(["--demo", "--practice"])
    assert not progress_file.exists()
