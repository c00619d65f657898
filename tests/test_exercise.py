import subprocess
from pathlib import Path
from unittest import mock

import pytest

from exercisekit.exercise import (
    ContextLine,
    Exercise,
    ExerciseError,
    Mode,
    load_exercises,
)

PENDING = "// fake_exercise\n\n// I AM NOT DONE\n\nfn main() {\n\n}\n"
FINISHED = "// fake_exercise\n\nfn main() {\n\n}\n"
TEST_SUCCESS = (
    "#[test]\nfn passing() {\n"
    '    println!("THIS TEST TOO SHALL PASS");\n'
    "    assert!(true);\n}\n"
)


def _write(directory: Path, name: str, text: str) -> Path:
    path = directory / name
    path.write_text(text)
    return path


class _FakeToolchain:
    def __init__(self, compile_code=0, run_code=0, run_stdout=b"", stderr=b""):
        self.calls = []
        self.compile_code = compile_code
        self.run_code = run_code
        self.run_stdout = run_stdout
        self.stderr = stderr

    def __call__(self, args, **kwargs):
        args = list(args)
        self.calls.append(args)
        if args[0] == "rustc":
            if self.compile_code == 0:
                Path(args[args.index("-o") + 1]).write_bytes(b"")
            return subprocess.CompletedProcess(args, self.compile_code, b"", self.stderr)
        if args[0] == "cargo":
            return subprocess.CompletedProcess(args, self.compile_code, b"", self.stderr)
        return subprocess.CompletedProcess(args, self.run_code, self.run_stdout, self.stderr)


def test_pending_state(tmp_path):
    exercise = Exercise("pending_exercise", _write(tmp_path, "pending_exercise.rs", PENDING), Mode.COMPILE)
    assert exercise.state() == [
        ContextLine("// fake_exercise", 1, False),
        ContextLine("", 2, False),
        ContextLine("// I AM NOT DONE", 3, True),
        ContextLine("", 4, False),
        ContextLine("fn main() {", 5, False),
    ]
    assert exercise.looks_done() is False


def test_finished_exercise(tmp_path):
    exercise = Exercise("finished_exercise", _write(tmp_path, "finished_exercise.rs", FINISHED), Mode.COMPILE)
    assert exercise.state() == []
    assert exercise.looks_done() is True


def test_marker_on_first_line_has_no_earlier_context(tmp_path):
    path = _write(tmp_path, "p.rs", "// I AM NOT DONE\n\n#[test]\nfn it_works() {}\n")
    state = Exercise("p", path, Mode.TEST).state()
    assert [line.number for line in state] == [1, 2, 3]
    assert state[0].important is True


def test_str_is_path(tmp_path):
    path = tmp_path / "intro1.rs"
    assert str(Exercise("intro1", path, "compile")) == str(path)


def test_mode_rejects_unknown_value(tmp_path):
    with pytest.raises(ValueError):
        Exercise("x", tmp_path / "x.rs", "interpret")


def test_clean(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    exercise = Exercise("example", _write(tmp_path, "pending_exercise.rs", PENDING), Mode.COMPILE)
    with mock.patch("exercisekit.exercise.subprocess.run", side_effect=_FakeToolchain()):
        compiled = exercise.compile()
    assert compiled.binary.exists()
    compiled.close()
    assert not compiled.binary.exists()


def test_context_manager_removes_binary(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    exercise = Exercise("example", _write(tmp_path, "a.rs", FINISHED), Mode.COMPILE)
    with mock.patch("exercisekit.exercise.subprocess.run", side_effect=_FakeToolchain()):
        with exercise.compile() as compiled:
            binary = compiled.binary
            assert binary.exists()
    assert not binary.exists()


def test_exercise_with_output(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    exercise = Exercise("exercise_with_output", _write(tmp_path, "testSuccess.rs", TEST_SUCCESS), Mode.TEST)
    fake = _FakeToolchain(run_stdout=b"THIS TEST TOO SHALL PASS\n")
    with mock.patch("exercisekit.exercise.subprocess.run", side_effect=fake):
        with exercise.compile() as compiled:
            out = compiled.run()
    assert "THIS TEST TOO SHALL PASS" in out.stdout
    assert "--test" in fake.calls[0]
    assert fake.calls[-1][1:] == ["--show-output"]


def test_compile_failure_raises_with_stderr(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    exercise = Exercise("compFailure", _write(tmp_path, "compFailure.rs", "fn main() {\n    let\n}\n"), Mode.COMPILE)
    fake = _FakeToolchain(compile_code=1, stderr=b"error: expected pattern")
    with mock.patch("exercisekit.exercise.subprocess.run", side_effect=fake):
        with pytest.raises(ExerciseError) as info:
            exercise.compile()
    assert info.value.output.stderr == "error: expected pattern"
    assert list(tmp_path.glob("temp_*")) == []


def test_run_failure_raises(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    exercise = Exercise("testNotPassed", _write(tmp_path, "t.rs", FINISHED), Mode.TEST)
    fake = _FakeToolchain(run_code=101, run_stdout=b"test failed")
    with mock.patch("exercisekit.exercise.subprocess.run", side_effect=fake):
        with exercise.compile() as compiled:
            with pytest.raises(ExerciseError) as info:
                compiled.run()
    assert info.value.output.stdout == "test failed"


def test_clippy_writes_cargo_toml(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "exercises" / "clippy").mkdir(parents=True)
    exercise = Exercise("clippy1", _write(tmp_path, "clippy1.rs", FINISHED), Mode.CLIPPY)
    fake = _FakeToolchain()
    with mock.patch("exercisekit.exercise.subprocess.run", side_effect=fake):
        exercise.compile().close()
    toml = (tmp_path / "exercises" / "clippy" / "Cargo.toml").read_text()
    assert 'name = "clippy1"' in toml
    assert 'path = "clippy1.rs"' in toml
    assert fake.calls[-1][:2] == ["cargo", "clippy"]
    assert "clippy::float_cmp" in fake.calls[-1]


def test_load_exercises(tmp_path):
    info = tmp_path / "info.toml"
    info.write_text(
        '[[exercises]]\nname = "intro1"\npath = "exercises/intro/intro1.rs"\nmode = "compile"\nhint = "No hints."\n'
        '[[exercises]]\nname = "tests1"\npath = "exercises/tests/tests1.rs"\nmode = "test"\nhint = "Hello!"\n'
    )
    exercises = load_exercises(info)
    assert [e.name for e in exercises] == ["intro1", "tests1"]
    assert exercises[1].mode is Mode.TEST
    assert exercises[1].hint == "Hello!"
    assert exercises[0].path == Path("exercises/intro/intro1.rs")