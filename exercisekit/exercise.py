"""Exercises: loading, compiling, running and checking completion state."""

from __future__ import annotations

import enum
import os
import re
import subprocess
import threading
import tomllib
import weakref
from dataclasses import dataclass
from pathlib import Path

from exercisekit.ui import no_emoji

_RUSTC_COLOR_ARGS = ("--color", "always")
I_AM_DONE_REGEX = re.compile(r"^\s*///?\s*I\s+AM\s+NOT\s+DONE", re.MULTILINE)
CONTEXT = 2
CLIPPY_CARGO_TOML_PATH = Path("./exercises/clippy/Cargo.toml")


def _temp_file() -> Path:
    """A binary path in the working directory unique to this process and thread."""
    return Path.cwd() / f"temp_{os.getpid()}_ThreadId{threading.get_ident()}"


def _remove(path: Path) -> None:
    try:
        path.unlink(missing_ok=True)
    except OSError:
        pass


def _lines(source: str) -> list[str]:
    lines = source.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


class Mode(enum.Enum):
    """How an exercise is checked."""

    COMPILE = "compile"
    TEST = "test"
    CLIPPY = "clippy"


@dataclass(frozen=True)
class ExerciseOutput:
    """Captured output of a finished process."""

    stdout: str
    stderr: str

    @classmethod
    def _from_process(cls, result: subprocess.CompletedProcess) -> ExerciseOutput:
        return cls(
            stdout=result.stdout.decode("utf-8", errors="replace"),
            stderr=result.stderr.decode("utf-8", errors="replace"),
        )


class ExerciseError(Exception):
    """Compiling or running an exercise failed; carries the captured output."""

    def __init__(self, output: ExerciseOutput):
        super().__init__(output.stderr or output.stdout)
        self.output = output


@dataclass(frozen=True)
class ContextLine:
    """A source line shown around the pending marker."""

    line: str
    number: int
    important: bool


class CompiledExercise:
    """A compiled exercise binary, removed when closed."""

    def __init__(self, exercise: Exercise, binary: Path):
        self.exercise = exercise
        self.binary = binary
        self._finalizer = weakref.finalize(self, _remove, binary)

    def run(self) -> ExerciseOutput:
        """Run the binary; raise ExerciseError if it exits unsuccessfully."""
        args = [str(self.binary)]
        if self.exercise.mode is Mode.TEST:
            args.append("--show-output")
        result = subprocess.run(args, capture_output=True)
        output = ExerciseOutput._from_process(result)
        if result.returncode != 0:
            raise ExerciseError(output)
        return output

    def close(self) -> None:
        """Delete the compiled binary."""
        self._finalizer()

    def __enter__(self) -> CompiledExercise:
        return self

    def __exit__(self, *args) -> None:
        self.close()


def _command(*args: str) -> subprocess.CompletedProcess:
    return subprocess.run([*args, *_RUSTC_COLOR_ARGS], capture_output=True)


@dataclass
class Exercise:
    """An exercise as described in info.toml."""

    name: str
    path: Path
    mode: Mode
    hint: str = ""

    def __post_init__(self) -> None:
        self.path = Path(self.path)
        self.mode = Mode(self.mode)

    def compile(self) -> CompiledExercise:
        """Compile the exercise; raise ExerciseError with the compiler output on failure."""
        binary = _temp_file()
        source = str(self.path)
        match self.mode:
            case Mode.COMPILE:
                result = _command("rustc", source, "-o", str(binary))
            case Mode.TEST:
                result = _command("rustc", "--test", source, "-o", str(binary))
            case Mode.CLIPPY:
                result = self._clippy(binary)
        if result.returncode == 0:
            return CompiledExercise(self, binary)
        _remove(binary)
        raise ExerciseError(ExerciseOutput._from_process(result))

    def _clippy(self, binary: Path) -> subprocess.CompletedProcess:
        cargo_toml = (
            "[package]\n"
            f'name = "{self.name}"\n'
            'version = "0.0.1"\n'
            'edition = "2021"\n'
            "[[bin]]\n"
            f'name = "{self.name}"\n'
            f'path = "{self.name}.rs"'
        )
        try:
            CLIPPY_CARGO_TOML_PATH.write_text(cargo_toml)
        except OSError as exc:
            message = (
                "Failed to write Clippy Cargo.toml file."
                if no_emoji()
                else "Failed to write 📎 Clippy 📎 Cargo.toml file."
            )
            raise OSError(message) from exc
        # Build a runnable binary too; clippy reports the same compile errors.
        _command("rustc", str(self.path), "-o", str(binary))
        # A clean is needed for clippy to report every lint.
        _command("cargo", "clean", "--manifest-path", str(CLIPPY_CARGO_TOML_PATH))
        return subprocess.run(
            [
                "cargo",
                "clippy",
                "--manifest-path",
                str(CLIPPY_CARGO_TOML_PATH),
                *_RUSTC_COLOR_ARGS,
                "--",
                "-D",
                "warnings",
                "-D",
                "clippy::float_cmp",
            ],
            capture_output=True,
        )

    def state(self) -> list[ContextLine]:
        """Lines around the pending marker; an empty list when the exercise is done."""
        source = self.path.read_text(encoding="utf-8")
        if not I_AM_DONE_REGEX.search(source):
            return []
        lines = _lines(source)
        matched = next(i for i, line in enumerate(lines) if I_AM_DONE_REGEX.search(line))
        first = max(matched - CONTEXT, 0)
        last = matched + CONTEXT
        return [
            ContextLine(line=line, number=i + 1, important=i == matched)
            for i, line in enumerate(lines)
            if first <= i <= last
        ]

    def looks_done(self) -> bool:
        """True when the pending marker has been removed from the file."""
        return not self.state()

    def __str__(self) -> str:
        return str(self.path)


def load_exercises(path) -> list[Exercise]:
    """Read the exercise list from an info.toml file."""
    with open(path, "rb") as handle:
        data = tomllib.load(handle)
    return [
        Exercise(name=entry["name"], path=Path(entry["path"]), mode=Mode(entry["mode"]), hint=entry["hint"])
        for entry in data["exercises"]
    ]