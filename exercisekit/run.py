"""Run or reset a single exercise."""

from __future__ import annotations

import subprocess
from collections.abc import Iterator
from contextlib import contextmanager

from rich.console import Console

from exercisekit.exercise import Exercise, ExerciseError, Mode
from exercisekit.ui import success, warn
from exercisekit.verify import VerificationFailed, test


@contextmanager
def _spinner(message: str) -> Iterator[None]:
    with Console(highlight=False, soft_wrap=True).status(message):
        yield


def run(exercise: Exercise, verbose: bool = False) -> None:
    """Compile and run (or test) the exercise; raise VerificationFailed on failure."""
    if exercise.mode is Mode.TEST:
        test(exercise, verbose)
    else:
        _compile_and_run(exercise)


def reset(exercise: Exercise) -> subprocess.Popen:
    """Stash the learner's changes to the exercise file with git."""
    return subprocess.Popen(["git", "stash", "--", str(exercise.path)])


def _compile_and_run(exercise: Exercise) -> None:
    try:
        with _spinner(f"Compiling {exercise}..."):
            compiled = exercise.compile()
    except ExerciseError as exc:
        warn(f"Compilation of {exercise} failed!, Compiler error message:\n")
        print(exc.output.stderr)
        raise VerificationFailed(exercise) from None

    with compiled:
        try:
            with _spinner(f"Running {exercise}..."):
                output = compiled.run()
        except ExerciseError as exc:
            print(exc.output.stdout)
            print(exc.output.stderr)
            warn(f"Ran {exercise} with errors")
            raise VerificationFailed(exercise) from None

    print(output.stdout)
    success(f"Successfully ran {exercise}")