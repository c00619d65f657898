"""Check exercises in order, prompting the learner while one is still marked pending."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from contextlib import contextmanager

from rich.console import Console
from rich.status import Status
from rich.text import Text

from exercisekit.exercise import CompiledExercise, Exercise, ExerciseError, Mode
from exercisekit.ui import no_emoji, success, warn

_BAR_WIDTH = 60


class VerificationFailed(Exception):
    """An exercise did not compile, did not pass, or is still marked pending."""

    def __init__(self, exercise: Exercise):
        super().__init__(f"{exercise} did not pass")
        self.exercise = exercise


def _console() -> Console:
    return Console(highlight=False, soft_wrap=True)


@contextmanager
def _spinner(message: str) -> Iterator[Status]:
    with _console().status(message) as status:
        yield status


def _print_progress(done: int, total: int, percentage: float) -> None:
    filled = min(_BAR_WIDTH * done // total, _BAR_WIDTH) if total else _BAR_WIDTH
    if filled < _BAR_WIDTH:
        bar = "#" * filled + ">" + "-" * (_BAR_WIDTH - filled - 1)
    else:
        bar = "#" * _BAR_WIDTH
    print(f"Progress: [{bar}] {done}/{total} ({percentage:.1f} %)")


def verify(exercises: Iterable[Exercise], progress: tuple[int, int], verbose: bool = False) -> None:
    """Check each exercise in turn; raise VerificationFailed at the first that does not pass."""
    num_done, total = progress
    _print_progress(num_done, total, 0.0)
    for exercise in exercises:
        try:
            match exercise.mode:
                case Mode.TEST:
                    passed = _compile_and_test(exercise, interactive=True, verbose=verbose)
                case Mode.COMPILE:
                    passed = _compile_and_run_interactively(exercise)
                case Mode.CLIPPY:
                    passed = _compile_only(exercise)
        except VerificationFailed:
            passed = False
        if not passed:
            raise VerificationFailed(exercise)
        num_done += 1
        percentage = num_done / total * 100.0 if total else 100.0
        _print_progress(num_done, total, percentage)


def test(exercise: Exercise, verbose: bool = False) -> None:
    """Compile and run the exercise's tests; raise VerificationFailed if they fail."""
    _compile_and_test(exercise, interactive=False, verbose=verbose)


def _compile(exercise: Exercise, message: str) -> CompiledExercise:
    try:
        with _spinner(message):
            return exercise.compile()
    except ExerciseError as exc:
        output = exc.output
    warn(f"Compiling of {exercise} failed! Please try again. Here's the output:")
    print(output.stderr)
    raise VerificationFailed(exercise)


def _compile_only(exercise: Exercise) -> bool:
    _compile(exercise, f"Compiling {exercise}...").close()
    return prompt_for_completion(exercise, None)


def _compile_and_run_interactively(exercise: Exercise) -> bool:
    with _compile(exercise, f"Compiling {exercise}...") as compiled:
        try:
            with _spinner(f"Running {exercise}..."):
                output = compiled.run()
        except ExerciseError as exc:
            warn(f"Ran {exercise} with errors")
            print(exc.output.stdout)
            print(exc.output.stderr)
            raise VerificationFailed(exercise) from None
    return prompt_for_completion(exercise, output.stdout)


def _compile_and_test(exercise: Exercise, interactive: bool, verbose: bool) -> bool:
    with _compile(exercise, f"Testing {exercise}...") as compiled:
        try:
            with _spinner(f"Testing {exercise}..."):
                output = compiled.run()
        except ExerciseError as exc:
            warn(f"Testing of {exercise} failed! Please try again. Here's the output:")
            print(exc.output.stdout)
            raise VerificationFailed(exercise) from None
    if verbose:
        print(output.stdout)
    return prompt_for_completion(exercise, None) if interactive else True


def _separator() -> Text:
    return Text("====================", style="bold")


def prompt_for_completion(exercise: Exercise, prompt_output: str | None) -> bool:
    """Return True if the exercise is done; otherwise show where the pending marker is and return False."""
    context = exercise.state()
    if not context:
        return True

    match exercise.mode:
        case Mode.COMPILE:
            success(f"Successfully ran {exercise}!")
        case Mode.TEST:
            success(f"Successfully tested {exercise}!")
        case Mode.CLIPPY:
            success(f"Successfully compiled {exercise}!")

    plain = no_emoji()
    clippy_message = (
        "The code is compiling, and Clippy is happy!"
        if plain
        else "The code is compiling, and 📎 Clippy 📎 is happy!"
    )
    success_message = {
        Mode.COMPILE: "The code is compiling!",
        Mode.TEST: "The code is compiling, and the tests pass!",
        Mode.CLIPPY: clippy_message,
    }[exercise.mode]

    print()
    print(f"~*~ {success_message} ~*~" if plain else f"🎉 🎉  {success_message} 🎉 🎉")
    print()

    console = _console()
    if prompt_output is not None:
        print("Output:")
        console.print(_separator())
        print(prompt_output)
        console.print(_separator())
        print()

    print("You can keep working on this exercise,")
    console.print(
        Text.assemble(
            "or jump into the next one by removing the ",
            ("`I AM NOT DONE`", "bold"),
            " comment:",
        )
    )
    print()
    for context_line in context:
        line = (context_line.line, "bold") if context_line.important else context_line.line
        console.print(
            Text.assemble(
                (f"{context_line.number:>2}", "bold blue"),
                " ",
                ("|", "blue"),
                "  ",
                line,
            )
        )
    return False