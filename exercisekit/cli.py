"""Command-line interface: list, run, verify, watch and inspect exercises."""

from __future__ import annotations

import argparse
import enum
import itertools
import os
import queue
import subprocess
import sys
import threading
from collections.abc import Iterator, Sequence
from pathlib import Path

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

from exercisekit.exercise import Exercise, load_exercises
from exercisekit.project import RustAnalyzerProject
from exercisekit.run import reset, run
from exercisekit.ui import no_emoji
from exercisekit.verify import VerificationFailed, verify

VERSION = "5.3.0"
INFO_FILE = "info.toml"
_DEBOUNCE_SECONDS = 1.0

WELCOME = """       welcome to...
  ___ __  __ ___ ___   ___ ___ ___ ___ _  _____ _____
 | __|\\ \\/ /| __| _ \\ / __|_ _/ __| __| |/ /_ _|_   _|
 | _|  >  < | _||   /| (__ | |\\__ \\ _|| ' < | |  | |
 |___|/_/\\_\\|___|_|_\\ \\___|___|___/___|_|\\_\\___| |_|"""

DEFAULT_OUT = """Thanks for installing exercisekit!

Is this your first time? Don't worry, these exercises are made for beginners!
Before you get started, here are a few notes about how it works:

1. The central concept is that you solve exercises. These exercises usually
   have some sort of syntax error in them, which will cause them to fail
   compilation or testing. Sometimes there's a logic error instead of a syntax
   error. No matter what error, it's your job to find it and fix it!
   You'll know when you fixed it because then the exercise will compile and
   you can move on to the next exercise.
2. If you run in watch mode (which we recommend), it'll automatically start
   with the first exercise. Don't get confused by an error message popping up
   as soon as you start! This is part of the exercise that you're supposed to
   solve, so open the exercise file in an editor and start your detective work!
3. If you're stuck on an exercise, there is a helpful hint you can view by typing
   'hint' (in watch mode), or running `exercisekit hint exercise_name`.
4. If you want to use `rust-analyzer` with the exercises, which provides
   features like autocompletion, run the command `exercisekit lsp`.

Got all that? Great! To get started, run `exercisekit watch` in order to get the
first exercise. Make sure to have your editor open!"""

FINISH_LINE = """+----------------------------------------------------+
|            You made it to the finish line!         |
+----------------------------------------------------+

We hope you enjoyed working through the exercises!
If you noticed any issues, please don't hesitate to report them.
You can also contribute your own exercises to help others learn."""

_WATCH_HELP = """Commands available to you in watch mode:
  hint  - prints the current exercise's hint
  clear - clears the screen
  quit  - quits watch mode
  help  - displays this help message

Watch mode automatically re-evaluates the current exercise
when you edit a file's contents."""


class WatchStatus(enum.Enum):
    """How watch mode ended."""

    FINISHED = "finished"
    UNFINISHED = "unfinished"


def rustc_exists() -> bool:
    """True when `rustc --version` can be run successfully."""
    try:
        result = subprocess.run(["rustc", "--version"], stdout=subprocess.DEVNULL)
    except OSError:
        return False
    return result.returncode == 0


def find_exercise(name: str, exercises: Sequence[Exercise]) -> Exercise:
    """Find an exercise by name, or the first pending one for 'next'; raise LookupError if none."""
    if name == "next":
        for exercise in exercises:
            if not exercise.looks_done():
                return exercise
        raise LookupError(
            "🎉 Congratulations! You have done all the exercises!\n"
            "🔚 There are no more exercises to do next!"
        )
    for exercise in exercises:
        if exercise.name == name:
            return exercise
    raise LookupError(f"No exercise found for '{name}'!")


def list_exercises(
    exercises: Sequence[Exercise],
    paths: bool = False,
    names: bool = False,
    pattern: str | None = None,
    unsolved: bool = False,
    solved: bool = False,
) -> Iterator[str]:
    """Yield the lines of the exercise listing, ending with a progress summary."""
    if not paths and not names:
        yield f"{'Name':<17}\t{'Path':<46}\t{'Status':<7}"
    filters = [f for f in (pattern or "").lower().split(",") if f.strip()]
    done_count = 0
    for exercise in exercises:
        fname = str(exercise.path)
        done = exercise.looks_done()
        if done:
            done_count += 1
        status = "Done" if done else "Pending"
        matches = pattern is None or any(f in exercise.name or f in fname for f in filters)
        wanted = (done and solved) or (not done and unsolved) or (not solved and not unsolved)
        if wanted and matches:
            if paths:
                yield fname
            elif names:
                yield exercise.name
            else:
                yield f"{exercise.name:<17}\t{fname:<46}\t{status:<7}"
    total = len(exercises)
    percentage = done_count / total * 100.0 if total else float("nan")
    yield f"Progress: You completed {done_count} / {total} exercises ({percentage:.1f} %)."


class _SharedHint:
    """The hint of the exercise that failed last, shared with the watch shell."""

    def __init__(self, text: str):
        self._lock = threading.Lock()
        self._text = text

    def set(self, text: str) -> None:
        with self._lock:
            self._text = text

    def get(self) -> str:
        with self._lock:
            return self._text


class _ChangeCollector(FileSystemEventHandler):
    def __init__(self, changes: queue.Queue):
        super().__init__()
        self._changes = changes

    def _collect(self, event: FileSystemEvent) -> None:
        if not event.is_directory:
            self._changes.put(os.fsdecode(event.src_path))

    def on_created(self, event: FileSystemEvent) -> None:
        self._collect(event)

    def on_modified(self, event: FileSystemEvent) -> None:
        self._collect(event)


def _clear_screen() -> None:
    print("\x1bc")


def _spawn_watch_shell(hint: _SharedHint, should_quit: threading.Event) -> None:
    print(
        "Welcome to watch mode! You can type 'help' to get an overview "
        "of the commands you can use here."
    )

    def shell() -> None:
        while True:
            try:
                raw = sys.stdin.readline()
            except (OSError, ValueError) as error:
                print(f"error reading command: {error}")
                return
            if not raw:
                return
            command = raw.strip()
            if command == "hint":
                print(hint.get())
            elif command == "clear":
                print("\x1b[2J\x1b[1;1H")
            elif command == "quit":
                should_quit.set()
                print("Bye!")
            elif command == "help":
                print(_WATCH_HELP)
            else:
                print(f"unknown command: {command}")

    threading.Thread(target=shell, daemon=True).start()


def _ends_with(path: Path, suffix: Path) -> bool:
    tail = suffix.parts
    return 0 < len(tail) <= len(path.parts) and path.parts[len(path.parts) - len(tail):] == tail


def _debounced(first: str, changes: queue.Queue) -> list[str]:
    """Collect further changes until the events go quiet; drop duplicates."""
    collected = [first]
    while True:
        try:
            collected.append(changes.get(timeout=_DEBOUNCE_SECONDS))
        except queue.Empty:
            return list(dict.fromkeys(collected))


def _recheck(changed: str, exercises: Sequence[Exercise], hint: _SharedHint, verbose: bool) -> bool:
    """Re-verify after a change; True when every exercise is now done."""
    path = Path(changed)
    if path.suffix != ".rs" or not path.exists():
        return False
    filepath = path.resolve()
    current = next((e for e in exercises if _ends_with(filepath, e.path)), None)
    pending = itertools.chain(
        [current] if current is not None else [],
        (e for e in exercises if not e.looks_done() and not _ends_with(filepath, e.path)),
    )
    num_done = sum(1 for e in exercises if e.looks_done())
    _clear_screen()
    try:
        verify(pending, (num_done, len(exercises)), verbose)
    except VerificationFailed as exc:
        hint.set(exc.exercise.hint)
        return False
    return True


def watch(exercises: Sequence[Exercise], verbose: bool = False) -> WatchStatus:
    """Verify the exercises and re-verify whenever a file below ./exercises changes."""
    changes: queue.Queue = queue.Queue()
    observer = Observer()
    observer.schedule(_ChangeCollector(changes), "./exercises", recursive=True)
    observer.start()
    try:
        _clear_screen()
        try:
            verify(exercises, (0, len(exercises)), verbose)
        except VerificationFailed as exc:
            hint = _SharedHint(exc.exercise.hint)
        else:
            return WatchStatus.FINISHED

        should_quit = threading.Event()
        _spawn_watch_shell(hint, should_quit)
        while not should_quit.is_set():
            try:
                first = changes.get(timeout=1.0)
            except queue.Empty:
                continue
            for changed in _debounced(first, changes):
                if _recheck(changed, exercises, hint, verbose):
                    return WatchStatus.FINISHED
        return WatchStatus.UNFINISHED
    finally:
        observer.stop()
        observer.join()


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def _parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="exercisekit",
        description="A collection of small exercises to get you used to writing and reading code",
    )
    parser.add_argument("--nocapture", action="store_true", help="show outputs from the test exercises")
    parser.add_argument("-v", "--version", action="store_true", help="show the executable version")
    commands = parser.add_subparsers(dest="command")
    commands.add_parser("verify", help="verifies all exercises according to the recommended order")
    commands.add_parser("watch", help="reruns `verify` when files were edited")
    for name, text in (
        ("run", "runs/tests a single exercise"),
        ("reset", 'resets a single exercise using "git stash -- <filename>"'),
        ("hint", "returns a hint for the given exercise"),
    ):
        sub = commands.add_parser(name, help=text)
        sub.add_argument("name", nargs="?", help="the name of the exercise")
    lister = commands.add_parser("list", help="lists the exercises available")
    lister.add_argument("-p", "--paths", action="store_true", help="show only the paths of the exercises")
    lister.add_argument("-n", "--names", action="store_true", help="show only the names of the exercises")
    lister.add_argument(
        "-f", "--filter", dest="pattern", help="comma separated patterns to match exercise names"
    )
    lister.add_argument("-u", "--unsolved", action="store_true", help="display only exercises not yet solved")
    lister.add_argument("-s", "--solved", action="store_true", help="display only exercises that have been solved")
    commands.add_parser("lsp", help="enable rust-analyzer for exercises")
    return parser


def _print_listing(args: argparse.Namespace, exercises: Sequence[Exercise]) -> int:
    lines = list_exercises(
        exercises,
        paths=args.paths,
        names=args.names,
        pattern=args.pattern,
        unsolved=args.unsolved,
        solved=args.solved,
    )
    try:
        for line in lines:
            sys.stdout.write(line + "\n")
        sys.stdout.flush()
    except BrokenPipeError:
        return 0
    except OSError:
        return 1
    return 0


def _lsp() -> int:
    project = RustAnalyzerProject()
    try:
        project.get_sysroot_src()
    except OSError:
        print("Couldn't find toolchain path, do you have `rustc` installed?")
        return 1
    try:
        project.exercises_to_json(".")
    except OSError:
        print("Couldn't parse exercises files")
        return 1
    if not project.crates:
        print("Failed find any exercises, make sure you're in the exercises folder")
        return 0
    try:
        project.write_to_disk("./rust-project.json")
    except OSError:
        print("Failed to write rust-project.json to disk for rust-analyzer")
        return 0
    print("Successfully generated rust-project.json")
    print("rust-analyzer will now parse exercises, restart your language server or editor")
    return 0


def _watch(exercises: Sequence[Exercise], verbose: bool) -> int:
    try:
        status = watch(exercises, verbose)
    except OSError as error:
        print(f"Error: Could not watch your progress. Error message was {error!r}.")
        print("Most likely you've run out of disk space or your 'inotify limit' has been reached.")
        return 1
    if status is WatchStatus.FINISHED:
        emoji = "★" if no_emoji() else "🎉"
        print(f"{emoji} All exercises completed! {emoji}")
        print(f"\n{FINISH_LINE}\n")
    else:
        print("We hope you're enjoying the exercises!")
        print(
            "If you want to continue working on the exercises at a later point, "
            "you can simply run `exercisekit watch` again"
        )
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line and return the exit status."""
    args = _parser().parse_args(argv)

    if args.version:
        print(f"v{VERSION}")
        return 0

    if args.command in ("run", "reset", "hint") and args.name is None:
        print("Required positional arguments not provided:\n    name", file=sys.stderr)
        return 1

    if args.command is None:
        print(f"\n{WELCOME}\n")

    if not Path(INFO_FILE).exists():
        print(f"{sys.argv[0]} must be run from the exercises directory")
        print("Try `cd` into the directory that holds info.toml!")
        return 1

    if not rustc_exists():
        print("We cannot find `rustc`.")
        print("Try running `rustc --version` to diagnose your problem.")
        print("For instructions on how to install Rust, check the README.")
        return 1

    exercises = load_exercises(INFO_FILE)
    verbose = args.nocapture

    match args.command:
        case None:
            print(f"{DEFAULT_OUT}\n")
            return 0
        case "list":
            return _print_listing(args, exercises)
        case "run" | "reset" | "hint":
            try:
                exercise = find_exercise(args.name, exercises)
            except LookupError as exc:
                print(exc)
                return 1
            if args.command == "hint":
                print(exercise.hint)
                return 0
            if args.command == "reset":
                try:
                    reset(exercise)
                except OSError:
                    return 1
                return 0
            try:
                run(exercise, verbose)
            except VerificationFailed:
                return 1
            return 0
        case "verify":
            try:
                verify(exercises, (0, len(exercises)), verbose)
            except VerificationFailed:
                return 1
            return 0
        case "lsp":
            return _lsp()
        case "watch":
            return _watch(exercises, verbose)
    return 1


if __name__ == "__main__":
    sys.exit(main())