# exercisekit

A runner for a course made of small programming exercises. Each exercise is a
source file that does not yet compile or whose tests do not yet pass; your job
is to fix it. `exercisekit` compiles and runs the exercises in order with
`rustc`, shows you what went wrong, and moves on once you have marked an
exercise as finished.

## Requirements

- Python 3.11 or later
- `rustc` on your `PATH` (and `cargo` with Clippy for the `clippy` exercises)
- `git`, for `exercisekit reset`

## Installing

```
pip install .
```

## Getting started

Run every command from the course directory, the one that holds `info.toml`.
That file lists the exercises in their recommended order, each with a `name`,
a `path`, a `mode` (`compile`, `test` or `clippy`) and a `hint`:

```toml
[[exercises]]
name = "intro1"
path = "exercises/intro/intro1.rs"
mode = "compile"
hint = "Remove the I AM NOT DONE comment to move on."
```

Then start watch mode:

```
exercisekit watch
```

Watch mode checks each exercise in turn and stops at the first one that still
needs work. It then watches the `./exercises` directory; when a `.rs` file is
saved, that exercise and every other pending one are checked again. While
watching you can type:

- `hint`  – print the hint for the exercise that failed last
- `clear` – clear the screen
- `quit`  – leave watch mode
- `help`  – list these commands

An exercise counts as finished once it compiles (and its tests pass) and the
`// I AM NOT DONE` comment has been removed from it. While the comment is still
there, a successful check prints the lines around it and waits for you.

## Commands

```
exercisekit                     # print a welcome text and short instructions
exercisekit verify              # check all exercises in order, stop at the first failure
exercisekit watch               # like verify, then re-check whenever a file changes
exercisekit run <name>          # compile and run (or test) one exercise
exercisekit run next            # run the first exercise not yet finished
exercisekit hint <name>         # print the hint for an exercise
exercisekit reset <name>        # discard your changes to an exercise with "git stash -- <path>"
exercisekit list                # show every exercise with its path and status
exercisekit lsp                 # write rust-project.json for rust-analyzer
exercisekit --version           # print the version
```

`hint`, `reset` and `run` also accept `next`. Add `--nocapture` before the
command to see the output of test exercises:

```
exercisekit --nocapture run tests1
```

Commands exit with status 1 when an exercise fails, when no exercise has the
given name, or when `info.toml` or `rustc` cannot be found.

### Listing exercises

`exercisekit list` accepts:

- `-p`, `--paths` – print only the paths
- `-n`, `--names` – print only the names
- `-f`, `--filter <patterns>` – show exercises whose name or path contains one
  of the comma-separated patterns
- `-u`, `--unsolved` – show only exercises still pending
- `-s`, `--solved` – show only finished exercises

The listing ends with a progress line such as
`Progress: You completed 12 / 80 exercises (15.0 %).`

### rust-analyzer

`exercisekit lsp` adds one crate for every `.rs` file below `./exercises` and
writes them to `./rust-project.json`. The standard library sources are taken
from the `RUST_SRC_PATH` environment variable, or found with
`rustc --print sysroot`.

## Emoji

Set the `NO_EMOJI` environment variable to replace emoji in the output with
plain characters.

## Using it as a library

The pieces behind the commands can also be used directly:

```python
from exercisekit.exercise import load_exercises
from exercisekit.verify import VerificationFailed, verify

exercises = load_exercises("info.toml")
pending = [exercise for exercise in exercises if not exercise.looks_done()]
print(f"{len(pending)} exercises to go")

try:
    verify(exercises, (0, len(exercises)), verbose=False)
except VerificationFailed as failed:
    print(failed.exercise.hint)
```

- `exercisekit.exercise` – `Exercise`, `Mode`, `load_exercises`;
  `Exercise.compile()` returns a `CompiledExercise` (a context manager that
  deletes the binary on close) or raises `ExerciseError` with the captured
  output; `Exercise.state()` returns the `ContextLine`s around the pending
  marker, empty when done.
- `exercisekit.verify` – `verify`, `test`, `prompt_for_completion`,
  `VerificationFailed`.
- `exercisekit.run` – `run` and `reset` for a single exercise.
- `exercisekit.project` – `RustAnalyzerProject` and `Crate`.
- `exercisekit.cli` – `main`, `find_exercise`, `list_exercises`, `watch`,
  `rustc_exists`.

`exercisekit.lessons` holds worked solutions to many of the course topics as
plain functions and classes: `basics`, `branching`, `concurrency`, `enums`,
`errors`, `hashmaps`, `iterators`, `options`, `quizzes`, `smart_pointers`,
`strings`, `structs`, `traits` and `vecs`. For example:

```python
from exercisekit.lessons.iterators import factorial
from exercisekit.lessons.quizzes import calculate_price_of_apples

factorial(4)                    # 24
calculate_price_of_apples(41)   # 41
```

## What it does not do

- It does not ship a course. The exercise files and `info.toml` must already
  be in the directory you run it from.
- The worked solutions in `exercisekit.lessons` do not cover every topic; there
  is none for type conversions, for example.
- It does not install or manage `rustc`, `cargo` or Clippy.