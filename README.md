# drillings

Support code for working through a directory of small exercises:

- coloured status lines for the terminal (`drillings.ui`),
- generation of a `rust-project.json` file so an editor's language server
  understands each exercise file (`drillings.project`),
- worked solutions to the lessons as plain Python functions and classes
  (`drillings.lessons`).

## Requirements

- Python 3.11 or later
- `rustc` on your `PATH` only if you want `RustAnalyzerProject.get_sysroot_src`
  to find the toolchain itself (set `RUST_SRC_PATH` to skip that)

## Installation

```
pip install .
```

For running the test suite:

```
pip install .[test]
pytest
```

## Status lines

```python
from drillings.ui import success, warn

success("Successfully ran exercises/intro/intro1.rs")
warn("Compiling of exercises/intro/intro2.rs failed!")
```

`success` prints a green line starting with ✅, `warn` a red line starting
with ⚠️. When the `NO_EMOJI` environment variable is set, the symbols are
`✓` and `!` instead.

## Language-server project file

```python
from drillings.project import RustAnalyzerProject

project = RustAnalyzerProject()
project.get_sysroot_src()
project.exercises_to_json("./exercises")
project.write_to_disk("./rust-project.json")
```

- `get_sysroot_src()` uses `RUST_SRC_PATH` when it is set; otherwise it runs
  `rustc --print sysroot`, prints the toolchain it found and points
  `sysroot_src` at `<sysroot>/lib/rustlib/src/rust/library`.
- `exercises_to_json(root)` adds a `Crate` (edition `2021`, no deps,
  `cfg = ["test"]`) for every `.rs` file below `root`, in sorted order.
- `to_json()` returns the compact JSON text; `write_to_disk(path)` writes it.

## Lessons

Each module in `drillings.lessons` holds solutions to one group of lessons.
Errors are raised as exceptions.

| Module | Contents |
| --- | --- |
| `basics` | `bigger`, `foo_if_fizz`, `animal_habitat` |
| `quizzes` | `calculate_price_of_apples`, `transformer` with `Command` / `CommandKind`, `ReportCard` |
| `people` | `Person.default`, `Person.from_text` (falls back to John, 30), `Person.parse` (raises `ParsePersonError` with a `PersonErrorKind`) |
| `errors` | `generate_nametag_text`, `total_cost`, `spend_tokens`, `PositiveNonzeroInteger`, `parse_pos_nonzero` and their errors |
| `iterators` | `capitalize_first`, `capitalize_words_vector`, `capitalize_words_string`, `divide`, `result_with_list`, `list_of_results`, `factorial`, `Progress` counting helpers |
| `hashmaps` | `fruit_basket`, `Fruit`, `fill_fruit_basket`, `Team`, `build_scores_table` |
| `sequences` | `array_and_vec`, `vec_loop`, `vec_map`, `maybe_icecream` |
| `structures` | `ColorClassicStruct`, `ColorTupleStruct`, `UnitLikeStruct`, `Order`, `create_order_template`, `Package`, and `State.process` for `ChangeColor` / `Move` / `Echo` / `Quit` messages |
| `text` | `current_favorite_color`, `is_a_color_word`, `trim_me`, `compose_me`, `replace_me`, `append_bar`, `Licensed`, `compare_license_types`, `Wrapper` |
| `pointers` | the cons list `Cons` / `Nil`, `Cow` and `abs_all` |

```python
from drillings.lessons.errors import total_cost
from drillings.lessons.iterators import NotDivisibleError, divide
from drillings.lessons.people import ParsePersonError, Person, PersonErrorKind
from drillings.lessons.quizzes import Command, CommandKind, transformer

assert total_cost("34") == 171
assert Person.from_text("Mark,twenty") == Person("John", 30)
assert transformer([("foo", Command(CommandKind.APPEND, 1))]) == ["foobar"]

try:
    Person.parse("John,32,")
except ParsePersonError as exc:
    assert exc.kind is PersonErrorKind.BAD_LEN

try:
    divide(81, 6)
except NotDivisibleError as exc:
    assert (exc.dividend, exc.divisor) == (81, 6)
```

## What this package does not do

There is no command-line tool. The package does not read an `info.toml`
exercise list, compile, run or test exercise files, verify progress, watch
the exercise directory for changes, show hints, list exercises or reset them.
It provides only the status lines, the project-file generation and the
lesson solutions described above.