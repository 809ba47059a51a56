# kata

A collection of small, self-contained programming exercises. Each one is a
plain Python module that you can import. Most of them can also be run as a
console command. The package has no third-party dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Commands

| Command                          | What it does                                                                 |
|----------------------------------|------------------------------------------------------------------------------|
| `kata-hello [NAME]`              | Prints `Hello from [NAME]` (`world` when no name is given).                  |
| `kata-odd-even N`                | Prints `EVEN` or `ODD`, `NAN` for a non-number.                              |
| `kata-armstrong N`               | Says whether `N` equals the sum of the cubes of its digits.                  |
| `kata-show-arguments ARGS...`    | Prints each argument on its own line.                                        |
| `kata-books [FILE...]`           | Shows a built-in catalogue, or the books read from each text or `.ini` file. |
| `kata-matrix`                    | Fills a 20×10 character matrix, edits cells and prints each stage.           |
| `kata-bookshop`                  | Creates, copies, moves and ships books, narrating each step.                 |
| `kata-authors`                   | Lists books with their authors and reviewers, alien authors included.        |
| `kata-student`                   | Sets, copies and displays student grades.                                    |
| `kata-life [GENERATIONS]`        | Draws a glider and prints the Game of Life (100 generations by default).     |
| `kata-felines`                   | Creates a lion, a kitty and a plain feline and prints their sounds.          |
| `kata-cats [INI_FILE]`           | Starts with four built-in felines, adds those from an INI file, lets them speak. |
| `kata-plugins [INI_FILE]`        | Registers the feline kinds named in a plugins INI file, then loads cats.     |

`kata-cats` and `kata-plugins` fall back to a relative default path
(`../../data/...`) when no file is given.

Examples:

```
$ kata-odd-even 7
ODD
$ kata-armstrong 153
Armstrong
$ kata-armstrong 154
NOT Armstrong
```

## Library use

### Numbers and flow control

```python
from kata.numbers import is_number, parity, is_armstrong

is_number("-42")                    # True
is_number("+42", allow_plus=False)  # False
parity(4)                           # "EVEN"
is_armstrong(371)                   # True
```

`kata.basics` holds small flow-control helpers: `describe_value`,
`describe_color` (for a `Color`), `count_up`, `sum_to`, `sum_odd_to` and
`describe_record` for a `BookRecord`.

### String utilities

`kata.stringutil` has `split_by_char`, `string_to_bool`, `bool_to_string`
(formatted with a `LetterCase`), `string_to_int`, `string_to_double`,
`unsigned_to_hex_string`, `trim_string`, `remove_outer_quotes` and
`get_extension_from_file_name`.

```python
from kata.stringutil import split_by_char, get_extension_from_file_name

split_by_char("a|b|", "|")                          # ["a", "b", ""]
get_extension_from_file_name("27_plugin_lion.dll")  # "dll"
```

### Books, matrices and students

- `kata.books`: `CatalogBook` and `Author` (with length and author-count
  limits), `ListedBook`, `read_books_from_text_file` (alternating name and
  author lines) and `read_books_from_ini_file` (a `[books] count` plus
  `[book.N]` sections with `name` and `author`).
- `kata.matrix.Matrix`: a character grid with `set_line`, `set_cell` and
  `render`; writes outside the grid raise `IndexError`.
- `kata.bookshop.Book`: a book that prints messages when it is created,
  copied (`copy.copy`), moved (`take`) and destroyed; `ship_book` prints
  shipping labels.
- `kata.authors`: `Author`, `AlienAuthor` and `ReviewedBook`.
- `kata.student.Student`: `set_grade` accepts grades from 1 to 10 only.

### Game of Life

Two implementations are provided. `kata.life.LifeBoard` stamps the classic
`Shape` patterns (block, boat, blinker, beacon, glider, pulsar,
pentadecathlon) and renders the board as text. `kata.engine.GameOfLife` is
built on the generic `kata.board.Board` and works with `Status` cells; its
`draw_pattern` draws only the block and the boat, and the `Orientation`
argument does not change the drawing.

```python
from kata.life import LifeBoard, Shape

board = LifeBoard()
board.draw_shape(Shape.GLIDER, 0, 0)
board.next_generation()
print(board.render())
```

Both boards are at least 20×20; smaller sizes are raised to that minimum.

### Felines and the factory

`kata.felines` defines `Lion`, `Lynx` and `DomesticCat`; `speak()` prints
and returns a line such as `Scar says: Roar!`. A `FelineFactory` maps type
names to creators, and `load_from_ini_file` in `kata.reader` builds felines
from an INI file laid out like this:

```ini
[general]
num_cats = 2

[felines]
feline1.type = lion
feline1.name = Scar
feline1.option = P. l. leo
feline2.type = domestic_cat
feline2.name = Bubbles
feline2.option = arctic cat
```

```python
from kata.factory import FelineFactory
from kata.reader import load_from_ini_file

factory = FelineFactory.with_builtin_cats()
for feline in load_from_ini_file("cats.ini", factory):
    feline.speak()
```

If a type has no registered creator, that entry is skipped and a message is
printed. `kata.sample` holds a separate, simpler hierarchy (`SampleFeline`,
`SampleLion`, `Kitty`).

## What the package does not do

- `kata.plugins` does not load code from files. A plugins INI file lists
  `[plugins] num_plugins` and `plugin.N` file names; the feline kind is taken
  from the part after `_plugin_` (for example `28_plugin_lynx.so` gives
  `lynx`) and matched against the built-in creators for `lion` and `lynx`.
  Any other name is reported as not loadable.
- There is no graphical or interactive Game of Life window; the boards are
  driven from code and rendered as text.