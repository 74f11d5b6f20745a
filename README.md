# labtasks

A set of small numeric tasks as a Python library, with a `labtasks`
command that runs each of them.

- `labtasks.exercises`: tasks on two or three numbers.
- `labtasks.numbersets`: primality and the classification of an integer range.
- `labtasks.phonebook`: a report on two small phone books that grows on each press.
- `labtasks.calculator`: a keypad calculator with memory and a few scientific keys.
- `labtasks.numformat`: text-to-number parsing and number formatting used by the others.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Library use

### Exercises

```python
from labtasks import exercises

exercises.sort_descending(1, 3, 2)              # (3, 2, 1)
exercises.replace_min_with_sum(4, 1, 6)         # ("Y", 10)
exercises.replace_max_with_difference(2, 9, 5)  # ("Y", -3)
exercises.sum_if_different(2, 5)                # (7, 7); equal values give (0, 0)
exercises.max_if_different(2, 5)                # (5, 5); equal values give (0, 0)
exercises.spread(4, -1, 7)                      # 8
exercises.double_if_decreasing(3, 2, 1)         # (6, 4, 2); otherwise all negated
exercises.double_if_monotonic(1, 2, 3)          # (2, 4, 6); otherwise all negated
exercises.order_pair(5, 2)                      # (2, 5)
```

On ties, `replace_min_with_sum` and `replace_max_with_difference` pick the
earliest of X, Y, Z. The difference is the earlier remaining value minus the
later one.

### Number sets

```python
from labtasks.numbersets import is_prime, classify_range, format_numbers

is_prime(97)                         # True
result = classify_range(1, 10)       # both ends included
format_numbers(result.primes)        # "2 3 5 7"
format_numbers(result.composites)    # "4 6 8 9 10"
format_numbers(result.multiples_of_three)  # "3 6 9"
```

`classify_range` returns a frozen `Classification` dataclass holding three
frozensets. Numbers above one that are not prime count as composite.

### Phone-book report

```python
from labtasks.phonebook import PhoneBookReport

report = PhoneBookReport()
print(report.press())   # report numbered 1
report.press()          # report numbered 2
report.presses          # 2
report.text             # all reports so far
```

Each press builds two books whose names carry the press number, and returns
a report listing each book's entries in name order. Reports are kept in
`history`.

### Calculator

```python
from labtasks.calculator import Calculator

calc = Calculator()
calc.press_digit("7")
calc.press_operator("+")
calc.press_digit("5")
calc.equals()
calc.display   # "12"
calc.history   # "12"
```

`press_digit` takes a single character `"0"`–`"9"` and `press_operator` one
of `+ - * /`; anything else raises `ValueError`. Operators are applied
strictly left to right. An operator or `equals` pushes the entry onto the
stack and, once an operand, an operator and another operand are waiting,
combines them; the history line shows the stack. Division by zero leaves the
pending operation in place and clears the entry.

Other keys: `press_point`, `toggle_sign`, `clear`, the memory keys
`memory_store`, `memory_recall`, `memory_clear`, `memory_add`,
`memory_subtract`, and `cosine` (radians), `log10`, `sqrt`, `square`.
`log10` and `sqrt` show `Error` for negative entries.

### Number helpers

`parse_double` and `parse_int` read text and return zero when it is not a
number (`parse_int` also when it is outside the 32-bit signed range).
`format_number` writes integers in full and floats with six significant
digits.

## Command line

```
labtasks --help
```

Subcommands:

- `sort X Y Z`, `replace-min X Y Z`, `replace-max X Y Z`, `spread X Y Z`,
  `double-decreasing X Y Z`, `double-monotonic X Y Z`, `order X Y`
- `sum A B`, `max A B` (integers; prints `A = …, B = …`)
- `classify START STOP`: prints multiples of 3, primes and composites
- `phonebook [--presses N]`: prints the report after N presses (default 1)
- `calc KEY...`: runs calculator keys and prints the entry line, then the
  history line. Keys are digit strings, `+ - * /`, `.`, `=`, `C`, `neg`,
  `MS`, `MR`, `MC`, `M+`, `M-`, `cos`, `log`, `sqrt`, `sqr`.

Arguments that are not numbers are read as zero.

```
labtasks calc 7 + 5 =
```

## What it does not do

There is no graphical window or interactive keypad. Every task runs as a
library call or as a single command that prints its result and exits.
Nothing is saved between runs, including the calculator memory and the
phone-book press count.