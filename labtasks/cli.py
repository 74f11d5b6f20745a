"""Command-line front end for the exercises, the number sets and the calculator."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence

from labtasks import exercises
from labtasks.calculator import Calculator
from labtasks.numbersets import classify_range, format_numbers
from labtasks.numformat import format_number, parse_double, parse_int
from labtasks.phonebook import PhoneBookReport

_THREE = ("x", "y", "z")
_TWO_INT = ("a", "b")


def _joined(values: Sequence[float]) -> str:
    return " ".join(format_number(float(v)) for v in values)


def _calc_actions(calc: Calculator) -> dict[str, Callable[[], None]]:
    return {
        ".": calc.press_point,
        "=": calc.equals,
        "C": calc.clear,
        "neg": calc.toggle_sign,
        "MS": calc.memory_store,
        "MR": calc.memory_recall,
        "MC": calc.memory_clear,
        "M+": calc.memory_add,
        "M-": calc.memory_subtract,
        "cos": calc.cosine,
        "log": calc.log10,
        "sqrt": calc.sqrt,
        "sqr": calc.square,
    }


def _run_calculator(keys: Sequence[str], parser: argparse.ArgumentParser) -> str:
    calc = Calculator()
    actions = _calc_actions(calc)
    for key in keys:
        if key and all(ch in "0123456789" for ch in key):
            for ch in key:
                calc.press_digit(ch)
        elif key in ("+", "-", "*", "/"):
            calc.press_operator(key)
        elif key in actions:
            actions[key]()
        else:
            parser.error(f"unknown key: {key!r}")
    return f"{calc.display}\n{calc.history}"


def _build_parser() -> tuple[argparse.ArgumentParser, argparse.ArgumentParser]:
    parser = argparse.ArgumentParser(prog="labtasks", description=__doc__)
    sub = parser.add_subparsers(dest="command", required=True)

    for name, help_text in (
        ("sort", "order three values from largest to smallest"),
        ("replace-min", "name the smallest value and sum the other two"),
        ("replace-max", "name the largest value and subtract the other two"),
        ("spread", "largest minus smallest of three values"),
        ("double-decreasing", "double if strictly decreasing, else negate"),
        ("double-monotonic", "double if strictly monotonic, else negate"),
    ):
        cmd = sub.add_parser(name, help=help_text)
        for field in _THREE:
            cmd.add_argument(field)

    order = sub.add_parser("order", help="order two values as smaller, larger")
    order.add_argument("x")
    order.add_argument("y")

    for name, help_text in (
        ("sum", "replace two integers by their sum if they differ"),
        ("max", "replace two integers by the larger if they differ"),
    ):
        cmd = sub.add_parser(name, help=help_text)
        for field in _TWO_INT:
            cmd.add_argument(field)

    classify = sub.add_parser("classify", help="multiples of three, primes, composites")
    classify.add_argument("start", type=int)
    classify.add_argument("stop", type=int)

    phonebook = sub.add_parser("phonebook", help="report on two phone books")
    phonebook.add_argument("--presses", type=int, default=1)

    calc = sub.add_parser("calc", help="run a sequence of calculator keys")
    calc.add_argument("keys", nargs="+")
    return parser, calc


def main(argv: Sequence[str] | None = None) -> int:
    """Run one task from the command line and print its result."""
    parser, calc_parser = _build_parser()
    args = parser.parse_args(argv)
    command = args.command

    if command in ("sort", "replace-min", "replace-max", "spread",
                   "double-decreasing", "double-monotonic"):
        x, y, z = (parse_double(getattr(args, f)) for f in _THREE)
        if command == "sort":
            output = _joined(exercises.sort_descending(x, y, z))
        elif command == "replace-min":
            name, value = exercises.replace_min_with_sum(x, y, z)
            output = f"{name} = {format_number(float(value))}"
        elif command == "replace-max":
            name, value = exercises.replace_max_with_difference(x, y, z)
            output = f"{name} = {format_number(float(value))}"
        elif command == "spread":
            output = format_number(float(exercises.spread(x, y, z)))
        elif command == "double-decreasing":
            output = _joined(exercises.double_if_decreasing(x, y, z))
        else:
            output = _joined(exercises.double_if_monotonic(x, y, z))
    elif command == "order":
        output = _joined(exercises.order_pair(parse_double(args.x), parse_double(args.y)))
    elif command in ("sum", "max"):
        a, b = parse_int(args.a), parse_int(args.b)
        func = exercises.sum_if_different if command == "sum" else exercises.max_if_different
        a, b = func(a, b)
        output = f"A = {a}, B = {b}"
    elif command == "classify":
        result = classify_range(args.start, args.stop)
        output = "\n".join((
            f"multiples of 3: {format_numbers(result.multiples_of_three)}",
            f"primes: {format_numbers(result.primes)}",
            f"composites: {format_numbers(result.composites)}",
        ))
    elif command == "phonebook":
        if args.presses < 1:
            parser.error("--presses must be at least 1")
        book = PhoneBookReport()
        for _ in range(args.presses):
            book.press()
        sys.stdout.write(book.text)
        return 0
    else:
        output = _run_calculator(args.keys, calc_parser)

    print(output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())