"""A stack-driven desk calculator with memory and a few scientific keys."""

from __future__ import annotations

import math

from labtasks.numformat import format_number, parse_double

_DIGITS = frozenset("0123456789")
_OPERATORS = frozenset("+-*/")


class Calculator:
    """Calculator state: the entry line, the history line, a stack and memory.

    Operators are applied strictly left to right as they are entered; the
    history line shows the contents of the stack.
    """

    def __init__(self) -> None:
        self.display = ""
        self.history = ""
        self.memory = 0.0
        self._stack: list[str] = []

    @property
    def stack(self) -> tuple[str, ...]:
        """The pending operands and operators, bottom first."""
        return tuple(self._stack)

    def _calculate(self, sign: str) -> None:
        if not self.display:
            return
        self._stack.append(self.display)
        self.display = ""

        if len(self._stack) >= 3:
            right = parse_double(self._stack.pop())
            op = self._stack.pop()
            left = parse_double(self._stack.pop())

            result = 0.0
            if op == "+":
                result = left + right
            elif op == "-":
                result = left - right
            elif op == "*":
                result = left * right
            elif op == "/":
                if right == 0:
                    self._stack.append(format_number(float(left)))
                    self._stack.append(op)
                    self.display = ""
                    return
                result = left / right

            self._stack.append(format_number(float(result)))
            self.display = self._stack[-1]

        if sign != "=":
            self._stack.append(sign)
        self.history = " ".join(self._stack)

    def press_digit(self, digit: str) -> None:
        """Append a single decimal digit to the entry line."""
        if digit not in _DIGITS:
            raise ValueError(f"not a decimal digit: {digit!r}")
        self.display += digit

    def press_point(self) -> None:
        """Append a decimal point unless it would make no sense."""
        if not self.display or self.display.endswith("-") or "." in self.display:
            return
        self.display += "."

    def press_operator(self, op: str) -> None:
        """Enter the current value followed by one of + - * /."""
        if op not in _OPERATORS:
            raise ValueError(f"unknown operator: {op!r}")
        self._calculate(op)

    def equals(self) -> None:
        """Enter the current value and finish the pending operation."""
        self._calculate("=")

    def clear(self) -> None:
        """Reset the entry line, the history line and the stack."""
        self.display = ""
        self.history = ""
        self._stack.clear()

    def toggle_sign(self) -> None:
        """Add a leading minus sign, or remove the one that is there."""
        if self.display.startswith("-"):
            self.display = self.display[1:]
        else:
            self.display = "-" + self.display

    def memory_store(self) -> None:
        """Store the entry line's value in memory."""
        self.memory = parse_double(self.display)

    def memory_recall(self) -> None:
        """Show the memory's value on the entry line."""
        self.display = format_number(float(self.memory))

    def memory_clear(self) -> None:
        """Set the memory to zero."""
        self.memory = 0.0

    def memory_add(self) -> None:
        """Add the entry line's value to memory."""
        self.memory += parse_double(self.display)

    def memory_subtract(self) -> None:
        """Subtract the entry line's value from memory."""
        self.memory -= parse_double(self.display)

    def cosine(self) -> None:
        """Replace the entry by its cosine, the value taken in radians."""
        value = parse_double(self.display)
        try:
            result = math.cos(value)
        except ValueError:
            result = math.nan
        self.display = format_number(result)

    def log10(self) -> None:
        """Replace the entry by its decimal logarithm; negatives give Error."""
        value = parse_double(self.display)
        if value < 0:
            self.display = "Error"
            return
        self.display = format_number(-math.inf if value == 0 else math.log10(value))

    def sqrt(self) -> None:
        """Replace the entry by its square root; negatives give Error."""
        value = parse_double(self.display)
        if value < 0:
            self.display = "Error"
            return
        self.display = format_number(math.sqrt(value))

    def square(self) -> None:
        """Replace the entry by its square."""
        value = parse_double(self.display)
        self.display = format_number(value * value)