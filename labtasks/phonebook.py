"""Two small phone books, rebuilt and reported on every press."""

from __future__ import annotations


class PhoneBookReport:
    """Builds a numbered report of two phone books on each press."""

    def __init__(self) -> None:
        self.presses = 0
        self.history: list[str] = []

    @staticmethod
    def _section(title: str, book: dict[str, str]) -> str:
        lines = [f"{title}:"]
        lines.extend(f"{name}: {phone}" for name, phone in sorted(book.items()))
        return "\n".join(lines) + "\n"

    def press(self) -> str:
        """Count a press and return the report for it.

        The report is also appended to the history.
        """
        self.presses += 1
        n = self.presses
        first = {
            f"Иванов_{n}": "111-111",
            f"Петров_{n}": "222-222",
        }
        second = {
            f"Сидоров_{n}": "333-333",
            f"Козлов_{n}": "444-444",
        }
        report = (
            f"Нажатие #{n} \n"
            + self._section("Книга 1", first)
            + self._section("Книга 2", second)
        )
        self.history.append(report)
        return report

    @property
    def text(self) -> str:
        """All reports so far, one per paragraph."""
        return "\n".join(self.history)