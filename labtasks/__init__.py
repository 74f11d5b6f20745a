"""Small numeric exercises, number-set classification, a phone-book report and a stack calculator."""

__version__ = "0.1.0"

__all__ = ["calculator", "cli", "exercises", "numbersets", "numformat", "phonebook"]