"""Exception hierarchy for wordrank."""

from __future__ import annotations


class WordRankError(Exception):
    """Base class for all wordrank errors."""


class SequenceTooShortError(WordRankError, IndexError):
    """A sequence operation was given fewer elements than it needs.

    Attributes:
        operation: Name of the failing operation
        required: Minimum number of elements the operation needs
        actual: Number of elements it was given
    """

    def __init__(self, operation: str, required: int, actual: int):
        self.operation = operation
        self.required = required
        self.actual = actual
        super().__init__(f"{operation} requires at least {required} element(s), got {actual}")


class PolicyError(WordRankError, KeyError):
    """Unknown scoring policy."""

    def __init__(self, name: str, available: list[str]):
        self.name = name
        self.available = available
        super().__init__(name)

    def __str__(self) -> str:
        return f"unknown policy '{self.name}' (available: {', '.join(self.available)})"


class ConfigError(WordRankError):
    """Configuration file could not be parsed or validated."""


__all__ = [
    "WordRankError",
    "SequenceTooShortError",
    "PolicyError",
    "ConfigError",
]
