"""Domain errors.

All project exceptions derive from `PersonRecordsError` so the CLI can catch
them in one place.
"""

from __future__ import annotations


class PersonRecordsError(Exception):
    """Base class for person-records errors."""


class ConstructionError(PersonRecordsError):
    """Dynamic construction of a record produced no value."""


class HandleReleasedError(PersonRecordsError, RuntimeError):
    """A released handle was used or released again."""

    def __init__(self, operation: str) -> None:
        super().__init__(f"cannot {operation}: person handle was already released")
        self.operation = operation
