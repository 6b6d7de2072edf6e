"""
Service contract and canonical implementation for string operations.
"""

from typing import Protocol

from string_service.app.core.errors import EmptyInputError


class StringService(Protocol):
    """Operations on strings.

    ``uppercase`` may fail with :class:`EmptyInputError`; ``count``
    never fails.
    """

    def uppercase(self, s: str) -> str:
        ...

    def count(self, s: str) -> int:
        ...


class BasicStringService:
    """The canonical :class:`StringService` implementation."""

    def uppercase(self, s: str) -> str:
        if s == "":
            raise EmptyInputError()
        return s.upper()

    def count(self, s: str) -> int:
        return len(s)
