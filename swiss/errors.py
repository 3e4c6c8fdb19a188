"""error types raised by swiss collections."""

from __future__ import annotations

from typing import Any


class SwissError(Exception):
    """base class for swiss errors."""


class TypeMismatch(SwissError, TypeError):
    """an element or key does not have the shape an operation needs."""

    def __init__(self, message: str, value: Any = None):
        super().__init__(message)
        self.value = value


class MissingKeyError(SwissError, KeyError):
    """raised by subscription on an absent key. get() returns MISSING instead."""

    def __init__(self, key: Any):
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"key not found in collection: {self.key!r}"
