"""Exception hierarchy for overstate."""

from __future__ import annotations


class OverstateError(Exception):
    """Base exception for all overstate errors."""


class StoreConfigError(OverstateError, ValueError):
    """Invalid store definition or mode."""


class ReservedKeyError(OverstateError, TypeError):
    """Attempt to write or delete a reserved metadata key on a mutable state."""

    def __init__(self, key: object, path: str) -> None:
        self.key = key
        self.path = path
        super().__init__(f"{key!r} is read-only on mutable state at {path!r}")
