"""Store mode configuration."""

from __future__ import annotations

import enum
import os

from overstate.exceptions import StoreConfigError

MODE_ENV_VAR = "OVERSTATE_MODE"


class Mode(str, enum.Enum):
    """How a Store hands out mutable state.

    DEVELOPMENT builds a fresh root per call and keeps the caller's owner.
    PRODUCTION memoizes a single owner-less root per store.
    """

    DEVELOPMENT = "development"
    PRODUCTION = "production"

    @classmethod
    def parse(cls, value: Mode | str) -> Mode:
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise StoreConfigError(f"Unknown store mode: {value!r}") from None


def default_mode() -> Mode:
    """Mode from $OVERSTATE_MODE, development when unset or empty."""
    value = os.environ.get(MODE_ENV_VAR)
    if not value or not value.strip():
        return Mode.DEVELOPMENT
    return Mode.parse(value)
