"""Store — owns the raw state tree and hands out mutable state facades.

A store is built from a definition with three branches:

    store = Store({
        "state": {"users": [], "user_count": lambda ctx: len(ctx.state["users"])},
        "actions": {...},
        "libraries": {...},
    })

Only "state" is wrapped. "actions" and "libraries" are opaque here; they are
handed to derived entries through their DerivedContext.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, MutableMapping, MutableSequence
from typing import Any

from overstate.config import Mode, default_mode
from overstate.derived import DerivedContext
from overstate.exceptions import StoreConfigError
from overstate.mutable_state import MutableState
from overstate.registry import create_mutable_state

logger = logging.getLogger("overstate.store")


class Store:
    """Holder of the raw state, actions and libraries for one application."""

    def __init__(self, definition: Mapping[str, Any], *, mode: Mode | str | None = None) -> None:
        if not isinstance(definition, Mapping) or "state" not in definition:
            raise StoreConfigError("Store definition needs a 'state' entry")
        state = definition["state"]
        if not isinstance(state, (MutableMapping, MutableSequence)):
            raise StoreConfigError(
                f"Store state must be a dict or list, got {type(state).__name__}"
            )
        self.state = state
        actions = definition.get("actions")
        libraries = definition.get("libraries")
        self.actions = {} if actions is None else actions
        self.libraries = {} if libraries is None else libraries
        self.mode = default_mode() if mode is None else Mode.parse(mode)
        # Production-only memo, see registry.create_mutable_state
        self._mutable_state: MutableState | None = None
        logger.debug("Store created in %s mode", self.mode.value)

    def create_mutable_state(self, owner: object = None) -> MutableState:
        """Root facade over the raw state. See overstate.registry for identity rules."""
        return create_mutable_state(self, owner)

    def derived_context(self) -> DerivedContext:
        return DerivedContext(self.state, self.actions, self.libraries)

    def __repr__(self) -> str:
        return f"Store(mode={self.mode.value!r})"
