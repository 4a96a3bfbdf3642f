"""Owner/identity registry — decides which root mutable state a caller gets.

Development: every call builds a new root stamped with the caller's owner,
so concurrent consumers of one store can be told apart while debugging.

Production: the store memoizes a single root the first time it is asked for
one. Owners are dropped, every node reports None.
"""

from __future__ import annotations

import dataclasses
import logging
from typing import TYPE_CHECKING

from overstate._paths import ROOT_PATH
from overstate.config import Mode
from overstate.mutable_state import MutableState, wrap

if TYPE_CHECKING:
    from overstate.store import Store

logger = logging.getLogger("overstate.registry")


@dataclasses.dataclass(frozen=True)
class Owner:
    """Debug token naming who holds a mutable state (a component, a test...).

    Any object works as an owner; this is just the conventional shape.
    """

    type: str
    name: str


def create_mutable_state(store: Store, owner: object = None) -> MutableState:
    if store.mode is Mode.PRODUCTION:
        if store._mutable_state is None:
            store._mutable_state = wrap(store.state, ROOT_PATH, store, None)
            logger.debug("Memoized production mutable state for %r", store)
        return store._mutable_state

    logger.debug("Created mutable state for owner %r", owner)
    return wrap(store.state, ROOT_PATH, store, owner)
