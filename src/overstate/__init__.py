"""overstate: path-aware mutable state facades over plain Python state trees."""

from importlib.metadata import version as _version

__version__ = _version("overstate")

from overstate.config import Mode, default_mode
from overstate.derived import DerivedContext, is_derived
from overstate.exceptions import OverstateError, ReservedKeyError, StoreConfigError
from overstate.mutable_state import (
    MUTABLE_STATE,
    OWNER,
    PATH,
    RAW,
    STORE,
    MutableState,
    MutableStateDict,
    MutableStateList,
    is_mutable_state,
    to_raw,
)
from overstate.registry import Owner
from overstate.store import Store

__all__ = [
    "Store",
    "Mode",
    "default_mode",
    "Owner",
    "MutableState",
    "MutableStateDict",
    "MutableStateList",
    "is_mutable_state",
    "to_raw",
    "MUTABLE_STATE",
    "PATH",
    "RAW",
    "STORE",
    "OWNER",
    "DerivedContext",
    "is_derived",
    "OverstateError",
    "ReservedKeyError",
    "StoreConfigError",
]
