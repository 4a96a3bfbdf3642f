"""Mutable state — a path-aware read/write facade over the raw state tree.

A mutable state node stands in for one raw dict or list. Reading a key
returns primitives unchanged, resolves derived entries against the store,
and wraps nested dicts/lists in fresh child nodes. Writing a key writes
straight into the raw container.

Nodes are views, not cached state: every read synthesizes a new node from
whatever raw value currently sits at that key. Swapping two list elements
and reading them back therefore reports the new index in the path and the
post-swap raw value.

Metadata rides alongside data under reserved sentinel keys:

    state = store.create_mutable_state()
    state["users"][0][PATH]   # "state.users.0"
    state["users"][0][RAW]    # store.state["users"][0]
    state[MUTABLE_STATE]      # True

The sentinels are not strings, so no data key can collide with them. They
are read-only: assigning or deleting one raises ReservedKeyError.

The raw tree never holds facade objects. A node written into the tree is
replaced by its raw value first.
"""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator, MutableMapping, MutableSequence
from typing import TYPE_CHECKING, Any

from overstate._paths import resolve_path
from overstate.derived import invoke, is_derived
from overstate.exceptions import ReservedKeyError

if TYPE_CHECKING:
    from overstate.store import Store


class _ReservedKey:
    """Sentinel key for facade metadata."""

    __slots__ = ("_name",)

    def __init__(self, name: str) -> None:
        self._name = name

    def __repr__(self) -> str:
        return self._name


MUTABLE_STATE = _ReservedKey("MUTABLE_STATE")
PATH = _ReservedKey("PATH")
RAW = _ReservedKey("RAW")
STORE = _ReservedKey("STORE")
OWNER = _ReservedKey("OWNER")


def is_mutable_state(value: object) -> bool:
    return isinstance(value, MutableState)


def to_raw(value: Any) -> Any:
    """Underlying raw value of a facade node; anything else unchanged."""
    if isinstance(value, MutableState):
        return value._target
    return value


def wrap(value: Any, path: str, store: Store, owner: object = None) -> Any:
    """Facade for a raw dict/list at path, or the value itself."""
    if isinstance(value, MutableState) or isinstance(value, (str, bytes, bytearray)):
        return value
    if isinstance(value, MutableMapping):
        return MutableStateDict(value, path, store, owner)
    if isinstance(value, MutableSequence):
        return MutableStateList(value, path, store, owner)
    return value


class MutableState:
    """Base facade node. Use MutableStateDict / MutableStateList."""

    __slots__ = ("_target", "_path", "_store", "_owner")

    # Compared by raw value, unhashable like dict and list.
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, target: Any, path: str, store: Store, owner: object = None) -> None:
        object.__setattr__(self, "_target", target)
        object.__setattr__(self, "_path", path)
        object.__setattr__(self, "_store", store)
        object.__setattr__(self, "_owner", owner)

    def _metadata(self, key: _ReservedKey) -> Any:
        if key is MUTABLE_STATE:
            return True
        if key is PATH:
            return self._path
        if key is RAW:
            return self._target
        if key is STORE:
            return self._store
        return self._owner

    def _resolve(self, key: str | int, value: Any) -> Any:
        """Turn the raw value found at key into what a read returns."""
        if is_derived(value):
            value = invoke(value, self._store.derived_context())
            if is_derived(value):
                return value
        return wrap(value, resolve_path(self._path, key), self._store, self._owner)

    def _check_writable(self, key: object) -> None:
        if isinstance(key, _ReservedKey):
            raise ReservedKeyError(key, self._path)

    def __len__(self) -> int:
        return len(self._target)

    def __eq__(self, other: object) -> bool:
        return self._target == to_raw(other)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._path!r}, {self._target!r})"


class MutableStateDict(MutableState, MutableMapping):
    """Facade over a raw mapping.

    String keys are also reachable as attributes (state.users[0].profile.name)
    as long as they don't clash with a mapping method; item access always
    reaches the data. Dunder names and the node's own slots
    (_target, _path, _store, _owner) are never treated as data keys.
    """

    __slots__ = ()

    # --- Read operations ---

    def __getitem__(self, key: Any) -> Any:
        if isinstance(key, _ReservedKey):
            return self._metadata(key)
        return self._resolve(key, self._target[key])

    def __getattr__(self, name: str) -> Any:
        if name in MutableState.__slots__ or name.startswith("__"):
            raise AttributeError(name)
        try:
            value = self._target[name]
        except KeyError:
            raise AttributeError(f"{self._path!r} has no key {name!r}") from None
        return self._resolve(name, value)

    def get(self, key: Any, default: Any = None) -> Any:
        if isinstance(key, _ReservedKey):
            return self._metadata(key)
        try:
            value = self._target[key]
        except KeyError:
            return default
        return self._resolve(key, value)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._target)

    def __contains__(self, key: object) -> bool:
        return key in self._target

    def keys(self):
        return self._target.keys()

    def __dir__(self) -> Iterable[str]:
        keys = [k for k in self._target if isinstance(k, str) and k.isidentifier()]
        return [*super().__dir__(), *keys]

    # --- Write operations ---

    def __setitem__(self, key: Any, value: Any) -> None:
        self._check_writable(key)
        self._target[key] = to_raw(value)

    def __delitem__(self, key: Any) -> None:
        self._check_writable(key)
        del self._target[key]

    def __setattr__(self, name: str, value: Any) -> None:
        if name in MutableState.__slots__:
            object.__setattr__(self, name, value)
        else:
            self[name] = value

    def __delattr__(self, name: str) -> None:
        if name in MutableState.__slots__:
            object.__delattr__(self, name)
            return
        try:
            del self[name]
        except KeyError:
            raise AttributeError(f"{self._path!r} has no key {name!r}") from None

    def pop(self, key: Any, *default: Any) -> Any:
        """Remove key and return its raw value."""
        self._check_writable(key)
        return self._target.pop(key, *default)

    def popitem(self) -> tuple[Any, Any]:
        return self._target.popitem()

    def setdefault(self, key: Any, default: Any = None) -> Any:
        self._check_writable(key)
        if key not in self._target:
            self._target[key] = to_raw(default)
        return self[key]

    def update(self, other: Any = (), /, **kwargs: Any) -> None:
        other = to_raw(other)
        pairs = list(other.items() if hasattr(other, "items") else other)
        pairs.extend(kwargs.items())
        # Reserved keys are rejected before any pair reaches the raw dict
        for key, _ in pairs:
            self._check_writable(key)
        for key, value in pairs:
            self._target[key] = to_raw(value)

    def clear(self) -> None:
        self._target.clear()


class MutableStateList(MutableState, MutableSequence):
    """Facade over a raw list. Paths use the non-negative index."""

    __slots__ = ()

    # --- Read operations ---

    def __getitem__(self, index: Any) -> Any:
        if isinstance(index, _ReservedKey):
            return self._metadata(index)
        if isinstance(index, slice):
            positions = range(*index.indices(len(self._target)))
            return [self._resolve(i, self._target[i]) for i in positions]
        value = self._target[index]
        if index < 0:
            index += len(self._target)
        return self._resolve(index, value)

    def __iter__(self) -> Iterator[Any]:
        for i, value in enumerate(self._target):
            yield self._resolve(i, value)

    def __contains__(self, value: object) -> bool:
        return to_raw(value) in self._target

    def index(self, value: Any, start: int = 0, stop: int = sys.maxsize) -> int:
        return self._target.index(to_raw(value), start, stop)

    def count(self, value: Any) -> int:
        return self._target.count(to_raw(value))

    # --- Write operations ---

    def __setitem__(self, index: Any, value: Any) -> None:
        self._check_writable(index)
        if isinstance(index, slice):
            self._target[index] = [to_raw(v) for v in value]
        else:
            self._target[index] = to_raw(value)

    def __delitem__(self, index: Any) -> None:
        self._check_writable(index)
        del self._target[index]

    def insert(self, index: int, value: Any) -> None:
        self._target.insert(index, to_raw(value))

    def append(self, value: Any) -> None:
        self._target.append(to_raw(value))

    def extend(self, values: Iterable[Any]) -> None:
        self._target.extend([to_raw(v) for v in values])

    def pop(self, index: int = -1) -> Any:
        """Remove the item at index and return its raw value."""
        return self._target.pop(index)

    def remove(self, value: Any) -> None:
        self._target.remove(to_raw(value))

    def reverse(self) -> None:
        self._target.reverse()

    def clear(self) -> None:
        self._target.clear()
