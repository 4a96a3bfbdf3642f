"""Derived entries — callables living in the raw state.

A derived entry is resolved every time it is read, so its result always
reflects the live raw state. Two shapes are supported:

    state = {
        "users": [...],
        # computed value
        "users_length": lambda ctx: len(ctx.state["users"]),
        # parameterized accessor
        "user_name": lambda ctx: lambda index: ctx.state["users"][index]["name"],
    }

Reading "users_length" through a mutable state returns the length. Reading
"user_name" returns the inner function, which the caller invokes with its
own arguments.
"""

from __future__ import annotations

from typing import Any, Callable


class DerivedContext:
    """What a derived entry receives: the raw root state, actions and libraries."""

    __slots__ = ("state", "actions", "libraries")

    def __init__(self, state: Any, actions: Any, libraries: Any) -> None:
        self.state = state
        self.actions = actions
        self.libraries = libraries

    def __repr__(self) -> str:
        return (
            f"DerivedContext(state={self.state!r}, actions={self.actions!r}, "
            f"libraries={self.libraries!r})"
        )


def is_derived(value: object) -> bool:
    return callable(value)


def invoke(fn: Callable[[DerivedContext], Any], context: DerivedContext) -> Any:
    """Call a derived entry once with context. Errors propagate unchanged."""
    return fn(context)
