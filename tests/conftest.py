"""Shared fixtures: a small users store with derived entries."""

import pytest

from overstate import Store


@pytest.fixture
def raw_store():
    return {
        "state": {
            "users": [
                {"profile": {"name": "Jon", "surname": "Snow"}},
                {"profile": {"name": "Jammie", "surname": "Lannister"}},
            ],
            "users_length": lambda ctx: len(ctx.state["users"]),
            "user_name": lambda ctx: lambda index: ctx.state["users"][index]["profile"]["name"],
            "user_prop": lambda ctx: lambda index, prop: ctx.libraries["capitalize"](
                ctx.state["users"][index]["profile"][prop]
            ),
        },
        "actions": {},
        "libraries": {"capitalize": str.upper},
    }


@pytest.fixture
def store(raw_store):
    return Store(raw_store, mode="development")


@pytest.fixture
def state(store):
    return store.create_mutable_state()
