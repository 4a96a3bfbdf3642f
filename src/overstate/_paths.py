"""Dotted paths locating a node inside the state tree.

Keys are joined as-is: a key containing the separator makes the path
ambiguous.
"""

ROOT_PATH = "state"
SEPARATOR = "."


def resolve_path(parent_path: str, key: str | int) -> str:
    return f"{parent_path}{SEPARATOR}{key}"
