"""
Key and index lookups over parsed values.

Objects are addressed by key and arrays by position; ``get`` also accepts a
decimal string for array positions and ``get_ind`` an integer for object
keys, so a path of mixed segments can be walked uniformly.
"""

from typing import Any


def _array_index(key: str) -> int | None:
    if key.isascii() and key.isdigit():
        return int(key)
    return None


def _slot(value: Any, key: str | int) -> tuple[Any, Any] | None:
    """Returns the (container, subscript) pair for an existing slot."""
    if isinstance(value, dict):
        name = key if isinstance(key, str) else str(key)
        return (value, name) if name in value else None
    if isinstance(value, list):
        index = _array_index(key) if isinstance(key, str) else key
        if index is not None and 0 <= index < len(value):
            return value, index
    return None


def get(value: Any, key: str, default: Any = None) -> Any:
    """
    Looks up ``key`` in an object, or a decimal position in an array.

    Returns the live nested value, so mutating a returned list or dict
    changes the tree. Returns ``default`` when there is no such slot.
    """
    slot = _slot(value, key)
    if slot is None:
        return default
    container, subscript = slot
    return container[subscript]


def get_ind(value: Any, index: int, default: Any = None) -> Any:
    """Looks up an array position, or the key ``str(index)`` in an object."""
    slot = _slot(value, index)
    if slot is None:
        return default
    container, subscript = slot
    return container[subscript]


def replace(value: Any, key: str, new: Any) -> bool:
    """Overwrites the slot ``get`` would find; False if there is none."""
    slot = _slot(value, key)
    if slot is None:
        return False
    container, subscript = slot
    container[subscript] = new
    return True


def replace_ind(value: Any, index: int, new: Any) -> bool:
    """Overwrites the slot ``get_ind`` would find; False if there is none."""
    slot = _slot(value, index)
    if slot is None:
        return False
    container, subscript = slot
    container[subscript] = new
    return True
