"""Building blocks for transforms: a target entity and functions over entity values."""

from __future__ import annotations

import copy
from typing import Any, Callable, Iterable


class Target:
    """The entity a transform builds, plus any entities it creates alongside."""

    def __init__(self) -> None:
        self._target: dict[str, Any] = {}
        self._filtered = False
        self._created: list[Any] = []

    def add(self, property_name: str, value: Any) -> None:
        """Set a property on the target entity."""
        self._target[property_name] = value

    def output(self) -> list[Any]:
        """Return the created entities followed by the target, unless it was filtered."""
        result = copy.deepcopy(self._created)
        if not self._filtered:
            result.append(copy.deepcopy(self._target))
        return result

    def filter(self) -> None:
        """Drop the target entity from the output."""
        self._filtered = True

    def create(self, value: Any) -> None:
        """Emit extra entities; a list adds each of its items."""
        if isinstance(value, list):
            self._created.extend(value)
        else:
            self._created.append(value)


def _on_strings(source: Any, function: Callable[[str], str]) -> Any:
    if isinstance(source, list):
        return [function(item) for item in source if isinstance(item, str)]
    if isinstance(source, str):
        return function(source)
    return []


def lower(source: Any) -> Any:
    """Lower-case a string, or every string in a list, dropping other items."""
    return _on_strings(source, str.lower)


def upper(source: Any) -> Any:
    """Upper-case a string, or every string in a list, dropping other items."""
    return _on_strings(source, str.upper)


def list_literal(content: Iterable[Any]) -> list[Any]:
    return list(content)


def null_literal() -> None:
    return None


def number_literal(n: int) -> int:
    return int(n)


def string_literal(s: str) -> str:
    return str(s)


def concat(parts: Any) -> str:
    """Join the strings in a list, skipping anything that is not a string."""
    if isinstance(parts, str):
        return parts
    if isinstance(parts, list):
        return "".join(part for part in parts if isinstance(part, str))
    return ""


def apply(function: Callable[[Any], Iterable[Any]], items: Any) -> list[Any]:
    """Run a transform on each item of a list and flatten the entities it outputs."""
    if not isinstance(items, list):
        return []
    return [result for item in items for result in function(item)]


def map_items(function: Callable[[Any], Any], items: Any) -> list[Any] | None:
    """Apply a function to each item of a list; anything else maps to null."""
    if not isinstance(items, list):
        return None
    return [function(item) for item in items]


def path(arg: Any, value: Any) -> Any:
    """Follow a property name, or a list of names, into nested objects."""
    if isinstance(arg, str):
        keys = [arg]
    elif isinstance(arg, list):
        keys = [key for key in arg if isinstance(key, str)]
    else:
        return None
    current = value
    for key in keys:
        if not isinstance(current, dict) or key not in current:
            return None
        current = current[key]
    return current