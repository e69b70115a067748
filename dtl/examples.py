"""Small transforms assembled from the building blocks."""

from __future__ import annotations

from typing import Any

from dtl.functions import (
    Target,
    apply,
    concat,
    list_literal,
    lower,
    map_items,
    null_literal,
    number_literal,
    path,
    string_literal,
    upper,
)


def hello_world(source: Any) -> list[Any]:
    """Add ``hello`` built from literals and the lower-cased ``x.y`` of the source."""
    target = Target()
    target.add(
        "hello",
        concat(
            list_literal(
                [
                    string_literal("wor"),
                    number_literal(1),
                    concat(
                        list_literal(
                            [
                                string_literal("l"),
                                lower(
                                    path(
                                        list_literal([string_literal("x"), string_literal("y")]),
                                        source,
                                    )
                                ),
                                null_literal(),
                            ]
                        )
                    ),
                ]
            )
        ),
    )
    return target.output()


def _foo(source: Any) -> list[Any]:
    target = Target()
    target.add("bar", source)
    return target.output()


def create_foo(source: Any) -> list[Any]:
    """Create one ``{"bar": item}`` entity per item of ``foo`` and drop the target."""
    target = Target()
    target.create(apply(_foo, path(string_literal("foo"), source)))
    target.filter()
    return target.output()


def map_upper(source: Any) -> list[Any]:
    """Add ``bar`` holding an upper-cased list of letters."""
    target = Target()
    target.add("bar", map_items(upper, ["a", "B", "c"]))
    return target.output()