"""Shared helpers for the tagfield package."""

from __future__ import annotations

from typing import Callable, Hashable, Iterable, Optional, TypeVar

T = TypeVar("T")


def unique_in_order(
    values: Iterable[T],
    *,
    key: Optional[Callable[[T], Hashable]] = None,
) -> list[T]:
    """Return unique values preserving the original order.

    When ``key`` is given, two values are duplicates when their keys match and
    the first occurrence wins.
    """
    seen: set[Hashable] = set()
    output: list[T] = []
    for value in values:
        marker = key(value) if key is not None else value
        if marker in seen:
            continue
        seen.add(marker)
        output.append(value)
    return output


def join_links(*parts: Optional[str]) -> str:
    """Join URL path fragments with single slashes, keeping any query string."""
    query = ""
    segments: list[str] = []
    for part in parts:
        if not part:
            continue
        if "?" in part:
            part, extra = part.split("?", 1)
            query = f"{query}&{extra}" if query else extra
        if not segments:
            segments.append(part.rstrip("/") or part)
        else:
            stripped = part.strip("/")
            if stripped:
                segments.append(stripped)
    link = "/".join(segment for segment in segments if segment)
    if segments and segments[0] == "/":
        link = "/" + "/".join(segments[1:])
    return f"{link}?{query}" if query else link
