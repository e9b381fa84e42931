"""Shared types for form fields.

This module contains:
- Validation mode type (shared with the suggestion client)
- Option and suggestion payload shapes
- The per-call form context
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal, Optional, TypedDict

from typing_extensions import ReadOnly

# --- Shared Validation Mode --- #
ValidationMode = Literal["off", "warn", "strict"]


# --- Payload Types --- #
class OptionData(TypedDict):
    """Readonly option pair as emitted in schema data."""
    Title: ReadOnly[str]
    Value: ReadOnly[str]


class SuggestItem(TypedDict):
    """Readonly suggestion returned by the suggest endpoint."""
    id: ReadOnly[str]
    text: ReadOnly[str]


class SuggestResponse(TypedDict):
    items: ReadOnly[list[SuggestItem]]


# --- Form Context --- #
@dataclass(frozen=True)
class FormContext:
    """Owning-form information passed to a field for a single call.

    Parameters
    ----------
    record
        Record the form is editing, used when the field has none of its own.
    link
        URL of the form; field links (and the suggest URL) hang off it.
    """

    record: Optional[Any] = None
    link: str = ""


def _format_option(value: object) -> OptionData:
    """Build a Title/Value pair where the tag is its own label."""
    text = value if isinstance(value, str) else str(value)
    return {"Title": text, "Value": text}


__all__ = [
    "FormContext",
    "OptionData",
    "SuggestItem",
    "SuggestResponse",
    "ValidationMode",
]
