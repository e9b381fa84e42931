"""Value input variants and normalization helpers for string tag fields.

A tag field value can arrive in four shapes. Raw inputs are classified once
into one of the variants below and then resolved by ``_resolve_tags``:

- ``DelimitedString``: ``"Tag1,Tag2"``
- ``StringSequence``: ``["Tag1", "Tag2"]``
- ``RecordColumnRef``: a record whose column holds a delimited string
- ``RelatedCollectionRef``: related entities, resolved to their identifiers
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from functools import singledispatch
from typing import Any, Union

from ..records import WritableRecord

_logger = logging.getLogger(__name__)

TAG_DELIMITER = ","
READONLY_DELIMITER = ", "


# --- Input Variants --- #
@dataclass(frozen=True)
class DelimitedString:
    text: str


@dataclass(frozen=True)
class StringSequence:
    items: Iterable[Any]


@dataclass(frozen=True)
class RecordColumnRef:
    record: Any
    column: str


@dataclass(frozen=True)
class RelatedCollectionRef:
    entities: Iterable[Any]
    id_field: str = "id"


TagValueInput = Union[DelimitedString, StringSequence, RecordColumnRef, RelatedCollectionRef]
_VARIANTS = (DelimitedString, StringSequence, RecordColumnRef, RelatedCollectionRef)


# --- Classification --- #
def _is_collection(value: object) -> bool:
    return isinstance(value, Iterable) and not isinstance(value, (str, bytes, Mapping))


def _classify_value(value: object, source: object = None, *, column: str) -> TagValueInput | None:
    """Map a raw value (and optional data source) onto an input variant.

    Parameters
    ----------
    value
        Raw value: a variant, ``None``, a delimited string or a sequence.
    source
        Optional data source. Records (objects with ``write()`` or with a
        ``column`` attribute) and mappings holding ``column`` win over
        ``value``, as do collections of related entities. Any other source
        is ignored.
    column
        Column name to read from a record source.

    Returns
    -------
    TagValueInput | None
        The variant to resolve, or ``None`` when the input is unsupported.
    """
    if source is not None:
        if isinstance(source, Mapping):
            if column in source:
                return RecordColumnRef(source, column)
        elif isinstance(source, WritableRecord):
            return RecordColumnRef(source, column)
        elif _is_collection(source):
            return RelatedCollectionRef(source)
        elif hasattr(source, column):
            return RecordColumnRef(source, column)

    if isinstance(value, _VARIANTS):
        return value
    if value is None:
        return StringSequence(())
    if isinstance(value, str):
        return DelimitedString(value)
    if _is_collection(value):
        return StringSequence(value)
    return None


# --- Resolution --- #
def _split_tags(text: str) -> list[str]:
    return [part for part in text.split(TAG_DELIMITER) if part]


@singledispatch
def _resolve_tags(variant: object) -> list[Any]:
    _logger.warning("Unsupported tag value input: %r", variant)
    return []


@_resolve_tags.register(DelimitedString)
def _(variant: DelimitedString) -> list[Any]:
    return _split_tags(variant.text)


@_resolve_tags.register(StringSequence)
def _(variant: StringSequence) -> list[Any]:
    return list(variant.items)


@_resolve_tags.register(RecordColumnRef)
def _(variant: RecordColumnRef) -> list[Any]:
    record = variant.record
    if isinstance(record, Mapping):
        raw = record.get(variant.column)
    else:
        raw = getattr(record, variant.column, None)
    if raw is None:
        return []
    if isinstance(raw, str):
        return _split_tags(raw)
    if _is_collection(raw):
        return list(raw)
    _logger.warning("Column %s holds unsupported tag value: %r", variant.column, raw)
    return []


@_resolve_tags.register(RelatedCollectionRef)
def _(variant: RelatedCollectionRef) -> list[Any]:
    ids = []
    for entity in variant.entities:
        if isinstance(entity, Mapping):
            ids.append(entity.get(variant.id_field))
        else:
            ids.append(getattr(entity, variant.id_field, None))
    return ids


def _normalize_tag_value(value: object, source: object = None, *, column: str) -> list[Any]:
    """Normalize any supported tag value input to an ordered list of tags.

    Falsy entries are dropped and order is preserved. Never raises:
    unsupported or malformed input yields an empty list.
    """
    variant = _classify_value(value, source, column=column)
    if variant is None:
        _logger.warning("Unsupported value for tag field %s: %r", column, value)
        return []
    try:
        tags = _resolve_tags(variant)
    except (TypeError, ValueError, AttributeError) as exc:
        _logger.warning("Could not read tags for field %s: %s", column, exc)
        return []
    return [tag for tag in tags if tag]


__all__ = [
    "DelimitedString",
    "READONLY_DELIMITER",
    "RecordColumnRef",
    "RelatedCollectionRef",
    "StringSequence",
    "TAG_DELIMITER",
    "TagValueInput",
    "_normalize_tag_value",
]
