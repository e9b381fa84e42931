"""Record and collection contracts used by tag fields.

Tag fields never persist anything themselves. They read and assign a column
on a record supplied by the caller and, when creating tags, ask a backing
collection for a record class and call ``write()`` on the new instance.
``Record`` and ``RecordList`` are minimal in-memory implementations of those
contracts, useful for forms without an ORM and for tests.
"""

from __future__ import annotations

import itertools
from typing import Any, Iterable, Iterator, Optional, Protocol, runtime_checkable


@runtime_checkable
class WritableRecord(Protocol):
    """A record that can be persisted by calling ``write()``."""

    def write(self) -> Any: ...


@runtime_checkable
class RecordCollection(Protocol):
    """A searchable collection of records of a single class."""

    data_class: type

    def find(self, field: str, value: object) -> Optional[Any]: ...


@runtime_checkable
class AppendableCollection(Protocol):
    def add(self, record: Any) -> None: ...


class Record:
    """Attribute bag with an ``id`` assigned on first write."""

    _ids = itertools.count(1)

    def __init__(self, **fields: Any) -> None:
        self.id: int = 0
        for name, value in fields.items():
            setattr(self, name, value)

    def write(self) -> int:
        if not self.id:
            self.id = next(Record._ids)
        return self.id

    def is_in_db(self) -> bool:
        return bool(self.id)

    def __repr__(self) -> str:
        fields = ", ".join(f"{name}={value!r}" for name, value in vars(self).items())
        return f"{type(self).__name__}({fields})"


class RecordList:
    """Ordered in-memory collection of records."""

    def __init__(self, data_class: type = Record, records: Iterable[Any] = ()) -> None:
        self.data_class = data_class
        self._records: list[Any] = list(records)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def add(self, record: Any) -> None:
        if record not in self._records:
            self._records.append(record)

    def find(self, field: str, value: object) -> Optional[Any]:
        """Return the first record whose ``field`` equals ``value`` exactly."""
        for record in self._records:
            if getattr(record, field, None) == value:
                return record
        return None

    def column(self, field: str) -> list[Any]:
        return [getattr(record, field, None) for record in self._records]


__all__ = [
    "AppendableCollection",
    "Record",
    "RecordCollection",
    "RecordList",
    "WritableRecord",
]
