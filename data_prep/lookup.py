"""
Record lookup — the only way the engine reaches stored businesses/strategies.

Storage is someone else's problem: anything with a ``fetch(record_id)`` that
returns the record (or None) can be injected.
"""

from __future__ import annotations

import logging
from typing import Dict, Generic, Hashable, Mapping, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RecordNotFoundError(LookupError):
    """A supplied identifier did not resolve to a record."""

    def __init__(self, kind: str, record_id: Hashable):
        self.kind = kind
        self.record_id = record_id
        super().__init__(f"{kind} not found")

    def __str__(self) -> str:
        return f"{self.kind} not found (id={self.record_id!r})"


class RecordLookup(Generic[T]):
    """Interface: fetch one record by id, None if it does not exist."""

    def fetch(self, record_id: Hashable) -> Optional[T]:
        raise NotImplementedError


class InMemoryLookup(RecordLookup[T]):
    """Dict-backed lookup. Ids are compared in string form, so 1 and "1" match."""

    def __init__(self, records: Optional[Mapping[Hashable, T]] = None):
        self._records: Dict[str, T] = {}
        for record_id, record in (records or {}).items():
            self.add(record_id, record)

    def add(self, record_id: Hashable, record: T) -> None:
        self._records[str(record_id)] = record

    def fetch(self, record_id: Hashable) -> Optional[T]:
        return self._records.get(str(record_id))

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, record_id: Hashable) -> bool:
        return self.fetch(record_id) is not None


def fetch_required(lookup: RecordLookup[T], record_id: Hashable, kind: str) -> T:
    """Fetch a record that the caller explicitly asked for; missing is an error."""
    record = lookup.fetch(record_id)
    if record is None:
        logger.warning("%s lookup failed for id=%r", kind, record_id)
        raise RecordNotFoundError(kind, record_id)
    return record


def fetch_optional(
    lookup: Optional[RecordLookup[T]], record_id: Optional[Hashable], kind: str
) -> Optional[T]:
    """No id means "not requested" (None); a supplied id must resolve."""
    if record_id is None:
        return None
    if lookup is None:
        raise ValueError(f"{kind} id {record_id!r} supplied without a {kind.lower()} lookup.")
    return fetch_required(lookup, record_id, kind)
