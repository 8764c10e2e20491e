"""
In-memory storage for projects and reports.

Each entity type lives in an :class:`EntityStore`, an insertion-ordered
mapping of id to record.  Records are plain dictionaries, much like rows
returned by a database cursor; services convert them into pydantic
schemas before handing them to the API layer, so stored dictionaries
never leave the service that owns them.

A :class:`Database` bundles both stores with a single re-entrant lock.
Services hold the lock for the whole of any check-then-act sequence
(for example "does the project exist? then insert the report") so the
check stays consistent with the write.  Nothing is persisted; all data
is lost when the process exits.
"""

import threading
import uuid
from typing import Callable, Dict, List, Optional


def generate_id() -> str:
    """Return a new opaque identifier."""
    return uuid.uuid4().hex


class EntityStore:
    """Insertion-ordered ``id -> record`` mapping for one entity type."""

    def __init__(self) -> None:
        self._records: Dict[str, dict] = {}

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, record_id: str) -> bool:
        return record_id in self._records

    def get(self, record_id: str) -> Optional[dict]:
        record = self._records.get(record_id)
        return dict(record) if record is not None else None

    def all(self) -> List[dict]:
        return [dict(record) for record in self._records.values()]

    def filter(self, predicate: Callable[[dict], bool]) -> List[dict]:
        return [dict(record) for record in self._records.values() if predicate(record)]

    def insert(self, record: dict) -> dict:
        """Store ``record`` under a freshly generated id and return a copy."""
        record_id = generate_id()
        while record_id in self._records:
            record_id = generate_id()
        stored = {**record, "id": record_id}
        self._records[record_id] = stored
        return dict(stored)

    def update(self, record_id: str, changes: dict) -> Optional[dict]:
        """Overwrite the given fields; ``id`` is never changed.

        Returns the updated record, or ``None`` if ``record_id`` is unknown.
        """
        record = self._records.get(record_id)
        if record is None:
            return None
        record.update({k: v for k, v in changes.items() if k != "id"})
        return dict(record)

    def delete(self, record_id: str) -> bool:
        return self._records.pop(record_id, None) is not None


class Database:
    """Owner of the project and report stores and their shared lock."""

    def __init__(self) -> None:
        self.lock = threading.RLock()
        self.projects = EntityStore()
        self.reports = EntityStore()
