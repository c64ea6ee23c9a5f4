"""
In-memory resource store.

Generic list-backed store for pydantic records, standing in for a database.
One instance per resource kind is owned by the application and injected
into services; a single lock serializes every read and mutation.

Dependencies: pydantic, threading (stdlib)
System role: Process-lifetime storage for mock records
"""

import threading
from collections.abc import Callable, Iterable, Mapping
from typing import Any, Generic, TypeVar

from pydantic import BaseModel

from serverless_api.utils.formatters import current_timestamp

RecordT = TypeVar("RecordT", bound=BaseModel)


class ResourceStore(Generic[RecordT]):
    """
    Generic store for records with an integer id and created/updated stamps.

    Type Parameters:
        RecordT: Pydantic record model with id, created and updated fields

    Attributes:
        model: Record model class
        resource: Human-readable resource label, e.g. "Course"
    """

    def __init__(
        self,
        model: type[RecordT],
        resource: str,
        seed: Iterable[Mapping[str, Any]] = (),
    ) -> None:
        """
        Initialize store with optional seed records.

        Args:
            model: Record model class
            resource: Resource label used in errors and logs
            seed: Initial records
        """
        self.model = model
        self.resource = resource
        self._lock = threading.Lock()
        self._records: list[RecordT] = [model.model_validate(record) for record in seed]
        # Monotonic ids, never reused
        self._next_id = max((record.id for record in self._records), default=0) + 1

    def get_all(self, predicate: Callable[[RecordT], bool] | None = None) -> list[RecordT]:
        """
        Snapshot of stored records, optionally filtered.

        Args:
            predicate: Keep only records for which it returns True

        Returns:
            list: Records in insertion order
        """
        with self._lock:
            if predicate is None:
                return list(self._records)
            return [record for record in self._records if predicate(record)]

    def get_by_id(self, record_id: int) -> RecordT | None:
        """
        Retrieve a single record by id.

        Returns:
            Record if found, None otherwise
        """
        with self._lock:
            return self._find(record_id)

    def create(self, **fields: Any) -> RecordT:
        """
        Create a record with a new id and fresh timestamps.

        Args:
            **fields: Record field values (without id and timestamps)

        Returns:
            Created record
        """
        now = current_timestamp()
        with self._lock:
            record = self.model.model_validate(
                {**fields, "id": self._next_id, "created": now, "updated": now}
            )
            self._next_id += 1
            self._records.append(record)
            return record

    def update_by_id(self, record_id: int, **changes: Any) -> RecordT | None:
        """
        Replace the supplied fields of a record and refresh its updated stamp.

        Fields not present in changes keep their stored value; id and
        created never change.

        Returns:
            Updated record if found, None otherwise
        """
        changes = {
            key: value
            for key, value in changes.items()
            if key not in ("id", "created", "updated")
        }
        with self._lock:
            for index, record in enumerate(self._records):
                if record.id == record_id:
                    updated = self.model.model_validate(
                        {**record.model_dump(), **changes, "updated": current_timestamp()}
                    )
                    self._records[index] = updated
                    return updated
        return None

    def _find(self, record_id: int) -> RecordT | None:
        for record in self._records:
            if record.id == record_id:
                return record
        return None
