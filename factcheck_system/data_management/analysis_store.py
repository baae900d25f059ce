"""Analysis status storage keyed by analysis identifier.

The pipeline depends only on the AnalysisStore protocol (async get/set/delete),
so the in-process store used here can be swapped for a shared cache without
touching orchestration logic.

InMemoryAnalysisStore follows the same conventions as the other stores:
- O(1) lookup by analysis_id
- Safe concurrent access with an asyncio lock
- Snapshot semantics: records are copied on the way in and on the way out,
  so a reader can never mutate what the pipeline holds

Usage:
    from factcheck_system.data_management.analysis_store import InMemoryAnalysisStore

    store = InMemoryAnalysisStore()
    await store.set(AnalysisRecord(analysis_id="a-1"))
    record = await store.get("a-1")
"""

import asyncio
from typing import Optional, Protocol, runtime_checkable

import structlog

from factcheck_system.data_management.schemas.analysis_schema import AnalysisRecord


@runtime_checkable
class AnalysisStore(Protocol):
    """Key-value store for analysis records."""

    async def get(self, analysis_id: str) -> Optional[AnalysisRecord]:
        ...

    async def set(self, record: AnalysisRecord) -> None:
        ...

    async def delete(self, analysis_id: str) -> bool:
        ...


class InMemoryAnalysisStore:
    """Process-local AnalysisStore backed by a dict.

    Data structure:
    {
        analysis_id: AnalysisRecord,
        ...
    }
    """

    def __init__(self) -> None:
        self._records: dict[str, AnalysisRecord] = {}
        self._lock = asyncio.Lock()
        self._logger = structlog.get_logger().bind(component="InMemoryAnalysisStore")

    async def get(self, analysis_id: str) -> Optional[AnalysisRecord]:
        """Get a snapshot of a record.

        Args:
            analysis_id: Analysis identifier.

        Returns:
            Deep copy of the AnalysisRecord if found, None otherwise.
        """
        async with self._lock:
            record = self._records.get(analysis_id)
            return record.model_copy(deep=True) if record is not None else None

    async def set(self, record: AnalysisRecord) -> None:
        """Insert or replace the record stored under its analysis_id."""
        async with self._lock:
            self._records[record.analysis_id] = record.model_copy(deep=True)
            self._logger.debug(
                "record_saved",
                analysis_id=record.analysis_id,
                status=record.status.value,
                progress=record.progress,
            )

    async def delete(self, analysis_id: str) -> bool:
        """Remove a record.

        Returns:
            True if a record was removed, False if none existed.
        """
        async with self._lock:
            removed = self._records.pop(analysis_id, None) is not None
            if removed:
                self._logger.debug("record_deleted", analysis_id=analysis_id)
            return removed

    async def count(self) -> int:
        """Number of records currently held."""
        async with self._lock:
            return len(self._records)
