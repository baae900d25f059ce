"""Analysis lifecycle record tracked by the pipeline.

One AnalysisRecord exists per submitted claim/media pair. It is created as
``processing`` at 0%, advanced through stage checkpoints, and ends either
``complete`` (with a result) or ``error`` (with a message). Terminal records
never change again.

Records are treated as values: every transition returns a new record, which
the pipeline writes back to the store. Readers only ever see snapshots.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, model_validator

from factcheck_system.data_management.schemas.verdict_schema import FactCheckVerdict


class AnalysisStatus(str, Enum):
    """Lifecycle state of an analysis.

    PROCESSING: Pipeline is still running stages.
    COMPLETE: Final verdict assembled and attached as ``result``.
    ERROR: Orchestration failed; message attached as ``error``.
    """

    PROCESSING = "processing"
    COMPLETE = "complete"
    ERROR = "error"


class AnalysisStateError(ValueError):
    """Raised on an illegal lifecycle transition."""


class AnalysisRecord(BaseModel):
    """Progress and outcome of a single analysis."""

    analysis_id: str = Field(..., description="Unique analysis identifier")
    status: AnalysisStatus = Field(default=AnalysisStatus.PROCESSING)
    progress: int = Field(default=0, ge=0, le=100)
    progress_message: str = Field(default="")
    result: Optional[FactCheckVerdict] = Field(default=None)
    error: Optional[str] = Field(default=None)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @model_validator(mode="after")
    def check_terminal_payload(self) -> "AnalysisRecord":
        """result is present iff complete; error is present iff error."""
        if (self.result is not None) != (self.status == AnalysisStatus.COMPLETE):
            raise ValueError("result must be set exactly when status is complete")
        if (self.error is not None) != (self.status == AnalysisStatus.ERROR):
            raise ValueError("error must be set exactly when status is error")
        return self

    @property
    def is_terminal(self) -> bool:
        return self.status != AnalysisStatus.PROCESSING

    def advance(self, progress: int, message: str) -> "AnalysisRecord":
        """Return a copy moved forward to ``progress`` with a new stage message."""
        self._ensure_processing()
        if progress < self.progress:
            raise AnalysisStateError(
                f"progress cannot decrease ({self.progress} -> {progress})"
            )
        return self.model_copy(
            update={
                "progress": progress,
                "progress_message": message,
                "updated_at": datetime.now(timezone.utc),
            }
        )

    def complete(self, result: FactCheckVerdict) -> "AnalysisRecord":
        """Return the terminal ``complete`` copy carrying ``result``."""
        self._ensure_processing()
        return AnalysisRecord(
            analysis_id=self.analysis_id,
            status=AnalysisStatus.COMPLETE,
            progress=100,
            progress_message="Analysis complete",
            result=result,
            created_at=self.created_at,
        )

    def fail(self, error: str) -> "AnalysisRecord":
        """Return the terminal ``error`` copy. Progress stays where it stopped."""
        self._ensure_processing()
        return AnalysisRecord(
            analysis_id=self.analysis_id,
            status=AnalysisStatus.ERROR,
            progress=self.progress,
            progress_message=self.progress_message,
            error=error or "Unknown error",
            created_at=self.created_at,
        )

    def _ensure_processing(self) -> None:
        if self.is_terminal:
            raise AnalysisStateError(
                f"analysis {self.analysis_id} is already {self.status.value}"
            )
