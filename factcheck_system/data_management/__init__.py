"""Data management package for the fact-check pipeline.

Provides the analysis status store and the schemas shared by every stage:
- AnalysisStore: protocol the pipeline depends on (get/set/delete)
- InMemoryAnalysisStore: process-local implementation
"""

from factcheck_system.data_management.analysis_store import (
    AnalysisStore,
    InMemoryAnalysisStore,
)

__all__ = [
    "AnalysisStore",
    "InMemoryAnalysisStore",
]
