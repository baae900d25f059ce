"""Pipeline orchestration for fact-check analyses.

- FactCheckPipeline: submit/run an analysis, poll status, fetch result
"""

from factcheck_system.pipeline.fact_check_pipeline import FactCheckPipeline

__all__ = ["FactCheckPipeline"]
