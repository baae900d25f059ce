"""Tests for analysis-scoped structured logging context."""

import asyncio
import uuid

import pytest
from structlog.contextvars import get_contextvars

from factcheck_system.utils.logging import analysis_context, new_analysis_id


class TestAnalysisContext:
    def test_binds_and_restores(self) -> None:
        assert "analysis_id" not in get_contextvars()
        with analysis_context("a-1"):
            assert get_contextvars()["analysis_id"] == "a-1"
        assert "analysis_id" not in get_contextvars()

    @pytest.mark.asyncio
    async def test_isolated_between_tasks(self) -> None:
        seen: dict[str, str] = {}

        async def run(analysis_id: str) -> None:
            with analysis_context(analysis_id):
                await asyncio.sleep(0.01)
                seen[analysis_id] = get_contextvars()["analysis_id"]

        await asyncio.gather(run("a-1"), run("a-2"))
        assert seen == {"a-1": "a-1", "a-2": "a-2"}


def test_new_analysis_id_is_uuid4() -> None:
    value = new_analysis_id()
    assert uuid.UUID(value).version == 4
    assert new_analysis_id() != value
