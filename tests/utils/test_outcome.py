"""Tests for the Outcome result type and settle()."""

import pytest

from factcheck_system.utils.outcome import Outcome, settle


class TestOutcome:
    def test_success(self) -> None:
        outcome = Outcome.success([1, 2])
        assert outcome.ok
        assert outcome.unwrap_or([]) == [1, 2]

    def test_success_with_none_value(self) -> None:
        outcome = Outcome.success(None)
        assert outcome.ok
        assert outcome.unwrap_or("default") is None

    def test_failure_from_exception(self) -> None:
        outcome = Outcome.failure(RuntimeError("boom"))
        assert not outcome.ok
        assert outcome.error == "boom"
        assert outcome.unwrap_or([]) == []

    def test_failure_without_message_uses_type_name(self) -> None:
        assert Outcome.failure(TimeoutError()).error == "TimeoutError"

    def test_value_and_error_rejected(self) -> None:
        with pytest.raises(ValueError):
            Outcome(value=1, error="x")


class TestSettle:
    @pytest.mark.asyncio
    async def test_value(self) -> None:
        async def work():
            return 42

        assert (await settle(work())).value == 42

    @pytest.mark.asyncio
    async def test_exception_captured(self) -> None:
        async def work():
            raise ValueError("bad input")

        outcome = await settle(work())
        assert not outcome.ok
        assert outcome.error == "bad input"
