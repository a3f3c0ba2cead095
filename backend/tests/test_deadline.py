"""Tests for the per-request deadline."""

import asyncio

import pytest

from aesthetic.utils.deadline import Deadline


class FakeClock:
    def __init__(self) -> None:
        self.now = 100.0

    def __call__(self) -> float:
        return self.now


class TestDeadline:
    def test_remaining_counts_down(self):
        clock = FakeClock()
        deadline = Deadline(10, clock=clock)
        clock.now += 4
        assert deadline.remaining() == pytest.approx(6)
        assert not deadline.expired

    def test_remaining_never_negative(self):
        clock = FakeClock()
        deadline = Deadline(1, clock=clock)
        clock.now += 5
        assert deadline.remaining() == 0
        assert deadline.expired

    @pytest.mark.asyncio
    async def test_run_returns_result(self):
        async def work():
            return "done"

        assert await Deadline(1).run(work()) == "done"

    @pytest.mark.asyncio
    async def test_run_times_out(self):
        with pytest.raises(TimeoutError):
            await Deadline(0.01).run(asyncio.sleep(1))

    @pytest.mark.asyncio
    async def test_time_shared_across_calls(self):
        deadline = Deadline(0.2)
        await deadline.run(asyncio.sleep(0.15))
        with pytest.raises(TimeoutError):
            await deadline.run(asyncio.sleep(0.15))
