import asyncio

import pytest

from temp_folder_remover.services.cleanup_scheduler import CleanupScheduler

pytestmark = pytest.mark.asyncio


class PassRecorder:
    """Pass callable that records calls and overlap."""

    def __init__(self, duration: float = 0.0):
        self.duration = duration
        self.calls = 0
        self.active = 0
        self.max_active = 0

    async def __call__(self):
        self.calls += 1
        self.active += 1
        self.max_active = max(self.max_active, self.active)
        try:
            await asyncio.sleep(self.duration)
        finally:
            self.active -= 1
        return self.calls


class TestCleanupScheduler:
    async def test_start_runs_one_pass_immediately(self):
        recorder = PassRecorder()
        scheduler = CleanupScheduler(60, recorder)

        await scheduler.start()
        try:
            assert recorder.calls == 1
            assert scheduler.passes_run == 1
            assert scheduler.last_result == 1
            assert scheduler.is_armed
        finally:
            await scheduler.stop()

    async def test_timer_fires_repeatedly(self):
        recorder = PassRecorder()
        scheduler = CleanupScheduler(0.05, recorder)

        await scheduler.start()
        await asyncio.sleep(0.23)
        await scheduler.stop()

        # Immediate pass plus several ticks
        assert recorder.calls >= 3

    async def test_slow_pass_causes_skipped_ticks_not_overlap(self):
        recorder = PassRecorder(duration=0.12)
        scheduler = CleanupScheduler(0.05, recorder)

        await scheduler.start()
        await asyncio.sleep(0.2)
        await scheduler.stop()

        assert recorder.max_active == 1
        assert scheduler.ticks_skipped >= 1

    async def test_tick_is_skipped_while_pass_is_running(self):
        release = asyncio.Event()

        async def blocking_pass():
            await release.wait()

        scheduler = CleanupScheduler(60, blocking_pass)
        start_task = asyncio.create_task(scheduler.start())
        await asyncio.sleep(0.01)

        ran = await scheduler.run_pass()

        assert ran is False
        assert scheduler.ticks_skipped == 1

        release.set()
        await start_task
        await scheduler.stop()
        assert scheduler.passes_run == 1

    async def test_stop_waits_for_in_flight_pass(self):
        started = asyncio.Event()
        finished = {"value": False}

        async def slow_pass():
            started.set()
            await asyncio.sleep(0.05)
            finished["value"] = True

        scheduler = CleanupScheduler(60, slow_pass)
        start_task = asyncio.create_task(scheduler.start())
        await started.wait()

        await scheduler.stop()

        assert finished["value"] is True
        await start_task

    async def test_no_passes_after_stop(self):
        recorder = PassRecorder()
        scheduler = CleanupScheduler(0.03, recorder)

        await scheduler.start()
        await scheduler.stop()
        calls_at_stop = recorder.calls
        await asyncio.sleep(0.1)

        assert recorder.calls == calls_at_stop
        assert not scheduler.is_armed

    async def test_failing_pass_does_not_stop_timer(self):
        calls = {"count": 0}

        async def failing_pass():
            calls["count"] += 1
            raise RuntimeError("boom")

        scheduler = CleanupScheduler(0.03, failing_pass)
        await scheduler.start()
        await asyncio.sleep(0.1)
        await scheduler.stop()

        assert calls["count"] >= 2

    async def test_double_start_is_ignored(self):
        recorder = PassRecorder()
        scheduler = CleanupScheduler(60, recorder)

        await scheduler.start()
        await scheduler.start()
        await scheduler.stop()

        assert recorder.calls == 1

    async def test_stop_without_start_is_noop(self):
        scheduler = CleanupScheduler(60, PassRecorder())

        await scheduler.stop()

        assert not scheduler.is_armed

    async def test_non_positive_interval_is_rejected(self):
        with pytest.raises(ValueError):
            CleanupScheduler(0, PassRecorder())
