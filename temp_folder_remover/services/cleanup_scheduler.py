import asyncio
import logging
from typing import Any, Awaitable, Callable, Optional

PassCallable = Callable[[], Awaitable[Any]]


class CleanupScheduler:
    """
    Owns the recurring timer that triggers cleanup passes.

    start() arms a fixed-rate timer and runs one pass immediately. Ticks fire on
    a grid of interval_seconds measured from arming. A tick that arrives while a
    pass is still running is skipped, never queued, so passes never overlap.
    """

    def __init__(self, interval_seconds: float, pass_fn: PassCallable):
        if interval_seconds <= 0:
            raise ValueError("interval_seconds must be positive")

        self._interval = interval_seconds
        self._pass_fn = pass_fn
        self._pass_lock = asyncio.Lock()

        self._is_running = False
        self._timer_task: Optional[asyncio.Task] = None
        self._armed_at = 0.0

        self.passes_run = 0
        self.ticks_skipped = 0
        self.last_result: Any = None

    @property
    def is_armed(self) -> bool:
        return self._is_running

    @property
    def interval_seconds(self) -> float:
        return self._interval

    async def start(self) -> None:
        if self._is_running:
            logging.warning("Cleanup scheduler already armed")
            return

        self._is_running = True
        self._armed_at = asyncio.get_running_loop().time()
        self._timer_task = asyncio.create_task(self._timer_loop())
        logging.info(f"Cleanup timer armed - pass every {self._interval}s")

        # Run immediately on start
        await self.run_pass()

    async def stop(self) -> None:
        if not self._is_running:
            return

        self._is_running = False
        task, self._timer_task = self._timer_task, None

        # Wait for an in-flight pass; passes are never aborted halfway
        async with self._pass_lock:
            if task:
                task.cancel()

        if task:
            try:
                await task
            except asyncio.CancelledError:
                pass

        logging.info("Cleanup timer disarmed")

    async def run_pass(self) -> bool:
        """Run one pass unless one is already running. Returns True if it ran."""
        if self._pass_lock.locked():
            self.ticks_skipped += 1
            logging.warning("Previous cleanup pass still running - skipping tick")
            return False

        async with self._pass_lock:
            self.passes_run += 1
            try:
                self.last_result = await self._pass_fn()
            except Exception as e:
                logging.error(f"Unexpected error in cleanup pass: {e}")
        return True

    async def _timer_loop(self) -> None:
        loop = asyncio.get_running_loop()
        tick = 1
        try:
            while self._is_running:
                delay = self._armed_at + tick * self._interval - loop.time()
                if delay > 0:
                    await asyncio.sleep(delay)

                if not self._is_running:
                    break

                await self.run_pass()

                elapsed_ticks = int((loop.time() - self._armed_at) // self._interval)
                missed = elapsed_ticks - tick
                if missed > 0:
                    self.ticks_skipped += missed
                    logging.warning(
                        f"Cleanup pass overran the interval - skipped {missed} tick(s)"
                    )
                tick = max(tick, elapsed_ticks) + 1

        except asyncio.CancelledError:
            logging.debug("Cleanup timer loop cancelled")
        except Exception as e:
            logging.error(f"Unexpected error in cleanup timer loop: {e}")
