import asyncio
import os
from datetime import datetime

import aiofiles
import aiofiles.os

from .event_sink import EventSink

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


class LogFileWriter:
    """
    Append-only cleanup log.

    Every write opens the file, appends one "YYYY-MM-DD HH:MM:SS - message" line
    and closes it again. Failures are rerouted to the fallback event sink and
    never raised to the caller.
    """

    def __init__(self, log_file_path: str, event_sink: EventSink):
        self.log_file_path = log_file_path
        self._event_sink = event_sink
        # Keeps lines in call order when passes and lifecycle log concurrently
        self._write_lock = asyncio.Lock()

    async def write(self, message: str) -> None:
        async with self._write_lock:
            try:
                log_directory = os.path.dirname(self.log_file_path)
                if log_directory and not await aiofiles.os.path.isdir(log_directory):
                    await aiofiles.os.makedirs(log_directory, exist_ok=True)

                entry = f"{datetime.now().strftime(TIMESTAMP_FORMAT)} - {message}\n"
                async with aiofiles.open(
                    self.log_file_path, "a", encoding="utf-8"
                ) as log_file:
                    await log_file.write(entry)

            except Exception as e:
                self._event_sink.error(
                    f"Logging error: {e}. Original message: {message}"
                )
