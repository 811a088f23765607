import logging
from typing import Optional

from ..config import SERVICE_NAME
from ..models import CleanupResult, EffectiveSettings, ServiceState
from .cleanup_scheduler import CleanupScheduler
from .event_sink import EventSink
from .folder_cleaner import FolderCleaner
from .log_writer import LogFileWriter
from .settings_resolver import SettingsResolver


class TempFolderCleanupService:
    """
    Start/stop facade for the service host.

    Every start re-resolves the effective settings, so a changed
    appsettings.json is picked up on the next restart.
    """

    def __init__(self, resolver: SettingsResolver, event_sink: EventSink):
        self._resolver = resolver
        self._event_sink = event_sink

        self._state = ServiceState.STOPPED
        self._effective: Optional[EffectiveSettings] = None
        self._log_writer: Optional[LogFileWriter] = None
        self._scheduler: Optional[CleanupScheduler] = None

    @property
    def state(self) -> ServiceState:
        return self._state

    @property
    def effective_settings(self) -> Optional[EffectiveSettings]:
        return self._effective

    @property
    def scheduler(self) -> Optional[CleanupScheduler]:
        return self._scheduler

    async def start(self) -> None:
        if self._state != ServiceState.STOPPED:
            logging.warning(f"Cannot start service while {self._state.value}")
            return

        self._state = ServiceState.STARTING
        self._effective = self._resolver.resolve()
        logging.info(
            f"Effective settings: folder={self._effective.target_folder_path} "
            f"interval={self._effective.poll_interval_minutes}min "
            f"log={self._effective.log_file_path}"
        )

        self._log_writer = LogFileWriter(self._effective.log_file_path, self._event_sink)
        cleaner = FolderCleaner(self._effective.target_folder_path, self._log_writer)
        self._scheduler = CleanupScheduler(
            self._effective.poll_interval_seconds, cleaner.run_pass
        )

        await self._log_writer.write(f"{SERVICE_NAME} service started.")
        await self._scheduler.start()
        self._state = ServiceState.RUNNING

    async def stop(self) -> None:
        if self._state != ServiceState.RUNNING:
            logging.warning(f"Cannot stop service while {self._state.value}")
            return

        self._state = ServiceState.STOPPING
        if self._scheduler:
            await self._scheduler.stop()
        if self._log_writer:
            await self._log_writer.write(f"{SERVICE_NAME} service stopped.")
        self._state = ServiceState.STOPPED

    def status(self) -> dict:
        last_result: Optional[CleanupResult] = None
        if self._scheduler:
            last_result = self._scheduler.last_result

        return {
            "service": SERVICE_NAME,
            "state": self._state.value,
            "settings": self._effective.to_dict() if self._effective else None,
            "passes_run": self._scheduler.passes_run if self._scheduler else 0,
            "ticks_skipped": self._scheduler.ticks_skipped if self._scheduler else 0,
            "last_pass": last_result.to_summary() if last_result else None,
        }
