"""
Cleanup service components.

- EventSink: fallback event channel (console / syslog)
- LogFileWriter: timestamped append-only cleanup log
- SettingsResolver: effective settings from appsettings.json with defaults
- FolderCleaner: one cleanup pass over the target folder
- CleanupScheduler: immediate pass plus fixed-period timer
- TempFolderCleanupService: start/stop lifecycle facade
"""

from .event_sink import EventSink
from .log_writer import LogFileWriter
from .settings_resolver import SettingsResolver
from .folder_cleaner import FolderCleaner
from .cleanup_scheduler import CleanupScheduler
from .cleanup_service import TempFolderCleanupService

__all__ = [
    "EventSink",
    "LogFileWriter",
    "SettingsResolver",
    "FolderCleaner",
    "CleanupScheduler",
    "TempFolderCleanupService",
]
