from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ServiceState(str, Enum):
    """
    Lifecycle state for the cleanup service.

    Workflow: Stopped -> Starting -> Running -> Stopping -> Stopped
    """

    STOPPED = "Stopped"
    STARTING = "Starting"
    RUNNING = "Running"
    STOPPING = "Stopping"


@dataclass(frozen=True)
class EffectiveSettings:
    """Resolved configuration for a single service run."""

    poll_interval_minutes: int
    target_folder_path: str
    log_file_path: str

    @property
    def poll_interval_seconds(self) -> int:
        return self.poll_interval_minutes * 60

    def to_dict(self) -> dict:
        return {
            "poll_interval_minutes": self.poll_interval_minutes,
            "target_folder_path": self.target_folder_path,
            "log_file_path": self.log_file_path,
        }


class ExternalSettings(BaseModel):
    """
    Optional overrides read from appsettings.json.

    Field names follow the document's PascalCase keys. Unknown keys are ignored,
    wrong types fail validation for the whole document.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    timer_interval_minutes: Optional[int] = Field(
        default=None, alias="TimerIntervalMinutes", strict=True
    )
    target_folder_path: Optional[str] = Field(default=None, alias="TargetFolderPath")
    log_file_path: Optional[str] = Field(default=None, alias="LogFilePath")


@dataclass
class FileOutcome:
    path: str
    deleted: bool
    error: Optional[str] = None


@dataclass
class CleanupResult:
    """Outcome of one cleanup pass. Only logged, never persisted."""

    folder: str
    started_at: datetime = field(default_factory=datetime.now)
    folder_exists: bool = True
    files_found: int = 0
    outcomes: List[FileOutcome] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def deleted_count(self) -> int:
        return sum(1 for outcome in self.outcomes if outcome.deleted)

    @property
    def failed_count(self) -> int:
        return sum(1 for outcome in self.outcomes if not outcome.deleted)

    def to_summary(self) -> dict:
        return {
            "folder": self.folder,
            "started_at": self.started_at.isoformat(),
            "folder_exists": self.folder_exists,
            "files_found": self.files_found,
            "deleted": self.deleted_count,
            "failed": self.failed_count,
            "error": self.error,
        }
