from dataclasses import replace
from pathlib import Path
from typing import Optional

from ..config import (
    DEFAULT_LOG_FILE_PATH,
    DEFAULT_POLL_INTERVAL_MINUTES,
    DEFAULT_TARGET_FOLDER_PATH,
    MAX_POLL_INTERVAL_MINUTES,
    SETTINGS_FILE_NAME,
    Settings,
)
from ..models import EffectiveSettings, ExternalSettings
from .event_sink import EventSink


class SettingsResolver:
    """
    Resolves EffectiveSettings from the external appsettings.json document.

    Resolution is best-effort: a missing or broken document keeps the defaults
    and is reported on the fallback event sink, since the log file path may not
    be known yet. resolve() never raises.
    """

    def __init__(
        self,
        settings: Settings,
        event_sink: EventSink,
        defaults: Optional[EffectiveSettings] = None,
    ):
        self._settings = settings
        self._event_sink = event_sink
        self._defaults = defaults or EffectiveSettings(
            poll_interval_minutes=DEFAULT_POLL_INTERVAL_MINUTES,
            target_folder_path=DEFAULT_TARGET_FOLDER_PATH,
            log_file_path=DEFAULT_LOG_FILE_PATH,
        )

    @property
    def settings_file_path(self) -> Optional[Path]:
        directory = (self._settings.settings_directory or "").strip()
        if not directory:
            return None
        return Path(directory) / SETTINGS_FILE_NAME

    def resolve(self) -> EffectiveSettings:
        effective = self._defaults
        settings_path = self.settings_file_path
        if settings_path is None:
            return effective

        try:
            if not settings_path.is_file():
                self._event_sink.information(
                    f"Settings file not found at '{settings_path}'. Using defaults."
                )
                return effective

            external = self.read_external_settings(settings_path)
            effective = self.apply_overrides(effective, external)

        except Exception as e:
            self._event_sink.error(
                f"Error reading external settings: {e}. Using defaults."
            )
            return self._defaults

        return effective

    @staticmethod
    def read_external_settings(settings_path: Path) -> ExternalSettings:
        # utf-8-sig tolerates a BOM written by Windows editors
        raw = settings_path.read_text(encoding="utf-8-sig")
        return ExternalSettings.model_validate_json(raw)

    @staticmethod
    def apply_overrides(
        effective: EffectiveSettings, external: ExternalSettings
    ) -> EffectiveSettings:
        """Override only the fields that are present and valid."""
        overrides = {}

        if (
            external.timer_interval_minutes is not None
            and 0 < external.timer_interval_minutes <= MAX_POLL_INTERVAL_MINUTES
        ):
            overrides["poll_interval_minutes"] = external.timer_interval_minutes

        if external.target_folder_path and external.target_folder_path.strip():
            overrides["target_folder_path"] = external.target_folder_path

        if external.log_file_path and external.log_file_path.strip():
            overrides["log_file_path"] = external.log_file_path

        return replace(effective, **overrides)
