from functools import lru_cache
from typing import Any, Dict

from .config import Settings
from .services.cleanup_service import TempFolderCleanupService
from .services.event_sink import EventSink
from .services.settings_resolver import SettingsResolver

# Global singleton instances
_singletons: Dict[str, Any] = {}


@lru_cache
def get_settings() -> Settings:
    """Static settings, read once per process (cleared by reset_singletons)."""
    return Settings()


def get_event_sink() -> EventSink:
    if "event_sink" not in _singletons:
        _singletons["event_sink"] = EventSink()
    return _singletons["event_sink"]


def get_settings_resolver() -> SettingsResolver:
    if "settings_resolver" not in _singletons:
        _singletons["settings_resolver"] = SettingsResolver(
            settings=get_settings(), event_sink=get_event_sink()
        )
    return _singletons["settings_resolver"]


def get_cleanup_service() -> TempFolderCleanupService:
    if "cleanup_service" not in _singletons:
        _singletons["cleanup_service"] = TempFolderCleanupService(
            resolver=get_settings_resolver(), event_sink=get_event_sink()
        )
    return _singletons["cleanup_service"]


def reset_singletons() -> None:
    """Reset all singletons - used by tests."""
    _singletons.clear()
    get_settings.cache_clear()
