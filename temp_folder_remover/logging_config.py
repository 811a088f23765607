import importlib.util
import logging
import logging.handlers
import os
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from .config import SERVICE_NAME, Settings

_SYSLOG_SOCKETS = ("/dev/log", "/var/run/syslog")
_IS_WINDOWS = os.name == "nt"


def _syslog_address() -> Optional[str]:
    for address in _SYSLOG_SOCKETS:
        if os.path.exists(address):
            return address
    return None


def _pywin32_available() -> bool:
    return importlib.util.find_spec("win32evtlogutil") is not None


def setup_logging(settings: Settings) -> None:
    # Rich console handler for process and fallback event output
    console = Console(width=120, stderr=True)
    rich_handler = RichHandler(
        console=console,
        show_time=True,
        show_level=True,
        show_path=True,
        markup=False,
        rich_tracebacks=True,
        tracebacks_show_locals=False,
    )
    rich_handler.setLevel(settings.log_level)

    root_logger = logging.getLogger()
    root_logger.setLevel(settings.log_level)

    # Clear any existing handlers to avoid duplicates
    root_logger.handlers.clear()
    root_logger.addHandler(rich_handler)

    # Fallback event sink also goes to the platform log when there is one
    event_logger = logging.getLogger(SERVICE_NAME)
    event_logger.setLevel(logging.INFO)
    event_logger.handlers.clear()

    platform_handler = _platform_event_handler()
    if platform_handler is not None:
        event_logger.addHandler(platform_handler)

    # Silence noisy third-party loggers
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    logging.info(
        f"Logging initialized - Level: {settings.log_level}, "
        f"Event log: {type(platform_handler).__name__ if platform_handler else 'not available'}"
    )


def _platform_event_handler() -> Optional[logging.Handler]:
    """Windows Event Log on NT, syslog elsewhere; None when neither is usable."""
    if _IS_WINDOWS:
        if not _pywin32_available():
            logging.warning("Windows Event Log unavailable: pywin32 is not installed")
            return None
        try:
            # Registers SERVICE_NAME as the event source
            return logging.handlers.NTEventLogHandler(SERVICE_NAME)
        except Exception as e:
            logging.warning(f"Windows Event Log unavailable: {e}")
            return None

    address = _syslog_address()
    if not address:
        return None
    try:
        handler = logging.handlers.SysLogHandler(address=address)
    except OSError as e:
        logging.warning(f"Syslog unavailable at {address}: {e}")
        return None
    handler.ident = f"{SERVICE_NAME}: "
    handler.setFormatter(logging.Formatter("%(levelname)s %(message)s"))
    return handler
