import logging

from ..config import SERVICE_NAME


class EventSink:
    """
    Fallback event channel.

    Used only when the primary log file cannot be written, or before its path
    is known. Entries go to a logger named after the service source, whose
    handlers (console, syslog) are attached by setup_logging().
    """

    def __init__(self, source: str = SERVICE_NAME):
        self.source = source
        self._logger = logging.getLogger(source)

    def information(self, message: str) -> None:
        self._logger.info(message)

    def error(self, message: str) -> None:
        self._logger.error(message)
