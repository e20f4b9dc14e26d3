"""Engine and client loggers writing coloured lines to standard output."""

from __future__ import annotations

import logging
import sys

TRACE = 5
logging.addLevelName(TRACE, "TRACE")

_FORMAT = "[%(asctime)s] %(name)s: %(message)s"
_DATE_FORMAT = "%H:%M:%S"

_COLOURS = {
    TRACE: "\033[37m",
    logging.DEBUG: "\033[36m",
    logging.INFO: "\033[32m",
    logging.WARNING: "\033[33m\033[1m",
    logging.ERROR: "\033[31m\033[1m",
    logging.CRITICAL: "\033[1m\033[41m",
}
_RESET = "\033[0m"


class HazelLogger(logging.Logger):
    """Logger with ``trace`` and ``fatal`` levels."""

    def trace(self, msg: object, *args: object, **kwargs) -> None:
        if self.isEnabledFor(TRACE):
            self._log(TRACE, msg, args, **kwargs)

    def fatal(self, msg: object, *args: object, **kwargs) -> None:  # type: ignore[override]
        self.critical(msg, *args, **kwargs)


class _ColourFormatter(logging.Formatter):
    def __init__(self, colour: bool) -> None:
        super().__init__(_FORMAT, _DATE_FORMAT)
        self._colour = colour

    def format(self, record: logging.LogRecord) -> str:
        text = super().format(record)
        if not self._colour:
            return text
        return f"{_COLOURS.get(record.levelno, '')}{text}{_RESET}"


_core: HazelLogger | None = None
_client: HazelLogger | None = None


def _make_logger(name: str) -> HazelLogger:
    stream = sys.stdout
    isatty = getattr(stream, "isatty", None)
    handler = logging.StreamHandler(stream)
    handler.setFormatter(_ColourFormatter(bool(isatty and isatty())))
    logger = HazelLogger(name, TRACE)
    logger.addHandler(handler)
    logger.propagate = False
    return logger


def init() -> None:
    """Create the ``HAZEL`` core logger and the ``APP`` client logger."""
    global _core, _client
    _core = _make_logger("HAZEL")
    _client = _make_logger("APP")


def core_logger() -> HazelLogger:
    if _core is None:
        raise RuntimeError("logging is not initialised; call init() first")
    return _core


def client_logger() -> HazelLogger:
    if _client is None:
        raise RuntimeError("logging is not initialised; call init() first")
    return _client