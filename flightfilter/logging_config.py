import logging
import sys
from typing import TextIO


class _ColoredFormatter(logging.Formatter):
    _COLORS = {
        'DEBUG': '\033[36m',
        'INFO': '\033[32m',
        'WARNING': '\033[33m',
        'ERROR': '\033[31m',
        'CRITICAL': '\033[35m',
    }
    _RESET = '\033[0m'
    _BOLD = '\033[1m'

    def format(self, record: logging.LogRecord) -> str:
        color = self._COLORS.get(record.levelname, '')
        if color:
            # colour a copy so other handlers still see the plain level name
            record = logging.makeLogRecord(record.__dict__)
            record.levelname = f"{color}{self._BOLD}{record.levelname}{self._RESET}"
        return super().format(record)


class _ConsoleHandler(logging.StreamHandler):
    """Handler installed by setup_logging; replaced, not duplicated, on repeated calls."""


def setup_logging(level: int | str = logging.INFO, stream: TextIO | None = None) -> None:
    """Console logging for the filter CLI.

    Goes to stderr by default so the filtered flight listing on stdout stays clean.
    Level names are colored when the stream is a terminal.
    """
    if isinstance(level, str):
        name = level.upper()
        level = logging.getLevelName(name)
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {name}")
    if stream is None:
        stream = sys.stderr

    log_format = '%(asctime)s [%(levelname)s] %(name)s %(funcName)s():%(lineno)d - %(message)s'
    date_format = '%Y-%m-%d %H:%M:%S'

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in [h for h in root_logger.handlers if isinstance(h, _ConsoleHandler)]:
        root_logger.removeHandler(handler)

    handler = _ConsoleHandler(stream)
    handler.setLevel(level)

    formatter = (
        _ColoredFormatter(log_format, datefmt=date_format)
        if stream.isatty()
        else logging.Formatter(log_format, datefmt=date_format)
    )
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)
