"""
Pontifex Structured Logger
===========================

Provides :class:`PontifexLogger`, the logging facade used by the
Solitaire engine.  Records go to a Rich handler on stderr and,
optionally, to a rotating log file as plain text or JSON lines.

Secrets never reach the log: the engine passes letter counts as
structured fields (``log.info("...", message_letters=12)``), never the
passphrase or message text itself.  Those fields land under ``extra`` in
JSON output.

References:
    - Python logging HOWTO. https://docs.python.org/3/howto/logging.html
    - Rich library. https://github.com/Textualize/rich
"""

from __future__ import annotations

import json
import logging
import time
from contextlib import contextmanager
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Iterator

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

_LOG_THEME = Theme(
    {
        "log.level.debug": "dim cyan",
        "log.level.info": "bold bright_blue",
        "log.level.warning": "bold yellow",
        "log.level.error": "bold red",
    }
)

_TEXT_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

# Keyword arguments the stdlib logger understands itself.
_LOGGING_KWARGS = frozenset({"exc_info", "stack_info", "stacklevel"})


class _JSONFormatter(logging.Formatter):
    """One JSON object per record.

    Example line::

        {"timestamp": "...", "level": "INFO", "logger": "pontifex.solitaire.engine",
         "message": "Starting encrypt", "operation": "encrypt",
         "extra": {"passphrase_letters": 13, "message_letters": 9}}
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        operation = getattr(record, "operation", None)
        if operation is not None:
            entry["operation"] = operation
        fields = getattr(record, "pontifex_extra", None)
        if fields:
            entry["extra"] = fields
        if record.exc_info and record.exc_info[1] is not None:
            entry["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False, default=str)


class _ColorConsoleHandler(RichHandler):
    """Rich handler bound to stderr, leaving stdout to the cipher output."""

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(
            console=Console(theme=_LOG_THEME, stderr=True),
            show_path=False,
            rich_tracebacks=True,
            markup=False,
            **kwargs,
        )


class PontifexLogger:
    """Logger bound to one component, e.g. ``"solitaire.engine"``.

    Usage::

        log = PontifexLogger("solitaire.engine", log_file="pontifex.log", json_logs=True)
        with log.operation("encrypt"):
            with log.timed("encrypt of 10 letters"):
                ...
            log.info("Encrypted", message_letters=10)

    Args:
        tool_name:      Component name; the stdlib logger is ``pontifex.<tool_name>``.
        log_level:      Minimum severity name.
        log_file:       Rotating log file, or ``None`` for no file output.
        json_logs:      Write JSON lines instead of text to *log_file*.
        max_bytes:      Rotation threshold for *log_file*.
        backup_count:   Rotated files to keep.
        console_output: Attach the Rich stderr handler.
    """

    def __init__(
        self,
        tool_name: str,
        *,
        log_level: str = "WARNING",
        log_file: str | Path | None = None,
        json_logs: bool = False,
        max_bytes: int = 10_485_760,
        backup_count: int = 5,
        console_output: bool = True,
    ) -> None:
        self._operation: str | None = None
        level = getattr(logging, log_level.upper(), logging.WARNING)

        self._logger = logging.getLogger(f"pontifex.{tool_name}")
        self._logger.setLevel(level)
        self._logger.propagate = False
        self._close_handlers()

        if console_output:
            self._logger.addHandler(_ColorConsoleHandler(level=level))
        if log_file is not None:
            self._logger.addHandler(
                self._file_handler(Path(log_file), level, json_logs, max_bytes, backup_count)
            )

    @staticmethod
    def _file_handler(
        path: Path, level: int, json_logs: bool, max_bytes: int, backup_count: int
    ) -> RotatingFileHandler:
        path.parent.mkdir(parents=True, exist_ok=True)
        handler = RotatingFileHandler(
            filename=str(path),
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        handler.setLevel(level)
        if json_logs:
            handler.setFormatter(_JSONFormatter())
        else:
            handler.setFormatter(logging.Formatter(_TEXT_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S%z"))
        return handler

    def _close_handlers(self) -> None:
        """Detach and close handlers left by an earlier instance of this logger."""
        for handler in list(self._logger.handlers):
            self._logger.removeHandler(handler)
            handler.close()

    # ------------------------------------------------------------------ #
    #  Scopes
    # ------------------------------------------------------------------ #

    @contextmanager
    def operation(self, name: str) -> Iterator[PontifexLogger]:
        """Tag every record inside the block with ``operation=<name>``."""
        previous, self._operation = self._operation, name
        try:
            yield self
        finally:
            self._operation = previous

    @contextmanager
    def timed(self, label: str) -> Iterator[None]:
        """Log *label* on entry and again with ``elapsed_seconds`` on exit."""
        self.debug("Started: %s", label)
        start = time.perf_counter()
        try:
            yield
        finally:
            elapsed = time.perf_counter() - start
            self.info("Completed: %s (%.3f sec)", label, elapsed, elapsed_seconds=round(elapsed, 6))

    # ------------------------------------------------------------------ #
    #  Records
    # ------------------------------------------------------------------ #

    def _log(self, level: int, msg: str, args: tuple[Any, ...], kwargs: dict[str, Any]) -> None:
        fields = {k: kwargs.pop(k) for k in list(kwargs) if k not in _LOGGING_KWARGS}
        kwargs["extra"] = {"operation": self._operation, "pontifex_extra": fields}
        self._logger.log(level, msg, *args, **kwargs)

    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log(logging.DEBUG, msg, args, kwargs)

    def info(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log(logging.INFO, msg, args, kwargs)

    @property
    def underlying(self) -> logging.Logger:
        """The stdlib :class:`logging.Logger` behind this facade."""
        return self._logger


def enable_library_logging(package: str, log_level: str = "DEBUG") -> logging.Logger:
    """Route a library package's stdlib loggers to the Rich console.

    Library modules log through ``logging.getLogger(__name__)`` and never
    configure handlers themselves; the CLI calls this to surface them.
    """
    level = getattr(logging, log_level.upper(), logging.DEBUG)
    lib_logger = logging.getLogger(package)
    lib_logger.setLevel(level)
    if not any(isinstance(h, _ColorConsoleHandler) for h in lib_logger.handlers):
        lib_logger.addHandler(_ColorConsoleHandler(level=level))
    return lib_logger
