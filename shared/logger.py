"""
CipherBench Structured Logger
==============================

:class:`BenchLogger` wraps a stdlib :class:`logging.Logger` named
``cipherbench.<component>``.  Records go to stderr through a themed Rich
handler and, when a log file is configured, to a size-rotated file as
plain text or JSON lines.

Every record carries the component name and the active operation (set
with :meth:`BenchLogger.operation`).  Keyword arguments passed to the log
methods become a structured ``context`` object in JSON output::

    log.info("Comparison finished", iterations=1000, fastest="caesar")

References:
    - Python logging HOWTO. https://docs.python.org/3/howto/logging.html
    - Rich logging handler. https://rich.readthedocs.io/en/latest/logging.html
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
        "log.level.critical": "bold white on red",
    }
)

_TEXT_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s [%(operation)s] | %(message)s"
_MAX_BYTES = 10 * 1024 * 1024
_BACKUPS = 5


# ========================== Record enrichment ==============================


class _ContextFilter(logging.Filter):
    """Stamp ``component`` and ``operation`` onto every record."""

    def __init__(self, component: str) -> None:
        super().__init__()
        self.component = component
        self.operation = "-"

    def filter(self, record: logging.LogRecord) -> bool:
        record.component = self.component
        record.operation = self.operation
        if not hasattr(record, "context"):
            record.context = {}
        return True


class _JSONLinesFormatter(logging.Formatter):
    """One JSON object per record.

    Keys: ``ts``, ``level``, ``logger``, ``component``, ``operation``,
    ``message``, plus ``context`` and ``traceback`` when present.
    """

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "component": getattr(record, "component", None),
            "operation": getattr(record, "operation", "-"),
            "message": record.getMessage(),
        }
        context = getattr(record, "context", None)
        if context:
            payload["context"] = context
        if record.exc_info:
            payload["traceback"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


def _file_handler(path: Path, level: int, json_lines: bool) -> logging.Handler:
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        path, maxBytes=_MAX_BYTES, backupCount=_BACKUPS, encoding="utf-8"
    )
    handler.setLevel(level)
    if json_lines:
        handler.setFormatter(_JSONLinesFormatter())
    else:
        handler.setFormatter(logging.Formatter(_TEXT_FORMAT, "%Y-%m-%dT%H:%M:%S%z"))
    return handler


def _console_handler(level: int) -> logging.Handler:
    return RichHandler(
        level=level,
        console=Console(theme=_LOG_THEME, stderr=True),
        show_path=False,
        markup=False,
        rich_tracebacks=True,
    )


# ========================== BenchLogger ====================================


class BenchLogger:
    """Context-aware logger for one CipherBench component.

    Args:
        component:       Name appended to ``cipherbench.`` for the logger.
        log_level:       Minimum level name; unknown names mean WARNING.
        log_file:        Rotating log file path, or ``None`` for none.
        json_logs:       Write JSON lines instead of text to *log_file*.
        console_output:  Attach the Rich stderr handler.
    """

    def __init__(
        self,
        component: str,
        *,
        log_level: str = "WARNING",
        log_file: str | Path | None = None,
        json_logs: bool = False,
        console_output: bool = True,
    ) -> None:
        level = logging.getLevelName(log_level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

        self._context = _ContextFilter(component)
        self._logger = logging.getLogger(f"cipherbench.{component}")
        self._logger.setLevel(level)
        self._logger.propagate = False
        self.close()

        handlers: list[logging.Handler] = []
        if console_output:
            handlers.append(_console_handler(level))
        if log_file is not None:
            handlers.append(_file_handler(Path(log_file), level, json_logs))
        for handler in handlers:
            handler.addFilter(self._context)
            self._logger.addHandler(handler)

    # ------------------------------------------------------------------ #
    #  Scopes
    # ------------------------------------------------------------------ #

    @contextmanager
    def operation(self, name: str) -> Iterator[BenchLogger]:
        """Tag every record logged inside the block with *name*."""
        previous = self._context.operation
        self._context.operation = name
        try:
            yield self
        finally:
            self._context.operation = previous

    @contextmanager
    def timed(self, label: str) -> Iterator[None]:
        """Log *label* at DEBUG on entry and its wall time at INFO on exit."""
        start = time.perf_counter()
        self.debug("Started: %s", label)
        try:
            yield
        finally:
            elapsed = time.perf_counter() - start
            self.info("Finished: %s (%.3f sec)", label, elapsed, seconds=round(elapsed, 6))

    # ------------------------------------------------------------------ #
    #  Log methods
    # ------------------------------------------------------------------ #

    def _log(self, level: int, msg: str, args: tuple, context: dict[str, Any], **kw: Any) -> None:
        if self._logger.isEnabledFor(level):
            self._logger.log(level, msg, *args, extra={"context": context}, **kw)

    def debug(self, msg: str, *args: Any, **context: Any) -> None:
        self._log(logging.DEBUG, msg, args, context)

    def info(self, msg: str, *args: Any, **context: Any) -> None:
        self._log(logging.INFO, msg, args, context)

    def warning(self, msg: str, *args: Any, **context: Any) -> None:
        self._log(logging.WARNING, msg, args, context)

    def exception(self, msg: str, *args: Any, **context: Any) -> None:
        """Log at ERROR with the active exception's traceback."""
        self._log(logging.ERROR, msg, args, context, exc_info=True)

    def close(self) -> None:
        """Flush, close and detach every handler on the underlying logger."""
        for handler in list(self._logger.handlers):
            handler.close()
            self._logger.removeHandler(handler)
