"""Shared start-up code of the vetero applications: debug and error logging."""

from __future__ import annotations

import logging
import logging.handlers
import os
import sys
from typing import Any

from vetero.utils import ApplicationError, SystemCallError

TRACE = 5
logging.addLevelName(TRACE, "TRACE")

# A level above every message, used for "none".
SILENT = logging.CRITICAL + 10

_DEBUG_LEVELS = {
    "none": SILENT,
    "info": logging.INFO,
    "debug": logging.DEBUG,
    "trace": TRACE,
}

_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


def _parse_level(levelstring: str) -> int:
    for name, level in _DEBUG_LEVELS.items():
        if levelstring in (name, name.upper()):
            return level
    raise ApplicationError(f"Invalid loglevel: '{levelstring}'")


class VeteroApplication:
    """Base of the vetero programs; owns the debug and the error logger.

    Use it as a context manager, or call :meth:`close`, to release the
    log files it opened.
    """

    def __init__(self, application_name: str) -> None:
        self.application_name = application_name
        self.debug_log = logging.getLogger(f"{application_name}.debug")
        self.error_log = logging.getLogger(f"{application_name}.error")
        self.debug_log.propagate = False
        self.error_log.propagate = False
        self.error_log.setLevel(logging.DEBUG)
        self._debug_handler: logging.Handler | None = None
        self._error_handler: logging.Handler | None = None

    def setup_debug_logging(self, level: str, filename: str) -> None:
        """Set the minimum debug level and, if ``filename`` is given, log into it.

        Valid levels are ``trace``, ``debug``, ``info`` and ``none`` (also in
        upper case). Without a file, messages go to standard error.
        """
        numeric = _parse_level(level)
        self.debug_log.setLevel(numeric)

        if filename:
            try:
                handler: logging.Handler = logging.FileHandler(
                    filename, mode="a", encoding="utf-8"
                )
            except OSError as err:
                raise SystemCallError(f"Unable to open file '{filename}'", err.errno) from err
        else:
            handler = logging.StreamHandler(sys.stderr)

        handler.setFormatter(logging.Formatter(_FORMAT))
        self._debug_handler = self._replace(self.debug_log, self._debug_handler, handler)

    def setup_error_logging(self, error_logfile: str) -> None:
        """Send error messages to ``stderr``, ``stdout``, ``syslog`` or a file."""
        if error_logfile == "syslog":
            address: Any = "/dev/log" if os.path.exists("/dev/log") else ("localhost", 514)
            handler: logging.Handler = logging.handlers.SysLogHandler(
                address=address,
                facility=logging.handlers.SysLogHandler.LOG_DAEMON,
            )
            handler.ident = f"{self.application_name}: "
            handler.setFormatter(logging.Formatter("%(message)s"))
        elif error_logfile == "stderr":
            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(logging.Formatter(_FORMAT))
        elif error_logfile == "stdout":
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(logging.Formatter(_FORMAT))
        else:
            try:
                handler = logging.FileHandler(error_logfile, mode="a", encoding="utf-8")
            except OSError as err:
                raise ApplicationError(
                    f"Unable to setup error logging for '{error_logfile}'"
                ) from err
            handler.setFormatter(logging.Formatter(_FORMAT))

        self._error_handler = self._replace(self.error_log, self._error_handler, handler)

    @staticmethod
    def _replace(
        logger: logging.Logger, old: logging.Handler | None, new: logging.Handler
    ) -> logging.Handler:
        if old is not None:
            logger.removeHandler(old)
            old.close()
        logger.addHandler(new)
        return new

    def close(self) -> None:
        """Detach and close the handlers this application installed."""
        if self._debug_handler is not None:
            self.debug_log.removeHandler(self._debug_handler)
            self._debug_handler.close()
            self._debug_handler = None
        if self._error_handler is not None:
            self.error_log.removeHandler(self._error_handler)
            self._error_handler.close()
            self._error_handler = None

    def __enter__(self) -> VeteroApplication:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()