"""General helpers: locale-aware printf formatting, processes and files."""

from __future__ import annotations

import gzip
import locale
import logging
import os
import re
import subprocess
from collections.abc import Iterable, Iterator, Sequence
from typing import Any

_log = logging.getLogger(__name__)

_FLOAT_CONVERSIONS = frozenset("eEfFgG")

_SPEC = re.compile(
    r"%(?P<flags>[-+ #0]*)"
    r"(?P<width>\*|\d+)?"
    r"(?:\.(?P<prec>\*|\d*))?"
    r"(?P<length>hh|h|ll|l|L|q|j|z|t)?"
    r"(?P<conv>[diouxXeEfFgGcs%])"
)


class ApplicationError(Exception):
    """Error that ends the current operation of an application."""


class SystemCallError(ApplicationError):
    """An operating-system call failed; carries the error number."""

    def __init__(self, message: str, errno_value: int | None = None) -> None:
        self.errno = errno_value
        text = message
        if errno_value:
            text = f"{message}: {os.strerror(errno_value)}"
        super().__init__(text)


def _decimal_point(locale_name: str | None) -> str:
    """Return the decimal separator of ``locale_name``.

    ``None`` means the current numeric locale, ``""`` the one from the
    environment. An unknown locale logs a warning and falls back to the
    current one.
    """
    if locale_name is None:
        return locale.localeconv()["decimal_point"]

    previous = locale.setlocale(locale.LC_NUMERIC)
    try:
        try:
            locale.setlocale(locale.LC_NUMERIC, locale_name)
        except locale.Error as err:
            _log.warning("Unable to set new locale (%s): %s", locale_name, err)
        return locale.localeconv()["decimal_point"]
    finally:
        locale.setlocale(locale.LC_NUMERIC, previous)


def _format(fmt: str, args: Sequence[Any], decimal_point: str) -> str:
    remaining: Iterator[Any] = iter(args)

    def take() -> Any:
        try:
            return next(remaining)
        except StopIteration:
            raise TypeError("not enough arguments for format string") from None

    pieces: list[str] = []
    pos = 0
    while True:
        idx = fmt.find("%", pos)
        if idx < 0:
            pieces.append(fmt[pos:])
            break
        pieces.append(fmt[pos:idx])
        match = _SPEC.match(fmt, idx)
        if match is None:
            raise ValueError(f"unsupported format specification at index {idx}")
        pos = match.end()

        conv = match["conv"]
        if conv == "%":
            pieces.append("%")
            continue

        width = match["width"] or ""
        prec = match["prec"]
        values = []
        if width == "*":
            values.append(take())
        if prec == "*":
            values.append(take())
        values.append(take())

        spec = "%" + match["flags"] + width
        if prec is not None:
            spec += "." + prec
        spec += conv
        text = spec % tuple(values)
        if conv in _FLOAT_CONVERSIONS and decimal_point != ".":
            text = text.replace(".", decimal_point)
        pieces.append(text)

    if next(remaining, _SENTINEL) is not _SENTINEL:
        raise TypeError("not all arguments converted during string formatting")
    return "".join(pieces)


_SENTINEL = object()


def dash_decimal_value(locale_name: str, dashes_before: int, dashes_after: int = 0) -> str:
    """Return a placeholder such as ``"--.-"`` using the locale's decimal separator.

    With ``dashes_after`` of 0 the separator is omitted.
    """
    if dashes_before < 0 or dashes_after < 0:
        raise ValueError("the number of dashes must not be negative")

    result = "-" * dashes_before
    if dashes_after > 0:
        separator = _decimal_point(locale_name if locale_name else None)
        result += separator + "-" * dashes_after
    return result


def str_printf(fmt: str, *args: Any) -> str:
    """Format ``args`` with a printf-style format in the current locale."""
    return _format(fmt, args, _decimal_point(None))


def str_printf_l(fmt: str, locale_name: str | None, *args: Any) -> str:
    """Format ``args`` with a printf-style format in ``locale_name``.

    ``None`` uses the current locale, ``"C"`` the traditional one and ``""``
    the locale from the environment.
    """
    return _format(fmt, args, _decimal_point(locale_name))


def start_background(process: str, args: Iterable[str]) -> subprocess.Popen:
    """Start ``process`` (looked up in ``PATH``) with ``args`` in the background."""
    try:
        return subprocess.Popen([process, *args])
    except OSError as err:
        raise SystemCallError(f"Unable to start '{process}'", err.errno) from err


def compress_file(filename: str | os.PathLike[str]) -> None:
    """Replace the contents of ``filename`` with their gzip compression.

    The whole file is read into memory, so use it for small files only.
    """
    try:
        with open(filename, "rb") as source:
            data = source.read()
    except OSError as err:
        raise SystemCallError(f"Unable to open '{filename}' for reading", err.errno) from err

    try:
        with gzip.open(filename, "wb") as target:
            target.write(data)
    except OSError as err:
        raise ApplicationError(f"Unable to write to '{filename}'") from err


def realpath(filename: str | os.PathLike[str]) -> str:
    """Resolve ``filename`` to an absolute path without symbolic links."""
    try:
        os.stat(filename)
        return os.path.realpath(filename, strict=True)
    except OSError as err:
        raise SystemCallError(f"Unable to resolve '{filename}'", err.errno) from err