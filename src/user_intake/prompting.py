"""Generic read → parse → validate loop.

``read_input`` keeps prompting until a line both parses into the target type
and passes the validator.  Parse and validation failures are recoverable and
only produce a one-line diagnostic; a failing or exhausted line source is not,
and raises ``InputReadError``.
"""

from __future__ import annotations

import logging
import sys
from typing import Callable, Protocol, TypeVar

from user_intake.validator import Validator

logger = logging.getLogger(__name__)

T = TypeVar("T")

CONVERT_FAILED_MSG = "Failed to convert value, please try again."
INVALID_INPUT_MSG = "Invalid input, please try again."


class LineSource(Protocol):
    """Anything exposing file-like ``readline()``.

    Text sources (``sys.stdin``, ``io.StringIO``) and byte sources
    (``sys.stdin.buffer``, ``io.BytesIO``) are both accepted; byte lines are
    decoded as UTF-8.
    """

    def readline(self) -> str | bytes: ...


class InputReadError(RuntimeError):
    """The line source failed or ran out of lines."""


def read_line(source: LineSource) -> str:
    """Read one raw line from *source*, raising ``InputReadError`` at EOF."""
    try:
        line = source.readline()
    except OSError as exc:
        raise InputReadError(f"read failed ({exc})") from exc
    if not line:
        raise InputReadError("end of input")
    if isinstance(line, bytes):
        try:
            return line.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise InputReadError(f"undecodable input ({exc.reason})") from exc
    return line


def read_input(
    prompt: str,
    validator: Validator,
    parser: Callable[[str], T] = str,  # type: ignore[assignment]
    source: LineSource | None = None,
) -> T:
    """Prompt until a line parses with *parser* and passes *validator*.

    Parameters
    ----------
    prompt:
        Printed on its own line before every read.
    validator:
        Applied to the trimmed text, not the parsed value.
    parser:
        Converts the trimmed text to the target type, raising
        ``ValueError`` on malformed input.
    source:
        Line source; ``sys.stdin`` when omitted.
    """
    if source is None:
        source = sys.stdin

    attempt = 0
    while True:
        attempt += 1
        print(prompt)

        text = read_line(source).strip()
        logger.debug("%r attempt %d: read %r", prompt, attempt, text)

        try:
            value = parser(text)
        except ValueError as exc:
            logger.debug("%r attempt %d: conversion failed — %s", prompt, attempt, exc)
            print(CONVERT_FAILED_MSG)
            continue

        if validator.validate(text):
            logger.info("%r accepted after %d attempt(s)", prompt, attempt)
            return value

        logger.debug("%r attempt %d: rejected by %r", prompt, attempt, validator)
        print(INVALID_INPUT_MSG)
