"""Text → value parsers for the prompting loop.

A parser raises ``ValueError`` on malformed text; the prompting loop turns
that into a "failed to convert" diagnostic and re-prompts.
"""

from __future__ import annotations

import re

from user_intake.registry import register_parser

U32_MAX = 2**32 - 1

# int() also accepts underscores, surrounding whitespace and non-ASCII digits
_U32_RE = re.compile(r"\+?[0-9]+")


@register_parser("string")
def parse_string(text: str) -> str:
    return text


@register_parser("u32")
def parse_u32(text: str) -> int:
    """Parse an unsigned 32-bit decimal integer.

    Accepts an optional leading ``+`` followed by ASCII digits only.
    """
    if _U32_RE.fullmatch(text) is None:
        raise ValueError(f"invalid unsigned integer literal: {text!r}")
    value = int(text)
    if value > U32_MAX:
        raise ValueError(f"{text!r} is out of range for an unsigned 32-bit integer")
    return value
