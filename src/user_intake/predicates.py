"""Reusable single-field predicates.

Each predicate takes the trimmed input line and returns pass/fail.  They are
pure and stateless, so a validator can run them in any order.  Note that
``validate_name`` accepts the empty string; pair it with ``not_empty``.
"""

from __future__ import annotations

import re

from user_intake.registry import register_predicate

_EMAIL_RE = re.compile(r"[\w.-]+@[\w.-]+\.\w+")


@register_predicate("validate_name")
def validate_name(name: str) -> bool:
    """Reject names containing any numeric character."""
    return not any(ch.isnumeric() for ch in name)


@register_predicate("validate_email")
def validate_email(email: str) -> bool:
    """Accept ``local@domain.tld`` where the whole string matches."""
    return _EMAIL_RE.fullmatch(email) is not None


@register_predicate("not_empty")
def not_empty(value: str) -> bool:
    return len(value) > 0
