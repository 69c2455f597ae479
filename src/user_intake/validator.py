"""Composite validator — the logical AND of a fixed set of predicates."""

from __future__ import annotations

from typing import Callable, Iterable

# Importing the module triggers the @register_predicate decorators
import user_intake.predicates  # noqa: F401

from user_intake.registry import get_predicate

Predicate = Callable[[str], bool]


class Validator:
    """Run every stored predicate against a candidate string.

    The predicate sequence is captured at construction and never changes,
    so ``validate`` is idempotent.  An empty validator accepts everything.
    """

    def __init__(self, validations: Iterable[Predicate]) -> None:
        self._validations: tuple[Predicate, ...] = tuple(validations)

    @property
    def validations(self) -> tuple[Predicate, ...]:
        return self._validations

    def validate(self, value: str) -> bool:
        return all(check(value) for check in self._validations)

    def __repr__(self) -> str:
        names = ", ".join(check.__name__ for check in self._validations)
        return f"{self.__class__.__name__}([{names}])"


def validator_factory(*names: str) -> Validator:
    """Build a ``Validator`` from registered predicate names.

    Names are resolved once, here; the validator only holds the resolved
    function references.  Raises ``KeyError`` for an unknown name.

    Example::

        validator_factory("not_empty", "validate_name")
    """
    return Validator([get_predicate(name) for name in names])
