"""Name → function registry for field predicates and value parsers.

Predicates and parsers register themselves at import time via
``@register_predicate("not_empty")`` / ``@register_parser("u32")``.
Validators and field configs only ever hold the string key and resolve it
with ``get_predicate`` / ``get_parser``.  The set is closed once the
``predicates`` and ``parsers`` modules are imported.
"""

from __future__ import annotations

from typing import Any, Callable

# category -> {registered name -> function}
_registries: dict[str, dict[str, Callable[[str], Any]]] = {
    "predicate": {},
    "parser": {},
}


def _register(category: str, name: str):
    entries = _registries[category]

    def decorator(func: Callable[[str], Any]) -> Callable[[str], Any]:
        if name in entries:
            raise ValueError(
                f"Duplicate {category} registration: {name!r} is already "
                f"registered to {entries[name].__name__}"
            )
        entries[name] = func
        return func

    return decorator


def _lookup(category: str, name: str) -> Callable[[str], Any]:
    entries = _registries[category]
    if name not in entries:
        available = ", ".join(sorted(entries)) or "(none)"
        raise KeyError(f"Unknown {category} {name!r}. Available: {available}")
    return entries[name]


def register_predicate(name: str):
    """Function decorator that registers a ``(str) -> bool`` check."""
    return _register("predicate", name)


def register_parser(name: str):
    """Function decorator that registers a ``(str) -> value`` parser."""
    return _register("parser", name)


def get_predicate(name: str) -> Callable[[str], bool]:
    return _lookup("predicate", name)


def get_parser(name: str) -> Callable[[str], Any]:
    return _lookup("parser", name)


def list_registered() -> dict[str, dict[str, str]]:
    """Return ``{"predicates": {name: func_name}, "parsers": {...}}``."""
    return {
        f"{category}s": {name: func.__name__ for name, func in sorted(entries.items())}
        for category, entries in _registries.items()
    }
