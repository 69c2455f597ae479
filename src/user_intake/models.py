"""Pydantic models for intake configuration.

The optional YAML config is parsed into these models at startup.  Every key
has a default, so an empty config (or no config at all) reproduces the
standard name / email / age intake.  A field override only replaces the keys
it names; the rest keep that field's defaults.  Unknown predicate, parser or
log-level names fail fast, before the first prompt is shown.
"""

from __future__ import annotations

import logging
import os
from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

# Importing the modules triggers @register_predicate / @register_parser
import user_intake.parsers  # noqa: F401
import user_intake.predicates  # noqa: F401

from user_intake.registry import get_parser, get_predicate

LOG_LEVELS = tuple(logging.getLevelNamesMapping())

DEFAULT_FIELDS: dict[str, dict[str, Any]] = {
    "name": {"prompt": "Enter name:", "validators": ["not_empty", "validate_name"]},
    "email": {"prompt": "Enter email:", "validators": ["not_empty", "validate_email"]},
    "age": {"prompt": "Enter age:", "validators": ["not_empty"], "parser": "u32"},
}

# User.age is an unsigned int, name and email are plain strings
FIELD_PARSERS = {"name": "string", "email": "string", "age": "u32"}


def _default_log_level() -> str:
    return os.environ.get("USER_INTAKE_LOG_LEVEL", "WARNING")


class FieldConfig(BaseModel):
    """How to prompt for, parse and validate a single field."""

    prompt: str
    validators: list[str] = []
    parser: str = "string"

    @field_validator("validators")
    @classmethod
    def _known_predicates(cls, names: list[str]) -> list[str]:
        for name in names:
            try:
                get_predicate(name)
            except KeyError as exc:
                raise ValueError(exc.args[0]) from None
        return names

    @field_validator("parser")
    @classmethod
    def _known_parser(cls, name: str) -> str:
        try:
            get_parser(name)
        except KeyError as exc:
            raise ValueError(exc.args[0]) from None
        return name


class IntakeFields(BaseModel):
    name: FieldConfig = FieldConfig(**DEFAULT_FIELDS["name"])
    email: FieldConfig = FieldConfig(**DEFAULT_FIELDS["email"])
    age: FieldConfig = FieldConfig(**DEFAULT_FIELDS["age"])

    @model_validator(mode="before")
    @classmethod
    def _merge_field_defaults(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        merged = dict(data)
        for field_name, defaults in DEFAULT_FIELDS.items():
            override = data.get(field_name)
            if isinstance(override, dict):
                merged[field_name] = {**defaults, **override}
        return merged

    @model_validator(mode="after")
    def _parsers_match_record(self) -> IntakeFields:
        for field_name, expected in FIELD_PARSERS.items():
            actual = getattr(self, field_name).parser
            if actual != expected:
                raise ValueError(
                    f"user.{field_name} must use parser {expected!r}, got {actual!r}"
                )
        return self


class IntakeSettings(BaseModel):
    log_level: str = Field(default_factory=_default_log_level, validate_default=True)

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, level: str) -> str:
        level = level.upper()
        if level not in LOG_LEVELS:
            raise ValueError(
                f"Unknown log level {level!r}. Available: {', '.join(LOG_LEVELS)}"
            )
        return level


class IntakeConfig(BaseModel):
    """Root model — represents the entire intake YAML file."""

    version: str = "1.0"
    user: IntakeFields = IntakeFields()
    settings: IntakeSettings = Field(default_factory=IntakeSettings)
