"""Intake engine — the orchestrator.

Reads a validated config, resolves predicate and parser names via the
registry, and runs the prompting loop for name → email → age before building
the ``User`` record.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from user_intake.models import FieldConfig, IntakeConfig
from user_intake.prompting import LineSource, read_input
from user_intake.registry import get_parser
from user_intake.schemas.user import User
from user_intake.validator import validator_factory

logger = logging.getLogger(__name__)

FIELD_ORDER = ("name", "email", "age")


def load_config(config_path: str | Path | None = None) -> IntakeConfig:
    """Parse and validate the YAML at *config_path*; defaults when ``None``."""
    if config_path is None:
        return IntakeConfig()
    raw = yaml.safe_load(Path(config_path).read_text())
    return IntakeConfig.model_validate(raw or {})


def format_user(user: User) -> str:
    return f"Name: {user.name}, Email: {user.email}, Age: {user.age}"


class IntakeEngine:
    """Prompt for each user field in order and build the record."""

    def __init__(self, config: IntakeConfig | None = None) -> None:
        self._config = config if config is not None else IntakeConfig()

    @classmethod
    def from_file(cls, config_path: str | Path | None) -> IntakeEngine:
        return cls(load_config(config_path))

    @property
    def config(self) -> IntakeConfig:
        return self._config

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def run(self, source: LineSource | None = None) -> User:
        """Collect every field from *source* (stdin by default).

        Raises ``InputReadError`` if the source fails or runs dry before
        all fields are collected.
        """
        logging.basicConfig(
            level=self._config.settings.log_level,
            format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        )
        logger.info("Intake started (config version %s)", self._config.version)

        values: dict[str, Any] = {}
        for field_name in FIELD_ORDER:
            field_cfg: FieldConfig = getattr(self._config.user, field_name)
            values[field_name] = self._collect(field_name, field_cfg, source)

        user = User(**values)
        logger.info("Intake finished for %r", user.name)
        return user

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    @staticmethod
    def _collect(
        field_name: str,
        field_cfg: FieldConfig,
        source: LineSource | None,
    ) -> Any:
        validator = validator_factory(*field_cfg.validators)
        parser = get_parser(field_cfg.parser)
        logger.info(
            "Collecting %r with %r, parser=%r", field_name, validator, field_cfg.parser
        )
        return read_input(field_cfg.prompt, validator, parser, source)
