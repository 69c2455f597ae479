"""Shared fixtures for the test suite."""

from __future__ import annotations

import io
from pathlib import Path
from textwrap import dedent

import pytest

from user_intake.validator import Validator, validator_factory


@pytest.fixture()
def lines():
    """Return a factory that turns strings into an in-memory line source."""

    def _make(*entries: str) -> io.StringIO:
        return io.StringIO("".join(f"{entry}\n" for entry in entries))

    return _make


@pytest.fixture()
def name_validator() -> Validator:
    return validator_factory("not_empty", "validate_name")


@pytest.fixture()
def custom_config_file(tmp_path: Path) -> Path:
    """A config that renames the prompts and relaxes the name check."""
    path = tmp_path / "intake.yaml"
    path.write_text(dedent("""\
        version: "1.0"
        user:
          name:
            prompt: "Your name?"
            validators: [not_empty]
          email:
            prompt: "Your email?"
            validators: [not_empty, validate_email]
          age:
            prompt: "Your age?"
            validators: [not_empty]
            parser: u32
        settings:
          log_level: info
    """))
    return path
