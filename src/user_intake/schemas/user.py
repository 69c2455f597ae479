"""Pydantic model for the collected user record.

Fields arrive already validated by the prompting loop, so the model only
enforces types; it does not re-run the field predicates.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from user_intake.parsers import U32_MAX


class User(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    email: str
    age: int = Field(..., ge=0, le=U32_MAX)
