"""Metadata attached to every cheat-guarded assertion site."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator


class Severity(str, Enum):
    CRITICAL = "CRITICAL"
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"


class AssertionMetadata(BaseModel):
    """What a check protects and how it could be cheated.

    Attributes:
        protects: The real-world property this check defends.
        severity: How bad a silent bypass would be.
        cheats: Concrete ways the check could be gamed, in review order.
        consequence: What a real user experiences if the check is bypassed.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    protects: str
    severity: Severity
    cheats: tuple[str, ...]
    consequence: str

    @field_validator("protects", "consequence")
    @classmethod
    def text_must_not_be_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        return v

    @field_validator("cheats")
    @classmethod
    def cheats_must_not_be_empty(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        if not v:
            raise ValueError("cheats must list at least one cheat vector")
        if any(not cheat.strip() for cheat in v):
            raise ValueError("cheat vectors must not be blank")
        return v

    def fields(self) -> dict[str, Any]:
        """Keyword arguments accepted by cheat_bail, cheat_ensure and cheat_check."""
        return {
            "protects": self.protects,
            "severity": self.severity,
            "cheats": list(self.cheats),
            "consequence": self.consequence,
        }
