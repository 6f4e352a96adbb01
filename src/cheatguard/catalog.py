from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, field_validator

from cheatguard.metadata import AssertionMetadata


class GuardCatalog(BaseModel):
    model_config = ConfigDict(extra="forbid")
    guards: dict[str, AssertionMetadata]

    @field_validator("guards")
    @classmethod
    def guards_must_be_valid(
        cls, v: dict[str, AssertionMetadata]
    ) -> dict[str, AssertionMetadata]:
        if not v:
            raise ValueError("guards must not be empty")
        for name in v:
            if not name or any(c.isspace() for c in name):
                raise ValueError(f"Guard name '{name}' must not contain whitespace")
        return v

    def get(self, name: str) -> AssertionMetadata:
        try:
            return self.guards[name]
        except KeyError:
            known = ", ".join(sorted(self.guards))
            raise KeyError(f"Unknown guard '{name}' (known: {known})") from None


def load_catalog(path: Path) -> GuardCatalog:
    """Load and validate a guard catalog from a YAML file."""
    with open(path) as f:
        raw = yaml.safe_load(f)

    if not isinstance(raw, dict):
        raise ValueError(f"{path}: expected a mapping with a 'guards' key")

    return GuardCatalog(**raw)
