"""Generate JSON Schema for the guard catalog YAML format."""

from __future__ import annotations

import json
from pathlib import Path

from cheatguard.catalog import GuardCatalog


def generate_json_schema() -> dict:
    return GuardCatalog.model_json_schema()


def write_json_schema(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    schema = generate_json_schema()
    path.write_text(json.dumps(schema, indent=2) + "\n")
