from __future__ import annotations
from pathlib import Path
from typing import Any, Iterable
import json
from jsonschema import Draft202012Validator

SCHEMAS_DIR = Path(__file__).resolve().parent / "configs" / "schemas"


class SchemaValidator:
    def __init__(self, names: Iterable[str] = ("letschat",)):
        self._schemas = {}
        for name in names:
            path = SCHEMAS_DIR / f"{name}.schema.json"
            with open(path, "r", encoding="utf-8") as f:
                schema = json.load(f)
                self._schemas[name] = Draft202012Validator(schema)

    def validate(self, name: str, data: Any) -> list[str]:
        if name not in self._schemas:
            raise KeyError(f"Unknown schema {name}")
        validator = self._schemas[name]
        errors = sorted(validator.iter_errors(data), key=lambda e: list(e.path))
        return [f"{'/'.join(map(str, e.path))}: {e.message}" for e in errors]
