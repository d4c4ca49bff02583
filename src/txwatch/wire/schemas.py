from __future__ import annotations

import json
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any

import jsonschema
from jsonschema import FormatChecker

SCHEMA_ROOT = Path(__file__).resolve().parent / "schemas"

RESPONSE_SCHEMA = "rpc.response.schema.json"
OP_INFO_SCHEMA = "op.info.schema.json"
ACCOUNT_INFO_SCHEMA = "account.info.schema.json"


class SchemaValidationError(ValueError):
    def __init__(self, message: str, errors: list[str] | None = None) -> None:
        super().__init__(message)
        self.errors = errors or []


def _load_json(path: Path) -> dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        return json.load(f)


@lru_cache(maxsize=None)
def _compiled_validator(path: Path) -> jsonschema.Validator:
    # One compiled validator per schema file for the process lifetime.
    schema = _load_json(path)
    validator_cls = jsonschema.validators.validator_for(schema)
    validator_cls.check_schema(schema)
    return validator_cls(schema, format_checker=FormatChecker())


@dataclass(frozen=True)
class SchemaRegistry:
    """Bundled JSON Schemas for node responses, compiled once per file."""

    schema_root: Path

    @classmethod
    def default(cls) -> "SchemaRegistry":
        return cls(schema_root=SCHEMA_ROOT)

    def schema_path(self, schema_filename: str) -> Path:
        return self.schema_root / schema_filename

    def load_schema(self, schema_filename: str) -> dict[str, Any]:
        return _load_json(self.schema_path(schema_filename))

    def validator_for(self, schema_filename: str) -> jsonschema.Validator:
        return _compiled_validator(self.schema_path(schema_filename))

    def validate_instance(self, instance: Any, schema_filename: str) -> None:
        """Raise SchemaValidationError listing every violation, sorted by location."""
        errors = sorted(
            self.validator_for(schema_filename).iter_errors(instance),
            key=lambda e: [str(p) for p in e.path],
        )
        if errors:
            raise SchemaValidationError(
                f"{schema_filename}: {len(errors)} validation error(s).",
                errors=[self._format_error(err) for err in errors],
            )

    @staticmethod
    def _format_error(error: jsonschema.ValidationError) -> str:
        location = "/".join(str(part) for part in error.path) or "<root>"
        return f"{location}: {error.message}"
