"""
JSON Schema Contract Validators

Validation of input-record fragments against the JSON Schema contracts stored
in contracts/schema/ at the project root.

Schemas:
- point_entry.json (one {"value", "base"} entry of an input record)
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterator

import jsonschema
from jsonschema import Draft202012Validator, ValidationError


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Loader for JSON Schema files.

    Finds schemas in contracts/schema/ relative to the project root.
    """

    def __init__(self, schema_dir: Path | None = None):
        # Project root is 4 levels above this file
        self._schema_dir = schema_dir or (
            Path(__file__).parent.parent.parent.parent / "contracts" / "schema"
        )
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        self._schemas: Dict[str, Dict[str, Any]] = {}

    @property
    def schema_dir(self) -> Path:
        return self._schema_dir

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Load (and cache) a JSON Schema file.

        Args:
            schema_name: Schema name without extension (e.g. 'point_entry')

        Returns:
            The schema as a dict

        Raises:
            FileNotFoundError: if the schema file does not exist
            json.JSONDecodeError: if the file is not valid JSON
            ValueError: if the file is not a valid Draft 2020-12 schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # meta-validation
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

        self._schemas[schema_name] = schema
        return schema


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Base class for contract validators.

    Wraps a Draft 2020-12 validator compiled from one schema.
    """

    def __init__(self, schema_name: str, loader: SchemaLoader | None = None):
        self.schema_name = schema_name
        self.schema = (loader or _SCHEMA_LOADER).load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Any) -> None:
        """
        Validate data against the schema.

        Raises:
            ValidationError: if data does not match the schema
        """
        self.validator.validate(data)

    def is_valid(self, data: Any) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Any) -> Iterator[ValidationError]:
        """
        Iterate over every validation error.

        Errors come out sorted by path so the first one is deterministic:
        structural errors (empty path) before field errors.
        """
        return iter(sorted(self.validator.iter_errors(data), key=lambda e: list(e.path)))


class PointEntryValidator(ContractValidator):
    """Validator for one point entry ({"value": ..., "base": ...})."""

    def __init__(self, loader: SchemaLoader | None = None):
        super().__init__("point_entry", loader)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_point_entry(data: Any) -> None:
    """
    Validate a point entry.

    Raises:
        ValidationError: if the entry does not match point_entry.json
    """
    PointEntryValidator().validate(data)
