"""
JSON Schema контракты (Draft 2020-12)

Схемы поставляются с пакетом в каталоге schema/:
- matrix.json     — плотная матрица {rows, cols, data}
- intervals.json  — список пар [start, end]
"""

import json
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """Загрузка и кэширование схем из schema_dir (по умолчанию schema/ рядом с модулем)."""

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")
        self._schemas: Dict[str, Any] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Схема по имени без расширения ('matrix', 'intervals').

        Raises:
            FileNotFoundError: Нет файла {schema_name}.json
            ValueError: Файл не проходит meta-validation
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        schema = json.loads(schema_path.read_text(encoding="utf-8"))
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """Draft202012Validator, привязанный к одной схеме пакета."""

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Any) -> None:
        """Raises ValidationError при первом нарушении."""
        self.validator.validate(data)

    def is_valid(self, data: Any) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Any):
        return self.validator.iter_errors(data)


class MatrixValidator(ContractValidator):
    def __init__(self):
        super().__init__("matrix")


class IntervalsValidator(ContractValidator):
    def __init__(self):
        super().__init__("intervals")


def validate_matrix(data: Dict[str, Any]) -> None:
    """Проверка dict матрицы против matrix.json (ValidationError при нарушении)."""
    MatrixValidator().validate(data)


def validate_intervals(data: list) -> None:
    """Проверка списка пар против intervals.json (ValidationError при нарушении)."""
    IntervalsValidator().validate(data)
