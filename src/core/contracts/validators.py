"""
JSON Schema Contract Validators

Валидация JSON отчётов по формальным JSON Schema контрактам (jsonschema).

Схемы поставляются как package data в src/core/contracts/schema/
и читаются через importlib.resources, поэтому доступны и из editable,
и из обычной установки.

Схемы:
- benchmark_report.json (результаты сравнения алгоритмов умножения)
"""

import json
from importlib.resources import files
from typing import Any, Dict, Final

import jsonschema
from jsonschema import Draft202012Validator

# Подкаталог пакета со схемами
SCHEMA_DIRNAME: Final[str] = "schema"

BENCHMARK_REPORT_SCHEMA: Final[str] = "benchmark_report"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema из package data.

    Схемы читаются лениво при первом обращении и кэшируются.
    """

    def __init__(self, package: str = __package__):
        self._schema_dir = files(package) / SCHEMA_DIRNAME
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка и meta-валидация схемы.

        Args:
            schema_name: Имя схемы без расширения (например, 'benchmark_report')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден в пакете
            json.JSONDecodeError: Если файл не является валидным JSON
            ValueError: Если файл не является валидной JSON Schema
        """
        cached = self._schemas.get(schema_name)
        if cached is not None:
            return cached

        resource = self._schema_dir / f"{schema_name}.json"
        if not resource.is_file():
            raise FileNotFoundError(f"Schema not found: {resource}")

        schema = json.loads(resource.read_text(encoding="utf-8"))

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
    """Валидатор данных против одной именованной схемы."""

    def __init__(self, schema_name: str, loader: SchemaLoader | None = None):
        self.schema_name = schema_name
        self.schema = (loader or _SCHEMA_LOADER).load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)


class BenchmarkReportValidator(ContractValidator):
    """Валидатор для benchmark_report контракта."""

    def __init__(self, loader: SchemaLoader | None = None):
        super().__init__(BENCHMARK_REPORT_SCHEMA, loader)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_benchmark_report(data: Dict[str, Any]) -> None:
    """
    Валидация benchmark_report данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    BenchmarkReportValidator().validate(data)
