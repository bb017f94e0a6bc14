"""
JSON Schema Contract Validators

Модуль для валидации JSON данных согласно формальным JSON Schema контрактам.
Использует библиотеку jsonschema для проверки соответствия данных схемам.

Схемы (mobius/core/contracts/schema/):
- ext_complex.json
- curve.json
- generate_mobius_request.json
- generate_mobius_response.json
- api_error.json
"""

import json
from pathlib import Path
from typing import Any

import jsonschema
from jsonschema import Draft202012Validator


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы поставляются вместе с пакетом в каталоге schema/ рядом с модулем.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: dict[str, dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'curve')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Валидируем саму схему (meta-validation)
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str):
        """
        Args:
            schema_name: Имя схемы для валидации
        """
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Any) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Any) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Any):
        """Итератор по всем ошибкам валидации."""
        return self.validator.iter_errors(data)


class ExtComplexValidator(ContractValidator):
    """Валидатор для ext_complex контракта."""

    def __init__(self):
        super().__init__("ext_complex")


class CurveValidator(ContractValidator):
    """Валидатор для curve контракта."""

    def __init__(self):
        super().__init__("curve")


class GenerateMobiusRequestValidator(ContractValidator):
    """Валидатор для generate_mobius_request контракта."""

    def __init__(self):
        super().__init__("generate_mobius_request")


class GenerateMobiusResponseValidator(ContractValidator):
    """Валидатор для generate_mobius_response контракта."""

    def __init__(self):
        super().__init__("generate_mobius_response")


class ApiErrorValidator(ContractValidator):
    """Валидатор для api_error контракта."""

    def __init__(self):
        super().__init__("api_error")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_ext_complex(data: Any) -> None:
    """
    Валидация ext_complex данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    ExtComplexValidator().validate(data)


def validate_curve(data: Any) -> None:
    """
    Валидация curve данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    CurveValidator().validate(data)


def validate_generate_mobius_request(data: Any) -> None:
    """
    Валидация generate_mobius_request данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    GenerateMobiusRequestValidator().validate(data)


def validate_generate_mobius_response(data: Any) -> None:
    """
    Валидация generate_mobius_response данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    GenerateMobiusResponseValidator().validate(data)


def validate_api_error(data: Any) -> None:
    """
    Валидация api_error данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    ApiErrorValidator().validate(data)
