"""
Tests for JSON Schema Contract Validators

Комплексное тестирование JSON Schema валидаторов:
- Валидность самих схем
- Валидация правильных данных
- Детекция нарушений required полей
- Детекция нарушений типов и формы ("inf" | [re, im])
- Детекция нарушений constraints (minItems/maxItems/minimum/enum)
- Интеграция с Pydantic моделями
"""

from pathlib import Path

import pytest
from jsonschema import ValidationError

from mobius.core.contracts import (
    ApiError,
    ApiErrorValidator,
    CurveValidator,
    ExtComplexValidator,
    GenerateMobiusRequest,
    GenerateMobiusRequestValidator,
    GenerateMobiusResponse,
    GenerateMobiusResponseValidator,
    SchemaLoader,
    curve_to_model,
    validate_api_error,
    validate_curve,
    validate_ext_complex,
    validate_generate_mobius_request,
    validate_generate_mobius_response,
)
from mobius.core.domain import INF, Circle, Line, ext_complex


# =============================================================================
# FIXTURES - VALID DATA SAMPLES
# =============================================================================


@pytest.fixture
def valid_request():
    """Валидный generate_mobius_request для тестирования."""
    return {
        "inputs": [[0.0, 0.0], "inf", [1.0, 0.0]],
        "outputs": [[0.0, 1.0], [2.0, 0.0], "inf"],
        "curves": ["xy", "polar"],
    }


@pytest.fixture
def valid_response():
    """Валидный generate_mobius_response для тестирования."""
    return {
        "curves": {
            "xy": [
                {"type": "line", "point": [0.0, 0.0], "slope": [0.0, 1.0]},
                {"type": "circle", "center": [0.0, 0.0], "radius": 5.0},
            ]
        }
    }


# =============================================================================
# TESTS - SCHEMA LOADING
# =============================================================================


def test_schema_loader_loads_all_schemas():
    """Проверка загрузки всех схем."""
    loader = SchemaLoader()

    for name in (
        "ext_complex",
        "curve",
        "generate_mobius_request",
        "generate_mobius_response",
        "api_error",
    ):
        schema = loader.load_schema(name)
        assert schema["title"] == name


def test_schema_loader_caches_schemas():
    """Проверка кэширования схем."""
    loader = SchemaLoader()

    schema1 = loader.load_schema("curve")
    schema2 = loader.load_schema("curve")

    # Должен вернуть тот же объект (кэш)
    assert schema1 is schema2


def test_schema_loader_raises_on_missing_schema():
    """Проверка ошибки при отсутствующей схеме."""
    loader = SchemaLoader()

    with pytest.raises(FileNotFoundError):
        loader.load_schema("non_existent_schema")


def test_schema_loader_raises_on_missing_directory(tmp_path: Path):
    """Проверка ошибки при отсутствующем каталоге схем."""
    with pytest.raises(RuntimeError, match="Schema directory not found"):
        SchemaLoader(tmp_path / "missing")


def test_schema_loader_rejects_invalid_schema(tmp_path: Path):
    """Файл, не являющийся JSON Schema, отклоняется meta-валидацией."""
    (tmp_path / "broken.json").write_text('{"type": 12}', encoding="utf-8")
    loader = SchemaLoader(tmp_path)

    with pytest.raises(ValueError, match="Invalid JSON Schema"):
        loader.load_schema("broken")


# =============================================================================
# TESTS - EXT COMPLEX VALIDATION
# =============================================================================


@pytest.mark.parametrize("data", ["inf", [1.0, 2.0], [0, -3]])
def test_ext_complex_accepts_valid_data(data):
    """Валидация "inf" и пар чисел."""
    validate_ext_complex(data)
    assert ExtComplexValidator().is_valid(data)


@pytest.mark.parametrize(
    "data",
    ["infinity", [1.0], [1.0, 2.0, 3.0], ["1", "2"], [True, False], {}, None],
)
def test_ext_complex_rejects_invalid_data(data):
    """Любая другая форма отклоняется."""
    with pytest.raises(ValidationError):
        validate_ext_complex(data)


# =============================================================================
# TESTS - CURVE VALIDATION
# =============================================================================


def test_curve_validator_accepts_line_and_circle():
    validator = CurveValidator()
    assert validator.is_valid({"type": "line", "point": [1.0, 2.0], "slope": [3.0, 4.0]})
    assert validator.is_valid({"type": "circle", "center": [1.0, 2.0], "radius": 3.0})


def test_curve_rejects_negative_radius():
    with pytest.raises(ValidationError):
        validate_curve({"type": "circle", "center": [0.0, 0.0], "radius": -1.0})


def test_curve_rejects_unknown_type():
    with pytest.raises(ValidationError):
        validate_curve({"type": "parabola", "point": [0.0, 0.0], "slope": [1.0, 0.0]})


def test_curve_rejects_mixed_fields():
    """Поля окружности в прямой не допускаются."""
    with pytest.raises(ValidationError):
        validate_curve({"type": "line", "point": [0.0, 0.0], "slope": [1.0, 0.0], "radius": 1.0})


def test_curve_rejects_inf_marker():
    """Кривые используют обычные complex, а не ExtComplex."""
    with pytest.raises(ValidationError):
        validate_curve({"type": "circle", "center": "inf", "radius": 1.0})


# =============================================================================
# TESTS - REQUEST VALIDATION
# =============================================================================


def test_request_validator_accepts_valid_data(valid_request):
    """Валидация правильного запроса."""
    validator = GenerateMobiusRequestValidator()
    validator.validate(valid_request)  # Не должно выбросить исключение
    assert validator.is_valid(valid_request)


def test_request_curves_optional(valid_request):
    data = valid_request.copy()
    del data["curves"]
    validate_generate_mobius_request(data)


def test_request_rejects_missing_required_field(valid_request):
    """Валидация отклоняет данные без обязательных полей."""
    data = valid_request.copy()
    del data["outputs"]

    with pytest.raises(ValidationError) as exc_info:
        validate_generate_mobius_request(data)
    assert "'outputs' is a required property" in str(exc_info.value)


@pytest.mark.parametrize("count", [2, 4])
def test_request_rejects_wrong_point_count(valid_request, count):
    data = valid_request.copy()
    data["inputs"] = ["inf"] * count

    with pytest.raises(ValidationError):
        validate_generate_mobius_request(data)


def test_request_rejects_extra_field(valid_request):
    data = valid_request.copy()
    data["scale"] = 2.0

    with pytest.raises(ValidationError):
        validate_generate_mobius_request(data)


def test_request_rejects_non_string_curve_name(valid_request):
    data = valid_request.copy()
    data["curves"] = ["xy", 5]

    with pytest.raises(ValidationError) as exc_info:
        validate_generate_mobius_request(data)
    assert "is not of type 'string'" in str(exc_info.value)


# =============================================================================
# TESTS - RESPONSE / ERROR VALIDATION
# =============================================================================


def test_response_validator_accepts_valid_data(valid_response):
    validator = GenerateMobiusResponseValidator()
    validator.validate(valid_response)
    assert validator.is_valid({"curves": {}})


def test_response_rejects_missing_curves():
    with pytest.raises(ValidationError):
        validate_generate_mobius_response({})


def test_api_error_accepts_does_not_exist():
    validate_api_error({"kind": "DoesNotExist"})
    assert not ApiErrorValidator().is_valid({"kind": "Other"})


def test_iter_errors_returns_all_errors():
    """Проверка получения всех ошибок валидации."""
    validator = GenerateMobiusRequestValidator()

    invalid_data = {
        "inputs": ["inf"],  # minItems: 3 - НАРУШЕНИЕ
        "curves": "xy",  # type: array - НАРУШЕНИЕ
        "extra": True,  # additionalProperties - НАРУШЕНИЕ
    }  # outputs отсутствует - НАРУШЕНИЕ

    errors = list(validator.iter_errors(invalid_data))
    assert len(errors) >= 4


# =============================================================================
# TESTS - PYDANTIC INTEGRATION
# =============================================================================


def test_request_model_roundtrips_through_schema(valid_request):
    """Модель запроса порождает JSON, соответствующий схеме."""
    request = GenerateMobiusRequest.model_validate(valid_request)
    assert request.inputs[1] == INF
    assert request.outputs[0] == ext_complex(0.0, 1.0)

    validate_generate_mobius_request(request.model_dump(mode="json"))


def test_response_model_generates_valid_json():
    response = GenerateMobiusResponse.from_curves(
        {"xy": [Line(point=5 + 0j, slope=-2j), Circle(center=1j, radius=2.0)]}
    )
    validate_generate_mobius_response(response.model_dump(mode="json"))


def test_curve_model_generates_valid_json():
    model = curve_to_model(Circle(center=0.5 - 0.5j, radius=0.25))
    validate_curve(model.model_dump(mode="json"))


def test_api_error_model_generates_valid_json():
    validate_api_error(ApiError().model_dump(mode="json"))
