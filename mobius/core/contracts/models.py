"""
Wire Models — Pydantic модели запроса/ответа generate_mobius_transformation

Immutable Pydantic модели, соответствующие JSON Schema контрактам
(mobius/core/contracts/schema/*.json).

Формат кривой — tagged object:
    {"type": "line", "point": [re, im], "slope": [re, im]}
    {"type": "circle", "center": [re, im], "radius": r}

Core-значения (Line/Circle) и wire-модели конвертируются через
curve_to_model / model_to_curve; арифметическое ядро о pydantic не знает.
"""

import math
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

from mobius.core.contracts.codec import WireComplex, WireExtComplex
from mobius.core.domain.curve import Circle, Curve, Line
from mobius.core.exceptions import KIND_DOES_NOT_EXIST, InvalidValueError
from mobius.core.math.numerical_safeguards import is_valid_complex, is_valid_float


# =============================================================================
# CURVE MODELS
# =============================================================================


class LineModel(BaseModel):
    """Прямая point + slope * t."""

    type: Literal["line"] = "line"
    point: WireComplex = Field(..., description="Точка на прямой")
    slope: WireComplex = Field(..., description="Направление прямой")

    model_config = {"frozen": True}


class CircleModel(BaseModel):
    """Окружность |z − center| = radius."""

    type: Literal["circle"] = "circle"
    center: WireComplex = Field(..., description="Центр окружности")
    radius: float = Field(..., ge=0, description="Радиус (вещественный, >= 0)")

    model_config = {"frozen": True}


CurveModel = Annotated[Union[LineModel, CircleModel], Field(discriminator="type")]


def _check_finite(*values: complex) -> None:
    """
    Проверка представимости значений кривой в JSON.

    Переполнение при переносе кривой даёт NaN/Inf компоненты; это ошибка
    сериализации, а не отсутствие преобразования.

    Raises:
        InvalidValueError: Если компонента NaN или бесконечна
    """
    for value in values:
        if is_valid_complex(value):
            continue
        if math.isnan(value.real) or math.isnan(value.imag):
            raise InvalidValueError("value contains nan")
        raise InvalidValueError("value contains inf")


def curve_to_model(curve: Curve) -> Union[LineModel, CircleModel]:
    """
    Core Curve → wire модель.

    Raises:
        InvalidValueError: Если параметры кривой не конечны
        TypeError: Если curve не Line и не Circle
    """
    if isinstance(curve, Line):
        _check_finite(curve.point, curve.slope)
        return LineModel(point=curve.point, slope=curve.slope)
    if isinstance(curve, Circle):
        _check_finite(curve.center)
        if not is_valid_float(curve.radius):
            raise InvalidValueError(
                "value contains nan" if math.isnan(curve.radius) else "value contains inf"
            )
        return CircleModel(center=curve.center, radius=curve.radius)
    raise TypeError(f"unsupported curve type: {type(curve).__name__}")


def model_to_curve(model: Union[LineModel, CircleModel]) -> Curve:
    """Wire модель → core Curve."""
    if isinstance(model, LineModel):
        return Line(point=model.point, slope=model.slope)
    return Circle(center=model.center, radius=model.radius)


# =============================================================================
# REQUEST / RESPONSE
# =============================================================================


class GenerateMobiusRequest(BaseModel):
    """
    Запрос generate_mobius_transformation.

    Три входные точки, три выходные точки и имена запрошенных семейств кривых.
    """

    inputs: tuple[WireExtComplex, WireExtComplex, WireExtComplex] = Field(
        ..., description="Исходные точки"
    )
    outputs: tuple[WireExtComplex, WireExtComplex, WireExtComplex] = Field(
        ..., description="Образы исходных точек"
    )
    curves: list[str] = Field(
        default_factory=list, description="Имена семейств кривых (неизвестные игнорируются)"
    )

    model_config = {"frozen": True, "extra": "forbid"}


class GenerateMobiusResponse(BaseModel):
    """
    Ответ generate_mobius_transformation.

    Содержит только семейства, существующие в таблице; порядок кривых
    совпадает с порядком матриц семейства.
    """

    curves: dict[str, list[CurveModel]] = Field(default_factory=dict)

    model_config = {"frozen": True}

    @classmethod
    def from_curves(cls, curves: dict[str, list[Curve]]) -> "GenerateMobiusResponse":
        return cls(
            curves={
                name: [curve_to_model(curve) for curve in family]
                for name, family in curves.items()
            }
        )

    def curve_values(self, name: str) -> list[Curve]:
        """Core Curve значения семейства name (KeyError если семейство не вычислялось)."""
        return [model_to_curve(model) for model in self.curves[name]]


class ApiError(BaseModel):
    """Ошибка API: {"kind": "DoesNotExist"}."""

    kind: Literal["DoesNotExist"] = KIND_DOES_NOT_EXIST

    model_config = {"frozen": True}
