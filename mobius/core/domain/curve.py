"""
Curve — Окружность или прямая

Möbius преобразование переводит обобщённую окружность в обобщённую окружность,
поэтому результат всегда один из двух вариантов:
- Line: множество точек point + slope * t, t ∈ ℝ
- Circle: множество точек |z − center| = radius

Кривые — чистые value-объекты, создаются только matrix_to_curve и не хранят
ссылку на исходную матрицу.
"""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Line:
    """Прямая point + slope * t."""

    point: complex
    slope: complex


@dataclass(frozen=True)
class Circle:
    """Окружность |z − center| = radius (radius >= 0)."""

    center: complex
    radius: float


Curve = Union[Line, Circle]
