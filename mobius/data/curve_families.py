"""
Curve Families — Стандартные наборы кривых (сетки) для визуализации

Каждое семейство — упорядоченная последовательность матриц обобщённых окружностей
    |(m00 z + m01) / (m10 z + m11)| = 1

Семейства:
- "xy":    декартова сетка, прямые x = −5..5 и y = −5..5
- "polar": полярная сетка, окружности |z| = 1..6 и лучи через 0 с шагом 15°

Прямая x = k задаётся как серединный перпендикуляр точек k + 1 и k − 1:
    |z − (k + 1)| = |z − (k − 1)|  →  [[1, −1 − k], [1, 1 − k]]
Окружность |z| = r:
    |z / r| = 1                    →  [[1, 0], [0, r]]

Таблицы неизменяемы: mapping read-only, матрицы с writeable=False.
"""

import cmath
import math
from types import MappingProxyType
from typing import Final, Mapping, Optional

from mobius.core.math.matrix import Matrix2, frozen, matrix2

GRID_EXTENT: Final[int] = 5
POLAR_RADII: Final[tuple[int, ...]] = (1, 2, 3, 4, 5, 6)
POLAR_ANGLE_STEP_DEG: Final[int] = 15


def _bisector(unit: complex, offset: complex) -> Matrix2:
    """Серединный перпендикуляр точек offset + unit и offset − unit."""
    return frozen(matrix2(1, -unit - offset, 1, unit - offset))


def _xy_gridlines() -> tuple[Matrix2, ...]:
    steps = range(GRID_EXTENT, -GRID_EXTENT - 1, -1)
    vertical = [_bisector(1 + 0j, complex(k, 0)) for k in steps]
    horizontal = [_bisector(1j, complex(0, k)) for k in steps]
    return tuple(vertical + horizontal)


def _polar_grid() -> tuple[Matrix2, ...]:
    circles = [frozen(matrix2(1, 0, 0, r)) for r in POLAR_RADII]
    rays = []
    for angle_deg in range(0, 180, POLAR_ANGLE_STEP_DEG):
        # нормаль к лучу под углом angle_deg
        normal = cmath.exp(1j * math.radians(angle_deg + 90))
        rays.append(_bisector(normal, 0j))
    return tuple(circles + rays)


XY_GRIDLINES: Final[tuple[Matrix2, ...]] = _xy_gridlines()

POLAR_GRID: Final[tuple[Matrix2, ...]] = _polar_grid()

CURVE_FAMILIES: Final[Mapping[str, tuple[Matrix2, ...]]] = MappingProxyType(
    {
        "xy": XY_GRIDLINES,
        "polar": POLAR_GRID,
    }
)


def get_curve_family(
    name: str,
    families: Mapping[str, tuple[Matrix2, ...]] = CURVE_FAMILIES,
) -> Optional[tuple[Matrix2, ...]]:
    """
    Семейство кривых по имени.

    Returns:
        Последовательность матриц или None для неизвестного имени (не ошибка)
    """
    return families.get(name)
