"""
Numerical Safeguards — Epsilon-параметры и предикаты для complex арифметики

Модуль собирает в одном месте все численные допуски движка Möbius:
- Машинный epsilon для double precision
- Допуск вырожденности матрицы преобразования (|det T| < eps)
- Относительный допуск различения line/circle при восстановлении кривой
- Предикаты конечности для float и complex
- Epsilon-сравнения float

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Вся арифметика выполняется в double precision (Python float/complex)
2. Допуски подобраны эмпирически и не пересчитываются
3. Смена точности требует пересмотра всех констант этого модуля
"""

import cmath
import math
import sys
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Машинный epsilon для f64
EPS_MACHINE: Final[float] = sys.float_info.epsilon

# Допуск вырожденности матрицы преобразования
# compute_mobius_transform отказывает при |det T| < EPS_TRANSFORM_DET
EPS_TRANSFORM_DET: Final[float] = EPS_MACHINE * 100.0

# Относительный допуск для различения line/circle в matrix_to_curve
# Если ratio_sqr ≈ 1 в пределах допуска → кривая считается прямой
LINE_RATIO_REL_TOL: Final[float] = 1e-3


# =============================================================================
# ПРЕДИКАТЫ КОНЕЧНОСТИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


def is_valid_complex(value: complex) -> bool:
    """
    Проверка, что обе компоненты complex конечны.

    Examples:
        >>> is_valid_complex(1 + 2j)
        True
        >>> is_valid_complex(complex(float('inf'), 0.0))
        False
        >>> is_valid_complex(complex(0.0, float('nan')))
        False
    """
    return cmath.isfinite(value)


def norm_sqr(value: complex) -> float:
    """Квадрат модуля complex числа: re² + im²."""
    return value.real * value.real + value.imag * value.imag


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def is_zero(value: float, tol: float = EPS_MACHINE) -> bool:
    """
    Проверка, близко ли значение к нулю с учётом толерантности.

    Args:
        value: Проверяемое значение
        tol: Абсолютная толерантность (default: EPS_MACHINE)

    Returns:
        True если abs(value) <= tol
    """
    return abs(value) <= tol


def is_close_relative(a: float, b: float, rel_tol: float) -> bool:
    """
    Относительное сравнение float.

    Алгоритм:
        abs(a - b) <= rel_tol * max(abs(a), abs(b))

    Args:
        a: Первое значение
        b: Второе значение
        rel_tol: Относительная толерантность (должна быть > 0)

    Returns:
        True если значения близки с учётом относительной толерантности

    Raises:
        ValueError: Если rel_tol <= 0

    Examples:
        >>> is_close_relative(1.0, 0.9995, 1e-3)
        True
        >>> is_close_relative(1.0, 0.99, 1e-3)
        False
    """
    if rel_tol <= 0:
        raise ValueError(f"rel_tol must be positive, got {rel_tol}")

    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=0.0)
