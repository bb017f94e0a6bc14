"""
Matrix2 — Алгебра комплексных 2×2 матриц

Матрица [[a, b], [c, d]] используется в двух ролях:
- Möbius преобразование z ↦ (a z + b) / (c z + d)
- Обобщённая окружность |(a z + b) / (c z + d)| = 1

Обе роли разделяют одну алгебру: произведение, определитель, обращение.
Представление — numpy.ndarray формы (2, 2) с dtype complex128.
"""

from typing import Optional, TypeAlias

import numpy as np

from mobius.core.math.numerical_safeguards import EPS_TRANSFORM_DET

# 2×2 complex128 ndarray
Matrix2: TypeAlias = np.ndarray

MATRIX_DTYPE = np.complex128


# =============================================================================
# КОНСТРУИРОВАНИЕ
# =============================================================================


def matrix2(a: complex, b: complex, c: complex, d: complex) -> Matrix2:
    """
    Построение матрицы по строкам: [[a, b], [c, d]].

    Examples:
        >>> matrix2(1, 0, 0, 1).shape
        (2, 2)
    """
    return np.array([[a, b], [c, d]], dtype=MATRIX_DTYPE)


def identity() -> Matrix2:
    """Единичная матрица (тождественное преобразование)."""
    return np.eye(2, dtype=MATRIX_DTYPE)


def frozen(m: Matrix2) -> Matrix2:
    """
    Read-only копия матрицы.

    Используется для статических таблиц, чтобы исключить случайную мутацию.
    """
    result = np.array(m, dtype=MATRIX_DTYPE)
    result.flags.writeable = False
    return result


def entries(m: Matrix2) -> tuple[complex, complex, complex, complex]:
    """Элементы (a, b, c, d) как Python complex."""
    return (
        complex(m[0, 0]),
        complex(m[0, 1]),
        complex(m[1, 0]),
        complex(m[1, 1]),
    )


# =============================================================================
# ОПРЕДЕЛИТЕЛЬ И ОБРАЩЕНИЕ
# =============================================================================


def determinant(m: Matrix2) -> complex:
    """Определитель ad − bc."""
    a, b, c, d = entries(m)
    return a * d - b * c


def try_inverse(m: Matrix2) -> Optional[Matrix2]:
    """
    Обращение 2×2 матрицы.

    Returns:
        Обратная матрица или None, если определитель точно равен нулю.
        Почти вырожденные матрицы обращаются; проверка по допуску — у вызывающего.
    """
    a, b, c, d = entries(m)
    det = a * d - b * c
    if det == 0:
        return None

    return matrix2(d / det, -b / det, -c / det, a / det)


def is_singular(m: Matrix2, eps: float = EPS_TRANSFORM_DET) -> bool:
    """
    Проверка вырожденности по модулю определителя.

    Args:
        m: Матрица
        eps: Порог |det| (default: EPS_TRANSFORM_DET)

    Returns:
        True если |det(m)| < eps
    """
    return abs(determinant(m)) < eps
