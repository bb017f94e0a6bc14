"""
Möbius Transform — Построение и применение дробно-линейных преобразований

Модуль вычисляет преобразование z ↦ (a z + b) / (c z + d) по трём парам
вход → выход и применяет его к точкам расширенной плоскости.

Алгоритм (каноническая форма 0, ∞, 1):
    M_in  = map_to_canonical(inputs)    # inputs  → (0, ∞, 1)
    M_out = map_to_canonical(outputs)   # outputs → (0, ∞, 1)
    T     = M_out⁻¹ · M_in              # inputs  → outputs

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Проверка различности точек заранее НЕ выполняется: совпадающие точки и
   повторные INF поглощаются арифметикой и дают вырожденную матрицу
2. Вырожденность обнаруживается только по обратимости M_out и |det T|
3. Вычисление в точке никогда не возвращает NaN: любой неконечный
   результат схлопывается в INF
"""

import logging
from typing import Optional, Sequence

from mobius.core.domain.ext_complex import INF, ExtComplex, Finite, from_complex
from mobius.core.math.matrix import (
    Matrix2,
    determinant,
    entries,
    is_singular,
    matrix2,
    try_inverse,
)
from mobius.core.math.numerical_safeguards import EPS_TRANSFORM_DET

logger = logging.getLogger(__name__)


# =============================================================================
# АРИФМЕТИКА МАСШТАБНЫХ МНОЖИТЕЛЕЙ
# =============================================================================


def _scale_factor(minuend: ExtComplex, subtrahend: ExtComplex) -> complex:
    """
    Разность minuend − subtrahend для масштабного множителя строки.

    Правила для бесконечных операндов:
    - ∞ − ∞ → 0 (строка обнуляется, итоговая матрица вырождена)
    - ровно один операнд ∞ → 1 (множитель в формуле не нужен)
    """
    if isinstance(minuend, Finite) and isinstance(subtrahend, Finite):
        return minuend.value - subtrahend.value

    if minuend.is_inf() and subtrahend.is_inf():
        return 0j
    return 1 + 0j


def _row(z: ExtComplex, scale: complex) -> tuple[complex, complex]:
    """Строка (z − z_k) * scale; для z_k = ∞ строка [0, 1] * scale."""
    if isinstance(z, Finite):
        return (scale, -z.value * scale)
    return (0j, scale)


# =============================================================================
# КАНОНИЧЕСКАЯ ФОРМА
# =============================================================================


def map_to_canonical(z1: ExtComplex, z2: ExtComplex, z3: ExtComplex) -> Matrix2:
    """
    Матрица преобразования, переводящего z1 ↦ 0, z2 ↦ ∞, z3 ↦ 1.

    Формула:
        T(z) = ((z − z1)(z3 − z2)) / ((z − z2)(z3 − z1))

    Вырожденные входы (совпадающие точки, повторные INF) не отклоняются:
    результатом будет вырожденная матрица.

    Args:
        z1: Точка, переходящая в 0
        z2: Точка, переходящая в ∞
        z3: Точка, переходящая в 1

    Returns:
        2×2 complex матрица

    Examples:
        >>> from mobius.core.domain import INF, ext_complex
        >>> m = map_to_canonical(ext_complex(0, 0), INF, ext_complex(1, 0))
        >>> bool((m == matrix2(1, 0, 0, 1)).all())
        True
    """
    top = _row(z1, _scale_factor(z3, z2))
    bottom = _row(z2, _scale_factor(z3, z1))
    return matrix2(top[0], top[1], bottom[0], bottom[1])


# =============================================================================
# ПРЕОБРАЗОВАНИЕ ПО ТРЁМ ПАРАМ
# =============================================================================


def compute_mobius_transform(
    inputs: Sequence[ExtComplex],
    outputs: Sequence[ExtComplex],
    eps: float = EPS_TRANSFORM_DET,
) -> Optional[Matrix2]:
    """
    Единственное Möbius преобразование T с T(inputs[i]) = outputs[i].

    Args:
        inputs: Три исходные точки
        outputs: Три целевые точки
        eps: Порог |det T| (default: EPS_TRANSFORM_DET = 100 * machine eps)

    Returns:
        Матрица T или None, если преобразование не существует
        (выходные или входные точки не попарно различны в пределах eps)

    Raises:
        ValueError: Если передано не ровно три входа или три выхода
    """
    if len(inputs) != 3 or len(outputs) != 3:
        raise ValueError(
            f"exactly 3 inputs and 3 outputs required, got {len(inputs)} and {len(outputs)}"
        )

    m_in = map_to_canonical(*inputs)
    m_out = map_to_canonical(*outputs)

    m_out_inv = try_inverse(m_out)
    if m_out_inv is None:
        logger.debug("Canonical matrix of outputs %s is singular", list(outputs))
        return None

    tform = m_out_inv @ m_in

    if is_singular(tform, eps):
        logger.debug(
            "Transform rejected: |det T| = %.3e < eps = %.3e", abs(determinant(tform)), eps
        )
        return None

    return tform


# =============================================================================
# ВЫЧИСЛЕНИЕ В ТОЧКЕ
# =============================================================================


def apply_mobius_transform(tform: Matrix2, point: ExtComplex) -> ExtComplex:
    """
    Значение T(point).

    - point = ∞ → a / c (предел)
    - иначе (a p + b) / (c p + d)
    - деление на ноль, 0/0 и переполнение → INF

    Args:
        tform: Матрица преобразования
        point: Точка расширенной плоскости

    Returns:
        Образ точки (INF для любого неконечного результата)
    """
    a, b, c, d = entries(tform)

    if isinstance(point, Finite):
        numerator = a * point.value + b
        denominator = c * point.value + d
    else:
        numerator = a
        denominator = c

    try:
        value = numerator / denominator
    except ZeroDivisionError:
        return INF

    return from_complex(value)
