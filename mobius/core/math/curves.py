"""
Curves — Восстановление окружности/прямой из матричного представления

Матрица [[m00, m01], [m10, m11]] задаёт обобщённую окружность
    |(m00 z + m01) / (m10 z + m11)| = 1
т.е. множество точек, отношение расстояний от которых до
maj_pt = −maj1/maj0 и min_pt = −min1/min0 постоянно (окружность Аполлония).

Случаи:
1. Ведущий коэффициент одной строки ≈ 0 → окружность с центром в maj_pt
2. Отношение норм ведущих коэффициентов ≈ 1 → прямая (серединный перпендикуляр)
3. Иначе → окружность Аполлония

Предусловие: матрица невырождена (проверяет вызывающий код).
"""

import math

from mobius.core.domain.curve import Circle, Curve, Line
from mobius.core.math.matrix import Matrix2, entries
from mobius.core.math.numerical_safeguards import (
    LINE_RATIO_REL_TOL,
    is_close_relative,
    is_zero,
    norm_sqr,
)


def matrix_to_curve(m: Matrix2, line_rel_tol: float = LINE_RATIO_REL_TOL) -> Curve:
    """
    Преобразование 2×2 матрицы обобщённой окружности в Line или Circle.

    Args:
        m: Невырожденная матрица |(m00 z + m01)/(m10 z + m11)| = 1
        line_rel_tol: Относительный допуск ratio_sqr ≈ 1 для прямой
            (default: LINE_RATIO_REL_TOL = 0.001)

    Returns:
        Line или Circle

    Examples:
        >>> from mobius.core.math.matrix import matrix2
        >>> matrix_to_curve(matrix2(1, 0, 0, 5)).radius
        5.0
    """
    m00, m01, m10, m11 = entries(m)

    # min: строка с меньшим ведущим коэффициентом, maj: вторая
    min_norm_sqr = norm_sqr(m00)
    maj_norm_sqr = norm_sqr(m10)
    if min_norm_sqr <= maj_norm_sqr:
        min0, min1, maj0, maj1 = m00, m01, m10, m11
    else:
        min_norm_sqr, maj_norm_sqr = maj_norm_sqr, min_norm_sqr
        maj0, maj1, min0, min1 = m00, m01, m10, m11

    # |min1| / |maj0 z + maj1| = 1 → окружность вокруг −maj1/maj0
    if is_zero(min_norm_sqr):
        return Circle(
            center=-maj1 / maj0,
            radius=math.sqrt(norm_sqr(min1) / maj_norm_sqr),
        )

    maj_pt = -maj1 / maj0
    min_pt = -min1 / min0
    ratio_sqr = min_norm_sqr / maj_norm_sqr  # <= 1

    if is_close_relative(1.0, ratio_sqr, line_rel_tol):
        return Line(
            point=0.5 * (maj_pt + min_pt),
            slope=(maj_pt - min_pt) * 1j,
        )

    ratio = math.sqrt(ratio_sqr)
    affine_coeff = 1.0 / (1.0 - ratio_sqr)
    return Circle(
        center=affine_coeff * maj_pt + (1.0 - affine_coeff) * min_pt,
        radius=ratio * affine_coeff * abs(maj_pt - min_pt),
    )
