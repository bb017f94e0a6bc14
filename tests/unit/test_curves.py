"""
Тесты для восстановления кривых из матриц (matrix_to_curve)

Проверяет:
1. Окружность при нулевом ведущем коэффициенте
2. Окружность Аполлония
3. Прямую при ratio_sqr ≈ 1 и граница допуска 0.001
4. Согласованность с переносом кривой Möbius преобразованием
"""

import cmath
import math

import pytest

from mobius.core.domain import INF, Circle, Finite, Line, ext_complex
from mobius.core.math.curves import matrix_to_curve
from mobius.core.math.matrix import matrix2
from mobius.core.math.mobius_tform import apply_mobius_transform, compute_mobius_transform


def _distance_to_curve(curve, point: complex) -> float:
    if isinstance(curve, Circle):
        return abs(abs(point - curve.center) - curve.radius)
    # расстояние до прямой point + slope * t
    direction = curve.slope / abs(curve.slope)
    return abs(((point - curve.point) / direction).imag)


# =============================================================================
# ТЕСТЫ ОКРУЖНОСТЕЙ
# =============================================================================


class TestCircleRecovery:
    """Окружности"""

    def test_centered_circle(self) -> None:
        """|z / 5| = 1 → окружность радиуса 5 с центром 0"""
        curve = matrix_to_curve(matrix2(1, 0, 0, 5))

        assert isinstance(curve, Circle)
        assert curve.center == 0
        assert curve.radius == 5.0

    def test_zero_leading_in_second_row(self) -> None:
        """Нулевой ведущий коэффициент во второй строке: |(z − 2i) / 3| = 1"""
        curve = matrix_to_curve(matrix2(1, -2j, 0, 3))

        assert isinstance(curve, Circle)
        assert curve.center == pytest.approx(2j)
        assert curve.radius == pytest.approx(3.0)

    def test_zero_leading_in_first_row(self) -> None:
        """Нулевой ведущий коэффициент в первой строке: |2 / (z − 1)| = 1"""
        curve = matrix_to_curve(matrix2(0, 2, 1, -1))

        assert isinstance(curve, Circle)
        assert curve.center == pytest.approx(1.0)
        assert curve.radius == pytest.approx(2.0)

    def test_apollonius_circle(self) -> None:
        """|z − 2| = 2 |z + 1| → окружность с центром −2 и радиусом 2"""
        curve = matrix_to_curve(matrix2(1, -2, 2, 2))

        assert isinstance(curve, Circle)
        assert curve.center == pytest.approx(-2.0)
        assert curve.radius == pytest.approx(2.0)

    def test_apollonius_is_row_order_independent(self) -> None:
        """Перестановка строк задаёт то же множество |w| = 1 ↔ |1/w| = 1"""
        first = matrix_to_curve(matrix2(1, -2, 2, 2))
        second = matrix_to_curve(matrix2(2, 2, 1, -2))

        assert second.center == pytest.approx(first.center)
        assert second.radius == pytest.approx(first.radius)

    def test_radius_is_non_negative(self) -> None:
        curve = matrix_to_curve(matrix2(-3, 1j, 1, 0.5))
        assert isinstance(curve, Circle)
        assert curve.radius >= 0.0


# =============================================================================
# ТЕСТЫ ПРЯМЫХ
# =============================================================================


class TestLineRecovery:
    """Прямые"""

    def test_vertical_gridline(self) -> None:
        """|z − 6| = |z − 4| → прямая x = 5"""
        curve = matrix_to_curve(matrix2(1, -6, 1, -4))

        assert isinstance(curve, Line)
        assert curve.point == 5
        assert curve.slope == -2j

    def test_line_points_are_equidistant(self) -> None:
        curve = matrix_to_curve(matrix2(1, -1 - 1j, 1, 2 + 3j))
        assert isinstance(curve, Line)

        for t in (-2.0, 0.0, 0.5, 3.0):
            z = curve.point + curve.slope * t
            assert abs(z - (1 + 1j)) == pytest.approx(abs(z - (-2 - 3j)))

    def test_within_tolerance_is_line(self) -> None:
        """ratio_sqr ≈ 0.9992 → в пределах 0.001 → прямая"""
        assert isinstance(matrix_to_curve(matrix2(1, -1, 1.0004, 1)), Line)

    def test_outside_tolerance_is_circle(self) -> None:
        """ratio_sqr ≈ 0.98 → окружность"""
        assert isinstance(matrix_to_curve(matrix2(1, -1, 1.01, 1)), Circle)

    def test_custom_tolerance(self) -> None:
        """Допуск настраивается"""
        m = matrix2(1, -1, 1.01, 1)
        assert isinstance(matrix_to_curve(m, line_rel_tol=0.05), Line)


# =============================================================================
# ТЕСТЫ ПЕРЕНОСА КРИВЫХ
# =============================================================================


class TestCurveTransport:
    """Кривая C · T⁻¹ содержит образы точек кривой C"""

    INPUTS = (ext_complex(0.0, 0.0), ext_complex(1.0, 0.0), INF)
    OUTPUTS = (ext_complex(0.0, 1.0), ext_complex(2.0, 0.0), ext_complex(3.0, 1.0))

    @pytest.fixture
    def transforms(self):
        """Прямое и обратное преобразования"""
        forward = compute_mobius_transform(self.INPUTS, self.OUTPUTS)
        backward = compute_mobius_transform(self.OUTPUTS, self.INPUTS)
        assert forward is not None and backward is not None
        return forward, backward

    @pytest.mark.parametrize("k", [-3.0, 0.0, 2.0])
    def test_vertical_line_image(self, transforms, k: float) -> None:
        forward, backward = transforms
        # x = k
        curve = matrix_to_curve(matrix2(1, -1 - k, 1, 1 - k) @ backward)

        for t in (-4.0, -1.0, 0.5, 2.0, 7.0):
            image = apply_mobius_transform(forward, ext_complex(k, t))
            assert isinstance(image, Finite)
            assert _distance_to_curve(curve, image.value) < 1e-8

    @pytest.mark.parametrize("radius", [1.0, 2.5, 6.0])
    def test_circle_image(self, transforms, radius: float) -> None:
        forward, backward = transforms
        curve = matrix_to_curve(matrix2(1, 0, 0, radius) @ backward)

        for angle_deg in range(0, 360, 45):
            z = radius * cmath.exp(1j * math.radians(angle_deg))
            image = apply_mobius_transform(forward, ext_complex(z.real, z.imag))
            assert isinstance(image, Finite)
            assert _distance_to_curve(curve, image.value) < 1e-8

    def test_curve_through_pole_becomes_line(self, transforms) -> None:
        """Кривая через полюс T переходит в прямую"""
        forward, backward = transforms
        # полюс T: T(pole) = ∞, т.е. pole = T⁻¹(∞)
        pole = apply_mobius_transform(backward, INF)
        assert isinstance(pole, Finite)

        # окружность с центром 0 через полюс
        curve = matrix_to_curve(matrix2(1, 0, 0, abs(pole.value)) @ backward)
        assert isinstance(curve, Line)
