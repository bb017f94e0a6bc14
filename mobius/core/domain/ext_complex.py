"""
ExtComplex — Точка расширенной комплексной плоскости (сфера Римана)

Замкнутый sum type из двух вариантов:
- Finite: обычное complex число
- Infinity: бесконечно удалённая точка (singleton INF)

Отдельный тип нужен, так как бесконечные float не представимы в JSON.
Инвариант: Finite, полученный через from_complex, всегда содержит конечные
компоненты; нечисловые и бесконечные значения схлопываются в INF.

Равенство — точное (без epsilon). Сравнение "одна и та же ли это точка"
с допуском — ответственность вызывающего кода.
"""

import cmath
from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Finite:
    """Конечная точка плоскости."""

    value: complex

    def is_inf(self) -> bool:
        return False

    def __repr__(self) -> str:
        return f"Finite({self.value.real!r}, {self.value.imag!r})"


@dataclass(frozen=True)
class Infinity:
    """Бесконечно удалённая точка."""

    def is_inf(self) -> bool:
        return True

    def __repr__(self) -> str:
        return "INF"


INF = Infinity()

ExtComplex = Union[Finite, Infinity]


# =============================================================================
# КОНСТРУКТОРЫ
# =============================================================================


def ext_complex(re: float, im: float) -> Finite:
    """
    Конечное значение из вещественной и мнимой частей.

    Проверки не выполняются: NaN/Inf компоненты допустимы, но не рекомендуются.
    Кодек сериализует бесконечные компоненты как "inf", а NaN отклоняет.
    """
    return Finite(complex(re, im))


def from_complex(value: complex) -> ExtComplex:
    """
    Нормализующий конструктор.

    Returns:
        Finite(value) если обе компоненты конечны, иначе INF

    Examples:
        >>> from_complex(1 + 2j)
        Finite(1.0, 2.0)
        >>> from_complex(complex(float('inf'), 0.0))
        INF
    """
    if cmath.isfinite(value):
        return Finite(value)
    return INF
