"""
Codec — Wire-кодирование ExtComplex и complex

Отдельный слой-адаптер между арифметическим ядром и JSON:
- complex  ↔ [re, im]
- ExtComplex ↔ "inf" | [re, im]

Правила ExtComplex:
1. INF и Finite с бесконечной компонентой → "inf"
2. Finite с NaN компонентой → InvalidValueError("value contains nan")
3. "inf" → INF
4. [re, im] → Finite, но число вне диапазона double (float inf после
   JSON-парсинга или int, не помещающийся во float) → INF
5. Любая другая форма → ValueError

Аннотированные типы WireComplex / WireExtComplex подключают кодек к pydantic моделям.
"""

import math
from numbers import Real
from typing import Annotated, Any, Final, Union

from pydantic import PlainSerializer, PlainValidator

from mobius.core.domain.ext_complex import INF, ExtComplex, Finite, Infinity
from mobius.core.exceptions import InvalidValueError

INF_MARKER: Final[str] = "inf"

EXPECTING_EXT_COMPLEX: Final[str] = 'the string "inf" or a tuple of 2 numbers'
EXPECTING_COMPLEX: Final[str] = "a tuple of 2 finite numbers"


# =============================================================================
# ВСПОМОГАТЕЛЬНЫЕ
# =============================================================================


def _is_number(value: Any) -> bool:
    # bool является подклассом int, но не числом в JSON
    return isinstance(value, Real) and not isinstance(value, bool)


def _to_float(value: Real) -> float:
    """float(value); int вне диапазона double → inf."""
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def _pair(data: Any) -> tuple[Real, Real] | None:
    if isinstance(data, (list, tuple)) and len(data) == 2:
        if all(_is_number(part) for part in data):
            return data[0], data[1]
    return None


# =============================================================================
# COMPLEX
# =============================================================================


def encode_complex(value: complex) -> list[float]:
    """
    complex → [re, im].

    Raises:
        InvalidValueError: Если компонента не конечна (не представима в JSON)
    """
    if math.isnan(value.real) or math.isnan(value.imag):
        raise InvalidValueError("value contains nan")
    if math.isinf(value.real) or math.isinf(value.imag):
        raise InvalidValueError("value contains inf")
    return [value.real, value.imag]


def decode_complex(data: Any) -> complex:
    """
    [re, im] → complex.

    Raises:
        ValueError: Если data не пара конечных чисел
    """
    if isinstance(data, complex):
        value = data
    else:
        pair = _pair(data)
        if pair is None:
            raise ValueError(f"invalid value {data!r}, expected {EXPECTING_COMPLEX}")
        value = complex(_to_float(pair[0]), _to_float(pair[1]))

    if not (math.isfinite(value.real) and math.isfinite(value.imag)):
        raise ValueError(f"invalid value {data!r}, expected {EXPECTING_COMPLEX}")
    return value


# =============================================================================
# EXTCOMPLEX
# =============================================================================


def encode_ext_complex(value: ExtComplex) -> Union[str, list[float]]:
    """
    ExtComplex → "inf" | [re, im].

    Examples:
        >>> from mobius.core.domain import ext_complex
        >>> encode_ext_complex(ext_complex(1.0, 2.0))
        [1.0, 2.0]
        >>> encode_ext_complex(ext_complex(0.0, float('inf')))
        'inf'

    Raises:
        InvalidValueError: Если значение содержит NaN
    """
    if isinstance(value, Infinity):
        return INF_MARKER

    re, im = value.value.real, value.value.imag
    if math.isnan(re) or math.isnan(im):
        raise InvalidValueError("value contains nan")
    if math.isinf(re) or math.isinf(im):
        return INF_MARKER
    return [re, im]


def decode_ext_complex(data: Any) -> ExtComplex:
    """
    "inf" | [re, im] → ExtComplex.

    Уже декодированные Finite/Infinity возвращаются без изменений.

    Examples:
        >>> decode_ext_complex("inf")
        INF
        >>> decode_ext_complex([1, 1e1000])
        INF
        >>> decode_ext_complex([1, 2.0])
        Finite(1.0, 2.0)

    Raises:
        ValueError: Если data не "inf" и не пара чисел, либо содержит NaN
    """
    if isinstance(data, (Finite, Infinity)):
        return data

    if isinstance(data, str):
        if data == INF_MARKER:
            return INF
        raise ValueError(f"invalid value {data!r}, expected {EXPECTING_EXT_COMPLEX}")

    pair = _pair(data)
    if pair is None:
        raise ValueError(f"invalid value {data!r}, expected {EXPECTING_EXT_COMPLEX}")

    re, im = _to_float(pair[0]), _to_float(pair[1])
    if math.isnan(re) or math.isnan(im):
        raise ValueError(f"invalid value {data!r}, expected {EXPECTING_EXT_COMPLEX}")
    if math.isinf(re) or math.isinf(im):
        return INF
    return Finite(complex(re, im))


# =============================================================================
# PYDANTIC ТИПЫ
# =============================================================================

WireComplex = Annotated[
    complex,
    PlainValidator(decode_complex),
    PlainSerializer(encode_complex),
]

WireExtComplex = Annotated[
    Union[Finite, Infinity],
    PlainValidator(decode_ext_complex),
    PlainSerializer(encode_ext_complex),
]
