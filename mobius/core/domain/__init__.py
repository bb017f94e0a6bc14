"""
Domain models and value objects.

Contains the extended complex plane point (ExtComplex) and the curve variants
(Line, Circle) produced by the Möbius engine.
"""

from mobius.core.domain.curve import Circle, Curve, Line
from mobius.core.domain.ext_complex import (
    INF,
    ExtComplex,
    Finite,
    Infinity,
    ext_complex,
    from_complex,
)

__all__ = [
    # ExtComplex
    "ExtComplex",
    "Finite",
    "Infinity",
    "INF",
    "ext_complex",
    "from_complex",
    # Curve
    "Curve",
    "Line",
    "Circle",
]
