"""
Static curve-family tables consumed by the command layer.
"""

from mobius.data.curve_families import (
    CURVE_FAMILIES,
    POLAR_GRID,
    XY_GRIDLINES,
    get_curve_family,
)

__all__ = [
    "CURVE_FAMILIES",
    "POLAR_GRID",
    "XY_GRIDLINES",
    "get_curve_family",
]
