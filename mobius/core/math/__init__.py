"""
Core math modules для Möbius engine

Математические примитивы и численные алгоритмы с явными epsilon-проверками.
"""

# Numerical Safeguards
from mobius.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_MACHINE,
    EPS_TRANSFORM_DET,
    LINE_RATIO_REL_TOL,
    # Predicates
    is_close_relative,
    is_valid_complex,
    is_valid_float,
    is_zero,
    norm_sqr,
)

# Matrix algebra
from mobius.core.math.matrix import (
    Matrix2,
    determinant,
    entries,
    frozen,
    identity,
    is_singular,
    matrix2,
    try_inverse,
)

# Möbius transform
from mobius.core.math.mobius_tform import (
    apply_mobius_transform,
    compute_mobius_transform,
    map_to_canonical,
)

# Curve recovery
from mobius.core.math.curves import matrix_to_curve

__all__ = [
    # Numerical Safeguards — Epsilon constants
    "EPS_MACHINE",
    "EPS_TRANSFORM_DET",
    "LINE_RATIO_REL_TOL",
    # Numerical Safeguards — Predicates
    "is_close_relative",
    "is_valid_complex",
    "is_valid_float",
    "is_zero",
    "norm_sqr",
    # Matrix algebra
    "Matrix2",
    "determinant",
    "entries",
    "frozen",
    "identity",
    "is_singular",
    "matrix2",
    "try_inverse",
    # Möbius transform
    "apply_mobius_transform",
    "compute_mobius_transform",
    "map_to_canonical",
    # Curve recovery
    "matrix_to_curve",
]
