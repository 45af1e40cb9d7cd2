"""
Core math modules для bigmul

Limb-арифметика произвольной точности и алгоритмы умножения.
"""

# Limb primitives
from src.core.math.limbs import (
    LIMB_BASE,
    LIMB_DIGITS,
    BigIntError,
    LimbUnderflow,
    add_limbs,
    is_zero_limbs,
    normalize,
    shift_left_limbs,
    subtract_limbs,
    subtract_limbs_with_borrow,
)

# Decimal conversion
from src.core.math.decimal_codec import (
    InvalidDigits,
    parse_decimal,
    to_decimal,
)

# Multiplication
from src.core.math.multiplication import (
    MIN_RECURSION_THRESHOLD_LIMBS,
    RECURSION_THRESHOLD_LIMBS,
    MultiplicationAlgorithm,
    multiply_direct,
    multiply_divide_conquer,
    multiply_karatsuba,
    multiply_limbs,
)

__all__ = [
    # Limbs — Constants
    "LIMB_BASE",
    "LIMB_DIGITS",
    # Limbs — Exceptions
    "BigIntError",
    "LimbUnderflow",
    # Limbs — Functions
    "add_limbs",
    "is_zero_limbs",
    "normalize",
    "shift_left_limbs",
    "subtract_limbs",
    "subtract_limbs_with_borrow",
    # Decimal Codec — Exceptions
    "InvalidDigits",
    # Decimal Codec — Functions
    "parse_decimal",
    "to_decimal",
    # Multiplication — Constants
    "MIN_RECURSION_THRESHOLD_LIMBS",
    "RECURSION_THRESHOLD_LIMBS",
    # Multiplication — Types
    "MultiplicationAlgorithm",
    # Multiplication — Functions
    "multiply_direct",
    "multiply_divide_conquer",
    "multiply_karatsuba",
    "multiply_limbs",
]
