"""
Domain models and value objects.

Contains the arbitrary-precision integer value type.
"""

from src.core.domain.big_int import BigInt

__all__ = [
    "BigInt",
]
