"""
BigInt — неотрицательное целое произвольной точности

Immutable Pydantic модель над нормализованным limb-вектором
(база LIMB_BASE = 10^9, младший limb первый).

Все арифметические операции возвращают новый экземпляр, операнды
не изменяются. Равенство моделей = равенство limbs = равенство значений,
так как представление каноническое.
"""

from typing import Tuple

from pydantic import BaseModel, Field, StrictInt, field_validator

from src.core.math.decimal_codec import parse_decimal, to_decimal
from src.core.math.limbs import (
    LIMB_BASE,
    add_limbs,
    shift_left_limbs,
    subtract_limbs,
)
from src.core.math.multiplication import (
    RECURSION_THRESHOLD_LIMBS,
    MultiplicationAlgorithm,
    multiply_direct,
    multiply_divide_conquer,
    multiply_karatsuba,
    multiply_limbs,
)


# =============================================================================
# BIGINT MODEL
# =============================================================================


class BigInt(BaseModel):
    """
    Неотрицательное целое произвольной точности.

    Инварианты (проверяются при создании):
    1. limbs не пуст
    2. 0 <= limb < LIMB_BASE для каждого limb
    3. Старший limb ненулевой, кроме нуля, который равен (0,)
    """

    limbs: Tuple[StrictInt, ...] = Field(
        ..., min_length=1, description="Limbs в базе 10^9, младший первый"
    )

    model_config = {"frozen": True}  # Immutable

    @field_validator("limbs")
    @classmethod
    def validate_limbs(cls, v: Tuple[int, ...]) -> Tuple[int, ...]:
        """Диапазон каждого limb и нормализованная форма."""
        for i, limb in enumerate(v):
            if not 0 <= limb < LIMB_BASE:
                raise ValueError(f"limb[{i}]={limb} out of range [0, {LIMB_BASE})")
        if len(v) > 1 and v[-1] == 0:
            raise ValueError("limbs must be normalized (no high-order zero limbs)")
        return v

    # -------------------------------------------------------------------------
    # Constructors
    # -------------------------------------------------------------------------

    @classmethod
    def from_decimal(cls, s: str) -> "BigInt":
        """
        Создание из десятичной строки.

        Raises:
            InvalidDigits: если строка содержит не-цифры
        """
        return cls(limbs=tuple(parse_decimal(s)))

    @classmethod
    def zero(cls) -> "BigInt":
        return cls(limbs=(0,))

    @classmethod
    def one(cls) -> "BigInt":
        return cls(limbs=(1,))

    @classmethod
    def from_limbs(cls, limbs) -> "BigInt":
        return cls(limbs=tuple(limbs))

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def to_decimal(self) -> str:
        """Каноническая десятичная строка."""
        return to_decimal(self.limbs)

    def __str__(self) -> str:
        return self.to_decimal()

    @property
    def limb_count(self) -> int:
        return len(self.limbs)

    def is_zero(self) -> bool:
        return self.limbs == (0,)

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def add(self, other: "BigInt") -> "BigInt":
        return self.from_limbs(add_limbs(self.limbs, other.limbs))

    def subtract(self, other: "BigInt") -> "BigInt":
        """
        self - other.

        Raises:
            LimbUnderflow: если other > self
        """
        return self.from_limbs(subtract_limbs(self.limbs, other.limbs))

    def shift_left(self, k: int) -> "BigInt":
        """self * 10^(9k)"""
        return self.from_limbs(shift_left_limbs(self.limbs, k))

    def multiply_direct(self, other: "BigInt") -> "BigInt":
        return self.from_limbs(multiply_direct(self.limbs, other.limbs))

    def multiply_divide_conquer(
        self, other: "BigInt", threshold: int = RECURSION_THRESHOLD_LIMBS
    ) -> "BigInt":
        return self.from_limbs(multiply_divide_conquer(self.limbs, other.limbs, threshold))

    def multiply_karatsuba(
        self, other: "BigInt", threshold: int = RECURSION_THRESHOLD_LIMBS
    ) -> "BigInt":
        return self.from_limbs(multiply_karatsuba(self.limbs, other.limbs, threshold))

    def multiply(
        self,
        other: "BigInt",
        algorithm: MultiplicationAlgorithm = MultiplicationAlgorithm.KARATSUBA,
        threshold: int = RECURSION_THRESHOLD_LIMBS,
    ) -> "BigInt":
        """
        Умножение выбранным алгоритмом.

        Args:
            other: Второй множитель
            algorithm: direct / divide_conquer / karatsuba
            threshold: Base case рекурсивных алгоритмов (limbs)
        """
        return self.from_limbs(multiply_limbs(self.limbs, other.limbs, algorithm, threshold))
