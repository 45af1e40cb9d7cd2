"""
Multiplication — три алгоритма умножения limb-векторов

Алгоритмы:
- multiply_direct: schoolbook, O(len(a) * len(b))
- multiply_divide_conquer: naive split на 4 рекурсивных умножения, O(n^2)
- multiply_karatsuba: split на 3 рекурсивных умножения, O(n^log2(3)) ≈ O(n^1.585)

Divide-and-conquer вариант асимптотически не лучше schoolbook и оставлен
как контрольная точка для сравнения с Karatsuba.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Все три алгоритма возвращают одинаковый нормализованный результат
2. Рекурсивные варианты не вызывают друг друга, только multiply_direct
   в base case (n <= threshold)
3. Глубина рекурсии O(log2(n)), завершение гарантировано при
   threshold >= MIN_RECURSION_THRESHOLD_LIMBS

ФОРМУЛЫ (m = max(len(a), len(b)) // 2, a = a1 * B^m + a0):
    divide & conquer: a*b = a1b1 * B^2m + (a0b1 + a1b0) * B^m + a0b0
    karatsuba:        mid = (a0 + a1)(b0 + b1) - a0b0 - a1b1
                      a*b = a1b1 * B^2m + mid * B^m + a0b0
"""

from enum import Enum
from typing import Callable, Dict, Final, List, Sequence

from src.core.math.limbs import (
    LIMB_BASE,
    add_limbs,
    normalize,
    shift_left_limbs,
    subtract_limbs_with_borrow,
)

# =============================================================================
# CONSTANTS
# =============================================================================

# Размер операнда (limbs), при котором рекурсия переходит на schoolbook
# 32 limbs ≈ 288 десятичных цифр
RECURSION_THRESHOLD_LIMBS: Final[int] = 32

# Минимально допустимый threshold: при n <= 3 сумма половин (a0 + a1)
# может иметь n limbs, и Karatsuba перестаёт уменьшать размер задачи
MIN_RECURSION_THRESHOLD_LIMBS: Final[int] = 3


# =============================================================================
# ENUMS
# =============================================================================


class MultiplicationAlgorithm(str, Enum):
    """Алгоритм умножения."""

    DIRECT = "direct"
    DIVIDE_CONQUER = "divide_conquer"
    KARATSUBA = "karatsuba"


# =============================================================================
# HELPERS
# =============================================================================


def _validate_threshold(threshold: int) -> None:
    if threshold < MIN_RECURSION_THRESHOLD_LIMBS:
        raise ValueError(
            f"threshold must be >= {MIN_RECURSION_THRESHOLD_LIMBS} limbs, got {threshold}"
        )


def _split(limbs: Sequence[int], m: int) -> tuple[Sequence[int], Sequence[int]]:
    """Младшие m limbs и остаток (пустой, если len(limbs) <= m)."""
    return limbs[:m], limbs[m:]


def _combine(p: List[int], mid: List[int], q: List[int], m: int) -> List[int]:
    """q * B^2m + mid * B^m + p"""
    high = add_limbs(shift_left_limbs(q, 2 * m), shift_left_limbs(mid, m))
    return add_limbs(high, p)


# =============================================================================
# DIRECT (SCHOOLBOOK)
# =============================================================================


def multiply_direct(a: Sequence[int], b: Sequence[int]) -> List[int]:
    """
    Schoolbook умножение.

    Каждое произведение a[i] * b[j] накапливается в позиции i + j,
    carry распространяется сколь угодно далеко (буфер растёт при
    необходимости).

    Args:
        a: Первый множитель (limbs)
        b: Второй множитель (limbs)

    Returns:
        Нормализованное произведение. Пустой операнд → [0].

    Examples:
        >>> multiply_direct([999_999_999], [999_999_999])
        [1, 999999998]
    """
    len_a = len(a)
    len_b = len(b)
    if len_a == 0 or len_b == 0:
        return [0]

    result = [0] * (len_a + len_b)
    for i in range(len_a):
        ai = a[i]
        carry = 0
        for j in range(len_b):
            carry, result[i + j] = divmod(ai * b[j] + result[i + j] + carry, LIMB_BASE)

        k = i + len_b
        while carry:
            if k == len(result):
                result.append(0)
            carry, result[k] = divmod(result[k] + carry, LIMB_BASE)
            k += 1

    return normalize(result)


# =============================================================================
# DIVIDE & CONQUER (4 MULTIPLICATIONS)
# =============================================================================


def _divide_conquer(a: Sequence[int], b: Sequence[int], threshold: int) -> List[int]:
    if not a or not b:
        return [0]

    n = max(len(a), len(b))
    if n <= threshold:
        return multiply_direct(a, b)

    m = n // 2
    a0, a1 = _split(a, m)
    b0, b1 = _split(b, m)

    p = _divide_conquer(a0, b0, threshold)
    q = _divide_conquer(a1, b1, threshold)
    r = _divide_conquer(a0, b1, threshold)
    s = _divide_conquer(a1, b0, threshold)

    return _combine(p, add_limbs(r, s), q, m)


def multiply_divide_conquer(
    a: Sequence[int],
    b: Sequence[int],
    threshold: int = RECURSION_THRESHOLD_LIMBS,
) -> List[int]:
    """
    Divide-and-conquer умножение с 4 рекурсивными умножениями.

    n = max(len(a), len(b)), m = n // 2:
        p = a0*b0, q = a1*b1, r = a0*b1, s = a1*b0
        result = q * B^2m + (r + s) * B^m + p

    Args:
        a: Первый множитель (limbs)
        b: Второй множитель (limbs)
        threshold: Base case (limbs), ниже которого используется schoolbook

    Returns:
        Нормализованное произведение

    Raises:
        ValueError: если threshold < MIN_RECURSION_THRESHOLD_LIMBS
    """
    _validate_threshold(threshold)
    return _divide_conquer(a, b, threshold)


# =============================================================================
# KARATSUBA (3 MULTIPLICATIONS)
# =============================================================================


def _karatsuba(a: Sequence[int], b: Sequence[int], threshold: int) -> List[int]:
    if not a or not b:
        return [0]

    n = max(len(a), len(b))
    if n <= threshold:
        return multiply_direct(a, b)

    m = n // 2
    a0, a1 = _split(a, m)
    b0, b1 = _split(b, m)

    p = _karatsuba(a0, b0, threshold)
    q = _karatsuba(a1, b1, threshold)
    u = _karatsuba(add_limbs(a0, a1), add_limbs(b0, b1), threshold)

    # u = p + q + (a0b1 + a1b0) >= p + q; все операнды нормализованы
    pq = add_limbs(p, q)
    mid, borrow = subtract_limbs_with_borrow(u, pq)
    assert not borrow and len(pq) <= len(u), "karatsuba cross term would be negative"

    return _combine(p, mid, q, m)


def multiply_karatsuba(
    a: Sequence[int],
    b: Sequence[int],
    threshold: int = RECURSION_THRESHOLD_LIMBS,
) -> List[int]:
    """
    Karatsuba умножение с 3 рекурсивными умножениями.

    n = max(len(a), len(b)), m = n // 2:
        p = a0*b0, q = a1*b1, u = (a0 + a1)*(b0 + b1)
        mid = u - p - q
        result = q * B^2m + mid * B^m + p

    Вычитание mid не бросает LimbUnderflow: для неотрицательных
    операндов u >= p + q выполняется всегда, финальный borrow
    проверяется assert.

    Args:
        a: Первый множитель (limbs)
        b: Второй множитель (limbs)
        threshold: Base case (limbs), ниже которого используется schoolbook

    Returns:
        Нормализованное произведение

    Raises:
        ValueError: если threshold < MIN_RECURSION_THRESHOLD_LIMBS
    """
    _validate_threshold(threshold)
    return _karatsuba(a, b, threshold)


# =============================================================================
# DISPATCH
# =============================================================================


_ALGORITHMS: Final[Dict[MultiplicationAlgorithm, Callable[..., List[int]]]] = {
    MultiplicationAlgorithm.DIRECT: lambda a, b, threshold: multiply_direct(a, b),
    MultiplicationAlgorithm.DIVIDE_CONQUER: multiply_divide_conquer,
    MultiplicationAlgorithm.KARATSUBA: multiply_karatsuba,
}


def multiply_limbs(
    a: Sequence[int],
    b: Sequence[int],
    algorithm: MultiplicationAlgorithm = MultiplicationAlgorithm.KARATSUBA,
    threshold: int = RECURSION_THRESHOLD_LIMBS,
) -> List[int]:
    """
    Умножение выбранным алгоритмом.

    Args:
        a: Первый множитель (limbs)
        b: Второй множитель (limbs)
        algorithm: Алгоритм (MultiplicationAlgorithm или его строковое значение)
        threshold: Base case для рекурсивных алгоритмов (игнорируется для DIRECT)

    Returns:
        Нормализованное произведение
    """
    return _ALGORITHMS[MultiplicationAlgorithm(algorithm)](a, b, threshold)
