"""
Limbs — примитивы над limb-векторами

Представление: неотрицательное целое как последовательность limbs
в базе LIMB_BASE = 10^9, младший limb первый (little-endian по позиции).

    value = Σ limb[i] * LIMB_BASE^i

Модуль содержит базовую арифметику, на которой строятся алгоритмы умножения:
- normalize: удаление старших нулевых limbs
- add_limbs: сложение с переносом (carry)
- subtract_limbs: вычитание с заёмом (borrow), с проверкой underflow
- shift_left_limbs: умножение на LIMB_BASE^k

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат любой операции нормализован (старший limb != 0, либо [0])
2. Каждый limb в диапазоне 0 <= limb < LIMB_BASE
3. Операнды не мутируются, результат всегда новый list
"""

from typing import Final, List, Sequence

# =============================================================================
# CONSTANTS
# =============================================================================

# База limb-представления (9 десятичных цифр на limb)
LIMB_BASE: Final[int] = 1_000_000_000

# Число десятичных цифр в одном limb
LIMB_DIGITS: Final[int] = 9


# =============================================================================
# EXCEPTIONS
# =============================================================================


class BigIntError(ValueError):
    """Базовая ошибка арифметики произвольной точности."""
    pass


class LimbUnderflow(BigIntError):
    """
    Вычитание a - b при value(a) < value(b).

    Результат был бы отрицательным, а отрицательные значения
    не представимы.
    """
    pass


# =============================================================================
# NORMALIZATION
# =============================================================================


def normalize(limbs: List[int]) -> List[int]:
    """
    Удаление старших нулевых limbs (in place).

    Останавливается, когда старший limb ненулевой или остался один limb.
    Пустой список превращается в [0].

    Args:
        limbs: Мутируемый список limbs

    Returns:
        Тот же список (для удобства цепочек)

    Examples:
        >>> normalize([5, 0, 0])
        [5]
        >>> normalize([0, 0])
        [0]
    """
    while len(limbs) > 1 and limbs[-1] == 0:
        limbs.pop()
    if not limbs:
        limbs.append(0)
    return limbs


def is_zero_limbs(limbs: Sequence[int]) -> bool:
    """Значение равно нулю (допускаются ненормализованные нули)."""
    return all(limb == 0 for limb in limbs)


# =============================================================================
# ADDITION
# =============================================================================


def add_limbs(a: Sequence[int], b: Sequence[int]) -> List[int]:
    """
    Сложение limb-векторов с переносом.

    Для каждой позиции i < max(len(a), len(b)):
        sum = a[i] + b[i] + carry
        result[i] = sum % LIMB_BASE, carry = sum // LIMB_BASE
    Остаточный carry попадает в дополнительный limb.

    Args:
        a: Первый операнд (limbs)
        b: Второй операнд (limbs)

    Returns:
        Нормализованная сумма

    Examples:
        >>> add_limbs([999_999_999], [1])
        [0, 1]
    """
    len_a = len(a)
    len_b = len(b)
    max_len = max(len_a, len_b)
    result = [0] * (max_len + 1)
    carry = 0
    for i in range(max_len):
        ai = a[i] if i < len_a else 0
        bi = b[i] if i < len_b else 0
        carry, result[i] = divmod(ai + bi + carry, LIMB_BASE)
    result[max_len] = carry
    return normalize(result)


# =============================================================================
# SUBTRACTION
# =============================================================================


def _subtract_with_borrow(a: Sequence[int], b: Sequence[int]) -> tuple[List[int], int]:
    """
    Вычитание с заёмом по позициям a.

    Returns:
        (ненормализованный результат длины len(a), финальный borrow)
    """
    len_b = len(b)
    result = [0] * len(a)
    borrow = 0
    for i, ai in enumerate(a):
        bi = b[i] if i < len_b else 0
        diff = ai - bi - borrow
        if diff < 0:
            diff += LIMB_BASE
            borrow = 1
        else:
            borrow = 0
        result[i] = diff
    return result, borrow


def subtract_limbs(a: Sequence[int], b: Sequence[int]) -> List[int]:
    """
    Проверяемое вычитание a - b.

    Заём распространяется по позициям a. Если после последней позиции
    остаётся borrow, либо у b есть ненулевые limbs за пределами len(a),
    то value(a) < value(b).

    Args:
        a: Уменьшаемое (limbs)
        b: Вычитаемое (limbs)

    Returns:
        Нормализованная разность

    Raises:
        LimbUnderflow: если value(a) < value(b)

    Examples:
        >>> subtract_limbs([0, 1], [1])
        [999999999]
    """
    if not is_zero_limbs(b[len(a):]):
        raise LimbUnderflow(
            f"Subtraction underflow: subtrahend has {len(b)} limbs, "
            f"minuend only {len(a)}"
        )

    result, borrow = _subtract_with_borrow(a, b)
    if borrow:
        raise LimbUnderflow("Subtraction underflow: minuend is smaller than subtrahend")

    return normalize(result)


def subtract_limbs_with_borrow(a: Sequence[int], b: Sequence[int]) -> tuple[List[int], int]:
    """
    Вычитание без исключения: нормализованная разность и финальный borrow.

    borrow == 1 означает value(a) < value(b) (по позициям a), результат
    при этом «завёрнут» по модулю LIMB_BASE^len(a). Лимбы b за пределами
    len(a) не учитываются, поэтому вызывающий код проверяет и длины.

    Args:
        a: Уменьшаемое (limbs)
        b: Вычитаемое (limbs)

    Returns:
        (нормализованная разность, borrow)

    Examples:
        >>> subtract_limbs_with_borrow([0, 1], [1])
        ([999999999], 0)
        >>> subtract_limbs_with_borrow([1], [2])
        ([999999999], 1)
    """
    result, borrow = _subtract_with_borrow(a, b)
    return normalize(result), borrow


# =============================================================================
# SHIFT
# =============================================================================


def shift_left_limbs(limbs: Sequence[int], k: int) -> List[int]:
    """
    Умножение на LIMB_BASE^k: k нулевых limbs в младших позициях.

    0 * LIMB_BASE^k = 0, поэтому сдвиг нуля возвращает [0].

    Args:
        limbs: Исходное значение (limbs)
        k: Число limbs для сдвига (>= 0)

    Returns:
        Сдвинутое значение

    Raises:
        ValueError: если k < 0

    Examples:
        >>> shift_left_limbs([7], 2)
        [0, 0, 7]
        >>> shift_left_limbs([0], 5)
        [0]
    """
    if k < 0:
        raise ValueError(f"shift must be non-negative, got {k}")

    if is_zero_limbs(limbs):
        return [0]

    return normalize([0] * k + list(limbs))
