"""
Decimal Codec — конверсия base-10 строк ↔ limbs

Единственный поддерживаемый внешний формат: десятичная строка
из ASCII-цифр без знака, без префиксов и без пробелов.

- parse_decimal: строка → limbs (окна по 9 цифр справа налево)
- to_decimal: limbs → каноническая строка

Некорректный ввод отвергается через InvalidDigits с указанием
проблемной подстроки, а не превращается молча в нулевой limb.
"""

import re
from typing import Final, List, Sequence

from src.core.math.limbs import LIMB_DIGITS, BigIntError, normalize

# Первая непрерывная последовательность не-цифр (только ASCII 0-9 считаются цифрами)
_NON_DIGIT_RUN: Final[re.Pattern[str]] = re.compile(r"[^0-9]+")


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidDigits(BigIntError):
    """
    Строка содержит символы, не являющиеся десятичными цифрами.

    Attributes:
        text: Исходная строка
        substring: Первая непрерывная подстрока из не-цифр
        position: Индекс начала substring в text
    """

    def __init__(self, text: str, substring: str, position: int):
        self.text = text
        self.substring = substring
        self.position = position
        super().__init__(
            f"Invalid decimal digits {substring!r} at position {position}"
        )


# =============================================================================
# PARSING
# =============================================================================


def parse_decimal(s: str) -> List[int]:
    """
    Парсинг десятичной строки в нормализованные limbs.

    Строка режется на окна по LIMB_DIGITS символов, начиная справа;
    каждое окно даёт один limb. Ведущие нули допустимы и удаляются
    нормализацией. Пустая строка → ноль.

    Args:
        s: Десятичная строка

    Returns:
        Нормализованные limbs (младший первый)

    Raises:
        TypeError: если s не str
        InvalidDigits: если в s есть символы кроме 0-9

    Examples:
        >>> parse_decimal("1000000000")
        [0, 1]
        >>> parse_decimal("")
        [0]
    """
    if not isinstance(s, str):
        raise TypeError(f"expected str, got {type(s).__name__}")

    bad = _NON_DIGIT_RUN.search(s)
    if bad is not None:
        raise InvalidDigits(s, bad.group(), bad.start())

    limbs: List[int] = []
    end = len(s)
    while end > 0:
        start = max(0, end - LIMB_DIGITS)
        limbs.append(int(s[start:end]))
        end = start

    return normalize(limbs)


# =============================================================================
# RENDERING
# =============================================================================


def to_decimal(limbs: Sequence[int]) -> str:
    """
    Рендеринг limbs в каноническую десятичную строку.

    Старший limb без дополнения нулями, каждый следующий дополняется
    до LIMB_DIGITS цифр.

    Args:
        limbs: Нормализованные limbs

    Returns:
        Десятичная строка ("0" для нуля)

    Examples:
        >>> to_decimal([1, 2])
        '2000000001'
    """
    if not limbs:
        return "0"

    parts = [str(limbs[-1])]
    parts.extend(f"{limb:0{LIMB_DIGITS}d}" for limb in reversed(limbs[:-1]))
    return "".join(parts)
