"""Benchmark Runner — сравнение алгоритмов умножения по времени.

Для каждого размера входа (в десятичных цифрах):
- генерируются num_instances пар случайных чисел без ведущих нулей
- каждая пара умножается тремя алгоритмами (direct, divide & conquer, Karatsuba)
- результаты сверяются: расхождение → MultiplicationMismatch
- время усредняется по парам

Алгоритмы на одной паре запускаются последовательно, чтобы замеры
были сопоставимы.
"""

import logging
import random
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional, Tuple

from src.core.domain.big_int import BigInt
from src.core.math.multiplication import (
    MIN_RECURSION_THRESHOLD_LIMBS,
    RECURSION_THRESHOLD_LIMBS,
    MultiplicationAlgorithm,
)

logger = logging.getLogger(__name__)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class MultiplicationMismatch(AssertionError):
    """Алгоритмы умножения вернули разные результаты для одной пары.

    Attributes:
        limb_count: Размер большего операнда (limbs)
        disagreeing: Алгоритмы, результат которых отличается от direct
    """

    def __init__(self, limb_count: int, disagreeing: Tuple[MultiplicationAlgorithm, ...]):
        self.limb_count = limb_count
        self.disagreeing = disagreeing
        names = ", ".join(algorithm.value for algorithm in disagreeing)
        super().__init__(
            f"Multiplication mismatch for {limb_count}-limb operands: "
            f"{names} disagree with direct"
        )


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class BenchmarkConfig:
    """Конфигурация benchmark.

    Значения по умолчанию: 100 размеров от 1000 до 10000 цифр,
    10 пар на размер.
    """

    # Диапазон размеров входа (десятичные цифры)
    min_digits: int = 1000
    max_digits: int = 10000
    num_sizes: int = 100

    # Число случайных пар на каждый размер
    num_instances: int = 10

    # Base case рекурсивных алгоритмов (limbs)
    threshold_limbs: int = RECURSION_THRESHOLD_LIMBS

    # Seed генератора (None → недетерминированный)
    seed: Optional[int] = None

    # Каталог для JSON отчёта и графика
    output_dir: Path = Path("assets")

    def __post_init__(self) -> None:
        if self.min_digits < 1:
            raise ValueError(f"min_digits must be >= 1, got {self.min_digits}")
        if self.max_digits < self.min_digits:
            raise ValueError(
                f"max_digits ({self.max_digits}) must be >= min_digits ({self.min_digits})"
            )
        if self.num_sizes < 1:
            raise ValueError(f"num_sizes must be >= 1, got {self.num_sizes}")
        if self.num_instances < 1:
            raise ValueError(f"num_instances must be >= 1, got {self.num_instances}")
        if self.threshold_limbs < MIN_RECURSION_THRESHOLD_LIMBS:
            raise ValueError(
                f"threshold_limbs must be >= {MIN_RECURSION_THRESHOLD_LIMBS}, "
                f"got {self.threshold_limbs}"
            )


# =============================================================================
# RESULTS
# =============================================================================


@dataclass(frozen=True)
class TrialTiming:
    """Время одной пары (секунды)."""

    direct_s: float
    divide_conquer_s: float
    karatsuba_s: float


@dataclass(frozen=True)
class SizeTiming:
    """Среднее время по всем парам одного размера (секунды)."""

    digits: int
    direct_s: float
    divide_conquer_s: float
    karatsuba_s: float


@dataclass(frozen=True)
class BenchmarkReport:
    """Результат benchmark: конфигурация и строки по размерам."""

    config: BenchmarkConfig
    timings: Tuple[SizeTiming, ...]


# =============================================================================
# INPUT GENERATION
# =============================================================================


def digit_sizes(config: BenchmarkConfig) -> List[int]:
    """Размеры входа: равный шаг от min_digits, последний = max_digits.

    Examples:
        >>> digit_sizes(BenchmarkConfig(min_digits=10, max_digits=20, num_sizes=3))
        [10, 15, 20]
    """
    if config.num_sizes == 1:
        return [config.max_digits]

    step = (config.max_digits - config.min_digits) // (config.num_sizes - 1)
    sizes = [config.min_digits + i * step for i in range(config.num_sizes)]
    sizes[-1] = config.max_digits
    return sizes


def random_decimal(digits: int, rng: random.Random) -> str:
    """Случайная десятичная строка без ведущих нулей.

    Первая цифра 1-9, остальные 0-9. digits == 0 → "0".
    """
    if digits < 0:
        raise ValueError(f"digits must be non-negative, got {digits}")
    if digits == 0:
        return "0"

    head = str(rng.randint(1, 9))
    tail = "".join(str(rng.randint(0, 9)) for _ in range(digits - 1))
    return head + tail


# =============================================================================
# TRIAL
# =============================================================================


def _timed(fn: Callable[[], BigInt]) -> Tuple[BigInt, float]:
    start = time.perf_counter()
    product = fn()
    return product, time.perf_counter() - start


def run_trial(
    a: BigInt,
    b: BigInt,
    threshold: int = RECURSION_THRESHOLD_LIMBS,
) -> TrialTiming:
    """Умножение пары всеми тремя алгоритмами с проверкой совпадения.

    Raises:
        MultiplicationMismatch: если divide & conquer или Karatsuba
            отличаются от direct
    """
    direct, direct_s = _timed(lambda: a.multiply_direct(b))
    dc, dc_s = _timed(lambda: a.multiply_divide_conquer(b, threshold))
    kara, kara_s = _timed(lambda: a.multiply_karatsuba(b, threshold))

    disagreeing = tuple(
        algorithm
        for algorithm, product in (
            (MultiplicationAlgorithm.DIVIDE_CONQUER, dc),
            (MultiplicationAlgorithm.KARATSUBA, kara),
        )
        if product != direct
    )
    if disagreeing:
        error = MultiplicationMismatch(max(a.limb_count, b.limb_count), disagreeing)
        logger.error("%s; a=%s... b=%s...", error, str(a)[:50], str(b)[:50])
        raise error

    return TrialTiming(direct_s=direct_s, divide_conquer_s=dc_s, karatsuba_s=kara_s)


# =============================================================================
# BENCHMARK
# =============================================================================


class MultiplicationBenchmark:
    """Benchmark трёх алгоритмов умножения по диапазону размеров."""

    def __init__(self, config: BenchmarkConfig | None = None):
        self.config = config or BenchmarkConfig()
        self._rng = random.Random(self.config.seed)

    def measure_size(self, digits: int) -> SizeTiming:
        """Среднее время для одного размера входа."""
        total_direct = 0.0
        total_dc = 0.0
        total_kara = 0.0
        for instance in range(self.config.num_instances):
            a = BigInt.from_decimal(random_decimal(digits, self._rng))
            b = BigInt.from_decimal(random_decimal(digits, self._rng))
            trial = run_trial(a, b, self.config.threshold_limbs)
            logger.debug(
                "digits=%d instance=%d direct=%.6f dc=%.6f kara=%.6f",
                digits,
                instance,
                trial.direct_s,
                trial.divide_conquer_s,
                trial.karatsuba_s,
            )
            total_direct += trial.direct_s
            total_dc += trial.divide_conquer_s
            total_kara += trial.karatsuba_s

        count = self.config.num_instances
        return SizeTiming(
            digits=digits,
            direct_s=total_direct / count,
            divide_conquer_s=total_dc / count,
            karatsuba_s=total_kara / count,
        )

    def run(self, progress: Optional[Callable[[SizeTiming], None]] = None) -> BenchmarkReport:
        """Прогон по всем размерам.

        Args:
            progress: Callback, вызываемый после каждого размера

        Raises:
            MultiplicationMismatch: при первом расхождении алгоритмов
        """
        sizes = digit_sizes(self.config)
        logger.info(
            "Benchmark: %d sizes from %d to %d digits, %d instances each",
            len(sizes),
            sizes[0],
            sizes[-1],
            self.config.num_instances,
        )

        timings: List[SizeTiming] = []
        for digits in sizes:
            timing = self.measure_size(digits)
            logger.info(
                "n=%d direct=%.6f dc=%.6f kara=%.6f",
                digits,
                timing.direct_s,
                timing.divide_conquer_s,
                timing.karatsuba_s,
            )
            timings.append(timing)
            if progress is not None:
                progress(timing)

        return BenchmarkReport(config=self.config, timings=tuple(timings))


def run_benchmark(
    config: BenchmarkConfig | None = None,
    progress: Optional[Callable[[SizeTiming], None]] = None,
) -> BenchmarkReport:
    """Прогон benchmark с заданной (или default) конфигурацией.

    progress вызывается для каждой строки SizeTiming сразу после замера.
    """
    return MultiplicationBenchmark(config).run(progress)
