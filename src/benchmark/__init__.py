"""Benchmark — сравнение алгоритмов умножения по времени и корректности.

- Генерация случайных входов без ведущих нулей
- Замер direct / divide & conquer / Karatsuba с перекрёстной проверкой
- Табличный вывод, JSON отчёт, график
"""

from .report import (
    build_chart,
    format_table,
    render_chart,
    report_to_dict,
    write_report_json,
)
from .runner import (
    BenchmarkConfig,
    BenchmarkReport,
    MultiplicationBenchmark,
    MultiplicationMismatch,
    SizeTiming,
    TrialTiming,
    digit_sizes,
    random_decimal,
    run_benchmark,
    run_trial,
)

__all__ = [
    "BenchmarkConfig",
    "BenchmarkReport",
    "MultiplicationBenchmark",
    "MultiplicationMismatch",
    "SizeTiming",
    "TrialTiming",
    "digit_sizes",
    "random_decimal",
    "run_benchmark",
    "run_trial",
    "build_chart",
    "format_table",
    "render_chart",
    "report_to_dict",
    "write_report_json",
]
