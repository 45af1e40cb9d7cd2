"""Benchmark Report — вывод результатов сравнения алгоритмов.

- Табличный вывод (строка на размер входа)
- JSON отчёт, проверенный по контракту benchmark_report.json
- Интерактивный график (plotly, HTML)
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Final, List

import plotly.graph_objects as go

from src.benchmark.runner import BenchmarkReport
from src.core.contracts import validate_benchmark_report

logger = logging.getLogger(__name__)

REPORT_SCHEMA_VERSION: Final[str] = "1"

CHART_FILENAME: Final[str] = "multiplication_times.html"
REPORT_FILENAME: Final[str] = "multiplication_times.json"

# (поле SizeTiming, подпись, цвет)
_SERIES: Final = (
    ("direct_s", "Direct Multiplication", "red"),
    ("divide_conquer_s", "Simple Divide & Conquer", "green"),
    ("karatsuba_s", "Karatsuba", "blue"),
)


# =============================================================================
# TABLE
# =============================================================================


def format_table(report: BenchmarkReport) -> List[str]:
    """Строки вида 'n=1000, direct=0.012345, dc=0.023456, kara=0.009876'."""
    return [
        f"n={row.digits}, direct={row.direct_s:.6f}, "
        f"dc={row.divide_conquer_s:.6f}, kara={row.karatsuba_s:.6f}"
        for row in report.timings
    ]


# =============================================================================
# JSON
# =============================================================================


def report_to_dict(report: BenchmarkReport) -> Dict[str, Any]:
    """JSON-совместимое представление отчёта (контракт benchmark_report)."""
    config = report.config
    return {
        "schema_version": REPORT_SCHEMA_VERSION,
        "config": {
            "min_digits": config.min_digits,
            "max_digits": config.max_digits,
            "num_sizes": config.num_sizes,
            "num_instances": config.num_instances,
            "threshold_limbs": config.threshold_limbs,
            "seed": config.seed,
        },
        "timings": [
            {
                "digits": row.digits,
                "direct_s": row.direct_s,
                "divide_conquer_s": row.divide_conquer_s,
                "karatsuba_s": row.karatsuba_s,
            }
            for row in report.timings
        ],
    }


def write_report_json(report: BenchmarkReport, path: Path) -> Path:
    """
    Запись JSON отчёта после валидации по схеме.

    Raises:
        ValidationError: Если отчёт не соответствует контракту
    """
    data = report_to_dict(report)
    validate_benchmark_report(data)

    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)

    logger.info("Report saved to %s", path)
    return path


# =============================================================================
# CHART
# =============================================================================


def build_chart(report: BenchmarkReport) -> go.Figure:
    """Линейный график: среднее время каждого алгоритма от числа цифр."""
    fig = go.Figure()
    x_values = [row.digits for row in report.timings]

    for field, label, color in _SERIES:
        fig.add_trace(go.Scatter(
            x=x_values,
            y=[getattr(row, field) for row in report.timings],
            mode="lines",
            name=label,
            line=dict(color=color),
        ))

    fig.update_layout(
        title="Multiplication Algorithms Comparison",
        xaxis=dict(title="Input Size (number of digits)"),
        yaxis=dict(title="Average Execution Time (seconds)", rangemode="tozero"),
        width=800,
        height=600,
    )
    return fig


def render_chart(report: BenchmarkReport, path: Path) -> Path:
    """Сохранение графика в standalone HTML."""
    path.parent.mkdir(parents=True, exist_ok=True)
    build_chart(report).write_html(str(path))
    logger.info("Graph saved to %s", path)
    return path
