"""
Тесты для Benchmark — генерация входов, замеры, отчёты, CLI

Проверяет:
1. Валидацию BenchmarkConfig
2. Сетку размеров входа (последний = max_digits)
3. Случайные строки без ведущих нулей
4. Перекрёстную проверку алгоритмов (MultiplicationMismatch)
5. Табличный вывод, JSON отчёт и HTML график
6. CLI end-to-end на маленьких размерах
"""

import json
import random

import pytest

from src.benchmark import (
    BenchmarkConfig,
    BenchmarkReport,
    MultiplicationBenchmark,
    MultiplicationMismatch,
    SizeTiming,
    build_chart,
    digit_sizes,
    format_table,
    random_decimal,
    render_chart,
    report_to_dict,
    run_benchmark,
    run_trial,
    write_report_json,
)
from src.benchmark.cli import main
from src.core.contracts import validate_benchmark_report
from src.core.domain import BigInt
from src.core.math import MultiplicationAlgorithm


@pytest.fixture
def small_config(tmp_path) -> BenchmarkConfig:
    return BenchmarkConfig(
        min_digits=10,
        max_digits=400,
        num_sizes=3,
        num_instances=2,
        seed=42,
        output_dir=tmp_path,
    )


@pytest.fixture
def sample_report() -> BenchmarkReport:
    return BenchmarkReport(
        config=BenchmarkConfig(min_digits=100, max_digits=200, num_sizes=2, num_instances=1, seed=7),
        timings=(
            SizeTiming(digits=100, direct_s=0.001, divide_conquer_s=0.002, karatsuba_s=0.0015),
            SizeTiming(digits=200, direct_s=0.004, divide_conquer_s=0.006, karatsuba_s=0.003),
        ),
    )


# =============================================================================
# ТЕСТЫ: Config
# =============================================================================


class TestBenchmarkConfig:
    def test_defaults(self) -> None:
        config = BenchmarkConfig()
        assert config.min_digits == 1000
        assert config.max_digits == 10000
        assert config.num_sizes == 100
        assert config.num_instances == 10
        assert config.threshold_limbs == 32
        assert config.seed is None

    @pytest.mark.parametrize("kwargs,message", [
        ({"min_digits": 0}, "min_digits"),
        ({"min_digits": 100, "max_digits": 50}, "max_digits"),
        ({"num_sizes": 0}, "num_sizes"),
        ({"num_instances": 0}, "num_instances"),
        ({"threshold_limbs": 2}, "threshold_limbs"),
    ])
    def test_invalid(self, kwargs, message: str) -> None:
        with pytest.raises(ValueError, match=message):
            BenchmarkConfig(**kwargs)

    def test_frozen(self) -> None:
        config = BenchmarkConfig()
        with pytest.raises(AttributeError):
            config.num_sizes = 5


# =============================================================================
# ТЕСТЫ: Input generation
# =============================================================================


class TestDigitSizes:
    def test_default_grid(self) -> None:
        sizes = digit_sizes(BenchmarkConfig())
        assert len(sizes) == 100
        assert sizes[0] == 1000
        assert sizes[1] == 1090
        assert sizes[-1] == 10000

    def test_last_forced_to_max(self) -> None:
        sizes = digit_sizes(BenchmarkConfig(min_digits=10, max_digits=21, num_sizes=3))
        assert sizes == [10, 15, 21]

    def test_single_size(self) -> None:
        assert digit_sizes(BenchmarkConfig(min_digits=5, max_digits=50, num_sizes=1)) == [50]


class TestRandomDecimal:
    def test_length_and_no_leading_zero(self) -> None:
        rng = random.Random(0)
        for digits in (1, 2, 9, 10, 500):
            s = random_decimal(digits, rng)
            assert len(s) == digits
            assert s.isdigit()
            assert s[0] != "0"

    def test_zero_digits(self) -> None:
        assert random_decimal(0, random.Random(0)) == "0"

    def test_negative_rejected(self) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            random_decimal(-1, random.Random(0))

    def test_seeded_deterministic(self) -> None:
        assert random_decimal(50, random.Random(9)) == random_decimal(50, random.Random(9))


# =============================================================================
# ТЕСТЫ: Trial
# =============================================================================


class _BrokenKaratsuba(BigInt):
    def multiply_karatsuba(self, other, threshold=32):
        return BigInt.one()


class TestRunTrial:
    def test_timings_non_negative(self) -> None:
        a = BigInt.from_decimal(random_decimal(600, random.Random(1)))
        b = BigInt.from_decimal(random_decimal(600, random.Random(2)))
        trial = run_trial(a, b)
        assert trial.direct_s >= 0
        assert trial.divide_conquer_s >= 0
        assert trial.karatsuba_s >= 0

    def test_mismatch_raises(self) -> None:
        a = _BrokenKaratsuba.from_decimal("123456789123")
        b = _BrokenKaratsuba.from_decimal("987654321")
        with pytest.raises(MultiplicationMismatch, match="karatsuba") as exc_info:
            run_trial(a, b)
        assert exc_info.value.disagreeing == (MultiplicationAlgorithm.KARATSUBA,)
        assert exc_info.value.limb_count == 2

    def test_mismatch_is_assertion_error(self) -> None:
        assert issubclass(MultiplicationMismatch, AssertionError)


# =============================================================================
# ТЕСТЫ: Benchmark
# =============================================================================


class TestMultiplicationBenchmark:
    def test_report_rows(self, small_config: BenchmarkConfig) -> None:
        report = MultiplicationBenchmark(small_config).run()
        assert [row.digits for row in report.timings] == [10, 205, 400]
        assert report.config is small_config

    def test_progress_callback(self, small_config: BenchmarkConfig) -> None:
        seen = []
        MultiplicationBenchmark(small_config).run(progress=seen.append)
        assert [row.digits for row in seen] == [10, 205, 400]

    def test_run_benchmark(self, small_config: BenchmarkConfig) -> None:
        report = run_benchmark(small_config)
        assert len(report.timings) == 3

    def test_run_benchmark_progress(self, small_config: BenchmarkConfig) -> None:
        seen = []
        report = run_benchmark(small_config, progress=seen.append)
        assert [row.digits for row in seen] == [10, 205, 400]
        assert list(report.timings) == seen

    def test_logs_each_size(self, small_config: BenchmarkConfig, caplog) -> None:
        with caplog.at_level("INFO", logger="src.benchmark.runner"):
            MultiplicationBenchmark(small_config).run()
        assert any("n=400" in record.getMessage() for record in caplog.records)


# =============================================================================
# ТЕСТЫ: Report
# =============================================================================


class TestReport:
    def test_format_table(self, sample_report: BenchmarkReport) -> None:
        lines = format_table(sample_report)
        assert lines[0] == "n=100, direct=0.001000, dc=0.002000, kara=0.001500"
        assert len(lines) == 2

    def test_report_to_dict_is_valid(self, sample_report: BenchmarkReport) -> None:
        data = report_to_dict(sample_report)
        validate_benchmark_report(data)
        assert data["config"]["seed"] == 7
        assert data["timings"][1]["karatsuba_s"] == 0.003

    def test_write_report_json(self, sample_report: BenchmarkReport, tmp_path) -> None:
        path = write_report_json(sample_report, tmp_path / "out" / "report.json")
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        assert data["schema_version"] == "1"
        assert len(data["timings"]) == 2

    def test_build_chart(self, sample_report: BenchmarkReport) -> None:
        fig = build_chart(sample_report)
        names = [trace.name for trace in fig.data]
        assert names == ["Direct Multiplication", "Simple Divide & Conquer", "Karatsuba"]
        assert list(fig.data[2].y) == [0.0015, 0.003]

    def test_render_chart(self, sample_report: BenchmarkReport, tmp_path) -> None:
        path = render_chart(sample_report, tmp_path / "chart.html")
        assert path.exists()
        assert "Multiplication Algorithms Comparison" in path.read_text(encoding="utf-8")


# =============================================================================
# ТЕСТЫ: CLI
# =============================================================================


class TestCli:
    def test_end_to_end(self, tmp_path, capsys) -> None:
        code = main([
            "--min-digits", "10",
            "--max-digits", "50",
            "--num-sizes", "2",
            "--instances", "1",
            "--seed", "3",
            "--output-dir", str(tmp_path),
            "--no-chart",
        ])
        assert code == 0
        out = capsys.readouterr().out
        assert "n=10," in out
        assert "n=50," in out
        assert (tmp_path / "multiplication_times.json").exists()
        assert not (tmp_path / "multiplication_times.html").exists()

    def test_with_chart(self, tmp_path) -> None:
        code = main([
            "--min-digits", "5",
            "--max-digits", "5",
            "--num-sizes", "1",
            "--instances", "1",
            "--output-dir", str(tmp_path),
        ])
        assert code == 0
        assert (tmp_path / "multiplication_times.html").exists()

    def test_invalid_config(self, tmp_path) -> None:
        code = main(["--min-digits", "100", "--max-digits", "10", "--output-dir", str(tmp_path)])
        assert code == 2
