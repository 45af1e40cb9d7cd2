"""
Contract Validation Module

Модуль для валидации JSON контрактов bigmul.
"""

from .validators import (
    BenchmarkReportValidator,
    ContractValidator,
    SchemaLoader,
    validate_benchmark_report,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "BenchmarkReportValidator",
    # Functions
    "validate_benchmark_report",
]
