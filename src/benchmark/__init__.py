"""
Benchmarking engine for sorting and searching algorithms.

This module measures the execution time of textbook algorithms across a sweep
of input sizes, averaging a fixed number of trials per size.
"""

from .benchmark import (
    DEFAULT_CONFIG,
    BenchmarkConfig,
    BenchmarkEngine,
    BenchmarkReport,
    SizePoint,
    TrialRunner,
    list_algorithms,
    run_benchmark,
)
from .errors import AlgorithmExecutionFailure, BenchmarkError, UnknownAlgorithm
from .registry import (
    DEFAULT_REGISTRY,
    AlgorithmDescriptor,
    AlgorithmRegistry,
    create_default_registry,
)
from .timing import Stopwatch, measure

__all__ = [
    "DEFAULT_CONFIG",
    "DEFAULT_REGISTRY",
    "AlgorithmDescriptor",
    "AlgorithmExecutionFailure",
    "AlgorithmRegistry",
    "BenchmarkConfig",
    "BenchmarkEngine",
    "BenchmarkError",
    "BenchmarkReport",
    "SizePoint",
    "Stopwatch",
    "TrialRunner",
    "UnknownAlgorithm",
    "create_default_registry",
    "list_algorithms",
    "measure",
    "run_benchmark",
]
