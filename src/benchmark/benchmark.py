from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional, Tuple, cast

from data.generate import InputGenerator

from ..algorithms.algorithm import AlgorithmCategory, Searcher, Sorter
from .errors import AlgorithmExecutionFailure
from .registry import DEFAULT_REGISTRY, AlgorithmDescriptor, AlgorithmRegistry
from .timing import Stopwatch, measure

GeneratorFactory = Callable[[], InputGenerator]
# Builds the (operation, args) pair for one trial of size n
TrialSetup = Callable[[int], Tuple[Callable[..., Any], Tuple[Any, ...]]]


@dataclass(frozen=True)
class BenchmarkConfig:
    """Immutable configuration of a benchmark run.

    Attributes:
        sizes: Input sizes to benchmark, strictly ascending
        runs_per_size: Number of timed trials averaged per size
        precision: Decimal places kept in reported times
        verbose: Print per-size progress while running
    """

    sizes: Tuple[int, ...] = (100, 500, 1000, 5000)
    runs_per_size: int = 5
    precision: int = 4
    verbose: bool = False

    def __post_init__(self):
        # Accept any iterable of sizes but store a tuple
        object.__setattr__(self, "sizes", tuple(self.sizes))

        if not self.sizes:
            raise ValueError("At least one input size is required")
        for size in self.sizes:
            if not isinstance(size, int) or isinstance(size, bool) or size <= 0:
                raise ValueError(f"Input sizes must be positive integers, got {size!r}")
        if any(a >= b for a, b in zip(self.sizes, self.sizes[1:])):
            raise ValueError(f"Input sizes must be strictly ascending: {self.sizes}")
        if self.runs_per_size < 1:
            raise ValueError(
                f"runs_per_size must be at least 1, got {self.runs_per_size}"
            )
        if self.precision < 0:
            raise ValueError(f"precision must be non-negative, got {self.precision}")


DEFAULT_CONFIG = BenchmarkConfig()


@dataclass(frozen=True)
class SizePoint:
    """Mean execution time for one input size."""

    n: int
    time_ms: float

    def to_dict(self) -> Dict[str, Any]:
        return {"n": self.n, "time": self.time_ms}


@dataclass(frozen=True)
class BenchmarkReport:
    """Result of benchmarking one algorithm across the size sweep."""

    algorithm_id: str
    points: Tuple[SizePoint, ...] = field(default_factory=tuple)

    @property
    def sizes(self) -> List[int]:
        return [point.n for point in self.points]

    @property
    def times(self) -> List[float]:
        return [point.time_ms for point in self.points]

    def to_dict(self) -> Dict[str, Any]:
        """Payload in the shape returned by the benchmark endpoint."""
        return {
            "algorithm": self.algorithm_id,
            "results": [point.to_dict() for point in self.points],
        }


class TrialRunner:
    """Runs the timed trials for one algorithm and averages them per size.

    A new InputGenerator is taken from generator_factory for every run, so
    random state is never shared between runs.
    """

    def __init__(
        self,
        config: BenchmarkConfig = DEFAULT_CONFIG,
        generator_factory: GeneratorFactory = InputGenerator,
    ):
        self.config = config
        self.generator_factory = generator_factory

    def run_sorting(self, algorithm_id: str, sorter: Sorter) -> BenchmarkReport:
        """Benchmark a sorter on fresh random arrays."""
        generator = self.generator_factory()

        def setup(n: int):
            values = generator.random_array(n)
            return sorter.sort, (list(values),)  # Pass a copy

        return self._run(algorithm_id, setup)

    def run_searching(
        self, algorithm_id: str, searcher: Searcher, requires_sorted: bool = False
    ) -> BenchmarkReport:
        """Benchmark a searcher; each trial draws its own independent target."""
        generator = self.generator_factory()

        def setup(n: int):
            if requires_sorted:
                values = generator.sorted_array(n)
            else:
                values = generator.random_array(n)
            # The target may or may not be present in values
            target = generator.random_target()
            return searcher.search, (values, target)

        return self._run(algorithm_id, setup)

    def _run(self, algorithm_id: str, setup: TrialSetup) -> BenchmarkReport:
        """Run every trial of the sweep and collect the per-size means."""
        config = self.config
        total_steps = len(config.sizes)
        points: List[SizePoint] = []

        if config.verbose:
            print(f"\nStarting benchmark: {algorithm_id}")
            print(
                f"Testing {total_steps} sizes x {config.runs_per_size} runs, "
                f"started at {datetime.now().strftime('%H:%M:%S')}"
            )
            print("-" * 60)

        for step, n in enumerate(config.sizes, start=1):
            if config.verbose:
                print(f"[{step:2d}/{total_steps}] N={n:>10,} ", end="", flush=True)

            total_time = 0.0
            with Stopwatch() as stopwatch:
                for run in range(config.runs_per_size):
                    operation, args = setup(n)
                    try:
                        duration = measure(operation, *args)
                    except Exception as e:
                        if config.verbose:
                            print(f"→ FAILED: {str(e)[:50]}")
                        raise AlgorithmExecutionFailure(algorithm_id, n, run, e) from e
                    total_time += duration

            avg_time = round(total_time / config.runs_per_size, config.precision)
            points.append(SizePoint(n=n, time_ms=avg_time))

            if config.verbose:
                print(f"→ {avg_time:10.4f}ms [{stopwatch.elapsed_ms / 1000:4.1f}s]")

        if config.verbose:
            print(f"Benchmark complete for: {algorithm_id}")

        return BenchmarkReport(algorithm_id=algorithm_id, points=tuple(points))


class BenchmarkEngine:
    """Resolves algorithm ids and dispatches them to the matching trial strategy."""

    def __init__(
        self,
        registry: AlgorithmRegistry = DEFAULT_REGISTRY,
        config: BenchmarkConfig = DEFAULT_CONFIG,
        generator_factory: GeneratorFactory = InputGenerator,
    ):
        self.registry = registry
        self.config = config
        self.runner = TrialRunner(config, generator_factory)

    def list_algorithms(self) -> Tuple[AlgorithmDescriptor, ...]:
        """Get all benchmarkable algorithms in listing order."""
        return self.registry.describe()

    def run_benchmark(self, algorithm_id: str) -> BenchmarkReport:
        """
        Benchmark one algorithm across the configured size sweep.

        Args:
            algorithm_id: Registry id, e.g. "quickSort"

        Returns:
            A BenchmarkReport with one point per configured size

        Raises:
            UnknownAlgorithm: If algorithm_id is not registered
            AlgorithmExecutionFailure: If the algorithm raised during a trial
        """
        descriptor, implementation = self.registry.resolve(algorithm_id)

        if descriptor.category is AlgorithmCategory.SORTING:
            return self.runner.run_sorting(descriptor.id, cast(Sorter, implementation))
        elif descriptor.category is AlgorithmCategory.SEARCHING:
            return self.runner.run_searching(
                descriptor.id,
                cast(Searcher, implementation),
                requires_sorted=descriptor.requires_sorted_input,
            )
        else:
            raise ValueError(f"Unknown algorithm category: {descriptor.category}")


_default_engine: Optional[BenchmarkEngine] = None


def _get_default_engine() -> BenchmarkEngine:
    global _default_engine
    if _default_engine is None:
        _default_engine = BenchmarkEngine()
    return _default_engine


def list_algorithms() -> Tuple[AlgorithmDescriptor, ...]:
    """List the algorithms of the default engine."""
    return _get_default_engine().list_algorithms()


def run_benchmark(algorithm_id: str) -> BenchmarkReport:
    """Benchmark an algorithm with the default sweep of 100, 500, 1000 and 5000."""
    return _get_default_engine().run_benchmark(algorithm_id)
