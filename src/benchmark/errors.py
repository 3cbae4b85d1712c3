from typing import Optional


class BenchmarkError(Exception):
    """Base class for errors raised by the benchmark engine."""


class UnknownAlgorithm(BenchmarkError, ValueError):
    """Raised when an algorithm identifier is not in the registry."""

    def __init__(self, algorithm_id: object):
        self.algorithm_id = algorithm_id
        super().__init__(f"Unknown algorithm: {algorithm_id}")


class AlgorithmExecutionFailure(BenchmarkError, RuntimeError):
    """
    Raised when the algorithm under test fails during a trial.

    The original exception is chained as __cause__. The whole benchmark run is
    aborted; no partial report is produced.
    """

    def __init__(
        self,
        algorithm_id: str,
        n: int,
        trial: int,
        cause: Optional[BaseException] = None,
    ):
        self.algorithm_id = algorithm_id
        self.n = n
        self.trial = trial
        message = f"{algorithm_id} failed on trial {trial + 1} with N={n}"
        if cause is not None:
            message += f": {cause}"
        super().__init__(message)
