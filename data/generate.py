from typing import List, Optional

from mimesis import Numeric

# Inclusive bounds of the generated integers
MIN_VALUE = 0
MAX_VALUE = 9999


class InputGenerator:
    """Generates benchmark inputs: random integer arrays and search targets.

    Every value is drawn uniformly from [low, high]. Pass a seed for
    reproducible fixtures; leave it as None for fresh randomness.
    """

    def __init__(
        self,
        seed: Optional[int] = None,
        low: int = MIN_VALUE,
        high: int = MAX_VALUE,
        numeric: Optional[Numeric] = None,
    ):
        if low > high:
            raise ValueError(f"Invalid value range: low={low} > high={high}")

        self.seed = seed
        self.low = low
        self.high = high
        self.numeric = numeric if numeric is not None else Numeric(seed=seed)

    def random_array(self, size: int) -> List[int]:
        """Generate `size` random integers in arbitrary order."""
        if size < 0:
            raise ValueError(f"Array size must be non-negative, got {size}")
        # Same inclusive draw as random_target, so both share one value range
        return [
            self.numeric.integer_number(start=self.low, end=self.high)
            for _ in range(size)
        ]

    def sorted_array(self, size: int) -> List[int]:
        """Generate `size` random integers in non-decreasing order."""
        return sorted(self.random_array(size))

    def random_target(self) -> int:
        """Draw a search target independently of any generated array."""
        return self.numeric.integer_number(start=self.low, end=self.high)

    def __repr__(self) -> str:
        return f"InputGenerator(seed={self.seed!r}, low={self.low}, high={self.high})"
