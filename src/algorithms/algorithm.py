from abc import ABC, abstractmethod
from enum import Enum
from typing import List, Sequence


class AlgorithmCategory(Enum):
    """Kind of algorithm, which decides how benchmark inputs are generated."""

    SORTING = "sorting"
    SEARCHING = "searching"


class Algorithm(ABC):
    """
    Abstract base class for benchmarkable algorithms.

    Concrete algorithms derive from one of the capability classes below
    (Sorter or Searcher) rather than from this class directly.
    """

    category: AlgorithmCategory

    @abstractmethod
    def get_algorithm_name(self) -> str:
        """
        Get the name of the algorithm.

        Returns:
            A string representing the algorithm name
        """
        pass

    def __str__(self) -> str:
        """String representation of the algorithm."""
        return f"{self.get_algorithm_name()}"


class Sorter(Algorithm):
    """
    Capability interface for sorting algorithms.

    Implementations may sort the given list in place or build a new one, but
    must always return the list holding the values in non-decreasing order.
    """

    category = AlgorithmCategory.SORTING

    @abstractmethod
    def sort(self, values: List[int]) -> List[int]:
        """
        Sort the values.

        Args:
            values: The integers to sort. May be mutated.

        Returns:
            The values in non-decreasing order
        """
        pass

    def __call__(self, values: List[int]) -> List[int]:
        return self.sort(values)


class Searcher(Algorithm):
    """
    Capability interface for searching algorithms.

    Attributes:
        requires_sorted_input: Whether the algorithm is only correct on data
            in non-decreasing order
    """

    category = AlgorithmCategory.SEARCHING
    requires_sorted_input: bool = False

    @abstractmethod
    def search(self, values: Sequence[int], target: int) -> int:
        """
        Search for the target in the values.

        Args:
            values: The integers to search through
            target: The integer to look for

        Returns:
            Index of the target if found, -1 otherwise
        """
        pass

    def __call__(self, values: Sequence[int], target: int) -> int:
        return self.search(values, target)
