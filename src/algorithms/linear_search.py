from typing import Sequence

from .algorithm import Searcher


class LinearSearch(Searcher):
    """
    Linear Search Algorithm Implementation

    Scans the values front to back and stops at the first match. Works on
    unordered data.

    Time Complexity: O(n) - worst case, best case O(1), average case O(n/2)
    Space Complexity: O(1) - constant extra space
    """

    requires_sorted_input = False

    def search(self, values: Sequence[int], target: int) -> int:
        """
        Search for the target with a sequential scan.

        Args:
            values: Integers to search through
            target: Integer to search for

        Returns:
            Index of the first occurrence of target, or -1 if absent
        """
        for i, element in enumerate(values):
            if element == target:
                return i

        return -1

    def get_algorithm_name(self) -> str:
        """
        Get the name of the algorithm.

        Returns:
            A string representing the algorithm name
        """
        return "Linear Search"
