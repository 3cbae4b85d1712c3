from typing import Sequence

from .algorithm import Searcher


class BinarySearch(Searcher):
    """Binary search on sorted integer data."""

    requires_sorted_input = True

    def search(self, values: Sequence[int], target: int) -> int:
        """Search for target using binary search."""
        left, right = 0, len(values) - 1

        while left <= right:
            mid = (left + right) // 2
            mid_value = values[mid]

            if mid_value == target:
                return mid
            elif mid_value < target:
                left = mid + 1
            else:
                right = mid - 1

        return -1

    def get_algorithm_name(self) -> str:
        return "Binary Search"
