from typing import List

from .algorithm import Sorter


class BubbleSort(Sorter):
    """
    Bubble Sort Algorithm Implementation

    Repeatedly swaps adjacent out-of-order elements. Sorts in place and stops
    as soon as a full pass performs no swap.

    Time Complexity: O(n^2) - worst and average case, best case O(n)
    Space Complexity: O(1) - constant extra space
    """

    def sort(self, values: List[int]) -> List[int]:
        n = len(values)

        for i in range(n - 1):
            swapped = False
            # The last i elements are already in place
            for j in range(n - 1 - i):
                if values[j] > values[j + 1]:
                    values[j], values[j + 1] = values[j + 1], values[j]
                    swapped = True
            if not swapped:
                break

        return values

    def get_algorithm_name(self) -> str:
        return "Bubble Sort"
