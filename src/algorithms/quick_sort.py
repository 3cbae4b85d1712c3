from typing import List

from .algorithm import Sorter


class QuickSort(Sorter):
    """
    Quick Sort Algorithm Implementation

    In-place quick sort driven by an explicit stack of (low, high) ranges, so
    deep partitions never hit the interpreter recursion limit. The pivot is
    the median of the first, middle and last elements of each range.

    Time Complexity: O(n log n) - average case, O(n^2) worst case
    Space Complexity: O(log n) - range stack
    """

    def sort(self, values: List[int]) -> List[int]:
        stack = [(0, len(values) - 1)]

        while stack:
            low, high = stack.pop()
            if low >= high:
                continue

            p = self._partition(values, low, high)

            # Push the larger side first so the smaller one is handled next
            if p - low > high - p:
                stack.append((low, p - 1))
                stack.append((p + 1, high))
            else:
                stack.append((p + 1, high))
                stack.append((low, p - 1))

        return values

    def _partition(self, values: List[int], low: int, high: int) -> int:
        """Lomuto partition around a median-of-three pivot; returns its index."""
        mid = (low + high) // 2

        if values[mid] < values[low]:
            values[low], values[mid] = values[mid], values[low]
        if values[high] < values[low]:
            values[low], values[high] = values[high], values[low]
        if values[high] < values[mid]:
            values[mid], values[high] = values[high], values[mid]

        # Median now sits at mid; move it to the end as the pivot
        values[mid], values[high] = values[high], values[mid]
        pivot = values[high]

        i = low
        for j in range(low, high):
            if values[j] < pivot:
                values[i], values[j] = values[j], values[i]
                i += 1

        values[i], values[high] = values[high], values[i]
        return i

    def get_algorithm_name(self) -> str:
        return "Quick Sort"
