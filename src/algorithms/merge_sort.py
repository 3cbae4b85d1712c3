from typing import List

from .algorithm import Sorter


class MergeSort(Sorter):
    """Top-down merge sort. Leaves the input untouched and returns a new list."""

    def sort(self, values: List[int]) -> List[int]:
        """Sort values by splitting in half and merging the sorted halves."""
        if len(values) <= 1:
            return list(values)

        mid = len(values) // 2
        left = self.sort(values[:mid])
        right = self.sort(values[mid:])

        return self._merge(left, right)

    def _merge(self, left: List[int], right: List[int]) -> List[int]:
        """Merge two sorted lists into one sorted list."""
        merged: List[int] = []
        i = j = 0

        while i < len(left) and j < len(right):
            # <= keeps equal elements in their original order
            if left[i] <= right[j]:
                merged.append(left[i])
                i += 1
            else:
                merged.append(right[j])
                j += 1

        merged.extend(left[i:])
        merged.extend(right[j:])
        return merged

    def get_algorithm_name(self) -> str:
        return "Merge Sort"
