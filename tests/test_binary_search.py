"""
Comprehensive tests for BinarySearch algorithm.

Tests cover search functionality on sorted data, edge cases, and the
logarithmic number of probes.
"""

from unittest.mock import MagicMock

import pytest

from src.algorithms.algorithm import AlgorithmCategory
from src.algorithms.binary_search import BinarySearch


class TestBinarySearch:
    """Test suite for BinarySearch algorithm."""

    def setup_method(self):
        """Set up test fixtures."""
        self.binary_search = BinarySearch()
        self.sorted_values = [1, 3, 5, 7, 9]

    def test_search_found_first_element(self):
        """Test searching for first element in sorted data."""
        assert self.binary_search.search(self.sorted_values, 1) == 0

    def test_search_found_last_element(self):
        """Test searching for last element in sorted data."""
        assert self.binary_search.search(self.sorted_values, 9) == 4

    def test_search_found_middle_element(self):
        """Test searching for middle element."""
        assert self.binary_search.search(self.sorted_values, 5) == 2

    def test_search_not_found(self):
        """Test searching for non-existent element."""
        assert self.binary_search.search(self.sorted_values, 4) == -1

    def test_search_empty(self):
        """Test searching in empty data."""
        assert self.binary_search.search([], 1) == -1

    def test_search_single_element(self):
        assert self.binary_search.search([8], 8) == 0
        assert self.binary_search.search([8], 2) == -1

    @pytest.mark.parametrize(
        "target,expected_index",
        [
            (1, 0),
            (3, 1),
            (5, 2),
            (7, 3),
            (9, 4),
            (0, -1),  # Before first
            (10, -1),  # After last
            (6, -1),  # Between existing
        ],
    )
    def test_search_various_targets(self, target, expected_index):
        """Test search with various targets."""
        assert self.binary_search.search(self.sorted_values, target) == expected_index

    def test_search_duplicates_returns_matching_index(self):
        """With duplicates any matching index is acceptable."""
        values = [2, 4, 4, 4, 6]

        index = self.binary_search.search(values, 4)

        assert values[index] == 4

    def test_search_efficiency_probe_count(self):
        """Binary search reads at most ceil(log2(n + 1)) elements."""
        values = MagicMock()
        data = list(range(0, 2048, 2))  # 1024 elements
        values.__len__.return_value = len(data)
        values.__getitem__.side_effect = data.__getitem__

        assert self.binary_search.search(values, 2046) == 1023
        assert values.__getitem__.call_count <= 11

    def test_requires_sorted_input(self):
        assert BinarySearch.requires_sorted_input is True
        assert self.binary_search.category is AlgorithmCategory.SEARCHING

    def test_sorted_input_with_gaps(self):
        values = list(range(0, 10000, 3))

        for target in (0, 3, 2997, 9999):
            assert self.binary_search.search(values, target) == target // 3
        assert self.binary_search.search(values, 1) == -1

    def test_get_algorithm_name(self):
        """Test get_algorithm_name method."""
        assert self.binary_search.get_algorithm_name() == "Binary Search"
