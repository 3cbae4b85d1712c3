from dataclasses import dataclass
from typing import Any, Dict, Iterable, Iterator, Tuple, Union

from ..algorithms.algorithm import AlgorithmCategory, Searcher, Sorter
from ..algorithms.binary_search import BinarySearch
from ..algorithms.bubble_sort import BubbleSort
from ..algorithms.linear_search import LinearSearch
from ..algorithms.merge_sort import MergeSort
from ..algorithms.quick_sort import QuickSort
from .errors import UnknownAlgorithm

Implementation = Union[Sorter, Searcher]


@dataclass(frozen=True)
class AlgorithmDescriptor:
    """
    Static metadata for a registered algorithm.

    Attributes:
        id: Unique, stable key used to request a benchmark
        display_name: Human-readable name
        complexity_label: Asymptotic complexity for display, never parsed
        category: Whether the algorithm sorts or searches
        requires_sorted_input: Whether benchmark inputs must be pre-sorted
    """

    id: str
    display_name: str
    complexity_label: str
    category: AlgorithmCategory
    requires_sorted_input: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Listing entry in the shape served by the algorithms endpoint."""
        return {
            "id": self.id,
            "name": self.display_name,
            "complexity": self.complexity_label,
            "type": self.category.value,
        }


class AlgorithmRegistry:
    """Read-only mapping from algorithm id to descriptor and implementation."""

    def __init__(self, entries: Iterable[Tuple[AlgorithmDescriptor, Implementation]]):
        self._entries: Dict[str, Tuple[AlgorithmDescriptor, Implementation]] = {}

        for descriptor, implementation in entries:
            if descriptor.id in self._entries:
                raise ValueError(f"Duplicate algorithm id: {descriptor.id}")
            if descriptor.category is not implementation.category:
                raise ValueError(
                    f"{descriptor.id} is registered as {descriptor.category.value} "
                    f"but {implementation} is {implementation.category.value}"
                )
            self._entries[descriptor.id] = (descriptor, implementation)

    def describe(self) -> Tuple[AlgorithmDescriptor, ...]:
        """Descriptors in registration order."""
        return tuple(descriptor for descriptor, _ in self._entries.values())

    def resolve(self, algorithm_id: str) -> Tuple[AlgorithmDescriptor, Implementation]:
        """Look up an algorithm, raising UnknownAlgorithm on a miss."""
        if not isinstance(algorithm_id, str) or algorithm_id not in self._entries:
            raise UnknownAlgorithm(algorithm_id)
        return self._entries[algorithm_id]

    def ids(self) -> Tuple[str, ...]:
        return tuple(self._entries)

    def __contains__(self, algorithm_id: object) -> bool:
        return algorithm_id in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[AlgorithmDescriptor]:
        return iter(self.describe())


def _searcher_entry(
    algorithm_id: str, complexity: str, searcher: Searcher
) -> Tuple[AlgorithmDescriptor, Implementation]:
    descriptor = AlgorithmDescriptor(
        id=algorithm_id,
        display_name=searcher.get_algorithm_name(),
        complexity_label=complexity,
        category=AlgorithmCategory.SEARCHING,
        requires_sorted_input=searcher.requires_sorted_input,
    )
    return descriptor, searcher


def _sorter_entry(
    algorithm_id: str, complexity: str, sorter: Sorter
) -> Tuple[AlgorithmDescriptor, Implementation]:
    descriptor = AlgorithmDescriptor(
        id=algorithm_id,
        display_name=sorter.get_algorithm_name(),
        complexity_label=complexity,
        category=AlgorithmCategory.SORTING,
    )
    return descriptor, sorter


def create_default_registry() -> AlgorithmRegistry:
    """Build the registry of the textbook algorithms shipped with the analyzer."""
    return AlgorithmRegistry(
        [
            _sorter_entry("bubbleSort", "O(n²)", BubbleSort()),
            _sorter_entry("mergeSort", "O(n log n)", MergeSort()),
            _sorter_entry("quickSort", "O(n log n) avg", QuickSort()),
            _searcher_entry("linearSearch", "O(n)", LinearSearch()),
            _searcher_entry("binarySearch", "O(log n)", BinarySearch()),
        ]
    )


DEFAULT_REGISTRY = create_default_registry()
