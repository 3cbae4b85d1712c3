"""
Presentation helpers for benchmark reports: console tables and plots.
"""

from typing import Dict, List, Optional, Sequence

import matplotlib.pyplot as plt

from .benchmark import BenchmarkReport
from .registry import AlgorithmDescriptor

COLORS = ["blue", "green", "red", "orange", "purple", "brown"]


def print_algorithms(descriptors: Sequence[AlgorithmDescriptor]) -> None:
    """Print the available algorithms as a table."""
    header = f"{'ID':<14} {'Name':<15} {'Complexity':<16} {'Type':<10}"
    print(header)
    print("-" * len(header))
    for descriptor in descriptors:
        print(
            f"{descriptor.id:<14} {descriptor.display_name:<15} "
            f"{descriptor.complexity_label:<16} {descriptor.category.value:<10}"
        )


def print_report(
    report: BenchmarkReport, descriptor: Optional[AlgorithmDescriptor] = None
) -> None:
    """Print detailed benchmark results"""
    name = descriptor.display_name if descriptor else report.algorithm_id
    print(f"\n{name} ({report.algorithm_id}):")
    if descriptor:
        print(f"Expected complexity: {descriptor.complexity_label}")

    header = f"{'N':<10} {'Time (ms)':<12}"
    print(header)
    print("-" * len(header))
    for point in report.points:
        print(f"{point.n:<10} {point.time_ms:<12.4f}")


def plot_reports(
    reports: Sequence[BenchmarkReport],
    plot_name: str,
    descriptors: Optional[Dict[str, AlgorithmDescriptor]] = None,
    show_plots: bool = True,
    save_plot: bool = True,
) -> Optional[str]:
    """
    Plot execution time against input size, one line per report.

    Args:
        reports: Reports to draw
        plot_name: Chart title and file name stem
        descriptors: Optional descriptors keyed by id, used for legend labels
        show_plots: Display the figure interactively
        save_plot: Save the figure as <plot_name>.png

    Returns:
        The saved file name, or None when the plot was not saved
    """
    descriptors = descriptors or {}
    plt.figure(figsize=(12, 8))

    for i, report in enumerate(reports):
        descriptor = descriptors.get(report.algorithm_id)
        label = (
            f"{descriptor.display_name} {descriptor.complexity_label}"
            if descriptor
            else report.algorithm_id
        )
        plt.plot(
            report.sizes,
            report.times,
            color=COLORS[i % len(COLORS)],
            linestyle="-",
            marker="o",
            label=label,
        )

    plt.xlabel("Input Size (n)")
    plt.ylabel("Time (ms)")
    plt.title(f"{plot_name} - Execution Time")
    plt.legend()
    plt.grid(True, alpha=0.3)
    plt.tight_layout()

    filename: Optional[str] = None
    if save_plot:
        filename = f"{plot_name}.png"
        plt.savefig(filename, dpi=300, bbox_inches="tight")

    if show_plots:
        plt.show()
    else:
        plt.close()

    return filename


def reports_to_payload(reports: List[BenchmarkReport]) -> List[dict]:
    return [report.to_dict() for report in reports]
