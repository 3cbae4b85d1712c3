"""
Simple benchmark runner for sorting and searching algorithms.

Usage examples:
    python -m src.benchmark.simple_runner --list
    python -m src.benchmark.simple_runner --algorithms quickSort,mergeSort
    python simple_runner.py --algorithms all --sizes 100,500,1000 --runs 3 --json
"""

import argparse
import json
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent.parent
sys.path.append(str(project_root))

# Import after path setup
from data.generate import InputGenerator  # noqa: E402
from src.benchmark import (  # noqa: E402
    DEFAULT_CONFIG,
    AlgorithmExecutionFailure,
    BenchmarkConfig,
    BenchmarkEngine,
    UnknownAlgorithm,
)
from src.benchmark.report import (  # noqa: E402
    plot_reports,
    print_algorithms,
    print_report,
    reports_to_payload,
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Benchmark sorting and searching algorithms")
    parser.add_argument(
        "--list", action="store_true", help="List available algorithms and exit"
    )
    parser.add_argument(
        "--algorithms",
        default="all",
        help="Comma-separated list of algorithm ids to test, or 'all'",
    )
    parser.add_argument(
        "--sizes",
        default=",".join(str(size) for size in DEFAULT_CONFIG.sizes),
        help="Comma-separated list of input sizes",
    )
    parser.add_argument(
        "--runs",
        type=int,
        default=DEFAULT_CONFIG.runs_per_size,
        help="Number of timed runs averaged per size",
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="Seed for reproducible inputs"
    )
    parser.add_argument(
        "--json", action="store_true", help="Print results as JSON instead of tables"
    )
    parser.add_argument(
        "--output-prefix", default="benchmark", help="Prefix for output plot files"
    )
    parser.add_argument("--no-plots", action="store_true", help="Skip generating plots")
    parser.add_argument(
        "--verbose", action="store_true", help="Show per-size progress"
    )
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        sizes = [int(size.strip()) for size in args.sizes.split(",") if size.strip()]
        config = BenchmarkConfig(
            sizes=tuple(sizes), runs_per_size=args.runs, verbose=args.verbose
        )
    except ValueError as e:
        print(f"Error: invalid configuration: {e}")
        return 1

    seed = args.seed
    engine = BenchmarkEngine(
        config=config, generator_factory=lambda: InputGenerator(seed=seed)
    )
    descriptors = {d.id: d for d in engine.list_algorithms()}

    if args.list:
        if args.json:
            print(json.dumps({"algorithms": [d.to_dict() for d in descriptors.values()]}))
        else:
            print_algorithms(list(descriptors.values()))
        return 0

    if args.algorithms.strip() == "all":
        algorithms = list(descriptors)
    else:
        algorithms = [alg.strip() for alg in args.algorithms.split(",") if alg.strip()]

    reports = []
    try:
        for algorithm_id in algorithms:
            report = engine.run_benchmark(algorithm_id)
            reports.append(report)
            if not args.json:
                print_report(report, descriptors.get(algorithm_id))
    except UnknownAlgorithm as e:
        print(f"Error: {e}")
        print(f"Available algorithms: {', '.join(descriptors)}")
        return 1
    except AlgorithmExecutionFailure as e:
        print(f"Error: {e}")
        return 1

    if args.json:
        payload = reports_to_payload(reports)
        print(json.dumps(payload[0] if len(payload) == 1 else payload, indent=2))

    if not args.no_plots and reports:
        filename = plot_reports(
            reports,
            plot_name=args.output_prefix,
            descriptors=descriptors,
            show_plots=False,
        )
        if not args.json:
            print(f"\nBenchmark completed! Plot saved as {filename}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
