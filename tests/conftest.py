"""
Pytest configuration and fixtures for the algorithm benchmark tests.

This file contains shared fixtures and configuration for all test modules.
"""

import sys
from pathlib import Path

import matplotlib
import pytest

# Add the project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Never open plot windows during tests
matplotlib.use("Agg")


@pytest.fixture
def seeded_generator():
    """Provide a deterministic input generator."""
    from data.generate import InputGenerator

    return InputGenerator(seed=42)


@pytest.fixture
def small_config():
    """A short sweep that keeps engine tests fast."""
    from src.benchmark import BenchmarkConfig

    return BenchmarkConfig(sizes=(10, 20, 40), runs_per_size=3)


@pytest.fixture
def sorting_permutations():
    """Every distinct ordering of a small list with a duplicate."""
    import itertools

    return sorted(set(itertools.permutations([5, 3, 3, 1, 4])))


# Configure pytest markers
def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
    config.addinivalue_line("markers", "unit: marks tests as unit tests")


# Custom collection modifiers
def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers automatically."""
    for item in items:
        # Mark integration tests
        if "integration" in item.nodeid or "test_integration" in item.nodeid:
            item.add_marker(pytest.mark.integration)

        # Mark slow tests (tests that might take longer)
        if any(keyword in item.nodeid for keyword in ["large", "stress"]):
            item.add_marker(pytest.mark.slow)

        # Mark unit tests (default for most tests)
        if not any(
            marker.name in ["integration", "slow"] for marker in item.iter_markers()
        ):
            item.add_marker(pytest.mark.unit)


# Pytest options
def pytest_addoption(parser):
    """Add custom command line options."""
    parser.addoption(
        "--run-slow", action="store_true", default=False, help="run slow tests"
    )


def pytest_runtest_setup(item):
    """Setup for individual test runs."""
    # Skip slow tests unless --run-slow is passed
    if "slow" in item.keywords and not item.config.getoption("--run-slow"):
        pytest.skip("need --run-slow option to run")
