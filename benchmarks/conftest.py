"""pytest-benchmark configuration for dclconv benchmarks."""

from pathlib import Path

import pytest


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest-benchmark with custom settings."""
    config.option.benchmark_min_rounds = 3
    config.option.benchmark_warmup = False

    # Create benchmarks directory for JSON exports
    benchmark_dir = Path(__file__).parent.parent / ".benchmarks"
    benchmark_dir.mkdir(exist_ok=True)
