"""Shared fixtures for the ansicut test suite."""
import pytest


try:
    from pytest_codspeed import BenchmarkFixture  # noqa: F401
except ImportError:
    # test_benchmarks.py runs its workloads once when pytest-codspeed is absent
    @pytest.fixture
    def benchmark():
        """Call the benchmarked function directly and return its result."""
        def _run_once(func, *args, **kwargs):
            return func(*args, **kwargs)
        return _run_once
