"""
tests/conftest.py

Configuration for pytest.
"""

from collections.abc import Iterator
from pathlib import Path

import pytest

from devtools_har.utils.har_utils import strict_parsing


@pytest.fixture(scope="session")
def tests_root() -> Path:
    """
    Root directory for tests.
    Returns:
        Path to the tests directory.
    """
    return Path(__file__).parent.resolve()


@pytest.fixture(scope="session")
def data_dir(tests_root: Path) -> Path:
    """
    Directory containing test data files.
    Returns:
        Path to tests/data.
    """
    return tests_root / "data"


@pytest.fixture(scope="session")
def input_data_dir(data_dir: Path) -> Path:
    """
    Directory containing input test data files.
    Returns:
        Path to tests/data/input.
    """
    return data_dir / "input"


@pytest.fixture(scope="session")
def har_dir(input_data_dir: Path) -> Path:
    """
    Directory containing HAR fixture files.
    Returns:
        Path to tests/data/input/har.
    """
    return input_data_dir / "har"


@pytest.fixture(autouse=True)
def strict() -> Iterator[None]:
    """
    Run every test in strict mode, so an unexpected anomaly fails the test.
    """
    with strict_parsing(True):
        yield


@pytest.fixture
def lenient(strict: None) -> Iterator[None]:
    """
    Switch back to lenient mode for tests that exercise defaulting of malformed input.
    """
    with strict_parsing(False):
        yield
