from pathlib import Path

import pytest

from numpy.random import default_rng

from namegen import get_default_registry, set_default_registry


@pytest.fixture(scope="session")
def lazy_datadir() -> Path:
    return Path(__file__).parent / "reference"


@pytest.fixture(scope="session")
def original_datadir() -> Path:
    return Path(__file__).parent / "reference"


@pytest.fixture
def rng():
    return default_rng(42)


@pytest.fixture
def registry():
    """A fresh default registry, with the kernel prefix reserved."""
    previous = get_default_registry()
    yield set_default_registry()
    set_default_registry(previous)
