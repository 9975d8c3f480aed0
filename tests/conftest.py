import numpy as np
import pytest

from pixfmt.formats import format_registry


@pytest.fixture
def rng():
    return np.random.default_rng(20240611)


@pytest.fixture
def all_formats():
    """Every concrete pixel format, in a stable order."""
    return sorted(format_registry.values(), key=lambda cls: cls.__name__)
