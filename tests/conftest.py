import os
import random
import sys

import pytest

# Add the src directory to the Python path to allow imports without installing
sys.path.insert(
    0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
)


@pytest.fixture
def rng():
    """A seeded random generator so randomized spellings are reproducible."""
    return random.Random(1234)
