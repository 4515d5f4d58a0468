import os
import random
import sys

import pytest

# Ensure repository root importable early
ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def origin(rng):
    """Random (left, top) so that nothing silently assumes a room starts at (0, 0)."""
    return rng.randint(2, 10), rng.randint(2, 10)
