import random
import sys
from pathlib import Path

import pytest

# Ensure project root is on sys.path to allow `import engines`, `import utils`, etc.
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


@pytest.fixture
def seeded_rng() -> random.Random:
    """Deterministic random source shared by simulation tests."""
    return random.Random(1234)
