import random
import sys
from pathlib import Path

import pytest

# Make the repository root importable so tests can import 'urlsentry'
# without an install step.
repo_root = Path(__file__).resolve().parents[1]
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from urlsentry.history.storage import MemoryStorage  # noqa: E402
from urlsentry.history.store import HistoryStore  # noqa: E402


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def storage():
    return MemoryStorage()


@pytest.fixture
def store(storage):
    return HistoryStore(storage)
