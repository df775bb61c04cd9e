import random

import pytest

from wordplay.dictionary import DictionaryStore
from wordplay.storage import MemoryStore


@pytest.fixture
def storage():
    return MemoryStore()


@pytest.fixture
def store(storage):
    return DictionaryStore(storage)


@pytest.fixture
def rng():
    return random.Random(1234)
