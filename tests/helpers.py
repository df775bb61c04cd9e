import random

from wordplay.storage import KeyValueStore, StorageError


class BrokenStore(KeyValueStore):
    def get(self, key):
        raise StorageError('disk gone')

    def set(self, key, value):
        raise StorageError('disk full')


class ScriptedRandom(random.Random):
    """Random whose randrange answers come from a fixed script."""

    def __init__(self, picks):
        super().__init__(0)
        self.picks = list(picks)

    def randrange(self, *args, **kwargs):
        return self.picks.pop(0)


def one_edit_or_same(real: str, fake: str) -> bool:
    if real == fake:
        return True
    if len(fake) == len(real) - 1:
        return any(real[:i] + real[i + 1:] == fake for i in range(len(real)))
    if len(fake) == len(real) + 1:
        return any(real[:i] + real[i] + real[i:] == fake for i in range(len(real)))
    if len(fake) == len(real):
        return any(
            real[:i] + real[i + 1] + real[i] + real[i + 2:] == fake
            for i in range(len(real) - 1)
        )
    return False
