from __future__ import annotations
import random
from typing import Iterable, List, Optional

from .dictionary import SEED_WORDS, DictionaryStore

FALLBACK_WORD = 'apple'


class WordSelector:
    """Uniform draws over the seed vocabulary united with the player's words."""

    def __init__(
        self,
        store: DictionaryStore,
        seed_words: Iterable[str] = SEED_WORDS,
        fallback: str = FALLBACK_WORD,
        rng: Optional[random.Random] = None,
    ):
        self.store = store
        self.seed_words = tuple(seed_words)
        self.fallback = fallback or FALLBACK_WORD
        self.rng = rng or random.Random()

    def candidate_pool(self) -> List[str]:
        # dict.fromkeys keeps first-seen order while collapsing duplicates
        return list(dict.fromkeys([*self.seed_words, *self.store.get_all_words()]))

    def get_random_word(self) -> str:
        pool = self.candidate_pool()
        if not pool:
            return self.fallback
        return pool[self.rng.randrange(len(pool))]
