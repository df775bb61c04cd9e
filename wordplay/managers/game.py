from __future__ import annotations
import random
from typing import Optional

from ..dictionary import DictionaryStore
from ..game_logic import generate_hangman_round, generate_rush_round, generate_scramble_round, shuffle_word
from ..profile import ProfileStore
from ..schemas import Award, HangmanRound, RoundResult, RushRound, ScrambleRound, UserProfile
from ..scoring import points_for
from ..selection import FALLBACK_WORD, WordSelector
from ..storage import KeyValueStore

class GameManager:
    """Everything the front end talks to: dictionary edits, word draws, rounds, profile."""

    def __init__(self, storage: KeyValueStore, sio=None, fallback: str = FALLBACK_WORD, rng: Optional[random.Random] = None):
        self.sio = sio
        self.rng = rng or random.Random()
        self.dictionary = DictionaryStore(storage)
        self.selector = WordSelector(self.dictionary, fallback=fallback, rng=self.rng)
        self.profiles = ProfileStore(storage)

    def startup(self) -> bool:
        # must run before anything else reads the dictionary
        loaded = self.dictionary.load_dictionary()
        self.profiles.load()
        return loaded

    async def shutdown(self):
        await self.dictionary.flush()
        await self.profiles.flush()

    # dictionary edits

    async def add_words(self, text: str) -> int:
        count = self.dictionary.add_words_to_dictionary(text)
        if count:
            await self._emit_size()
        return count

    async def delete_word(self, word: str) -> bool:
        removed = self.dictionary.delete_word_from_dictionary(word.strip().lower())
        if removed:
            await self._emit_size()
        return removed

    async def reset(self):
        self.dictionary.reset_dictionary()
        await self._emit_size()

    def size(self) -> int:
        return self.dictionary.get_dictionary_size()

    # rounds

    def random_word(self) -> str:
        return self.selector.get_random_word()

    def rush_round(self) -> RushRound:
        return generate_rush_round(self.selector, self.rng)

    def scramble_round(self) -> ScrambleRound:
        return generate_scramble_round(self.selector, self.rng)

    def hangman_round(self) -> HangmanRound:
        return generate_hangman_round(self.selector, self.rng)

    def shuffle(self, word: str) -> str:
        return shuffle_word(word, self.rng)

    # profile

    def profile(self) -> UserProfile:
        return self.profiles.profile

    def update_profile(self, user_name: Optional[str] = None, is_dark_mode: Optional[bool] = None) -> UserProfile:
        p = self.profiles.profile
        return self.profiles.save(
            p.userName if user_name is None else user_name.strip(),
            p.score,
            p.isDarkMode if is_dark_mode is None else is_dark_mode,
        )

    def award(self, mode: str, result: RoundResult) -> Optional[Award]:
        points = points_for(mode, result, self.size())
        if points is None:
            return None
        profile = self.profiles.add_points(points) if points else self.profiles.profile
        return Award(mode=mode, points=points, score=profile.score)

    async def _emit_size(self):
        if self.sio is None:
            return
        await self.sio.emit('dictionary:size', {'size': self.size()})
