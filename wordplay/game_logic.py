from __future__ import annotations
import random
from typing import Optional

from .schemas import HangmanRound, RushRound, ScrambleRound
from .selection import WordSelector

HANGMAN_LIVES = 6


# Fisher-Yates; never returns the word itself unless no other arrangement exists
def shuffle_word(word: str, rng: Optional[random.Random] = None) -> str:
    if not word:
        return ''
    rng = rng or random.Random()
    if len(set(word)) < 2:
        return word
    while True:
        chars = list(word)
        for i in range(len(chars) - 1, 0, -1):
            j = rng.randint(0, i)
            chars[i], chars[j] = chars[j], chars[i]
        scrambled = ''.join(chars)
        if scrambled != word:
            return scrambled


# one random edit: drop, double, or swap neighbours; a failed length guard is a no-op
def make_fake(word: str, rng: Optional[random.Random] = None) -> str:
    rng = rng or random.Random()
    chars = list(word)
    kind = rng.randrange(3)
    if kind == 0:
        if len(chars) > 3:
            del chars[rng.randrange(len(chars))]
    elif kind == 1:
        if chars:
            idx = rng.randrange(len(chars))
            chars.insert(idx, chars[idx])
    else:
        if len(chars) > 1:
            idx = rng.randrange(len(chars) - 1)
            chars[idx], chars[idx + 1] = chars[idx + 1], chars[idx]
    return ''.join(chars)


def generate_rush_round(selector: WordSelector, rng: Optional[random.Random] = None) -> RushRound:
    rng = rng or selector.rng
    word = selector.get_random_word().lower()
    if rng.random() < 0.5:
        return RushRound(word=word, isReal=True)
    return RushRound(word=make_fake(word, rng), isReal=False)


def generate_scramble_round(selector: WordSelector, rng: Optional[random.Random] = None) -> ScrambleRound:
    rng = rng or selector.rng
    word = selector.get_random_word().lower()
    return ScrambleRound(word=word, scrambled=shuffle_word(word, rng).upper(), hint=word[:1])


def generate_hangman_round(selector: WordSelector, rng: Optional[random.Random] = None) -> HangmanRound:
    rng = rng or selector.rng
    word = selector.get_random_word().lower()
    unique = list(dict.fromkeys(word))
    # roughly a third of the distinct letters start revealed, at least one
    reveal = max(1, len(unique) // 3)
    revealed = rng.sample(unique, reveal)
    return HangmanRound(word=word, revealed=sorted(revealed), lives=HANGMAN_LIVES)
