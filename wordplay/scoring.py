from __future__ import annotations
import math
from typing import Optional

from .schemas import RoundResult

# Point rules per game mode. Larger dictionaries earn bigger multipliers
# in the modes that draw from them.


def hangman_points(lives_left: int, dictionary_size: int) -> int:
    return max(0, lives_left) * (1 + dictionary_size // 100)


def scramble_points(hint_used: bool) -> int:
    return 1 if hint_used else 3


def spellbee_points(word: str, dictionary_size: int) -> int:
    raw = dictionary_size / 100 * (len(word) - 10)
    return math.floor(max(1, raw))


def rush_points(streak: int, dictionary_size: int) -> float:
    if streak <= 0:
        return 0
    return min(dictionary_size / 100 + streak, 5)


def rain_points(taps: int) -> int:
    return max(5, taps)


MODES = ('hangman', 'scramble', 'spellbee', 'rush', 'rain')


def points_for(mode: str, result: RoundResult, dictionary_size: int) -> Optional[float]:
    """Points earned for a finished round, or None for an unknown mode."""
    if mode not in MODES:
        return None
    if not result.won:
        return 0
    if mode == 'hangman':
        return hangman_points(result.livesLeft, dictionary_size)
    if mode == 'scramble':
        return scramble_points(result.hintUsed)
    if mode == 'spellbee':
        return spellbee_points(result.word, dictionary_size)
    if mode == 'rush':
        return rush_points(result.streak, dictionary_size)
    return rain_points(result.taps)
