import asyncio
import json

from wordplay.profile import ProfileStore
from wordplay.schemas import RoundResult, UserProfile
from wordplay.scoring import (
    hangman_points,
    points_for,
    rain_points,
    rush_points,
    scramble_points,
    spellbee_points,
)
from wordplay.storage import USER_KEY, MemoryStore

from helpers import BrokenStore


def test_point_rules():
    assert hangman_points(4, 250) == 12
    assert hangman_points(6, 0) == 6
    assert scramble_points(hint_used=False) == 3
    assert scramble_points(hint_used=True) == 1
    assert spellbee_points('dictionary', 500) == 1
    assert spellbee_points('extraordinarily', 200) == 10
    assert rush_points(0, 900) == 0
    assert rush_points(3, 100) == 4
    assert rush_points(10, 0) == 5
    assert rain_points(2) == 5
    assert rain_points(9) == 9


def test_points_for_modes():
    assert points_for('hangman', RoundResult(livesLeft=3), 100) == 6
    assert points_for('scramble', RoundResult(won=False), 100) == 0
    assert points_for('chess', RoundResult(), 100) is None


def test_profile_score_is_floored():
    assert UserProfile(score=12.9).score == 12


def test_profile_save_and_load():
    storage = MemoryStore()
    profiles = ProfileStore(storage)
    profiles.save('sam', 7.5, True)
    assert json.loads(storage.get(USER_KEY)) == {'userName': 'sam', 'score': 7, 'isDarkMode': True}

    again = ProfileStore(storage)
    loaded = again.load()
    assert loaded == UserProfile(userName='sam', score=7, isDarkMode=True)
    assert again.add_points(4.2).score == 11


def test_profile_bad_data_and_io_errors():
    assert ProfileStore(MemoryStore()).load() is None
    assert ProfileStore(MemoryStore({USER_KEY: '[1, 2]'})).load() is None
    broken = ProfileStore(BrokenStore())
    assert broken.load() is None
    assert broken.save('kim', 3, False).score == 3


def test_profile_writes_go_through_background_flush():
    storage = MemoryStore()
    profiles = ProfileStore(storage)

    async def scenario():
        profiles.save('kim', 1, False)
        profiles.add_points(2)
        assert storage.get(USER_KEY) is None
        await profiles.flush()

    asyncio.run(scenario())
    assert json.loads(storage.get(USER_KEY))['score'] == 3
    assert storage.writes == 1
