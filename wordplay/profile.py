from __future__ import annotations
import logging
from typing import Optional

from pydantic import ValidationError

from .managers.persistence import SaveScheduler
from .schemas import UserProfile
from .storage import USER_KEY, KeyValueStore, StorageError

log = logging.getLogger('wordplay')


class ProfileStore:
    """Name, running score and theme flag, kept under their own slot."""

    def __init__(self, storage: KeyValueStore, key: str = USER_KEY):
        self.storage = storage
        self.key = key
        self.profile = UserProfile()
        self.saver = SaveScheduler(self.profile_json, self._write)

    def load(self) -> Optional[UserProfile]:
        try:
            raw = self.storage.get(self.key)
        except StorageError:
            log.exception('Failed to load user profile')
            return None
        if raw is None:
            return None
        try:
            self.profile = UserProfile.model_validate_json(raw)
        except ValidationError:
            log.warning('Ignoring malformed user profile under %s', self.key)
            return None
        return self.profile

    def save(self, user_name: str, score: float, is_dark_mode: bool) -> UserProfile:
        self.profile = UserProfile(userName=user_name, score=score, isDarkMode=is_dark_mode)
        self.saver.request()
        return self.profile

    def add_points(self, points: float) -> UserProfile:
        p = self.profile
        return self.save(p.userName, p.score + points, p.isDarkMode)

    def profile_json(self) -> str:
        return self.profile.model_dump_json()

    async def flush(self) -> None:
        await self.saver.drain()

    def _write(self, payload: str) -> bool:
        try:
            self.storage.set(self.key, payload)
        except StorageError:
            log.exception('Failed to save user profile')
            return False
        return True
