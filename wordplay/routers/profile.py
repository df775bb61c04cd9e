from fastapi import APIRouter, Depends

from ..managers.game import GameManager
from ..schemas import ProfileUpdate, UserProfile
from .deps import get_game

router = APIRouter(prefix='/profile', tags=['profile'])

@router.get('')
async def get_profile(game: GameManager = Depends(get_game)) -> UserProfile:
    return game.profile()

@router.put('')
async def update_profile(body: ProfileUpdate, game: GameManager = Depends(get_game)) -> UserProfile:
    return game.update_profile(body.userName, body.isDarkMode)
