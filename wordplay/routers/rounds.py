from fastapi import APIRouter, Depends, HTTPException

from ..managers.game import GameManager
from ..schemas import Award, HangmanRound, RandomWord, RoundResult, RushRound, ScrambleRound
from .deps import get_game

router = APIRouter(tags=['rounds'])

@router.get('/words/random')
async def random_word(game: GameManager = Depends(get_game)) -> RandomWord:
    return RandomWord(word=game.random_word())

@router.get('/rounds/rush')
async def rush(game: GameManager = Depends(get_game)) -> RushRound:
    return game.rush_round()

@router.get('/rounds/scramble')
async def scramble(game: GameManager = Depends(get_game)) -> ScrambleRound:
    return game.scramble_round()

@router.get('/rounds/hangman')
async def hangman(game: GameManager = Depends(get_game)) -> HangmanRound:
    return game.hangman_round()

@router.post('/rounds/{mode}/result')
async def finish_round(mode: str, result: RoundResult, game: GameManager = Depends(get_game)) -> Award:
    award = game.award(mode, result)
    if award is None:
        raise HTTPException(status_code=404, detail=f'Unknown game mode: {mode}')
    return award
