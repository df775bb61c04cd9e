from fastapi import APIRouter, Depends

from ..managers.game import GameManager
from ..schemas import AddWords, AddWordsResult, DeleteResult, DictionarySize, WordList
from .deps import get_game

router = APIRouter(prefix='/dictionary', tags=['dictionary'])

@router.post('/words')
async def add_words(body: AddWords, game: GameManager = Depends(get_game)) -> AddWordsResult:
    inserted = await game.add_words(body.text)
    return AddWordsResult(inserted=inserted, size=game.size())

@router.get('/words')
async def list_words(game: GameManager = Depends(get_game)) -> WordList:
    return WordList(words=sorted(game.dictionary.get_all_words()))

@router.delete('/words/{word}')
async def delete_word(word: str, game: GameManager = Depends(get_game)) -> DeleteResult:
    removed = await game.delete_word(word)
    return DeleteResult(word=word.strip().lower(), removed=removed, size=game.size())

@router.post('/reset')
async def reset(game: GameManager = Depends(get_game)) -> DictionarySize:
    await game.reset()
    return DictionarySize(size=game.size())

@router.get('/size')
async def size(game: GameManager = Depends(get_game)) -> DictionarySize:
    return DictionarySize(size=game.size())
