from __future__ import annotations
from pydantic import BaseModel, Field, field_validator
from typing import List, Optional

class RushRound(BaseModel):
    word: str
    isReal: bool

class ScrambleRound(BaseModel):
    word: str
    scrambled: str
    hint: str

class HangmanRound(BaseModel):
    word: str
    revealed: List[str] = []
    lives: int = 6

class AddWords(BaseModel):
    text: str = ''

class AddWordsResult(BaseModel):
    inserted: int
    size: int

class DeleteResult(BaseModel):
    word: str
    removed: bool
    size: int

class DictionarySize(BaseModel):
    size: int

class WordList(BaseModel):
    words: List[str]

class RandomWord(BaseModel):
    word: str

class RoundResult(BaseModel):
    won: bool = True
    livesLeft: int = 0
    hintUsed: bool = False
    word: str = ''
    streak: int = 0
    taps: int = 0

class Award(BaseModel):
    mode: str
    points: float
    score: int

class UserProfile(BaseModel):
    userName: str = ''
    score: int = 0
    isDarkMode: bool = False

    # stored scores are whole points; fractional awards round down
    @field_validator('score', mode='before')
    @classmethod
    def floor_score(cls, v):
        if isinstance(v, float):
            return int(v // 1)
        return v

class ProfileUpdate(BaseModel):
    userName: Optional[str] = Field(default=None, max_length=40)
    isDarkMode: Optional[bool] = None
