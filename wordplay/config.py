from __future__ import annotations
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

DEFAULT_DATA_DIR = Path(__file__).resolve().parent.parent / 'data'


def _split_origins(raw: str) -> List[str]:
    return [o.strip() for o in raw.split(',') if o.strip()] or ['*']


@dataclass
class Settings:
    data_dir: Path = DEFAULT_DATA_DIR
    fallback_word: str = 'apple'
    log_level: str = 'INFO'
    cors_origins: List[str] = field(default_factory=lambda: ['*'])

    @classmethod
    def from_env(cls) -> 'Settings':
        return cls(
            data_dir=Path(os.environ.get('WORDPLAY_DATA_DIR') or DEFAULT_DATA_DIR),
            fallback_word=os.environ.get('WORDPLAY_FALLBACK_WORD') or 'apple',
            log_level=(os.environ.get('WORDPLAY_LOG_LEVEL') or 'INFO').upper(),
            cors_origins=_split_origins(os.environ.get('WORDPLAY_CORS_ORIGINS', '*')),
        )
