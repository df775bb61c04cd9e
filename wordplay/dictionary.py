from __future__ import annotations
import json
import logging
import re
from typing import List, Tuple

from pydantic import StrictStr, TypeAdapter, ValidationError

from .managers.persistence import SaveScheduler
from .storage import DICTIONARY_KEY, KeyValueStore, StorageError
from .trie import Trie

log = logging.getLogger('wordplay')

# Built-in vocabulary, always unioned with the player's own words when drawing.
SEED_WORDS: Tuple[str, ...] = (
    'apple', 'banana', 'orange', 'garden', 'planet', 'rocket', 'window', 'pencil',
    'candle', 'forest', 'river', 'mountain', 'island', 'castle', 'dragon', 'wizard',
    'puzzle', 'rhythm', 'galaxy', 'jungle', 'bridge', 'coffee', 'guitar', 'harbor',
    'kitten', 'ladder', 'mirror', 'needle', 'oxygen', 'pepper', 'quartz', 'saddle',
    'thunder', 'violin', 'whisper', 'yellow', 'zipper', 'anchor', 'basket', 'circle',
    'desert', 'engine', 'feather', 'glacier', 'hammer', 'jacket', 'lantern', 'marble',
    'notebook', 'pillow', 'rainbow', 'shadow', 'ticket', 'umbrella', 'velvet', 'wallet',
    'education', 'language', 'vocabulary', 'dictionary',
)

_NON_LETTERS = re.compile(r'[^a-z\s]')
_WORD_LIST = TypeAdapter(List[StrictStr])


# lowercase, keep only a-z and whitespace, split on whitespace runs
def tokenize(text) -> List[str]:
    if not text or not isinstance(text, str):
        return []
    return _NON_LETTERS.sub('', text.lower()).split()


class DictionaryStore:
    def __init__(self, storage: KeyValueStore, key: str = DICTIONARY_KEY):
        self.storage = storage
        self.key = key
        self.trie = Trie()
        self.saver = SaveScheduler(self._serialize, self._write)

    def add_words_to_dictionary(self, text) -> int:
        tokens = tokenize(text)
        for token in tokens:
            self.trie.insert(token)
        if tokens:
            self.saver.request()
        return len(tokens)

    def delete_word_from_dictionary(self, word) -> bool:
        removed = self.trie.remove(word)
        if removed:
            self.saver.request()
        return removed

    def reset_dictionary(self) -> None:
        self.trie.clear()
        self.saver.request()

    def get_dictionary_size(self) -> int:
        return self.trie.get_count()

    def get_all_words(self) -> List[str]:
        return self.trie.get_all_words()

    def load_dictionary(self) -> bool:
        try:
            raw = self.storage.get(self.key)
        except StorageError:
            log.exception('Failed to load dictionary')
            return False
        if raw is None:
            return False
        try:
            words = _WORD_LIST.validate_json(raw)
        except ValidationError as e:
            log.warning('Ignoring malformed dictionary blob under %s: %s', self.key, e.error_count())
            return False
        self.trie.from_array(words)
        log.info('Loaded %d words into memory.', self.trie.get_count())
        return True

    def save_dictionary(self) -> bool:
        return self.saver.flush_now()

    async def flush(self) -> None:
        await self.saver.drain()

    def _serialize(self) -> str:
        return json.dumps(self.trie.get_all_words())

    def _write(self, payload: str) -> bool:
        try:
            self.storage.set(self.key, payload)
        except StorageError:
            log.exception('Failed to save dictionary')
            return False
        log.info('Saved dictionary to %s (%d bytes).', self.key, len(payload))
        return True

