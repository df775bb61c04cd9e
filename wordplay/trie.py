from __future__ import annotations
from typing import Dict, Iterable, List

# Prefix tree holding the player's custom vocabulary.


class TrieNode:
    __slots__ = ("children", "is_terminal")

    def __init__(self):
        self.children: Dict[str, TrieNode] = {}
        self.is_terminal: bool = False


class Trie:
    def __init__(self):
        self.root = TrieNode()
        self.word_count = 0

    def insert(self, word) -> None:
        if not word or not isinstance(word, str):
            return
        node = self.root
        for ch in word:
            if ch not in node.children:
                node.children[ch] = TrieNode()
            node = node.children[ch]
        if not node.is_terminal:
            node.is_terminal = True
            self.word_count += 1

    def search(self, word) -> bool:
        if not word or not isinstance(word, str):
            return False
        node = self._walk(word)
        return node is not None and node.is_terminal

    def starts_with(self, prefix) -> bool:
        if not prefix or not isinstance(prefix, str):
            return False
        return self._walk(prefix) is not None

    # unmark, then prune childless non-terminal nodes on the way back up
    def remove(self, word) -> bool:
        if not word or not isinstance(word, str):
            return False
        target = word.lower()
        removed = False

        def prune(node: TrieNode, depth: int) -> bool:
            # returns True when the caller should drop its edge to `node`
            nonlocal removed
            if depth == len(target):
                if not node.is_terminal:
                    return False
                node.is_terminal = False
                self.word_count -= 1
                removed = True
                return not node.children
            ch = target[depth]
            child = node.children.get(ch)
            if child is None:
                return False
            if prune(child, depth + 1):
                del node.children[ch]
                return not node.children and not node.is_terminal
            return False

        prune(self.root, 0)
        return removed

    def get_all_words(self) -> List[str]:
        words: List[str] = []
        stack = [(self.root, "")]
        while stack:
            node, path = stack.pop()
            if node.is_terminal:
                words.append(path)
            for ch, child in node.children.items():
                stack.append((child, path + ch))
        return words

    def from_array(self, words: Iterable) -> None:
        self.clear()
        for w in words:
            self.insert(w)

    def clear(self) -> None:
        self.root = TrieNode()
        self.word_count = 0

    def get_count(self) -> int:
        return self.word_count

    def _walk(self, s: str):
        node = self.root
        for ch in s:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def __len__(self) -> int:
        return self.word_count

    def __contains__(self, word) -> bool:
        return self.search(word)
