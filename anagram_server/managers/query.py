from __future__ import annotations
from typing import Iterable, List, Optional, Set

from ..canonical import signature
from ..classifier import WordClassifier, exclude_proper_nouns
from .store import AnagramStore


class QueryEngine:
    def __init__(self, store: AnagramStore, classifier: WordClassifier):
        self.store = store
        self.classifier = classifier

    def lookup(self, word: str, include_proper_nouns: bool = True, limit: Optional[int] = None) -> Set[str]:
        key = signature(word)
        anagrams = self.store.members(key) - {word}

        if limit is not None:
            if not include_proper_nouns:
                filtered = exclude_proper_nouns(anagrams, self.classifier)
                return self.store.sample_from(filtered, limit)
            # Sampled from the whole group before the query word is dropped,
            # so fewer than `limit` words may come back
            return self.store.random_sample(key, limit) - {word}
        if not include_proper_nouns:
            return exclude_proper_nouns(anagrams, self.classifier)
        return anagrams

    @staticmethod
    def are_anagrams(words: Iterable[str]) -> bool:
        return len({signature(w) for w in words}) == 1

    def groups_with_signature_length(self, size: int) -> List[List[str]]:
        # filters on key length, not on how many members a group has
        return [members for key, members in self.store.groups() if len(key) >= size]
