from __future__ import annotations
import logging
import random
import threading
from typing import Dict, Iterable, List, Optional, Set, Tuple

from ..canonical import signature

logger = logging.getLogger(__name__)


class AnagramStore:
    """Words grouped by signature.

    Each group is an insertion-ordered set (dict keys) of distinct words.
    A group exists only while it has at least one member. All access goes
    through one re-entrant lock and readers only ever get copies.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self._groups: Dict[str, Dict[str, None]] = {}
        self._lock = threading.RLock()
        self._rng = rng or random.Random()

    def add(self, word: str) -> bool:
        key = signature(word)
        with self._lock:
            group = self._groups.setdefault(key, {})
            if word in group:
                return False
            group[word] = None
            return True

    def add_bulk(self, words: Iterable[object]) -> int:
        # Each add is independent; a bad item never stops the rest
        added = 0
        for word in words:
            if not isinstance(word, str):
                logger.warning('Skipping non-string word %r', word)
                continue
            if self.add(word):
                added += 1
        return added

    def remove_word(self, word: str) -> None:
        key = signature(word)
        with self._lock:
            group = self._groups.get(key)
            if group is None:
                return
            group.pop(word, None)
            if not group:
                del self._groups[key]

    def remove_group(self, word: str) -> None:
        with self._lock:
            self._groups.pop(signature(word), None)

    def clear(self) -> None:
        with self._lock:
            self._groups.clear()

    def members(self, key: str) -> Set[str]:
        with self._lock:
            return set(self._groups.get(key, ()))

    def random_sample(self, key: str, n: int) -> Set[str]:
        with self._lock:
            population = list(self._groups.get(key, ()))
        return self.sample_from(population, n)

    def all_signatures(self) -> List[str]:
        with self._lock:
            return list(self._groups)

    def group_size(self, key: str) -> int:
        with self._lock:
            return len(self._groups.get(key, ()))

    def groups(self) -> List[Tuple[str, List[str]]]:
        with self._lock:
            return [(key, list(group)) for key, group in self._groups.items()]

    def word_count(self) -> int:
        with self._lock:
            return sum(len(group) for group in self._groups.values())

    def sample_from(self, words: Iterable[str], n: int) -> Set[str]:
        population = list(words)
        if n <= 0:
            return set()
        if len(population) <= n:
            return set(population)
        return set(self._rng.sample(population, n))
