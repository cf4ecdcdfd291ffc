from __future__ import annotations
import logging
from enum import Enum
from typing import Iterable, Optional, Protocol, Set

logger = logging.getLogger(__name__)


class Category(str, Enum):
    NOUN = 'noun'
    OTHER = 'other'
    UNKNOWN = 'unknown'


class WordClassifier(Protocol):
    def classify(self, word: str) -> Category:
        ...


class NullClassifier:
    """Used when part-of-speech tagging is switched off; never excludes anything."""

    def classify(self, word: str) -> Category:
        return Category.UNKNOWN


class NltkWordClassifier:
    """Tags single words with NLTK's perceptron tagger.

    The tagger model is fetched on first use if it is not installed. When it
    cannot be loaded every word classifies as UNKNOWN.
    """

    RESOURCES = {
        'averaged_perceptron_tagger_eng': 'taggers/averaged_perceptron_tagger_eng',
        'averaged_perceptron_tagger': 'taggers/averaged_perceptron_tagger',
    }

    def __init__(self):
        self._ready: Optional[bool] = None

    def warm_up(self) -> bool:
        """Load (or fetch) the tagger model ahead of the first lookup."""
        return self._ensure_tagger()

    def _ensure_tagger(self) -> bool:
        if self._ready is not None:
            return self._ready
        import nltk

        for path in self.RESOURCES.values():
            try:
                nltk.data.find(path)
                self._ready = True
                return True
            except LookupError:
                continue
        for name in self.RESOURCES:
            if nltk.download(name, quiet=True):
                self._ready = True
                return True
        logger.warning('NLTK tagger unavailable; proper nouns will not be filtered')
        self._ready = False
        return False

    def classify(self, word: str) -> Category:
        if not word or not self._ensure_tagger():
            return Category.UNKNOWN
        import nltk

        try:
            _, tag = nltk.pos_tag([word])[0]
        except LookupError:
            logger.warning('NLTK tagger failed to load for %r', word)
            return Category.UNKNOWN
        # NN, NNS, NNP, NNPS
        return Category.NOUN if tag.startswith('NN') else Category.OTHER


def is_proper_noun_like(word: str, classifier: WordClassifier) -> bool:
    if not word[:1].isupper():
        return False
    try:
        category = classifier.classify(word)
    except Exception:
        logger.warning('Classifier failed on %r; keeping it', word, exc_info=True)
        return False
    return category is Category.NOUN


def exclude_proper_nouns(candidates: Iterable[str], classifier: WordClassifier) -> Set[str]:
    words = set(candidates)
    excluded = {w for w in words if is_proper_noun_like(w, classifier)}
    if excluded:
        logger.debug('Excluding proper nouns %s', sorted(excluded))
    return words - excluded
