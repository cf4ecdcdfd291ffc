from __future__ import annotations
import json
from pydantic import BaseModel, ValidationError
from typing import Any, List

from .errors import ErrorKind, ParseResult
from .managers.metrics import WordMetrics


class WordsPayload(BaseModel):
    words: List[Any]


class StrictWordsPayload(BaseModel):
    words: List[str]


class WordsAdded(BaseModel):
    words_added: int


class DictionaryLoaded(BaseModel):
    words_loaded: int


class AnagramList(BaseModel):
    anagrams: List[str]


class AnagramCheck(BaseModel):
    anagrams: bool


class AnagramGroups(BaseModel):
    anagrams: List[List[str]]


class TopGroup(BaseModel):
    most_anagrams: List[str]


class Metrics(BaseModel):
    word_count: int
    anagram_min_length: int
    anagram_max_length: int
    anagram_median_length: float
    anagram_average_length: float

    @classmethod
    def from_metrics(cls, metrics: WordMetrics) -> 'Metrics':
        return cls(
            word_count=metrics.word_count,
            anagram_min_length=metrics.min_length,
            anagram_max_length=metrics.max_length,
            anagram_median_length=metrics.median_length,
            anagram_average_length=metrics.average_length,
        )


def parse_words(raw: bytes, strict: bool = False) -> ParseResult[List[Any]]:
    """Parse a `{"words": [...]}` body into a result value instead of raising."""
    try:
        body = json.loads(raw)
    except (ValueError, UnicodeDecodeError):
        return ParseResult.failure(ErrorKind.INVALID_JSON)

    if not isinstance(body, dict) or body.get('words') is None:
        return ParseResult.failure(ErrorKind.MISSING_FIELD, 'words')

    model = StrictWordsPayload if strict else WordsPayload
    try:
        payload = model.model_validate(body)
    except ValidationError:
        return ParseResult.failure(ErrorKind.MISSING_FIELD, 'words')
    return ParseResult.success(payload.words)
