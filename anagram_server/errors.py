from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar('T')


class ErrorKind(Enum):
    INVALID_JSON = (400, 'Invalid JSON')
    MISSING_FIELD = (422, 'Missing field')

    @property
    def status_code(self) -> int:
        return self.value[0]

    @property
    def message(self) -> str:
        return self.value[1]


@dataclass(frozen=True)
class ParseResult(Generic[T]):
    """Outcome of parsing a request body: either a value or an error kind."""
    value: Optional[T] = None
    error: Optional[ErrorKind] = None
    detail: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> 'ParseResult[T]':
        return cls(value=value)

    @classmethod
    def failure(cls, error: ErrorKind, detail: Optional[str] = None) -> 'ParseResult[T]':
        return cls(error=error, detail=detail)

    def message(self) -> str:
        if self.error is None:
            return ''
        if self.detail:
            return f'{self.error.message}: {self.detail}'
        return self.error.message


class AnagramError(Exception):
    status_code = 500


class EmptyStoreError(AnagramError):
    status_code = 404

    def __init__(self, message: str = 'No words stored'):
        super().__init__(message)


class NoGroupsError(AnagramError):
    status_code = 404

    def __init__(self, message: str = 'No anagram groups stored'):
        super().__init__(message)


class DictionaryNotFoundError(AnagramError):
    status_code = 500

    def __init__(self, path: str):
        super().__init__(f'Dictionary file not found: {path}')
        self.path = path
