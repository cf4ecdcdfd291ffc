from __future__ import annotations
import logging
from pathlib import Path
from typing import Iterator, Union

from .errors import DictionaryNotFoundError
from .managers.store import AnagramStore

logger = logging.getLogger(__name__)


def read_words(path: Union[str, Path]) -> Iterator[str]:
    """Yield each line of a line-delimited word file without its newline."""
    source = Path(path)
    if not source.is_file():
        raise DictionaryNotFoundError(str(source))
    with source.open('r', encoding='utf-8') as handle:
        for line in handle:
            yield line.rstrip('\r\n')


def load_dictionary(store: AnagramStore, path: Union[str, Path]) -> int:
    """Add every line of the file to the store; returns the number of lines read."""
    count = 0
    for word in read_words(path):
        store.add(word)
        count += 1
    logger.info('Loaded %d words from %s', count, path)
    return count
