from __future__ import annotations
import logging
import os
from dataclasses import dataclass, field
from typing import List

LOG_FORMAT = '%(asctime)s %(levelname)s %(name)s: %(message)s'

# Headers a browser client may send on cross-origin requests
ALLOWED_HEADERS = ['Authorization', 'Content-Type', 'Accept', 'X-User-Email', 'X-Auth-Token']
ALLOWED_METHODS = ['GET', 'PUT', 'POST', 'DELETE', 'OPTIONS']


def _split_csv(raw: str) -> List[str]:
    return [part.strip() for part in raw.split(',') if part.strip()]


@dataclass(frozen=True)
class Settings:
    dictionary_path: str = 'dictionary.txt'
    cors_origins: List[str] = field(default_factory=lambda: ['*'])
    log_level: str = 'INFO'
    pos_tagging: str = 'nltk'

    @classmethod
    def from_env(cls) -> 'Settings':
        return cls(
            dictionary_path=os.environ.get('ANAGRAM_DICTIONARY_PATH', 'dictionary.txt'),
            cors_origins=_split_csv(os.environ.get('ANAGRAM_CORS_ORIGINS', '*')) or ['*'],
            log_level=os.environ.get('ANAGRAM_LOG_LEVEL', 'INFO').upper(),
            pos_tagging=os.environ.get('ANAGRAM_POS_TAGGING', 'nltk').lower(),
        )

    @property
    def tagging_enabled(self) -> bool:
        return self.pos_tagging not in ('off', 'none', 'false', '0')


def setup_logging(level: str = 'INFO') -> None:
    """Configure root logging once per process."""
    logging.basicConfig(level=getattr(logging, level, logging.INFO), format=LOG_FORMAT)


settings = Settings.from_env()
