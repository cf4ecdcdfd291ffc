from __future__ import annotations
from dataclasses import dataclass
from typing import Set

from ..errors import EmptyStoreError, NoGroupsError
from .store import AnagramStore


@dataclass(frozen=True)
class WordMetrics:
    word_count: int
    min_length: int
    max_length: int
    median_length: float
    average_length: float


def compute_metrics(store: AnagramStore) -> WordMetrics:
    words = [w for _, members in store.groups() for w in members]
    if not words:
        raise EmptyStoreError()

    lengths = sorted(len(w) for w in words)
    n = len(lengths)
    # both indices coincide when n is odd
    median = (lengths[(n - 1) // 2] + lengths[n // 2]) / 2.0
    return WordMetrics(
        word_count=n,
        min_length=lengths[0],
        max_length=lengths[-1],
        median_length=median,
        average_length=sum(lengths) / float(n),
    )


def top_group(store: AnagramStore) -> Set[str]:
    """Members of the largest group. Ties go to the group created first; only one is returned."""
    groups = store.groups()
    if not groups:
        raise NoGroupsError()
    _, members = max(groups, key=lambda item: len(item[1]))
    return set(members)
