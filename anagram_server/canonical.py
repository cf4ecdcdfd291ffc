from __future__ import annotations


def signature(word: str) -> str:
    # lowercased so 'Ash' and 'ash' share the key 'ahs' as separate members
    return ''.join(sorted(word.lower()))
