import pytest

from anagram_server.dictionary import load_dictionary
from anagram_server.errors import DictionaryNotFoundError


def test_load_dictionary(store, dictionary_file):
    assert load_dictionary(store, dictionary_file) == 6
    assert store.members('opst') == {'stop', 'pots', 'tops'}
    assert store.members('ahs') == {'Ash', 'ash', 'has'}


def test_load_dictionary_missing_file(store, tmp_path):
    with pytest.raises(DictionaryNotFoundError):
        load_dictionary(store, tmp_path / 'missing.txt')
