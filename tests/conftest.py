import random

import pytest
from fastapi.testclient import TestClient

from anagram_server.classifier import Category
from anagram_server.main import app, get_classifier, get_settings, get_store
from anagram_server.config import Settings
from anagram_server.managers.store import AnagramStore


class FakeClassifier:
    """Classifier stub backed by a fixed word -> category table."""

    def __init__(self, nouns=(), others=()):
        self.nouns = set(nouns)
        self.others = set(others)
        self.calls = []

    def classify(self, word):
        self.calls.append(word)
        if word in self.nouns:
            return Category.NOUN
        if word in self.others:
            return Category.OTHER
        return Category.UNKNOWN


@pytest.fixture
def store():
    return AnagramStore(rng=random.Random(1234))


@pytest.fixture
def seeded_store(store):
    store.add_bulk(['listen', 'silent', 'enlist', 'inlets', 'banana'])
    return store


@pytest.fixture
def classifier():
    return FakeClassifier(nouns={'Silent', 'Enlist', 'Tinsel'}, others={'silent'})


@pytest.fixture
def dictionary_file(tmp_path):
    path = tmp_path / 'dictionary.txt'
    path.write_text('stop\npots\ntops\nAsh\nash\nhas\n', encoding='utf-8')
    return path


@pytest.fixture
def client(store, classifier, dictionary_file):
    """TestClient wired to a fresh store and the fake classifier."""
    config = Settings(dictionary_path=str(dictionary_file))
    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_classifier] = lambda: classifier
    app.dependency_overrides[get_settings] = lambda: config
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
