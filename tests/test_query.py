import pytest

from anagram_server.managers.query import QueryEngine


@pytest.fixture
def engine(seeded_store, classifier):
    seeded_store.add_bulk(['Silent', 'Tinsel'])
    return QueryEngine(seeded_store, classifier)


def test_lookup_without_filters(seeded_store, classifier):
    engine = QueryEngine(seeded_store, classifier)
    assert engine.lookup('listen') == {'silent', 'enlist', 'inlets'}


def test_lookup_excludes_only_exact_query_word(engine):
    assert 'listen' in engine.lookup('LISTEN')


def test_lookup_of_unknown_word(engine):
    assert engine.lookup('zzz') == set()


def test_lookup_filters_proper_nouns(engine):
    assert engine.lookup('listen', include_proper_nouns=False) == {'silent', 'enlist', 'inlets'}


def test_limited_filtered_lookup_samples_after_filtering(engine):
    result = engine.lookup('listen', include_proper_nouns=False, limit=2)
    assert len(result) == 2
    assert result <= {'silent', 'enlist', 'inlets'}


def test_limited_lookup_samples_before_dropping_query_word(engine):
    group = engine.store.members('eilnst')
    for _ in range(50):
        result = engine.lookup('listen', limit=3)
        assert 'listen' not in result
        assert result <= group
        assert len(result) in (2, 3)


def test_limited_lookup_can_come_back_short(seeded_store, classifier):
    seeded_store.add('ab')
    seeded_store.add('ba')
    engine = QueryEngine(seeded_store, classifier)
    assert engine.lookup('ab', limit=2) == {'ba'}
    assert engine.lookup('ab', limit=0) == set()


@pytest.mark.parametrize('words, expected', [
    (['stop', 'pots', 'tops'], True),
    (['stop', 'spot', 'late'], False),
    (['Stop', 'POTS'], True),
    (['alone'], True),
    (['same', 'same'], True),
    ([], False),
])
def test_are_anagrams(words, expected):
    assert QueryEngine.are_anagrams(words) is expected


def test_groups_by_signature_length(engine):
    engine.store.add_bulk(['ab', 'ba', 'a'])
    groups = engine.groups_with_signature_length(6)
    assert sorted(sorted(g) for g in groups) == [
        ['Silent', 'Tinsel', 'enlist', 'inlets', 'listen', 'silent'],
        ['banana'],
    ]
    assert len(engine.groups_with_signature_length(2)) == 3
    assert engine.groups_with_signature_length(7) == []
