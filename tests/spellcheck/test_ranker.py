"""
Tests for the Suggestion Ranker
===============================
"""

import pytest

from code_spell.dictionary import DictionaryStore
from code_spell.profiles import get_profile
from code_spell.ranker import SuggestionRanker, edit_distance


class TestEditDistance:

    @pytest.mark.parametrize('a, b, expected', [
        ('kitten', 'sitting', 3),
        ('retrun', 'return', 2),
        ('flaw', 'lawn', 2),
        ('', 'abc', 3),
        ('abc', '', 3),
        ('same', 'same', 0),
        ('a', 'b', 1),
    ])
    def test_known_distances(self, a, b, expected):
        assert edit_distance(a, b) == expected

    @pytest.mark.parametrize('a, b', [
        ('retrun', 'return'),
        ('prinft', 'printf'),
        ('x', 'malloc'),
        ('getname', 'setvalue'),
    ])
    def test_symmetric(self, a, b):
        assert edit_distance(a, b) == edit_distance(b, a)


@pytest.fixture
def c_snapshot():
    return DictionaryStore(get_profile('c')).snapshot()


@pytest.fixture
def ranker():
    return SuggestionRanker(get_profile('c'))


class TestSuggestionRanker:

    def test_return_is_top_suggestion(self, ranker, c_snapshot):
        assert ranker.suggest('retrun', c_snapshot.words)[0] == 'return'

    def test_uppercase_input_is_lowered(self, ranker, c_snapshot):
        assert ranker.suggest('RETRUN', c_snapshot.words)[0] == 'return'

    def test_at_most_five(self, ranker, c_snapshot):
        assert len(ranker.suggest('st', c_snapshot.words)) == 5

    def test_far_words_are_excluded(self, ranker, c_snapshot):
        assert ranker.suggest('qqqqqqqqqqqqqqqqqqqq', c_snapshot.words) == []

    def test_scores_are_descending(self, ranker, c_snapshot):
        ranked = ranker.rank('prinft', c_snapshot.words)
        scores = [s.score for s in ranked]
        assert scores == sorted(scores, reverse=True)
        assert all(s.distance <= 3 for s in ranked)

    def test_score_bonuses(self, ranker):
        # distance 2, same length, same first letter, C vocabulary
        assert ranker.score('prinft', 'printf', 2) == pytest.approx(1 / 3 + 0.5 + 0.3 + 0.2)
        # not in C vocabulary, different length and first letter
        assert ranker.score('abc', 'zzzz', 1) == pytest.approx(0.5)

    def test_ties_keep_dictionary_order(self, ranker):
        ranked = ranker.suggest('qzb', ['qza', 'qzc', 'qzd'])
        assert ranked == ['qza', 'qzc', 'qzd']

    def test_display_casing_does_not_change_ranking(self, ranker):
        ranked = ranker.suggest('qzb', ['qza', 'qzc'], {'qzc': 'QzC'})
        assert ranked == ['qza', 'QzC']

    def test_language_casing_is_returned(self):
        snapshot = DictionaryStore(get_profile('python')).snapshot()
        ranker = SuggestionRanker(get_profile('python'))
        assert ranker.suggest('ture', snapshot.words, snapshot.display)[0] == 'True'

    def test_custom_limits(self, c_snapshot):
        ranker = SuggestionRanker(get_profile('c'), max_suggestions=2, max_distance=1)
        suggestions = ranker.suggest('retrun', c_snapshot.words)
        assert len(suggestions) <= 2
        assert 'return' not in suggestions
