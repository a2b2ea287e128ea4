import pytest

from wordle_player.feedback import get_response
from wordle_player.knowledge import KnowledgeState
from wordle_player.scoring import expected_information_gain
from wordle_player.selector import (ScoredGuess, ideal_guess, rank_guesses, select_guess,
                                    top_n_guesses)
from wordle_player.vocabulary import Vocabulary

from conftest import WORDS

CANDIDATES = ['abcde', 'abcdf', 'abcdg']


def test_highest_score_wins():
    # 'xxxfg' separates all three candidates, 'abcde' only two ways
    assert select_guess(['abcde', 'xxxfg'], CANDIDATES) == 'xxxfg'


def test_equal_score_prefers_candidate():
    candidates = ['abcde', 'abcdf']
    assert expected_information_gain(candidates, 'xxxxe') == expected_information_gain(candidates, 'abcde')
    assert select_guess(['xxxxe', 'abcde'], candidates) == 'abcde'


def test_remaining_ties_keep_list_order():
    candidates = ['abcde', 'abcdf']
    assert select_guess(['xxxxe', 'yyyye'], candidates) == 'xxxxe'
    assert select_guess(['yyyye', 'xxxxe'], candidates) == 'yyyye'
    assert select_guess(['abcdf', 'abcde'], candidates) == 'abcdf'


def test_reproducible():
    candidates = WORDS[5:50]
    first = select_guess(WORDS, candidates)
    assert select_guess(WORDS, candidates) == first
    assert select_guess(Vocabulary(WORDS), Vocabulary(candidates)) == first


def test_selected_guess_has_max_score():
    candidates = WORDS[::3]
    best = select_guess(WORDS, candidates)
    best_score = expected_information_gain(candidates, best)
    assert all(expected_information_gain(candidates, g) <= best_score + 1e-9 for g in WORDS)


@pytest.mark.parametrize('guesses, candidates', [
    ([], ['apple']),
    (['apple'], []),
])
def test_empty_lists_fail(guesses, candidates):
    with pytest.raises(ValueError):
        select_guess(guesses, candidates)


def test_ideal_guess_filters_solutions():
    info = KnowledgeState()
    assert ideal_guess(info, WORDS, WORDS) == select_guess(WORDS, WORDS)

    info.update('raise', get_response('raise', 'grape'))
    remaining = info.filter(WORDS)
    assert ideal_guess(info, WORDS, WORDS) == select_guess(WORDS, remaining)


def test_rank_guesses():
    ranked = rank_guesses(['zzzzz', 'abcde', 'xxxfg'], CANDIDATES)
    assert [g.word for g in ranked] == ['xxxfg', 'abcde', 'zzzzz']
    assert ranked[0] == ScoredGuess('xxxfg', pytest.approx(expected_information_gain(CANDIDATES, 'xxxfg')), False)
    assert ranked[1].is_candidate
    assert ranked[2].score == 0.0


def test_top_n_guesses():
    info = KnowledgeState()
    top = top_n_guesses(info, WORDS, WORDS, 5)
    assert len(top) == 5
    assert top[0].word == select_guess(WORDS, WORDS)
    assert all(a.score >= b.score - 1e-9 for a, b in zip(top, top[1:]))
    assert all(g.is_candidate for g in top)
