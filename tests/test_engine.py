import random

import pytest

from wordle_player.engine import WordleEngine
from wordle_player.errors import InvalidGuessError
from wordle_player.feedback import Response

from conftest import WORDS


def test_guess_until_solved():
    engine = WordleEngine(WORDS, 'grape')
    assert not engine.solved

    assert str(engine.guess('crane')) == '.!!.!'
    assert not engine.solved

    assert engine.guess('grape') == Response.correct()
    assert engine.solved
    assert engine.num_guesses == 2
    assert [g for g, _ in engine.history] == ['crane', 'grape']


def test_illegal_guess_changes_nothing():
    engine = WordleEngine(WORDS, 'grape')
    engine.guess('crane')
    with pytest.raises(InvalidGuessError):
        engine.guess('zzzzz')
    assert engine.num_guesses == 1
    assert not engine.solved


def test_invalid_guess_is_value_error():
    engine = WordleEngine(['apple'], 'apple')
    with pytest.raises(ValueError):
        engine.guess('qwert')


def test_solution_is_always_a_legal_guess():
    engine = WordleEngine(['apple'], 'zebra')
    assert engine.guess('ZEBRA').is_correct


def test_random_secret():
    rng = random.Random(1234)
    solutions = WORDS[:10]
    secrets = {WordleEngine.random(WORDS, solutions, rng).solution for _ in range(50)}
    assert secrets <= set(solutions)
    assert len(secrets) > 1

    with pytest.raises(ValueError):
        WordleEngine.random(WORDS, [])
