"""
Guess Selection
===============

Picks the guess with the highest expected information gain.

Guesses are ordered by:
1. higher score
2. on equal score, a guess that is itself still a candidate (it can win
   outright)
3. earlier position in the guess list
"""

from typing import Iterable, List, NamedTuple, Union

import numpy as np

from .knowledge import KnowledgeState
from .scoring import score_guesses
from .vocabulary import Vocabulary, as_vocabulary


SCORE_DECIMALS = 9  # scores equal to this many places are ties


class ScoredGuess(NamedTuple):
    word: str
    score: float
    is_candidate: bool


def _rank(guesses: Vocabulary, candidates: Vocabulary):
    """Scores, candidate flags and the best-first ordering of ``guesses``."""
    if len(guesses) == 0:
        raise ValueError("Empty guess list")
    if len(candidates) == 0:
        raise ValueError("No candidates")

    scores = score_guesses(guesses.chars, candidates.chars)
    is_candidate = candidates.member_mask(guesses)
    # np.lexsort sorts by the last key first
    order = np.lexsort((np.arange(len(guesses)), ~is_candidate,
                        -np.round(scores, SCORE_DECIMALS)))
    return scores, is_candidate, order


def select_guess(guesses: Union[Vocabulary, Iterable[str]],
                 candidates: Union[Vocabulary, Iterable[str]]) -> str:
    """
    Best guess for a candidate set that has already been filtered.

    Args:
        guesses: words that may be guessed
        candidates: words that could still be the secret

    Raises:
        ValueError: if either list is empty
    """
    guesses = as_vocabulary(guesses)
    candidates = as_vocabulary(candidates)
    _, _, order = _rank(guesses, candidates)
    return guesses[order[0]]


def ideal_guess(knowledge: KnowledgeState, guesses: Union[Vocabulary, Iterable[str]],
                solutions: Union[Vocabulary, Iterable[str]]) -> str:
    """Best guess given what ``knowledge`` rules out of ``solutions``."""
    return select_guess(guesses, knowledge.filter(solutions))


def rank_guesses(guesses: Union[Vocabulary, Iterable[str]],
                 candidates: Union[Vocabulary, Iterable[str]]) -> List[ScoredGuess]:
    """Every guess with its score, best first."""
    guesses = as_vocabulary(guesses)
    candidates = as_vocabulary(candidates)
    scores, is_candidate, order = _rank(guesses, candidates)
    return [ScoredGuess(guesses[i], float(scores[i]), bool(is_candidate[i])) for i in order]


def top_n_guesses(knowledge: KnowledgeState, guesses: Union[Vocabulary, Iterable[str]],
                  solutions: Union[Vocabulary, Iterable[str]], count: int) -> List[ScoredGuess]:
    return rank_guesses(guesses, knowledge.filter(solutions))[:count]
