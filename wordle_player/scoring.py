"""
Guess Scoring
=============

Scores a guess by its expected information gain: the Shannon entropy, in
bits, of the distribution of responses the guess induces over the current
candidate set.

With n candidates split into buckets of sizes k by response pattern:

    gain = sum over non-empty buckets of (k / n) * (log2(n) - log2(k))
"""

from typing import Iterable, Union

import numpy as np
from numba import jit, prange

from .feedback import N_PATTERNS, compute_feedback
from .knowledge import KnowledgeState
from .vocabulary import Vocabulary, as_vocabulary, word_to_chars


# ============================================================================
# NUMBA-ACCELERATED SCORING
# ============================================================================

@jit(nopython=True, cache=True)
def get_partition_sizes(guess: np.ndarray, candidate_chars: np.ndarray) -> np.ndarray:
    """
    Count how many candidates fall into each feedback partition.

    Args:
        guess: shape (5,) char codes of the guess
        candidate_chars: shape (n_candidates, 5) char codes

    Returns:
        Array of 243 partition sizes
    """
    sizes = np.zeros(N_PATTERNS, dtype=np.int32)
    for j in range(candidate_chars.shape[0]):
        sizes[compute_feedback(guess, candidate_chars[j])] += 1
    return sizes


@jit(nopython=True, cache=True)
def information_gain(sizes: np.ndarray, total: int) -> float:
    """Expected bits gained from a partition; empty buckets are skipped."""
    if total <= 1:
        return 0.0

    start_entropy = np.log2(total)
    gain = 0.0
    for i in range(N_PATTERNS):
        s = sizes[i]
        if s > 0:
            gain += (start_entropy - np.log2(s)) * s / total

    return gain


@jit(nopython=True, parallel=True, cache=True)
def score_guesses(guess_chars: np.ndarray, candidate_chars: np.ndarray) -> np.ndarray:
    """
    Score every guess against the same candidate set in parallel.

    Args:
        guess_chars: shape (n_guesses, 5) char codes
        candidate_chars: shape (n_candidates, 5) char codes

    Returns:
        shape (n_guesses,) expected information gain per guess
    """
    n_guesses = guess_chars.shape[0]
    n_candidates = candidate_chars.shape[0]
    scores = np.zeros(n_guesses, dtype=np.float64)

    for i in prange(n_guesses):
        sizes = get_partition_sizes(guess_chars[i], candidate_chars)
        scores[i] = information_gain(sizes, n_candidates)

    return scores


# ============================================================================
# WORD-LEVEL API
# ============================================================================

def expected_information_gain(candidates: Union[Vocabulary, Iterable[str]], guess: str) -> float:
    """
    Expected bits of information gained by guessing ``guess``.

    Args:
        candidates: words that could still be the secret (must not be empty)
        guess: any 5-letter word

    Returns:
        A value in [0, log2(len(candidates))]; 0.0 for a single candidate
    """
    candidates = as_vocabulary(candidates)
    if len(candidates) == 0:
        raise ValueError("No candidates")

    sizes = get_partition_sizes(word_to_chars(guess), candidates.chars)
    return float(information_gain(sizes, len(candidates)))


def evaluate_guess(knowledge: KnowledgeState, solutions: Union[Vocabulary, Iterable[str]],
                   guess: str) -> float:
    """Like ``expected_information_gain``, filtering ``solutions`` through ``knowledge`` first."""
    return expected_information_gain(knowledge.filter(solutions), guess)
