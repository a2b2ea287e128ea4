"""
Feedback Computation
====================

Scores a guess against a secret.

Feedback is kept in two forms:
- ``Response``: a tuple of five ``LetterResponse`` values, for callers
- an integer pattern 0-242, position i contributing ``value * 3**i``,
  which the numba kernels use to bucket candidates in O(1)
"""

from enum import IntEnum
from typing import Iterator

import numpy as np
from numba import jit, prange

from .errors import MalformedResponseError


# ============================================================================
# CONSTANTS
# ============================================================================

WORD_LENGTH = 5
N_PATTERNS = 243  # 3^5 possible feedback patterns
CORRECT_PATTERN = 242  # 2 + 2*3 + 2*9 + 2*27 + 2*81 = 242 (all correct)


class LetterResponse(IntEnum):
    ABSENT = 0
    MISPLACED = 1
    CORRECT = 2

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]

    @property
    def emoji(self) -> str:
        return _EMOJI[self]


_SYMBOLS = {
    LetterResponse.ABSENT: '.',
    LetterResponse.MISPLACED: '?',
    LetterResponse.CORRECT: '!',
}
_FROM_SYMBOL = {s: r for r, s in _SYMBOLS.items()}
_EMOJI = {
    LetterResponse.ABSENT: '⬛',
    LetterResponse.MISPLACED: '🟨',
    LetterResponse.CORRECT: '🟩',
}


class Response(tuple):
    """Feedback for one guess: a ``LetterResponse`` per position."""

    def __new__(cls, letters):
        letters = tuple(LetterResponse(r) for r in letters)
        if len(letters) != WORD_LENGTH:
            raise ValueError(f"Response needs {WORD_LENGTH} letters, got {len(letters)}")
        return super().__new__(cls, letters)

    @classmethod
    def correct(cls) -> 'Response':
        return cls([LetterResponse.CORRECT] * WORD_LENGTH)

    @classmethod
    def from_code(cls, code: int) -> 'Response':
        """Convert integer (0-242) to a Response."""
        if not 0 <= code < N_PATTERNS:
            raise ValueError(f"Invalid feedback pattern: {code}")
        letters = []
        for _ in range(WORD_LENGTH):
            letters.append(code % 3)
            code //= 3
        return cls(letters)

    @classmethod
    def parse(cls, text: str) -> 'Response':
        """
        Parse the ``.?!`` encoding (``.`` absent, ``?`` misplaced,
        ``!`` correct), e.g. ``'.?..!'``.

        Raises:
            MalformedResponseError: on any other symbol or a wrong length
        """
        text = text.strip()
        if len(text) != WORD_LENGTH:
            raise MalformedResponseError(
                f"Response must be exactly {WORD_LENGTH} symbols, got {text!r}")
        try:
            return cls(_FROM_SYMBOL[c] for c in text)
        except KeyError as e:
            raise MalformedResponseError(
                f"Invalid response symbol {e.args[0]!r} in {text!r} (use '.', '?' or '!')") from None

    @classmethod
    def all_responses(cls) -> Iterator['Response']:
        """All 243 responses, in pattern order."""
        for code in range(N_PATTERNS):
            yield cls.from_code(code)

    @property
    def code(self) -> int:
        """Convert to integer pattern (0-242)."""
        result = 0
        multiplier = 1
        for r in self:
            result += int(r) * multiplier
            multiplier *= 3
        return result

    @property
    def is_correct(self) -> bool:
        return all(r == LetterResponse.CORRECT for r in self)

    def to_emoji(self) -> str:
        return ''.join(r.emoji for r in self)

    def __str__(self):
        return ''.join(r.symbol for r in self)

    def __repr__(self):
        return f"Response({str(self)!r})"


def get_response(guess: str, secret: str) -> Response:
    """
    Compute the response for a guess against a secret.

    Two passes so that repeated letters are never over-counted: exact
    matches consume their secret letter first, then each remaining guess
    letter consumes the leftmost unconsumed matching secret letter.
    """
    if guess == secret:
        return Response.correct()

    response = [LetterResponse.ABSENT] * WORD_LENGTH
    taken = [False] * WORD_LENGTH

    for i, (gl, sl) in enumerate(zip(guess, secret)):
        if gl == sl:
            response[i] = LetterResponse.CORRECT
            taken[i] = True

    for i, gl in enumerate(guess):
        if response[i] == LetterResponse.CORRECT:
            continue
        for j, sl in enumerate(secret):
            if not taken[j] and gl == sl:
                taken[j] = True
                response[i] = LetterResponse.MISPLACED
                break

    return Response(response)


# ============================================================================
# NUMBA-ACCELERATED FEEDBACK COMPUTATION
# ============================================================================

@jit(nopython=True, cache=True)
def compute_feedback(guess: np.ndarray, answer: np.ndarray) -> int:
    """
    Compute feedback for a guess against an answer.

    Args:
        guess: shape (5,) array of char codes (0-25 for a-z)
        answer: shape (5,) array of char codes

    Returns:
        Integer feedback pattern (0-242)
    """
    feedback = np.zeros(5, dtype=np.int32)
    answer_counts = np.zeros(26, dtype=np.int32)

    # Count letters in answer
    for i in range(5):
        answer_counts[answer[i]] += 1

    # First pass: mark correct letters
    for i in range(5):
        if guess[i] == answer[i]:
            feedback[i] = 2
            answer_counts[guess[i]] -= 1

    # Second pass: mark misplaced letters
    for i in range(5):
        if feedback[i] == 0:
            c = guess[i]
            if answer_counts[c] > 0:
                feedback[i] = 1
                answer_counts[c] -= 1

    return feedback[0] + 3*feedback[1] + 9*feedback[2] + 27*feedback[3] + 81*feedback[4]


@jit(nopython=True, cache=True)
def compute_feedback_row(guess: np.ndarray, answer_chars: np.ndarray) -> np.ndarray:
    """Feedback of one guess against every answer, shape (n_answers,)."""
    n_answers = answer_chars.shape[0]
    result = np.zeros(n_answers, dtype=np.uint8)
    for j in range(n_answers):
        result[j] = compute_feedback(guess, answer_chars[j])
    return result


@jit(nopython=True, parallel=True, cache=True)
def compute_feedback_matrix(guess_chars: np.ndarray, answer_chars: np.ndarray) -> np.ndarray:
    """
    Compute feedback for all guess/answer pairs in parallel.

    Args:
        guess_chars: shape (n_guesses, 5) array of char codes
        answer_chars: shape (n_answers, 5) array of char codes

    Returns:
        shape (n_guesses, n_answers) feedback matrix
    """
    n_guesses = guess_chars.shape[0]
    n_answers = answer_chars.shape[0]
    result = np.zeros((n_guesses, n_answers), dtype=np.uint8)

    for i in prange(n_guesses):
        for j in range(n_answers):
            result[i, j] = compute_feedback(guess_chars[i], answer_chars[j])

    return result
