"""
Knowledge State
===============

Accumulates what a sequence of (guess, response) observations says about
the secret:

- per position, which letters are excluded there (or forced)
- per letter, a closed interval [min_count, max_count] for how many times
  it occurs in the secret

Updates only ever shrink the set of words the state allows.
"""

from collections import Counter
from typing import Iterable, Union

import numpy as np
from numba import jit

from .feedback import WORD_LENGTH, LetterResponse, Response
from .vocabulary import ALPHABET, Vocabulary, as_vocabulary


UNKNOWN = 0
FORCED = 1
EXCLUDED = -1


@jit(nopython=True, cache=True)
def allowed_mask(exact: np.ndarray, min_counts: np.ndarray, max_counts: np.ndarray,
                 word_chars: np.ndarray) -> np.ndarray:
    """
    Check every word against the knowledge arrays.

    Args:
        exact: shape (5, 26) position states (UNKNOWN/FORCED/EXCLUDED)
        min_counts: shape (26,) lower count bounds
        max_counts: shape (26,) upper count bounds
        word_chars: shape (n_words, 5) char codes

    Returns:
        shape (n_words,) boolean mask of allowed words
    """
    n_words = word_chars.shape[0]
    mask = np.zeros(n_words, dtype=np.bool_)
    counts = np.zeros(26, dtype=np.int32)

    for w in range(n_words):
        ok = True
        for i in range(5):
            if exact[i, word_chars[w, i]] == EXCLUDED:
                ok = False
                break
        if ok:
            counts[:] = 0
            for i in range(5):
                counts[word_chars[w, i]] += 1
            for c in range(26):
                if counts[c] < min_counts[c] or counts[c] > max_counts[c]:
                    ok = False
                    break
        mask[w] = ok

    return mask


class KnowledgeState:
    """What the guesser knows about the secret so far."""

    def __init__(self):
        self.exact = np.full((WORD_LENGTH, 26), UNKNOWN, dtype=np.int8)
        self.min_counts = np.zeros(26, dtype=np.int32)
        self.max_counts = np.full(26, WORD_LENGTH, dtype=np.int32)

    def update(self, guess: str, response: Response):
        """
        Fold one observation into the state.

        ``CORRECT`` forces the letter at its position; ``MISPLACED`` and
        ``ABSENT`` only exclude the letter at that position, since a repeated
        letter can be correct in one place and absent in another. Counts are
        handled separately: each letter of the guess is present at least as
        many times as it was marked non-absent, and exactly that many times
        if any of its marks was absent.

        Observations that contradict each other, which only a mistyped
        response can produce, may push a letter's upper bound below its
        lower bound. Such a state allows no word; see ``consistent``.
        """
        for i, (c, r) in enumerate(zip(guess, response)):
            char_idx = ord(c) - ord('a')
            if r == LetterResponse.CORRECT:
                was_excluded = self.exact[i, char_idx] == EXCLUDED
                self.exact[i, :] = EXCLUDED
                if not was_excluded:
                    self.exact[i, char_idx] = FORCED
            else:
                self.exact[i, char_idx] = EXCLUDED

        present = Counter()
        absent = set()
        for c, r in zip(guess, response):
            if r == LetterResponse.ABSENT:
                absent.add(c)
            else:
                present[c] += 1

        for c in set(guess):
            char_idx = ord(c) - ord('a')
            num_present = present[c]
            self.min_counts[char_idx] = max(self.min_counts[char_idx], num_present)
            if c in absent:
                self.max_counts[char_idx] = min(self.max_counts[char_idx], num_present)

    @property
    def consistent(self) -> bool:
        """False once the observations contradict each other."""
        return bool(np.all(self.min_counts <= self.max_counts))

    def allows(self, word: str) -> bool:
        """Returns whether this word is consistent with everything seen so far."""
        for i, c in enumerate(word):
            if self.exact[i, ord(c) - ord('a')] == EXCLUDED:
                return False
        counts = Counter(word)
        return all(self.min_counts[j] <= counts[c] <= self.max_counts[j]
                   for j, c in enumerate(ALPHABET))

    def filter(self, words: Union[Vocabulary, Iterable[str]]) -> Vocabulary:
        """The allowed subset of ``words``, in their original order."""
        words = as_vocabulary(words)
        mask = allowed_mask(self.exact, self.min_counts, self.max_counts, words.chars)
        return words.subset(mask)

    def copy(self) -> 'KnowledgeState':
        other = KnowledgeState()
        other.exact = self.exact.copy()
        other.min_counts = self.min_counts.copy()
        other.max_counts = self.max_counts.copy()
        return other

    def __eq__(self, other):
        if not isinstance(other, KnowledgeState):
            return NotImplemented
        return (np.array_equal(self.exact, other.exact)
                and np.array_equal(self.min_counts, other.min_counts)
                and np.array_equal(self.max_counts, other.max_counts))

    def __str__(self):
        lines = ["Exact:"]
        for slot in self.exact:
            forced = np.flatnonzero(slot == FORCED)
            if len(forced):
                lines.append(f"\t[ {ALPHABET[forced[0]]} ]")
            else:
                excluded = ', '.join(f"!{ALPHABET[j]}" for j in np.flatnonzero(slot == EXCLUDED))
                lines.append(f"\t[ {excluded} ]")
        lines.append("Counts:")
        for j, c in enumerate(ALPHABET):
            lines.append(f"{c}: Between {self.min_counts[j]} and {self.max_counts[j]}")
        return '\n'.join(lines)
