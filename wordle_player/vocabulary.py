"""
Word Lists
==========

Loading and encoding of the word lists the solver works over.

Every list is wrapped in a ``Vocabulary``: an ordered, duplicate-free,
read-only collection of 5-letter words that also carries the char-code
array the numba kernels consume. A vocabulary is built once and shared by
every component; candidate sets are cheap subsets of it.
"""

import numpy as np
from typing import Iterable, Iterator, List, Sequence, Union

from .feedback import WORD_LENGTH


ALPHABET = 'abcdefghijklmnopqrstuvwxyz'


def words_to_chars(words: Sequence[str]) -> np.ndarray:
    """Convert words to char code array."""
    arr = np.zeros((len(words), WORD_LENGTH), dtype=np.int32)
    for i, w in enumerate(words):
        for j, c in enumerate(w):
            arr[i, j] = ord(c) - ord('a')
    return arr


def word_to_chars(word: str) -> np.ndarray:
    return words_to_chars([word])[0]


def is_valid_word(word: str) -> bool:
    return len(word) == WORD_LENGTH and all(c in ALPHABET for c in word)


def load_words(filepath: str) -> List[str]:
    """
    Load word list from file.

    One word per line. Words are lowercased; blank lines, words of the wrong
    length and words with non a-z characters are skipped. Duplicates keep
    their first occurrence.
    """
    with open(filepath, 'r') as f:
        words = (line.strip().lower() for line in f)
        return list(dict.fromkeys(w for w in words if is_valid_word(w)))


class Vocabulary:
    """
    An ordered, read-only list of words plus its char-code encoding.

    Args:
        words: 5-letter lowercase words, without duplicates

    Raises:
        ValueError: if a word appears more than once
    """

    def __init__(self, words: Iterable[str]):
        words = tuple(words)
        self._init(words, words_to_chars(words))
        if len(self.word_to_idx) != len(words):
            dupes = sorted({w for w in words if words.count(w) > 1})
            raise ValueError(f"Duplicate words in vocabulary: {dupes[:10]}")

    def _init(self, words, chars):
        chars.setflags(write=False)
        self.words = words
        self.chars = chars
        self.word_to_idx = {w: i for i, w in enumerate(words)}

    @classmethod
    def from_file(cls, filepath: str) -> 'Vocabulary':
        return cls(load_words(filepath))

    def subset(self, selector) -> 'Vocabulary':
        """
        Return the words picked by a boolean mask or an index array,
        reusing the already encoded char rows.
        """
        selector = np.asarray(selector)
        if selector.dtype == np.bool_:
            indices = np.flatnonzero(selector)
        else:
            indices = selector.astype(np.intp)
        sub = Vocabulary.__new__(Vocabulary)
        sub._init(tuple(self.words[i] for i in indices), self.chars[indices])
        return sub

    def member_mask(self, other: 'Vocabulary') -> np.ndarray:
        """Boolean mask over ``other``: which of its words are in this vocabulary."""
        return np.fromiter((w in self.word_to_idx for w in other.words),
                           dtype=np.bool_, count=len(other))

    def __len__(self) -> int:
        return len(self.words)

    def __iter__(self) -> Iterator[str]:
        return iter(self.words)

    def __getitem__(self, idx: int) -> str:
        return self.words[idx]

    def __contains__(self, word) -> bool:
        return word in self.word_to_idx

    def __eq__(self, other):
        if isinstance(other, Vocabulary):
            return self.words == other.words
        return NotImplemented

    def __hash__(self):
        return hash(self.words)

    def __repr__(self):
        if len(self) <= 10:
            return f"Vocabulary({list(self.words)!r})"
        return f"Vocabulary(<{len(self)} words: {', '.join(self.words[:5])}, ...>)"


def as_vocabulary(words: Union[Vocabulary, Iterable[str]]) -> Vocabulary:
    """Wrap a plain sequence of words; vocabularies pass through unchanged."""
    if isinstance(words, Vocabulary):
        return words
    return Vocabulary(words)
