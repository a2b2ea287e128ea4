"""
Decision Tree
=============

Works out, for every possible secret, the sequence of guesses the solver
would make, without playing any particular game.

At each node the best guess is chosen for the remaining words, the words
are partitioned by the response they would give, and each partition is
solved the same way. The guess is prepended to every path except the one
through the all-correct partition, which is the guess itself.

The guess x word feedback matrix is computed once up front, so a node only
has to look up the row of its chosen guess. An explicit stack of
(word indices, path so far) frames replaces recursion, so large
vocabularies do not hit the recursion limit.
"""

from typing import Dict, Iterable, Iterator, List, Union

import numpy as np

from .errors import SolverStalledError
from .feedback import CORRECT_PATTERN, compute_feedback_matrix, compute_feedback_row
from .selector import select_guess
from .vocabulary import Vocabulary, as_vocabulary, word_to_chars


def partition(guess: str, remaining: Vocabulary) -> Dict[int, Vocabulary]:
    """Group ``remaining`` by the feedback pattern each word gives for ``guess``."""
    patterns = compute_feedback_row(word_to_chars(guess), remaining.chars)
    return {int(p): remaining.subset(patterns == p) for p in np.unique(patterns)}


def find_word_paths(remaining: Union[Vocabulary, Iterable[str]],
                    guesses: Union[Vocabulary, Iterable[str]],
                    verbose: bool = False) -> Dict[str, List[str]]:
    """
    Build the full guess strategy for ``remaining``.

    Args:
        remaining: the words that could be the secret
        guesses: the words the solver may guess

    Returns:
        Each word of ``remaining`` (in order) mapped to its list of guesses,
        ending with the word itself

    Raises:
        SolverStalledError: if a chosen guess cannot split its words
    """
    remaining = as_vocabulary(remaining)
    guesses = as_vocabulary(guesses)
    if len(remaining) <= 1:
        return {word: [word] for word in remaining}

    if verbose:
        print(f"  [tree] feedback matrix: {len(guesses)} x {len(remaining)}")
    matrix = compute_feedback_matrix(guesses.chars, remaining.chars)

    paths = {}
    stack = [(np.arange(len(remaining)), [])]
    nodes = 0

    while stack:
        indices, path = stack.pop()

        if len(indices) <= 1:
            for i in indices:
                paths[remaining[i]] = path + [remaining[i]]
            continue

        guess = select_guess(guesses, remaining.subset(indices))
        nodes += 1
        if verbose:
            print(f"  [tree] node {nodes}: {len(indices)} words, depth {len(path) + 1} -> {guess}")

        patterns = matrix[guesses.word_to_idx[guess], indices]
        for pattern in np.unique(patterns)[::-1]:
            part = indices[patterns == pattern]
            if len(part) == len(indices):
                raise SolverStalledError(
                    f"Guess {guess!r} does not split {len(indices)} words: "
                    f"{[remaining[i] for i in indices[:10]]}")
            if pattern == CORRECT_PATTERN:
                stack.append((part, path))
            else:
                stack.append((part, path + [guess]))

    return {word: paths[word] for word in remaining}


def format_paths(paths: Dict[str, List[str]]) -> Iterator[str]:
    """Cheat-sheet lines, e.g. ``'apple: raise -> apple'``."""
    for word, path in paths.items():
        yield f"{word}: {' -> '.join(path)}"
