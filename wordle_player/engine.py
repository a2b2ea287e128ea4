"""
Game Session
============

Holds one secret word and answers guesses against it.
"""

import random
from typing import Iterable, List, Optional, Tuple, Union

from .errors import InvalidGuessError
from .feedback import Response, get_response
from .vocabulary import Vocabulary, as_vocabulary


class WordleEngine:
    """
    A single game.

    Args:
        words: the permitted guesses
        solution: the secret word
    """

    def __init__(self, words: Union[Vocabulary, Iterable[str]], solution: str):
        self.words = as_vocabulary(words)
        self.solution = solution.lower()
        self.history: List[Tuple[str, Response]] = []

    @classmethod
    def random(cls, words: Union[Vocabulary, Iterable[str]],
               solutions: Union[Vocabulary, Iterable[str]],
               rng: Optional[random.Random] = None) -> 'WordleEngine':
        """New game with a secret drawn uniformly from ``solutions``."""
        solutions = list(solutions)
        if not solutions:
            raise ValueError("Empty solution list")
        solution = (rng or random).choice(solutions)
        return cls(words, solution)

    def can_guess(self, word: str) -> bool:
        return word == self.solution or word in self.words

    def guess(self, word: str) -> Response:
        """
        Make a guess.

        Raises:
            InvalidGuessError: if the word is not a permitted guess; the game
                is left unchanged
        """
        word = word.strip().lower()
        if not self.can_guess(word):
            raise InvalidGuessError(f"Illegal guess: {word!r}")

        response = get_response(word, self.solution)
        self.history.append((word, response))
        return response

    @property
    def solved(self) -> bool:
        return any(response.is_correct for _, response in self.history)

    @property
    def num_guesses(self) -> int:
        return len(self.history)
