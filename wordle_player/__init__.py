"""
Wordle Player - Entropy-Maximizing Solver
=========================================

Plays Wordle and solves it by always guessing the word with the highest
expected information gain over the words still possible.
"""

__version__ = "0.1.0"

from .engine import WordleEngine
from .errors import (InconsistentStateError, InvalidGuessError,
                     MalformedResponseError, SolverStalledError)
from .evaluate import benchmark, get_num_tries, print_results, solve
from .feedback import CORRECT_PATTERN, LetterResponse, Response, get_response
from .knowledge import KnowledgeState
from .scoring import evaluate_guess, expected_information_gain
from .selector import ScoredGuess, ideal_guess, rank_guesses, select_guess, top_n_guesses
from .tree import find_word_paths, format_paths
from .vocabulary import Vocabulary, load_words
