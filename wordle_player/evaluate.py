"""
Batch Evaluation
================

Runs the solver against every word of a vocabulary, as if each were the
secret, and collects how many guesses each one took.

Each solve is independent, so with ``workers > 1`` the words are spread
over a process pool. The vocabularies are sent to each worker once, by the
pool initializer; results come back as (word, tries) pairs and are merged
into the histogram in the parent.
"""

import multiprocessing
import os
import sys
import time
from collections import defaultdict
from concurrent.futures import ProcessPoolExecutor, as_completed
from typing import Dict, Iterable, List, Optional, Tuple, Union

import numba

from .engine import WordleEngine
from .errors import InconsistentStateError, SolverStalledError
from .knowledge import KnowledgeState
from .selector import select_guess
from .vocabulary import Vocabulary, as_vocabulary


PROGRESS_EVERY = 20


# ============================================================================
# SINGLE SOLVE
# ============================================================================

def solve(secret: str, solutions: Union[Vocabulary, Iterable[str]],
          guesses: Union[Vocabulary, Iterable[str], None] = None,
          verbose: bool = False) -> Tuple[int, List[str]]:
    """
    Solve for a given secret.

    Guesses are made until exactly one candidate is left. If that candidate
    is the guess just made, the game is already won and no extra turn is
    counted; otherwise one more turn is counted for guessing it.

    Args:
        secret: the target word
        solutions: words that could be the secret
        guesses: words that may be guessed (default: solutions)
        verbose: print progress

    Returns:
        (num_guesses, list_of_guesses)

    Raises:
        InconsistentStateError: if no candidates remain
        SolverStalledError: if a guess eliminates nothing
    """
    solutions = as_vocabulary(solutions)
    guesses = solutions if guesses is None else as_vocabulary(guesses)

    engine = WordleEngine(guesses, secret)
    info = KnowledgeState()
    candidates = solutions
    made = []

    while True:
        if len(candidates) == 0:
            raise InconsistentStateError(f"No words matched, solution {secret!r}:\n{info}")

        if len(candidates) == 1:
            if made and candidates[0] == made[-1]:
                return len(made), made
            made.append(candidates[0])
            if verbose:
                print(f"  Turn {len(made)}: {candidates[0]} (only candidate)")
            return len(made), made

        guess = select_guess(guesses, candidates)
        made.append(guess)
        response = engine.guess(guess)
        info.update(guess, response)
        n_before = len(candidates)
        candidates = info.filter(candidates)

        if verbose:
            print(f"  Turn {len(made)}: {guess} -> {response.to_emoji()} "
                  f"({n_before} -> {len(candidates)} candidates)")

        if len(candidates) == n_before:
            raise SolverStalledError(
                f"Guess {guess!r} eliminated none of {n_before} candidates for {secret!r}")


def get_num_tries(secret: str, solutions: Union[Vocabulary, Iterable[str]],
                  guesses: Union[Vocabulary, Iterable[str], None] = None) -> int:
    n, _ = solve(secret, solutions, guesses)
    return n


# ============================================================================
# BATCH EVALUATION
# ============================================================================

_worker_vocab: Dict[str, Vocabulary] = {}


def _init_worker(solutions: Vocabulary, guesses: Vocabulary):
    # One numba thread per process, the pool already uses every core
    numba.set_num_threads(1)
    _worker_vocab['solutions'] = solutions
    _worker_vocab['guesses'] = guesses


def _solve_word(word: str) -> Tuple[str, int]:
    return word, get_num_tries(word, _worker_vocab['solutions'], _worker_vocab['guesses'])


def _to_histogram(tries: Iterable[Tuple[str, int]]) -> Dict[int, List[str]]:
    bins = defaultdict(list)
    for word, n in tries:
        bins[n].append(word)
    return {n: sorted(bins[n]) for n in sorted(bins)}


def evaluate(solutions: Union[Vocabulary, Iterable[str]],
             guesses: Union[Vocabulary, Iterable[str], None] = None,
             workers: Optional[int] = 1,
             progress_every: int = PROGRESS_EVERY,
             verbose: bool = False) -> Dict[int, List[str]]:
    """
    Solve every word of ``solutions`` and group the words by guess count.

    Args:
        solutions: the possible secrets, also the candidate set of each solve
        guesses: words that may be guessed (default: solutions)
        workers: worker processes; 1 runs in-process, None uses every core
        progress_every: print progress to stderr every this many words
        verbose: enable progress output

    Returns:
        Guess count -> sorted list of words, in ascending guess count

    The first failing solve aborts the whole run.
    """
    solutions = as_vocabulary(solutions)
    guesses = solutions if guesses is None else as_vocabulary(guesses)
    if workers is None:
        workers = os.cpu_count() or 1

    total = len(solutions)
    results = []

    def report(word):
        done = len(results)
        if verbose and progress_every and done % progress_every == 0:
            print(f"Word #{done}/{total} done ({word})", file=sys.stderr)

    if workers <= 1:
        for word in solutions:
            results.append((word, get_num_tries(word, solutions, guesses)))
            report(word)
        return _to_histogram(results)

    # Workers are spawned: forking after numba has started its threads is unsafe
    ctx = multiprocessing.get_context("spawn")
    with ProcessPoolExecutor(max_workers=workers, mp_context=ctx, initializer=_init_worker,
                             initargs=(solutions, guesses)) as executor:
        futs = [executor.submit(_solve_word, word) for word in solutions]
        try:
            for fut in as_completed(futs):
                word, n = fut.result()
                results.append((word, n))
                report(word)
        except BaseException:
            for f in futs:
                f.cancel()
            raise

    return _to_histogram(results)


# ============================================================================
# BENCHMARK
# ============================================================================

def benchmark(solutions: Union[Vocabulary, Iterable[str]],
              guesses: Union[Vocabulary, Iterable[str], None] = None,
              workers: Optional[int] = 1,
              progress_every: int = PROGRESS_EVERY,
              verbose: bool = True) -> Dict:
    """
    Benchmark the solver on a word list.

    Returns:
        Dict with results
    """
    solutions = as_vocabulary(solutions)

    start = time.time()
    bins = evaluate(solutions, guesses, workers=workers,
                    progress_every=progress_every, verbose=verbose)
    elapsed = time.time() - start

    total = len(solutions)
    total_guesses = sum(n * len(words) for n, words in bins.items())

    return {
        'total': total,
        'average': total_guesses / total if total else 0.0,
        'total_guesses': total_guesses,
        'distribution': {n: len(words) for n, words in bins.items()},
        'bins': bins,
        'time': elapsed,
        'rate': total / elapsed if elapsed > 0 else 0.0,
    }


def print_results(results: Dict, show_words: bool = True):
    """Pretty print benchmark results."""
    print("\n" + "=" * 50)
    print("BENCHMARK RESULTS")
    print("=" * 50)
    print(f"Words tested: {results['total']}")
    print(f"Total guesses: {results['total_guesses']}")
    print(f"Average guesses: {results['average']:.4f}")
    print(f"Time: {results['time']:.1f}s ({results['rate']:.1f} words/sec)")
    print("\nDistribution:")
    for n, count in results['distribution'].items():
        pct = 100 * count / results['total']
        bar = "█" * int(pct / 2)
        print(f"  {n}: {count:5d} ({pct:5.2f}%) {bar}")
    if show_words:
        for n, words in results['bins'].items():
            print(f"\nWords that took {n} guesses:\n{words}")
    print("=" * 50)
