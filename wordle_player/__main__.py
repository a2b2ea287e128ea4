"""
Command line for playing and solving Wordle.

    wordle-player play                 # guess a random word
    wordle-player assist               # suggest guesses for a game played elsewhere
    wordle-player cheat-sheet          # print the guess path of every answer
    wordle-player evaluate -w 8        # solve every answer, print the histogram
"""

import argparse
import os
import sys

from .engine import WordleEngine
from .errors import InvalidGuessError, MalformedResponseError
from .evaluate import PROGRESS_EVERY, benchmark, print_results
from .feedback import Response
from .knowledge import KnowledgeState
from .scoring import evaluate_guess
from .selector import top_n_guesses
from .tree import find_word_paths, format_paths
from .vocabulary import Vocabulary, is_valid_word


BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
DEFAULT_ANSWERS = os.path.join(BASE_DIR, "words", "answers.txt")
DEFAULT_GUESSES = os.path.join(BASE_DIR, "words", "allowed_guesses.txt")


def load_vocabularies(args):
    """Answers and guesses; a missing default guess list falls back to the answers."""
    if not os.path.exists(args.answers):
        raise SystemExit(f"Answer list not found: {args.answers}")
    answers = Vocabulary.from_file(args.answers)
    if args.guesses and os.path.exists(args.guesses):
        guesses = Vocabulary.from_file(args.guesses)
    elif args.guesses and args.guesses != DEFAULT_GUESSES:
        raise SystemExit(f"Guess list not found: {args.guesses}")
    else:
        guesses = answers
    if len(answers) == 0:
        raise SystemExit(f"No usable words in {args.answers}")
    print(f"Answers: {len(answers)}, Guesses: {len(guesses)}", file=sys.stderr)
    return answers, guesses


def play(args):
    answers, guesses = load_vocabularies(args)

    if args.test:
        target = args.test.strip().lower()
        if target not in answers:
            raise SystemExit(f"Need a known answer to test, not {target!r}")
        engine = WordleEngine(guesses, target)
    else:
        engine = WordleEngine.random(guesses, answers)

    while not engine.solved:
        print("Please make a guess (leave blank to forfeit):")
        try:
            guess = input().strip()
        except EOFError:
            guess = ''
        if not guess:
            print("You gave up :(")
            print(f"The answer was {engine.solution}")
            return 1
        try:
            response = engine.guess(guess)
        except InvalidGuessError:
            print("Illegal guess")
            continue
        print(response)

    print(f"Solved in {engine.num_guesses} guesses!")
    return 0


def _ask(prompt, parse):
    while True:
        text = input(prompt).strip()
        try:
            return parse(text)
        except ValueError as e:
            print(e)


def _parse_guess(text, allowed):
    text = text.lower()
    if not is_valid_word(text):
        raise ValueError(f"Must be a word of exactly 5 letters, not {text!r}")
    if not any(text in words for words in allowed):
        raise InvalidGuessError(f"Not in the word list: {text!r}")
    return text


def assist(args):
    answers, guesses = load_vocabularies(args)
    info = KnowledgeState()
    allowed = answers

    while True:
        allowed = info.filter(allowed)
        if len(allowed) == 1:
            print(f"Answer: {allowed[0]}")
            return 0
        elif len(allowed) == 0:
            print("No words match information:")
            print(info)
            if not info.consistent:
                print("The responses contradict each other")
            return 1

        top = top_n_guesses(info, guesses, allowed, args.top)
        print("Top {} guesses: [{}]".format(
            len(top), ', '.join(f"({g.word}, {g.score:.5f})" for g in top)))
        if len(allowed) > 10:
            print(f"{len(allowed)} words remain")
        else:
            print(f"Remaining words: {list(allowed)}")

        try:
            guess = _ask("What was your guess? ", lambda text: _parse_guess(text, (guesses, answers)))
            response = _ask("What was the response? ", Response.parse)
        except (KeyboardInterrupt, EOFError):
            print()
            return 1

        print(f"You guessed {guess} (+{evaluate_guess(info, allowed, guess)})")
        info.update(guess, response)


def cheat_sheet(args):
    answers, guesses = load_vocabularies(args)
    for line in format_paths(find_word_paths(answers, guesses, verbose=args.verbose)):
        print(line)
    return 0


def evaluate(args):
    answers, guesses = load_vocabularies(args)
    if args.same_lists:
        guesses = answers
    results = benchmark(answers, guesses, workers=args.workers,
                        progress_every=args.progress_every, verbose=not args.quiet)
    print_results(results, show_words=not args.counts_only)
    return 0


def parse_args(args=None):
    p = argparse.ArgumentParser(prog="wordle-player",
                                description="Play Wordle and solve it by maximizing information gain")
    p.add_argument('-a', '--answers', default=DEFAULT_ANSWERS,
                   help='Possible answers, one per line. Default %(default)s.')
    p.add_argument('-g', '--guesses', default=DEFAULT_GUESSES,
                   help='Allowed guesses, one per line (the answers if the default is missing). Default %(default)s.')
    sub = p.add_subparsers(dest='command', required=True)

    sp = sub.add_parser('play', help='Guess a randomly chosen answer')
    sp.add_argument('--test', help=argparse.SUPPRESS)
    sp.set_defaults(func=play)

    sp = sub.add_parser('assist', help='Suggest guesses; enter responses as ".?!" (absent, misplaced, correct)')
    sp.add_argument('-n', '--top', default=5, type=int,
                    help='Number of guesses to suggest. Default %(default)s.')
    sp.set_defaults(func=assist)

    sp = sub.add_parser('cheat-sheet', help='Print the guesses the solver makes for every answer')
    sp.add_argument('-v', '--verbose', action='store_true',
                    help='Show each tree node as it is computed')
    sp.set_defaults(func=cheat_sheet)

    sp = sub.add_parser('evaluate', help='Solve every answer and show the guess-count histogram')
    sp.add_argument('-w', '--workers', default=None, type=int,
                    help='Worker processes. Default: all CPU cores.')
    sp.add_argument('--progress-every', default=PROGRESS_EVERY, type=int,
                    help='Report progress every N words. Default %(default)s.')
    sp.add_argument('-q', '--quiet', action='store_true',
                    help='No progress output')
    sp.add_argument('-c', '--counts-only', action='store_true',
                    help='Only print counts, not the words in each bucket')
    sp.add_argument('-s', '--same-lists', action='store_true',
                    help='Only guess words from the answer list')
    sp.set_defaults(func=evaluate)

    return p.parse_args(args)


def main(args=None):
    args = parse_args(args)
    return args.func(args)


if __name__ == '__main__':
    sys.exit(main())
