import pytest

from wordle_player.errors import InconsistentStateError, SolverStalledError
from wordle_player.evaluate import benchmark, evaluate, get_num_tries, print_results, solve

from conftest import WORDS


def test_solve_apple():
    n, guesses = solve('apple', WORDS)
    assert n >= 1
    assert guesses[-1] == 'apple'
    assert len(guesses) == n


def test_only_word():
    assert solve('apple', ['apple']) == (1, ['apple'])


def test_no_confirming_guess_charged():
    # 'apple' is picked first and is right
    assert solve('apple', ['apple', 'ample']) == (1, ['apple'])
    # 'apple' is wrong, leaving only 'ample' which still has to be guessed
    assert solve('ample', ['apple', 'ample']) == (2, ['apple', 'ample'])


def test_separate_guess_list():
    n, guesses = solve('abcdg', ['abcde', 'abcdf', 'abcdg'], ['abcde', 'xxxfg'])
    assert (n, guesses) == (2, ['xxxfg', 'abcdg'])


def test_verbose(capsys):
    solve('grape', WORDS, verbose=True)
    out = capsys.readouterr().out
    assert 'Turn 1:' in out


def test_secret_outside_solutions_is_fatal():
    with pytest.raises(InconsistentStateError):
        solve('zebra', ['apple', 'ample'])


def test_stalled():
    with pytest.raises(SolverStalledError):
        solve('bakes', ['bakes', 'cakes'], ['zzzzz'])


def test_evaluate_histogram():
    bins = evaluate(WORDS)
    assert list(bins) == sorted(bins)
    assert sorted(w for words in bins.values() for w in words) == sorted(WORDS)
    for n, words in bins.items():
        assert words == sorted(words)
        for word in words:
            assert get_num_tries(word, WORDS) == n


def test_parallel_matches_serial():
    words = WORDS[:24]
    assert evaluate(words, workers=2) == evaluate(words, workers=1)


def test_progress_goes_to_stderr(capsys):
    evaluate(WORDS[:10], progress_every=5, verbose=True)
    err = capsys.readouterr().err
    assert 'Word #5/10 done' in err
    assert 'Word #10/10 done' in err


def test_benchmark(capsys):
    results = benchmark(WORDS, verbose=False)
    assert results['total'] == len(WORDS)
    assert sum(results['distribution'].values()) == len(WORDS)
    assert results['total_guesses'] == sum(n * c for n, c in results['distribution'].items())
    assert results['average'] == pytest.approx(results['total_guesses'] / len(WORDS))

    print_results(results)
    out = capsys.readouterr().out
    assert 'BENCHMARK RESULTS' in out
    assert f"Words tested: {len(WORDS)}" in out


@pytest.mark.parametrize('workers', [1, 2])
def test_first_failure_aborts_evaluation(workers):
    with pytest.raises(SolverStalledError):
        evaluate(['bakes', 'cakes', 'makes'], ['zzzzz'], workers=workers)
