import numpy as np
import pytest

from wordle_player.vocabulary import (Vocabulary, as_vocabulary, is_valid_word, load_words,
                                      word_to_chars, words_to_chars)

from conftest import WORDS


def test_load_words(tmp_path):
    path = tmp_path / 'words.txt'
    path.write_text('Apple\n\nample\n  crane  \napple\nab\ntoolong\nh3llo\nwired\n')
    assert load_words(str(path)) == ['apple', 'ample', 'crane', 'wired']
    assert list(Vocabulary.from_file(str(path))) == ['apple', 'ample', 'crane', 'wired']


def test_is_valid_word():
    assert is_valid_word('crane')
    assert not is_valid_word('Crane')
    assert not is_valid_word('cranes')
    assert not is_valid_word('cr-ne')


def test_chars():
    assert list(word_to_chars('abcez')) == [0, 1, 2, 4, 25]
    chars = words_to_chars(['apple', 'crane'])
    assert chars.shape == (2, 5)
    assert chars.dtype == np.int32
    assert words_to_chars([]).shape == (0, 5)


def test_vocabulary_is_read_only_sequence():
    vocab = Vocabulary(WORDS)
    assert len(vocab) == len(WORDS)
    assert list(vocab) == WORDS
    assert vocab[0] == 'apple'
    assert 'crane' in vocab
    assert 'zebra' not in vocab
    assert not vocab.chars.flags.writeable
    assert vocab == Vocabulary(WORDS)


def test_subset():
    vocab = Vocabulary(WORDS)
    mask = np.array([w.startswith('b') for w in WORDS])
    by_mask = vocab.subset(mask)
    assert list(by_mask) == [w for w in WORDS if w.startswith('b')]
    assert np.array_equal(by_mask.chars, words_to_chars(list(by_mask)))

    by_index = vocab.subset([3, 1])
    assert list(by_index) == [WORDS[3], WORDS[1]]
    assert by_index.word_to_idx == {WORDS[3]: 0, WORDS[1]: 1}

    assert len(vocab.subset(np.zeros(len(WORDS), dtype=bool))) == 0


def test_member_mask():
    vocab = Vocabulary(['apple', 'crane'])
    other = Vocabulary(['zebra', 'crane', 'apple'])
    assert list(vocab.member_mask(other)) == [False, True, True]


def test_as_vocabulary():
    vocab = Vocabulary(WORDS)
    assert as_vocabulary(vocab) is vocab
    assert as_vocabulary(WORDS) == vocab


def test_duplicates_rejected():
    with pytest.raises(ValueError, match='apple'):
        Vocabulary(['apple', 'crane', 'apple'])
