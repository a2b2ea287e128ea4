import pytest

from wordle_player.vocabulary import Vocabulary


WORDS = [
    'apple', 'ample', 'apply', 'angle', 'ankle', 'abbey', 'alley', 'allay', 'baker', 'barge',
    'beach', 'bench', 'blade', 'blame', 'bland', 'blank', 'bleak', 'brake', 'brave', 'bread',
    'break', 'cable', 'crane', 'crate', 'crave', 'craze', 'crown', 'dance', 'drake', 'eerie',
    'eager', 'eagle', 'fable', 'favor', 'flame', 'frame', 'grape', 'grace', 'grade', 'great',
    'jazzy', 'knelt', 'lapse', 'level', 'mamma', 'pasta', 'paste', 'plate', 'raise', 'salet',
    'shake', 'shale', 'slate', 'snake', 'spade', 'speed', 'stale', 'stare', 'tarse', 'there',
    'three', 'trace', 'weird', 'wired', 'aegis',
]


@pytest.fixture(scope='session')
def words():
    return Vocabulary(WORDS)
