"""Exceptions raised by the solver."""


class InvalidGuessError(ValueError):
    """The guess is not in the permitted guess list."""


class MalformedResponseError(ValueError):
    """A response string used a symbol other than '.', '?' or '!'."""


class InconsistentStateError(RuntimeError):
    """No candidates remain although a real secret was being solved."""


class SolverStalledError(RuntimeError):
    """The chosen guess cannot separate the remaining candidates."""
