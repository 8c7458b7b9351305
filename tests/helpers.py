import itertools


class FixedBag:
    """Deterministic stand-in for UniformBag: cycles through the given letters."""
    def __init__(self, letters):
        self._it = itertools.cycle(letters)

    def next_piece(self):
        return next(self._it)


def full_row(w, v=1):
    return [v] * w
