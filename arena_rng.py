"""Uniform piece randomizer"""
import random
from typing import Optional
from arena_piece import PIECES


class UniformBag:
    """Each draw picks one of the seven letters independently, no bag shuffle or repeat rejection."""
    PIECES = PIECES

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._rng = random.Random(seed)

    def next_piece(self) -> str:
        return self.PIECES[self._rng.randrange(len(self.PIECES))]
