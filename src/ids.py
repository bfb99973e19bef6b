"""Random decimal identifiers for Tasks.org remote ids.

Not cryptographically secure; ids only need to be unique inside the target
application's namespace and collisions are not checked.
"""
from typing import Callable, Optional
import random

DIGITS = '0123456789'
TAG_ID_LENGTH = 17
TASK_ID_LENGTH = 19

IdSource = Callable[[int], str]


class IdGenerator:
    def __init__(self, rng: Optional[random.Random] = None):
        self.rng: random.Random = rng if rng is not None else random.Random()

    def digits(self, length: int) -> str:
        """Return ``length`` random decimal digits (leading zeros allowed)."""
        if length < 1:
            raise ValueError(f"id length must be positive, got {length}")
        return ''.join(self.rng.choice(DIGITS) for _ in range(length))

    __call__ = digits
