"""
Module: ids.py
Description: Random identifiers for batch request entries.

Batch entry ids only need to be unique within a single request, so they are
drawn from a random alphanumeric space without collision checks.
"""

import random
import string
from typing import Callable, Optional

ID_ALPHABET = string.ascii_letters + string.digits
DEFAULT_ID_LENGTH = 15

IdGenerator = Callable[[], str]


def random_id(length: int = DEFAULT_ID_LENGTH, rng: Optional[random.Random] = None) -> str:
    """
    Generate a random alphanumeric string.

    Args:
        length: Number of characters
        rng: Random source (defaults to the module-level generator)

    Returns:
        Random identifier of the requested length

    Example:
        >>> len(random_id())
        15
    """
    if length <= 0:
        raise ValueError("length must be positive")

    source = rng or random
    return ''.join(source.choice(ID_ALPHABET) for _ in range(length))


class RandomIdGenerator:
    """
    Callable id generator with its own random source.

    Pass a seed to make the sequence of generated ids reproducible.

    Example:
        >>> generate = RandomIdGenerator(seed=42)
        >>> first = generate()
        >>> RandomIdGenerator(seed=42)() == first
        True
    """

    def __init__(self, seed: Optional[int] = None, length: int = DEFAULT_ID_LENGTH):
        if length <= 0:
            raise ValueError("length must be positive")

        self.length = length
        self._rng = random.Random(seed)

    def __call__(self) -> str:
        return random_id(self.length, self._rng)
