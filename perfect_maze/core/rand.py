import logging
import random
import time
from abc import ABC, abstractmethod
from typing import MutableSequence, Optional, Sequence

logger = logging.getLogger(__name__)

# Clock reads attempted before giving up and seeding with 0
CLOCK_RETRIES = 100

class RandomSource(ABC):
    """
    Randomness consumed by the generators.
    Subclasses provide uniform(); shuffle() is built on top of it.
    Not meant for anything security related.
    """

    @abstractmethod
    def uniform(self, n: int) -> int:
        """Returns an integer in [0, n). n must be positive."""
        pass

    def shuffle(self, seq: MutableSequence) -> MutableSequence:
        """In-place Fisher-Yates shuffle. Returns seq for convenience."""
        for i in range(len(seq) - 1, 0, -1):
            j = self.uniform(i + 1)
            seq[i], seq[j] = seq[j], seq[i]
        return seq

    def choice(self, seq: Sequence):
        return seq[self.uniform(len(seq))]

def clock_seed(clock=time.time_ns) -> int:
    for _ in range(CLOCK_RETRIES):
        try:
            return clock()
        except OSError:
            continue
    logger.warning(f"System clock unavailable after {CLOCK_RETRIES} attempts, seeding with 0")
    return 0

class SeededRandom(RandomSource):
    """
    Default source: random.Random seeded explicitly, or from the wall clock
    when no seed is given.
    """

    def __init__(self, seed: Optional[int] = None):
        if seed is None:
            seed = clock_seed()
        self.seed = seed
        self._rng = random.Random(seed)

    def uniform(self, n: int) -> int:
        if n <= 0:
            raise ValueError(f"uniform() needs a positive bound, got {n}")
        return self._rng.randrange(n)

class SequenceRandom(RandomSource):
    """
    Replays a fixed cycle of integers (each reduced modulo n).
    Useful for pinning down generator behaviour in tests.
    """

    def __init__(self, values: Sequence[int]):
        if not values:
            raise ValueError("SequenceRandom needs at least one value")
        self.values = list(values)
        self.calls = 0

    def uniform(self, n: int) -> int:
        if n <= 0:
            raise ValueError(f"uniform() needs a positive bound, got {n}")
        value = self.values[self.calls % len(self.values)]
        self.calls += 1
        return value % n
