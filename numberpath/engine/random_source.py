import random
from typing import Any, MutableSequence, Optional, Protocol


class RandomSource(Protocol):
    """ What the engine needs from a random generator. random.Random satisfies it """

    def shuffle(self, x: MutableSequence[Any]) -> None: ...

    def uniform(self, a: float, b: float) -> float: ...


# process-wide generator, seeded from system entropy
_default_rng = random.Random()


def resolve_rng(rng: Optional[RandomSource] = None) -> RandomSource:
    return _default_rng if rng is None else rng
