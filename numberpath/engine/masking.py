import math
from typing import Dict, Optional, Sequence

from numberpath.engine.grid import Position
from numberpath.engine.random_source import RandomSource, resolve_rng


def mask_puzzle(path: Sequence, hidden_rate: float, rng: Optional[RandomSource] = None) -> Dict[Position, int]:
    """
    Choose which steps of a solved path stay visible.
    floor(len(path) * hidden_rate) step indices are hidden, uniformly at random;
    the returned map holds position -> 1-based step for every visible step.
    """
    if not 0 <= hidden_rate <= 1:
        raise ValueError(f"hidden_rate must be within [0, 1], got {hidden_rate}")

    rng = resolve_rng(rng)
    total_steps = len(path)
    hide_count = math.floor(total_steps * hidden_rate)

    indices = list(range(1, total_steps + 1))
    rng.shuffle(indices)
    hidden = set(indices[:hide_count])

    return {
        Position(*pos): index
        for index, pos in enumerate(path, start=1)
        if index not in hidden
    }
