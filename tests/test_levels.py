import random

import pytest

from numberpath.engine import level_config
from numberpath.engine.levels import DIFFICULTY_TIERS, tier_for_level


@pytest.mark.parametrize("level, tier, rows, cols, obstacles", [
    (1, "tutorial", 3, 3, 0),
    (2, "tutorial", 3, 3, 0),
    (3, "easy", 3, 4, 0),
    (5, "normal", 4, 4, 0),
    (7, "hard", 4, 5, 0),
    (10, "expert", 5, 5, 0),
    (11, "master", 5, 5, 1),
    (13, "grandmaster", 5, 5, 2),
    (40, "grandmaster", 5, 5, 2),
])
def test_tier_table(rng, level, tier, rows, cols, obstacles):
    config = level_config(level, rng=rng)
    assert config.level == level
    assert config.tier == tier
    assert (config.rows, config.cols) == (rows, cols)
    assert config.obstacle_count == obstacles


@pytest.mark.parametrize("level", [0, -3])
def test_levels_below_one_are_clamped(rng, level):
    config = level_config(level, rng=rng)
    assert config.level == 1
    assert config.tier == "tutorial"


@pytest.mark.parametrize("level", range(1, 16))
def test_hidden_rate_within_tier_range(level):
    rng = random.Random(level)
    tier = tier_for_level(level)
    for _ in range(20):
        rate = level_config(level, rng=rng).hidden_rate
        assert tier.min_hidden <= rate <= tier.max_hidden
        assert round(rate, 2) == rate


def test_difficulty_never_decreases():
    sizes = [tier.rows * tier.cols for tier in DIFFICULTY_TIERS]
    obstacles = [tier.obstacles for tier in DIFFICULTY_TIERS]
    assert sizes == sorted(sizes)
    assert obstacles == sorted(obstacles)
