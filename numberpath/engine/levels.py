from dataclasses import dataclass
from typing import Optional

from numberpath.engine.random_source import RandomSource, resolve_rng


@dataclass(frozen=True)
class DifficultyTier:
    name: str
    rows: int
    cols: int
    min_hidden: float
    max_hidden: float
    obstacles: int


@dataclass(frozen=True)
class LevelConfig:
    level: int
    tier: str
    rows: int
    cols: int
    hidden_rate: float
    obstacle_count: int


# hidden rate >= 0.5 means at most half of the numbers are shown
DIFFICULTY_TIERS = (
    DifficultyTier("tutorial", 3, 3, 0.50, 0.60, 0),
    DifficultyTier("easy", 3, 4, 0.55, 0.65, 0),
    DifficultyTier("normal", 4, 4, 0.60, 0.70, 0),
    DifficultyTier("hard", 4, 5, 0.65, 0.75, 0),
    DifficultyTier("expert", 5, 5, 0.70, 0.80, 0),
    DifficultyTier("master", 5, 5, 0.70, 0.80, 1),
    DifficultyTier("grandmaster", 5, 5, 0.70, 0.80, 2),
)

LEVELS_PER_TIER = 2


def tier_for_level(level: int) -> DifficultyTier:
    level = max(level, 1)
    index = min((level - 1) // LEVELS_PER_TIER, len(DIFFICULTY_TIERS) - 1)
    return DIFFICULTY_TIERS[index]


def level_config(level: int, rng: Optional[RandomSource] = None) -> LevelConfig:
    """Grid size, hidden rate and obstacle count for a 1-based level"""
    level = max(level, 1)
    tier = tier_for_level(level)
    rng = resolve_rng(rng)
    hidden_rate = round(rng.uniform(tier.min_hidden, tier.max_hidden), 2)
    return LevelConfig(
        level=level,
        tier=tier.name,
        rows=tier.rows,
        cols=tier.cols,
        hidden_rate=hidden_rate,
        obstacle_count=tier.obstacles,
    )
