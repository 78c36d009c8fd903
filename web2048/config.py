"""
Configuration for the 2048 game engine, session and leaderboard.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class GameConfig:
    """
    Game rules and storage keys.

    Attributes are grouped by the component that consumes them.
    """

    # ##>: Board parameters.
    size: int = 4

    # ##>: Spawn policy.
    tile_probs: dict[int, float] = field(default_factory=lambda: {2: 0.9, 4: 0.1})
    double_spawn_prob: float = 0.4  # Chance that one spawn places two tiles
    extra_start_tile_prob: float = 0.4  # Chance of a third spawn on new game

    # ##>: Leaderboard parameters.
    leaderboard_size: int = 10
    default_player_name: str = 'Player'

    # ##>: Storage keys.
    state_key: str = 'web2048_state'
    leaders_key: str = 'web2048_leaders'

    def __post_init__(self):
        if self.size < 2:
            raise ValueError(f'size must be >= 2, got {self.size}')
        if abs(sum(self.tile_probs.values()) - 1.0) > 1e-9:
            raise ValueError(f'tile_probs must sum to 1, got {self.tile_probs}')
        if self.leaderboard_size <= 0:
            raise ValueError(f'leaderboard_size must be > 0, got {self.leaderboard_size}')


DEFAULT_CONFIG = GameConfig()
