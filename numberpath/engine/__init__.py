from numberpath.engine.errors import (
    GameOverError,
    InvalidMoveError,
    InvalidStartError,
    ObstaclePlacementFailed,
    PuzzleError,
    PuzzleGenerationError,
)
from numberpath.engine.grid import CellState, Grid, Position
from numberpath.engine.topology import Topology, get_topology
from numberpath.engine.hamiltonian import find_hamiltonian_path, is_hamiltonian_path
from numberpath.engine.obstacles import place_obstacles
from numberpath.engine.masking import mask_puzzle
from numberpath.engine.levels import LevelConfig, level_config
from numberpath.engine.generator import PuzzleInstance, generate_level, generate_puzzle
from numberpath.engine.session import GameState, GameStatus
