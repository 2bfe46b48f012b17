"""
data_models.py: Data structures for the simulation state.
"""

from dataclasses import dataclass, field
from typing import List, Tuple

from .constants import (
    PLAYER_WIDTH, PLAYER_HEIGHT, PLAYER_SPEED, SPAWN_INTERVAL_START
)

@dataclass
class Player:
    """The ship. Only x moves; the intent flags are written by input handlers."""
    x: float
    y: float
    width: float = PLAYER_WIDTH
    height: float = PLAYER_HEIGHT
    speed: float = PLAYER_SPEED

    move_left: bool = False
    move_right: bool = False

    def to_render_state(self):
        """Prepares a minimal snapshot of what a renderer needs."""
        return {
            "x": round(self.x, 2),
            "y": round(self.y, 2),
            "w": self.width,
            "h": self.height,
        }

@dataclass
class Rock:
    """A falling obstacle. (x, y) is the top-left of its bounding box."""
    x: float
    y: float
    size: float
    speed: float

    @property
    def radius(self) -> float:
        return self.size / 2

    @property
    def center(self) -> Tuple[float, float]:
        return self.x + self.radius, self.y + self.radius

    def to_render_state(self):
        return {
            "x": round(self.x, 2),
            "y": round(self.y, 2),
            "size": round(self.size, 2),
        }

@dataclass
class SimulationState:
    """Everything one game owns. Mutated only by the engine's step and reset."""
    player: Player
    rocks: List[Rock] = field(default_factory=list)
    score: int = 0
    spawn_interval: float = SPAWN_INTERVAL_START
    last_spawn_ms: float = 0.0
    game_over: bool = False

    # Tick bookkeeping
    tick_count: int = 0
    last_elapsed_ms: float = 0.0
