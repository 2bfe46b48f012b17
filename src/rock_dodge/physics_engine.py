"""
physics_engine.py: The authoritative single-player simulation.
"""

import random
from dataclasses import dataclass, field
from typing import List, Optional, Protocol

from .constants import (
    PLAYER_WIDTH, PLAYER_HEIGHT, PLAYER_SPEED, PLAYER_BOTTOM_OFFSET,
    ROCK_MIN_SIZE, ROCK_SIZE_RANGE, ROCK_MIN_SPEED, ROCK_SPEED_RANGE,
    SPAWN_INTERVAL_START
)
from .data_models import Player, Rock, SimulationState
from .physics_core import PhysicsCore


class RandomSource(Protocol):
    """Anything with a random() returning a float in [0, 1). random.Random fits."""

    def random(self) -> float:
        ...


@dataclass
class GameEngine(PhysicsCore):
    """
    Owns one game's state and advances it one tick per step() call.
    The caller supplies the clock; the engine only differences timestamps.
    """
    rng: RandomSource = field(default_factory=random.Random)
    state: Optional[SimulationState] = None

    def __post_init__(self):
        if self.state is None:
            self.state = SimulationState(player=self._new_player())
            self.reset()

    def _new_player(self) -> Player:
        return Player(
            x=(self.width - PLAYER_WIDTH) / 2,
            y=self.height - PLAYER_BOTTOM_OFFSET,
            width=PLAYER_WIDTH,
            height=PLAYER_HEIGHT,
            speed=PLAYER_SPEED,
        )

    # ---------- Read accessors ----------
    @property
    def player(self) -> Player:
        return self.state.player

    @property
    def rocks(self) -> List[Rock]:
        return self.state.rocks

    @property
    def score(self) -> int:
        return self.state.score

    @property
    def game_over(self) -> bool:
        return self.state.game_over

    @property
    def spawn_interval(self) -> float:
        return self.state.spawn_interval

    # ---------- Input side ----------
    def set_move_left(self, value: bool):
        self.state.player.move_left = bool(value)

    def set_move_right(self, value: bool):
        self.state.player.move_right = bool(value)

    def request_restart(self) -> bool:
        """Resets only when the game is over. Returns whether a reset happened."""
        if not self.state.game_over:
            return False
        self.reset()
        return True

    # ---------- Simulation ----------
    def reset(self):
        """Back to a fresh game. The last spawn timestamp carries over."""
        state = self.state
        state.rocks = []
        state.score = 0
        state.spawn_interval = SPAWN_INTERVAL_START
        state.game_over = False
        state.player.x = (self.width - state.player.width) / 2

    def spawn_rock(self) -> Rock:
        """Drops a new rock fully above the top edge."""
        size = ROCK_MIN_SIZE + self.rng.random() * ROCK_SIZE_RANGE
        rock = Rock(
            x=self.rng.random() * (self.width - size),
            y=-size,
            size=size,
            speed=ROCK_MIN_SPEED + self.rng.random() * ROCK_SPEED_RANGE,
        )
        self.state.rocks.append(rock)
        return rock

    def step(self, elapsed_ms: float, now_ms: float):
        """
        Advances the game by one tick. A no-op once the game is over.

        1. Apply movement intent and clamp to the playfield.
        2. Spawn a rock if the spawn interval has passed, then tighten it.
        3. Move every rock, flag a collision, drop rocks that left the bottom.
        """
        state = self.state
        if state.game_over:
            return

        state.tick_count += 1
        state.last_elapsed_ms = elapsed_ms

        state.player.x = self.apply_movement(state.player)

        if now_ms - state.last_spawn_ms > state.spawn_interval:
            self.spawn_rock()
            state.last_spawn_ms = now_ms
            state.spawn_interval = self.next_spawn_interval(state.spawn_interval)

        remaining = []
        for rock in state.rocks:
            rock.y += rock.speed

            if self.check_collision(state.player, rock):
                state.game_over = True

            if self.has_exited(rock):
                state.score += 1
            else:
                remaining.append(rock)
        state.rocks = remaining
