"""
rock_dodge: a tiny arcade game where a ship dodges falling rocks.
"""

from .physics_core import PhysicsCore, rect_circle_colliding
from .physics_engine import GameEngine, RandomSource
from .data_models import Player, Rock, SimulationState

__all__ = [
    "GameEngine",
    "PhysicsCore",
    "Player",
    "RandomSource",
    "Rock",
    "SimulationState",
    "rect_circle_colliding",
]
