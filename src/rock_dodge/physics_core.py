"""
physics_core.py: The deterministic movement, collision and difficulty helpers.
"""

import math
from dataclasses import dataclass

from .constants import (
    SCREEN_WIDTH, SCREEN_HEIGHT, SPAWN_INTERVAL_STEP, SPAWN_INTERVAL_FLOOR
)
from .data_models import Player, Rock


def rect_circle_colliding(rx: float, ry: float, rw: float, rh: float,
                          cx: float, cy: float, cr: float) -> bool:
    """
    Exact axis-aligned rectangle vs circle overlap test.

    The circle center is clamped into the rectangle to find the closest
    point; the shapes touch when that point is within the radius.
    """
    test_x = max(rx, min(cx, rx + rw))
    test_y = max(ry, min(cy, ry + rh))
    dist_x = cx - test_x
    dist_y = cy - test_y
    return math.sqrt(dist_x * dist_x + dist_y * dist_y) <= cr


@dataclass
class PhysicsCore:
    """
    Shared deterministic rules used by the engine. Holds only the playfield size.
    """
    width: float = SCREEN_WIDTH
    height: float = SCREEN_HEIGHT

    def apply_movement(self, player: Player) -> float:
        """Returns the player's x after one tick of intent. Both flags cancel out."""
        x = player.x
        if player.move_left:
            x -= player.speed
        if player.move_right:
            x += player.speed
        return self.clamp_player_x(x, player.width)

    def clamp_player_x(self, x: float, player_width: float) -> float:
        return max(0.0, min(x, self.width - player_width))

    def check_collision(self, player: Player, rock: Rock) -> bool:
        cx, cy = rock.center
        return rect_circle_colliding(
            player.x, player.y, player.width, player.height,
            cx, cy, rock.radius
        )

    def has_exited(self, rock: Rock) -> bool:
        """True once the rock's top edge is a full rock below the playfield."""
        return rock.y > self.height + rock.size

    def next_spawn_interval(self, interval: float) -> float:
        return max(SPAWN_INTERVAL_FLOOR, interval - SPAWN_INTERVAL_STEP)
