"""
constants.py: Centralized configuration for the playfield, physics and rendering.
"""

# -------- Playfield Config --------
SCREEN_WIDTH = 400
SCREEN_HEIGHT = 600

# -------- Player Config --------
PLAYER_WIDTH = 30
PLAYER_HEIGHT = 40
PLAYER_SPEED = 5                # Pixels per tick
PLAYER_BOTTOM_OFFSET = 60       # Player top edge sits this far above the bottom

# -------- Rock Config --------
ROCK_MIN_SIZE = 20
ROCK_SIZE_RANGE = 30            # Size drawn from [20, 50)
ROCK_MIN_SPEED = 2.0
ROCK_SPEED_RANGE = 3.0          # Fall speed drawn from [2, 5) pixels per tick

# -------- Spawn Cadence (milliseconds) --------
SPAWN_INTERVAL_START = 800
SPAWN_INTERVAL_STEP = 6         # Shaved off after every spawn
SPAWN_INTERVAL_FLOOR = 330

# -------- Render Config --------
RENDER_FPS = 60
STAR_COUNT = 40
BACKGROUND_COLOR = (0, 0, 0)
STAR_COLOR = (255, 255, 255)
SHIP_COLOR = (0, 255, 255)
ROCK_COLOR = (136, 136, 136)
TEXT_COLOR = (255, 255, 255)
GAME_OVER_COLOR = (255, 0, 0)
