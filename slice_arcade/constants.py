# constants.py

"""
Game Constants

Fixed tuning values for the slicing game. None of these are configurable at
runtime; only the surface size is (see GameEnv and the command line).

Units:
- Distances are pixels, velocities pixels/frame, accelerations pixels/frame^2.
- Angles are radians, spin is radians/frame.
- Lifetimes are counted in frames.
"""

# Default surface
WIDTH = 800  # Pixels
HEIGHT = 600  # Pixels
FPS = 60  # Display refresh the frame step is tuned for

TITLE = "Slice Arcade"

# Physics
GRAVITY = 0.2
SPAWN_MARGIN = 50  # Objects appear this far below the bottom edge
CULL_MARGIN = 100  # ...and are dropped once they fall this far below it

# Spawning
SPAWN_CHANCE = 0.03  # Per frame
BOMB_CHANCE = 0.15  # Share of spawns that are bombs

# Fruit
FRUIT_RADIUS_MIN = 60
FRUIT_RADIUS_MAX = 70
FRUIT_MAX_VX = 4.0
FRUIT_MAX_SPIN = 0.05
FRUIT_COLORS = [
    (40, 167, 69),  # Green
    (255, 193, 7),  # Amber
    (220, 53, 69),  # Red
    (253, 126, 20),  # Orange
    (111, 66, 193),  # Purple
]

# Bombs
BOMB_RADIUS = 30
BOMB_MAX_SPIN = 0.01
COLOR_BOMB = (51, 51, 51)
COLOR_BOMB_FUSE = (255, 80, 80)
COLOR_BOMB_SPARK = (255, 200, 0)

# Scoring
SLICE_SCORE = 10

# Particle bursts
BURST_PARTICLES = 20
BURST_LIFE = 30
PARTICLE_MAX_SPEED = 2.5
PARTICLE_RADIUS_MIN = 1
PARTICLE_RADIUS_MAX = 4

# Interface colors (RGB / RGBA)
COLOR_BG_TOP = (20, 24, 40)
COLOR_BG_BOTTOM = (44, 62, 80)
COLOR_TEXT = (255, 255, 255)
COLOR_TEXT_SHADOW = (30, 30, 30)
COLOR_TRAIL = (255, 255, 255, 178)  # 70% opaque white
TRAIL_WIDTH = 5
COLOR_BUTTON = (52, 152, 219)
COLOR_BUTTON_HOVER = (93, 173, 226)
COLOR_OVERLAY = (0, 0, 0, 180)
COLOR_GAME_OVER = (200, 40, 40)
