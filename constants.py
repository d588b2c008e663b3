# constants.py

"""
Application Constants

This module defines static configuration values for the application's framework.
These are not expected to change between runs; per-run tunables (timing,
bucket styles, slot placement) live in config.json.

Data Contract:
- All values are immutable constants.
- Units are specified in comments where applicable.
"""

# Screen dimensions
WIDTH = 900  # Pixels
HEIGHT = 500  # Pixels

# Framerate
FPS = 30  # Ticks per second (~33 ms per tick)

# Colors (RGB)
WHITE = (255, 255, 255)
NIGHT_SKY = (87, 67, 76)

# Window Title
TITLE = "Watching the Fireworks"

# Logger name shared by every module
LOGGER_NAME = "firework_art"

# Spark physics (all per tick, not per second)
SPARK_LIFE = 120.0       # Starting life of a spark.
SPARK_LIFE_STEP = 2.0    # Life lost per tick, so a spark lasts 60 ticks.
SPARK_DRAG = 0.985       # Velocity multiplier applied each tick.
SPARK_GRAVITY = 0.25     # Added to vy each tick (screen y grows downward).
TRAIL_LENGTH = 20        # Default trail capacity (positions).

# Burst sizing
BURST_BASE_SPARKS = 35        # Sparks in a burst before the radius term.
BURST_RADIUS_DIVISOR = 10.0   # One extra spark per this many pixels of radius.
BURST_SPEED_DIVISOR = 55.0    # Base speed = max_radius / this.
BURST_SPEED_JITTER = 1.5      # Speed multiplier is drawn from 1 + U[0, jitter).
MAX_SPARKS_PER_BURST = 120

# Trail rendering
TRAIL_FADE_DIVISOR = 160.0  # alpha = t * life / divisor, at most 0.75.
TRAIL_WIDTH_BASE = 0.5      # Stroke width at the tail.
TRAIL_WIDTH_GAIN = 5.0      # Extra stroke width at the head.
GLOW_WIDTH_SCALE = 3.0      # Glow stroke is this many times the core stroke.
GLOW_ALPHA_SCALE = 50       # Glow alpha = alpha * this (core uses 255).

# Glow rings
GLOW_RING_STEP = 6  # Pixels each ring shrinks by, per ring index.

# Silhouette palette (RGBA)
SHADOW_DARK = (30, 20, 25, 255)
SHADOW_LIGHT = (60, 35, 30, 255)
RIM_PURPLE = (200, 120, 190, 60)
RIM_WARM = (240, 200, 120, 50)
RIM_SHARP_GREEN = (120, 145, 120, 180)
RIM_SHARP_WARM = (250, 210, 160, 230)
TRANSPARENT = (0, 0, 0, 0)
COUPLE_RIM_SOFT = (220, 245, 220, 50)
COUPLE_RIM_BRIGHT = (255, 255, 255, 200)
