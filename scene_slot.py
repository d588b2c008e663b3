# scene_slot.py

import enum
import logging
import numpy as np
import constants
from buckets import classify
from burst import BurstController

logger = logging.getLogger(constants.LOGGER_NAME)


class Placement(enum.Enum):
    """
    Where a firework sits on screen. The tag picks the burst center and the
    way the glow rings shrink. Both tables are hand-tuned per tag.
    """
    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"

    def burst_center(self, x: float, y: float, width: float, height: float) -> tuple:
        fx, fy_width, fy_height = _BURST_CENTER_FACTORS[self]
        return (x + width * fx, y + width * fy_width + height * fy_height)

    def glow_rect(self, x: int, y: int, width: int, height: int, shrink: int) -> tuple:
        left, top, w_loss, h_loss = _GLOW_SHRINK_FACTORS[self]
        return (x + shrink * left, y + shrink * top, width - shrink * w_loss, height - shrink * h_loss)


# (x factor of width, y factor of width, y factor of height).
# The right-hand burst measures its vertical offset from the width.
_BURST_CENTER_FACTORS = {
    Placement.LEFT: (0.35, 0.0, 0.35),
    Placement.RIGHT: (0.62, 0.38, 0.0),
    Placement.CENTER: (0.50, 0.0, 0.50),
}

# Multipliers of the per-ring shrink for (x, y, width, height).
_GLOW_SHRINK_FACTORS = {
    Placement.LEFT: (1, 1, 3, 3),
    Placement.RIGHT: (2, 1, 3, 3),
    Placement.CENTER: (2, 2, 4, 4),
}


class SceneSlot:
    """
    One firework on screen: its bounding box, base color and placement, the
    glow halo drawn beneath it, and the burst controller that owns its sparks.

    Data Contract:
    - Inputs:
        - name (str): Label for logs.
        - rect (tuple): (x, y, width, height) in pixels; width and height positive.
        - base_rgb (tuple): Base firework color; decides the color bucket.
        - placement (Placement | str): One of left, right, center.
        - styles (dict): ColorBucket -> BucketStyle.
        - sim_config (dict): The 'simulation' section of the config file.
        - rng (np.random.Generator): The master seeded random number generator.
    - Invariants: Immutable after construction apart from the controller's sparks.
    """
    def __init__(self, name: str, rect, base_rgb, placement, styles: dict, sim_config: dict, rng: np.random.Generator):
        x, y, width, height = (int(v) for v in rect)
        if width <= 0 or height <= 0:
            raise ValueError(f"Slot '{name}' needs a positive size, got {width}x{height}")

        self.name = name
        self.x, self.y, self.width, self.height = x, y, width, height
        self.bucket = classify(base_rgb)
        self.base_rgb = tuple(int(c) for c in base_rgb)
        self.placement = Placement(placement)
        self.style = styles[self.bucket]

        self.center = self.placement.burst_center(x, y, width, height)
        self.max_radius = width * self.style.radius_factor

        self.controller = BurstController(
            name=name,
            phase_offset=self.style.phase_offset,
            spark_rgb=self.style.spark_rgb,
            config=sim_config,
            rng=rng,
        )

        logger.info(
            f"SceneSlot '{name}' at {(x, y, width, height)}: bucket={self.bucket.value}, "
            f"placement={self.placement.value}, max_radius={self.max_radius:.1f}."
        )

    @classmethod
    def from_config(cls, config: dict, styles: dict, sim_config: dict, rng: np.random.Generator) -> "SceneSlot":
        return cls(
            name=config.get('name', 'slot'),
            rect=config['rect'],
            base_rgb=config['base_rgb'],
            placement=config['placement'],
            styles=styles,
            sim_config=sim_config,
            rng=rng,
        )

    def glow_rings(self):
        """
        Yields (rect, rgba) for every glow ring, outermost first. Each ring
        is brighter than the last and all share one low alpha, so the
        surface's blending builds up the radial falloff.
        """
        multipliers = self.style.ring_multipliers
        for i in range(self.style.ring_count):
            rgba = tuple(
                min(channel + i * multiplier, 255)
                for channel, multiplier in zip(self.base_rgb, multipliers)
            ) + (self.style.ring_alpha,)
            shrink = i * constants.GLOW_RING_STEP
            yield self.placement.glow_rect(self.x, self.y, self.width, self.height, shrink), rgba

    def update(self, tick: int) -> bool:
        return self.controller.update(tick, self.center, self.max_radius)

    def draw(self, canvas):
        """Draws the glow halo, then the sparks on top."""
        for (x, y, w, h), rgba in self.glow_rings():
            canvas.fill_ellipse(x, y, w, h, rgba)
        self.controller.draw(canvas)
