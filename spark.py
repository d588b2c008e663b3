# spark.py

import numpy as np
import constants

class Spark:
    """
    Represents a single particle of a firework burst.

    Data Contract:
    - Inputs:
        - position (array-like): Spawn point (x, y) in pixels.
        - velocity (array-like): Initial (vx, vy) in pixels per tick.
        - color (tuple): Brightened (R, G, B) of the owning burst.
        - trail_length (int): Trail capacity, at least 2.
    - Invariants:
        - life never increases; the spark is expired once life <= 0.
        - The trail always holds exactly trail_length positions, oldest first.
    """
    def __init__(self, position, velocity, color: tuple, trail_length: int = constants.TRAIL_LENGTH):
        if trail_length < 2:
            raise ValueError(f"trail_length must be at least 2, got {trail_length}")

        self.position = np.array(position, dtype=float)
        self.velocity = np.array(velocity, dtype=float)
        self.life = constants.SPARK_LIFE
        self.color = tuple(color)

        # The whole trail starts collapsed onto the spawn point.
        self.trail = np.tile(self.position, (trail_length, 1))

    @property
    def trail_length(self) -> int:
        return self.trail.shape[0]

    def advance(self):
        """
        Updates the spark's state for one tick.
        v_new = v_old * drag + gravity
        p_new = p_old + v_new
        """
        self.velocity *= constants.SPARK_DRAG
        self.velocity[1] += constants.SPARK_GRAVITY
        self.position += self.velocity
        self.life -= constants.SPARK_LIFE_STEP

        # Slide the window: drop the oldest entry, append the new position.
        self.trail[:-1] = self.trail[1:]
        self.trail[-1] = self.position

    def is_expired(self) -> bool:
        return self.life <= 0

    def draw(self, canvas):
        """
        Draws the tapered trail from tail to head.

        Each segment gets a bright white core and a wider, dimmer glow in the
        spark's own color. Opacity and width both grow toward the head, and
        the whole trail fades as life runs out.
        """
        segments = self.trail_length - 1
        for j in range(segments):
            t = j / segments
            alpha = t * self.life / constants.TRAIL_FADE_DIVISOR
            stroke_width = constants.TRAIL_WIDTH_BASE + constants.TRAIL_WIDTH_GAIN * t

            x1, y1 = int(self.trail[j, 0]), int(self.trail[j, 1])
            x2, y2 = int(self.trail[j + 1, 0]), int(self.trail[j + 1, 1])
            # Collapsed stretches land on one pixel; only the head segment marks it.
            if x1 == x2 and y1 == y2 and j < segments - 1:
                continue

            canvas.draw_line(x1, y1, x2, y2, stroke_width, (*constants.WHITE, int(alpha * 255)))
            canvas.draw_line(
                x1, y1, x2, y2,
                stroke_width * constants.GLOW_WIDTH_SCALE,
                (*self.color, int(alpha * constants.GLOW_ALPHA_SCALE))
            )
