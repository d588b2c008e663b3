# burst.py

import logging
import numpy as np
import constants
from spark import Spark

logger = logging.getLogger(constants.LOGGER_NAME)


def spark_count(max_radius: float, cap: int = constants.MAX_SPARKS_PER_BURST) -> int:
    """Number of sparks in a burst of the given radius, capped to keep bursts cheap."""
    return min(int(constants.BURST_BASE_SPARKS + max_radius / constants.BURST_RADIUS_DIVISOR), cap)


class BurstController:
    """
    Owns the active sparks of one color class and decides when a new burst
    is launched.

    Data Contract:
    - Inputs:
        - name (str): Label used in log messages.
        - phase_offset (int): Shifts this controller's cycle start.
        - spark_rgb (tuple): Color given to every spawned spark.
        - config (dict): The 'simulation' section of the config file.
        - rng (np.random.Generator): The master seeded random number generator.
    - Outputs: None. This class modifies its internal state.
    - Side Effects: Manages the lifecycle of its sparks.
    - Invariants: At most one burst is alive at a time. A burst is only
      spawned when the collection is empty and the phase is within the
      spawn tolerance of the cycle start.
    """
    def __init__(self, name: str, phase_offset: int, spark_rgb: tuple, config: dict, rng: np.random.Generator):
        self.name = name
        self.phase_offset = phase_offset
        self.spark_rgb = tuple(spark_rgb)
        self.rng = rng

        self.cycle_frames = int(config.get('cycle_frames', 80))
        self.spawn_phase_tolerance = config.get('spawn_phase_tolerance', 2)
        self.trail_length = int(config.get('trail_length', constants.TRAIL_LENGTH))
        self.max_sparks = int(config.get('max_sparks_per_burst', constants.MAX_SPARKS_PER_BURST))

        # Fail at start-up rather than on the first spawn.
        if self.cycle_frames < 1:
            raise ValueError(f"cycle_frames must be positive, got {self.cycle_frames}")
        if self.trail_length < 2:
            raise ValueError(f"trail_length must be at least 2, got {self.trail_length}")
        if self.max_sparks < 1:
            raise ValueError(f"max_sparks_per_burst must be positive, got {self.max_sparks}")

        self.sparks = []
        self.bursts_spawned = 0

        logger.info(
            f"BurstController '{name}' created: offset={phase_offset}, "
            f"cycle={self.cycle_frames}, color={self.spark_rgb}."
        )

    def phase(self, tick: int) -> int:
        """Position of this controller within its cycle, in ticks."""
        return (tick + self.phase_offset) % self.cycle_frames

    def should_spawn(self, tick: int) -> bool:
        return self.phase(tick) <= self.spawn_phase_tolerance and not self.sparks

    def spawn(self, center, max_radius: float):
        """
        Launches a burst of sparks from center, each with a random direction
        and a speed proportional to max_radius.
        """
        count = spark_count(max_radius, self.max_sparks)
        angles = self.rng.uniform(0.0, 2 * np.pi, count)
        speeds = (1 + self.rng.uniform(0.0, constants.BURST_SPEED_JITTER, count)) * (
            max_radius / constants.BURST_SPEED_DIVISOR
        )
        velocities = np.column_stack((np.cos(angles) * speeds, np.sin(angles) * speeds))

        for velocity in velocities:
            self.sparks.append(Spark(center, velocity, self.spark_rgb, self.trail_length))

        self.bursts_spawned += 1
        logger.debug(
            f"Burst '{self.name}' #{self.bursts_spawned} spawned {count} sparks "
            f"at ({center[0]:.1f}, {center[1]:.1f})."
        )

    def update(self, tick: int, center, max_radius: float) -> bool:
        """
        Runs one tick: spawns a burst if due, advances every spark, then
        retains only the sparks still alive. Returns True if a burst was spawned.
        """
        spawned = self.should_spawn(tick)
        if spawned:
            self.spawn(center, max_radius)

        for spark in self.sparks:
            spark.advance()

        # Filter pass keeps survivors in their original order.
        self.sparks = [spark for spark in self.sparks if not spark.is_expired()]
        return spawned

    def draw(self, canvas):
        """Draws every active spark. Does not change any state."""
        for spark in self.sparks:
            spark.draw(canvas)

    @property
    def active_count(self) -> int:
        return len(self.sparks)
