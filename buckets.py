# buckets.py

"""
Color buckets.

Every firework belongs to exactly one of three color classes. The class
decides both the glow-ring style and the burst configuration, so it is
classified once from the slot's base color and looked up from there.
"""

import enum
from dataclasses import dataclass


class ColorBucket(enum.Enum):
    GREEN = "green"
    PINK = "pink"
    YELLOW = "yellow"


def classify(rgb) -> ColorBucket:
    """
    Classifies a base (R, G, B) color. The predicates are order sensitive:
    green wins first, then pink, and everything else is yellow.
    """
    red, green, blue = _validate_rgb(rgb)
    if green > red and green >= blue:
        return ColorBucket.GREEN
    if blue > green and red > green:
        return ColorBucket.PINK
    return ColorBucket.YELLOW


@dataclass(frozen=True)
class BucketStyle:
    """
    Per-bucket constants for bursts and glow rings.

    Data Contract:
    - phase_offset (int): Shifts when this bucket's cycle starts.
    - spark_rgb (tuple): Brightened spark color.
    - radius_factor (float): Burst radius as a fraction of the slot width.
    - ring_count (int): Number of glow rings.
    - ring_alpha (int): Alpha (0-255) shared by every ring.
    - ring_multipliers (tuple): Per-ring (R, G, B) increments.
    """
    phase_offset: int
    spark_rgb: tuple
    radius_factor: float
    ring_count: int
    ring_alpha: int
    ring_multipliers: tuple

    @classmethod
    def from_config(cls, config: dict) -> "BucketStyle":
        multipliers = tuple(int(m) for m in config['ring_multipliers'])
        if len(multipliers) != 3:
            raise ValueError(f"ring_multipliers must have 3 entries, got {multipliers}")
        ring_count = int(config['ring_count'])
        if ring_count < 0:
            raise ValueError(f"ring_count must not be negative, got {ring_count}")
        ring_alpha = int(config['ring_alpha'])
        if not 0 <= ring_alpha <= 255:
            raise ValueError(f"ring_alpha must be within 0-255, got {ring_alpha}")

        return cls(
            phase_offset=int(config['phase_offset']),
            spark_rgb=_validate_rgb(config['spark_rgb']),
            radius_factor=float(config['radius_factor']),
            ring_count=ring_count,
            ring_alpha=ring_alpha,
            ring_multipliers=multipliers,
        )


def load_styles(config: dict) -> dict:
    """Builds a BucketStyle for every bucket. All three must be present."""
    styles = {}
    for bucket in ColorBucket:
        if bucket.value not in config:
            raise ValueError(f"Missing style for color bucket '{bucket.value}'")
        styles[bucket] = BucketStyle.from_config(config[bucket.value])
    return styles


def _validate_rgb(rgb) -> tuple:
    channels = tuple(int(c) for c in rgb)
    if len(channels) != 3 or any(not 0 <= c <= 255 for c in channels):
        raise ValueError(f"Expected an (R, G, B) triple within 0-255, got {rgb!r}")
    return channels
