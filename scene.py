# scene.py

import logging
import numpy as np
import constants
from buckets import load_styles
from scene_slot import SceneSlot

logger = logging.getLogger(constants.LOGGER_NAME)


class AnimationClock:
    """
    Frame counter driving every burst phase. Starts at 0, advances by one
    per tick and is never reset.
    """
    def __init__(self):
        self.tick = 0

    def advance(self) -> int:
        self.tick += 1
        return self.tick


class FrameRenderer:
    """
    Runs the scene once per tick: advances the clock, updates every slot in
    a fixed order, then draws the whole frame.

    Data Contract:
    - Inputs:
        - slots (list): SceneSlot instances, drawn back to front.
        - silhouettes: Object with draw(canvas), drawn last. Optional.
        - background (tuple): RGB the frame is cleared to.
    - Side Effects: on_tick mutates slot state; draw only reads it.
    """
    def __init__(self, slots: list, silhouettes=None, background: tuple = constants.NIGHT_SKY):
        self.slots = list(slots)
        self.silhouettes = silhouettes
        self.background = background
        self.clock = AnimationClock()

    @property
    def tick(self) -> int:
        return self.clock.tick

    def on_tick(self, canvas):
        tick = self.clock.advance()
        self.update(tick)
        self.draw(canvas)
        return tick

    def update(self, tick: int):
        for slot in self.slots:
            slot.update(tick)

    def draw(self, canvas):
        canvas.clear(self.background)
        for slot in self.slots:
            slot.draw(canvas)
        if self.silhouettes is not None:
            self.silhouettes.draw(canvas)

    def active_counts(self) -> dict:
        return {slot.name: slot.controller.active_count for slot in self.slots}


def build_scene(config: dict, rng: np.random.Generator, silhouettes=None) -> FrameRenderer:
    """
    Builds the frame renderer from the full config dictionary.
    Raises ValueError on any invalid static configuration.
    """
    sim_config = config['simulation']
    styles = load_styles(config['buckets'])
    slots = [SceneSlot.from_config(slot_config, styles, sim_config, rng) for slot_config in config['slots']]
    if not slots:
        raise ValueError("At least one scene slot must be configured")

    logger.info(f"Scene built with {len(slots)} slot(s): {[slot.name for slot in slots]}.")
    return FrameRenderer(slots, silhouettes=silhouettes)
