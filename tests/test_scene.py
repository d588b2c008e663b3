"""Test the animation clock, frame renderer and scene construction."""
import numpy as np
import pytest

import constants
from scene import AnimationClock, FrameRenderer, build_scene


class FakeSilhouettes:
    def draw(self, canvas):
        canvas.calls.append(("silhouettes",))


@pytest.fixture
def renderer(config, rng):
    return build_scene(config, rng, silhouettes=FakeSilhouettes())


def snapshot(renderer):
    return [
        [(s.position.copy(), s.life, s.trail.copy()) for s in slot.controller.sparks]
        for slot in renderer.slots
    ]


class TestAnimationClock:
    """Tests for the frame counter."""

    def test_starts_at_zero(self):
        assert AnimationClock().tick == 0

    def test_advances_by_one(self):
        clock = AnimationClock()
        ticks = [clock.advance() for _ in range(5)]
        assert ticks == [1, 2, 3, 4, 5]
        assert clock.tick == 5


class TestBuildScene:
    """Tests for building the scene from config.json."""

    def test_shipped_scene(self, renderer):
        assert [slot.name for slot in renderer.slots] == ["small", "medium", "large"]
        assert [slot.bucket.value for slot in renderer.slots] == ["green", "pink", "yellow"]
        assert renderer.tick == 0

    def test_short_trail_aborts_construction(self, config, rng):
        config["simulation"]["trail_length"] = 1
        with pytest.raises(ValueError):
            build_scene(config, rng)

    def test_unknown_placement_aborts_construction(self, config, rng):
        config["slots"][0]["placement"] = "top"
        with pytest.raises(ValueError):
            build_scene(config, rng)

    def test_missing_bucket_aborts_construction(self, config, rng):
        del config["buckets"]["yellow"]
        with pytest.raises(ValueError):
            build_scene(config, rng)

    def test_empty_scene_is_rejected(self, config, rng):
        config["slots"] = []
        with pytest.raises(ValueError):
            build_scene(config, rng)


class TestFrameRenderer:
    """Tests for per-tick orchestration."""

    def test_on_tick_advances_clock(self, renderer, canvas):
        assert renderer.on_tick(canvas) == 1
        assert renderer.on_tick(canvas) == 2
        assert renderer.tick == 2

    def test_frame_order(self, renderer, canvas):
        renderer.on_tick(canvas)
        assert canvas.calls[0] == ("clear", constants.NIGHT_SKY)
        assert canvas.calls[-1] == ("silhouettes",)

        ellipses = canvas.of_kind("ellipse")
        assert len(ellipses) == 19 + 23 + 30

    def test_bursts_follow_their_phase_offsets(self, renderer, canvas):
        spawns = {slot.name: [] for slot in renderer.slots}
        for _ in range(80):
            tick = renderer.clock.advance()
            for slot in renderer.slots:
                if slot.update(tick):
                    spawns[slot.name].append(tick)

        # offsets 45, 55 and 75 hit phase 0 at ticks 35, 25 and 5
        assert spawns == {"small": [35], "medium": [25], "large": [5]}

    def test_spark_counts_per_slot(self, renderer, canvas):
        for _ in range(40):
            renderer.on_tick(canvas)
        assert renderer.active_counts() == {"small": 59, "medium": 57, "large": 63}

    def test_draw_twice_does_not_mutate(self, renderer, canvas):
        for _ in range(40):
            renderer.on_tick(canvas)
        before = snapshot(renderer)

        renderer.draw(canvas)
        renderer.draw(canvas)

        after = snapshot(renderer)
        assert renderer.tick == 40
        for slot_before, slot_after in zip(before, after):
            assert len(slot_before) == len(slot_after)
            for (p0, l0, t0), (p1, l1, t1) in zip(slot_before, slot_after):
                assert np.array_equal(p0, p1)
                assert l0 == l1
                assert np.array_equal(t0, t1)

    def test_renders_without_silhouettes(self, config, rng, canvas):
        renderer = FrameRenderer(build_scene(config, rng).slots)
        renderer.on_tick(canvas)
        assert ("silhouettes",) not in canvas.calls
