"""Test the application entry point and animation loop."""
import json
import logging

import pytest

pygame = pytest.importorskip("pygame")

import main
from scene import build_scene


class FakeClock:
    def __init__(self):
        self.ticks = []

    def tick(self, framerate):
        self.ticks.append(framerate)

    def get_fps(self):
        return 30.0


def quit_after(frames):
    """Stands in for pygame.event.get: no events for frames - 1 calls, then QUIT."""
    calls = {"n": 0}

    def get():
        calls["n"] += 1
        if calls["n"] >= frames:
            return [pygame.event.Event(pygame.QUIT)]
        return []
    return get


class TestMain:
    """Tests for start-up."""

    def test_bad_scene_config_aborts_before_window_opens(self, tmp_path, monkeypatch, config, app_logger):
        config["run_id"] = "bad-config"
        config["simulation"]["trail_length"] = 1
        config_path = tmp_path / "config.json"
        config_path.write_text(json.dumps(config))
        monkeypatch.chdir(tmp_path)

        with pytest.raises(ValueError):
            main.main(str(config_path))

        for handler in app_logger.handlers:
            handler.flush()
        log_text = (tmp_path / "runs" / "bad-config" / "firework_art.log").read_text()
        assert "Invalid scene configuration" in log_text
        assert "Traceback" in log_text
        assert not pygame.display.get_init()

    def test_missing_slots_abort_start_up(self, tmp_path, monkeypatch, config, app_logger):
        del config["slots"]
        config_path = tmp_path / "config.json"
        config_path.write_text(json.dumps(config))
        monkeypatch.chdir(tmp_path)

        with pytest.raises(KeyError):
            main.main(str(config_path))
        assert not pygame.display.get_init()


class TestAnimationLoop:
    """Tests for the per-tick host loop."""

    @pytest.fixture
    def renderer(self, config, rng):
        return build_scene(config, rng)

    @pytest.fixture(autouse=True)
    def no_display(self, monkeypatch):
        monkeypatch.setattr(pygame.display, "flip", lambda: None)

    def test_runs_until_quit(self, renderer, canvas, monkeypatch):
        monkeypatch.setattr(pygame.event, "get", quit_after(5))
        clock = FakeClock()
        assert main.run_animation_loop(renderer, canvas, clock, 0) == 5
        assert clock.ticks == [30] * 5

    def test_quit_still_finishes_the_current_tick(self, renderer, canvas, monkeypatch):
        monkeypatch.setattr(pygame.event, "get", quit_after(1))
        assert main.run_animation_loop(renderer, canvas, FakeClock(), 0) == 1
        assert canvas.of_kind("clear")

    def test_status_lines_are_throttled(self, renderer, canvas, monkeypatch, caplog, app_logger):
        monkeypatch.setattr(pygame.event, "get", quit_after(6))
        with caplog.at_level(logging.DEBUG, logger=app_logger.name):
            main.run_animation_loop(renderer, canvas, FakeClock(), 3)
        status = [r.getMessage() for r in caplog.records if r.getMessage().startswith("Tick=")]
        assert len(status) == 2
        assert status[0].startswith("Tick=3,")
        assert status[1].startswith("Tick=6,")
