"""Pytest fixtures for Firework Art tests."""
import copy
import json
import logging

import numpy as np
import pytest
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent


class RecordingCanvas:
    """Canvas stand-in that records every draw command in order."""

    def __init__(self):
        self.calls = []

    def clear(self, rgb):
        self.calls.append(("clear", tuple(rgb)))

    def draw_line(self, x1, y1, x2, y2, width, rgba):
        self.calls.append(("line", x1, y1, x2, y2, width, tuple(rgba)))

    def fill_ellipse(self, x, y, w, h, rgba):
        self.calls.append(("ellipse", x, y, w, h, tuple(rgba)))

    def fill_path(self, path, gradient):
        self.calls.append(("fill_path", path, gradient))

    def stroke_path(self, path, width, gradient):
        self.calls.append(("stroke_path", path, width, gradient))

    def of_kind(self, kind):
        return [call for call in self.calls if call[0] == kind]


@pytest.fixture
def project_root():
    """Return the project root path."""
    return PROJECT_ROOT


@pytest.fixture
def config(project_root):
    """A fresh copy of the shipped configuration."""
    with open(project_root / "config.json") as f:
        return copy.deepcopy(json.load(f))


@pytest.fixture
def sim_config(config):
    return config["simulation"]


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def canvas():
    return RecordingCanvas()


@pytest.fixture
def app_logger():
    """The application logger, restored to a clean state afterwards."""
    logger = logging.getLogger("firework_art")
    yield logger
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
