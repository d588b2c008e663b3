# canvas.py

"""
Drawing surface.

The scene never touches pygame directly; it issues immediate-mode commands
to a canvas object. Any object with these methods will do (tests use a
recorder):

- clear(rgb)
- draw_line(x1, y1, x2, y2, width, rgba)
- fill_ellipse(x, y, w, h, rgba)
- fill_path(path, gradient)
- stroke_path(path, width, gradient)

Colors are 0-255 integer tuples. PygameCanvas blends every translucent
primitive onto its target surface as it is drawn.
"""

import math
import logging
from dataclasses import dataclass

import numpy as np
import pygame
import pygame.gfxdraw

import constants

logger = logging.getLogger(constants.LOGGER_NAME)


@dataclass(frozen=True)
class LinearGradient:
    """
    Two-color gradient along the line from start to end. Points beyond either
    end take that end's color (no cycling).
    """
    start: tuple
    start_rgba: tuple
    end: tuple
    end_rgba: tuple

    def colors_at(self, xs, ys) -> np.ndarray:
        """Returns float RGBA colors with shape xs.shape + (4,)."""
        xs = np.asarray(xs, dtype=float)
        ys = np.asarray(ys, dtype=float)
        dx = self.end[0] - self.start[0]
        dy = self.end[1] - self.start[1]
        length_sq = dx * dx + dy * dy
        if length_sq == 0:
            t = np.zeros_like(xs)
        else:
            t = np.clip(((xs - self.start[0]) * dx + (ys - self.start[1]) * dy) / length_sq, 0.0, 1.0)

        c0 = np.asarray(self.start_rgba, dtype=float)
        c1 = np.asarray(self.end_rgba, dtype=float)
        return c0 + (c1 - c0) * t[..., np.newaxis]


class Path:
    """
    Vector path made of subpaths of straight and cubic segments. Curves are
    flattened into polylines as they are added.

    close() closes only the current subpath.
    """
    def __init__(self, curve_steps: int = 16):
        self.curve_steps = curve_steps
        self._subpaths = []
        self._closed = []

    def move_to(self, x, y):
        self._subpaths.append([(float(x), float(y))])
        self._closed.append(False)
        return self

    def line_to(self, x, y):
        self._current().append((float(x), float(y)))
        return self

    def curve_to(self, x1, y1, x2, y2, x3, y3):
        points = self._current()
        p0 = np.array(points[-1])
        p1, p2, p3 = np.array((x1, y1), float), np.array((x2, y2), float), np.array((x3, y3), float)

        t = np.linspace(0.0, 1.0, self.curve_steps + 1)[1:, np.newaxis]
        u = 1.0 - t
        flattened = u ** 3 * p0 + 3 * u ** 2 * t * p1 + 3 * u * t ** 2 * p2 + t ** 3 * p3
        points.extend(tuple(p) for p in flattened)
        return self

    def close(self):
        if self._closed:
            self._closed[-1] = True
        return self

    def subpaths(self):
        """Yields (points, closed) with points as an (n, 2) float array."""
        for points, closed in zip(self._subpaths, self._closed):
            yield np.array(points, dtype=float), closed

    def _current(self) -> list:
        if not self._subpaths:
            raise ValueError("Path must start with move_to")
        return self._subpaths[-1]


class PygameCanvas:
    """
    Canvas backed by a pygame.Surface.

    Lines and ellipses are drawn with pygame.gfxdraw, which alpha-blends onto
    the target. Antialiased outlines are only added to opaque primitives,
    since outlining a translucent shape would blend its edge twice. Every
    firework primitive (trail cores, trail glows, glow rings) is translucent,
    so the antialias flag never affects them; it only smooths opaque shapes.

    Data Contract:
    - Inputs:
        - surface (pygame.Surface): The target, usually the display surface.
        - antialias (bool): Request smoothed edges where available.
    - Side Effects: Draws onto surface. Gradient-filled paths are rendered
      once per (path, gradient, width) and reused, so paths must not change
      after they are first drawn.
    """
    def __init__(self, surface: pygame.Surface, antialias: bool = True):
        self.surface = surface
        self.antialias = antialias
        self._layers = {}

    def clear(self, rgb):
        self.surface.fill(rgb)

    def draw_line(self, x1, y1, x2, y2, width, rgba):
        """
        Strokes a segment with square caps, so even a zero-length segment
        leaves a width-sized mark.
        """
        rgba = _clamp_rgba(rgba)
        if rgba[3] == 0 or width <= 0:
            return

        if width <= 1:
            pygame.gfxdraw.line(self.surface, int(x1), int(y1), int(x2), int(y2), rgba)
            return

        dx, dy = x2 - x1, y2 - y1
        length = math.hypot(dx, dy)
        if length == 0:
            ux, uy = 1.0, 0.0
        else:
            ux, uy = dx / length, dy / length

        half = width / 2.0
        # Offsets along the segment (cap) and across it (thickness).
        cx, cy = ux * half, uy * half
        nx, ny = -uy * half, ux * half
        points = [
            (round(x1 - cx + nx), round(y1 - cy + ny)),
            (round(x2 + cx + nx), round(y2 + cy + ny)),
            (round(x2 + cx - nx), round(y2 + cy - ny)),
            (round(x1 - cx - nx), round(y1 - cy - ny)),
        ]
        pygame.gfxdraw.filled_polygon(self.surface, points, rgba)
        if self.antialias and rgba[3] == 255:
            pygame.gfxdraw.aapolygon(self.surface, points, rgba)

    def fill_ellipse(self, x, y, w, h, rgba):
        """Fills the ellipse inscribed in the (x, y, w, h) box."""
        rgba = _clamp_rgba(rgba)
        if rgba[3] == 0 or w <= 0 or h <= 0:
            return

        rx, ry = int(w) // 2, int(h) // 2
        cx, cy = int(x) + rx, int(y) + ry
        if rx == 0 or ry == 0:
            return
        pygame.gfxdraw.filled_ellipse(self.surface, cx, cy, rx, ry, rgba)
        if self.antialias and rgba[3] == 255:
            pygame.gfxdraw.aaellipse(self.surface, cx, cy, rx, ry, rgba)

    def fill_path(self, path: Path, gradient: LinearGradient):
        """Fills every subpath of path with a linear gradient."""
        key = ('fill', path, gradient)
        if key not in self._layers:
            polygons = [points for points, _ in path.subpaths() if len(points) >= 3]

            def paint_mask(layer, origin):
                for points in polygons:
                    pygame.draw.polygon(layer, constants.WHITE, [tuple(p) for p in points - origin])

            self._layers[key] = self._render_gradient(polygons, 0, paint_mask, gradient)
            logger.debug(f"Rendered gradient fill layer for {len(polygons)} polygons.")
        self._blit_layer(self._layers[key])

    def stroke_path(self, path: Path, width: int, gradient: LinearGradient):
        """
        Outlines every subpath of path. The whole outline is rasterized as one
        mask first, so overlapping joints do not brighten translucent strokes.
        """
        width = max(1, int(width))
        key = ('stroke', path, gradient, width)
        if key not in self._layers:
            subpaths = [(points, closed) for points, closed in path.subpaths() if len(points) >= 2]

            def paint_mask(layer, origin):
                for points, closed in subpaths:
                    local = [tuple(p) for p in points - origin]
                    pygame.draw.lines(layer, constants.WHITE, closed, local, width)
                    if width > 2:
                        # Fill the gaps pygame leaves at thick joints.
                        for point in local:
                            pygame.draw.circle(layer, constants.WHITE, point, width / 2)

            self._layers[key] = self._render_gradient(
                [points for points, _ in subpaths], width, paint_mask, gradient
            )
            logger.debug(f"Rendered gradient stroke layer for {len(subpaths)} subpaths at width {width}.")
        self._blit_layer(self._layers[key])

    def _blit_layer(self, entry):
        if entry is not None:
            layer, position = entry
            self.surface.blit(layer, position)

    def _render_gradient(self, point_sets: list, pad: int, paint_mask, gradient: LinearGradient):
        """
        Renders a white coverage mask over the bounding box of the points
        (plus pad) and colors it with gradient. Returns (layer, position), or
        None when nothing lands on the surface.
        """
        if not point_sets:
            return None
        points = np.concatenate(point_sets)

        surface_w, surface_h = self.surface.get_size()
        left = max(int(np.floor(points[:, 0].min())) - pad, 0)
        top = max(int(np.floor(points[:, 1].min())) - pad, 0)
        right = min(int(np.ceil(points[:, 0].max())) + pad, surface_w - 1)
        bottom = min(int(np.ceil(points[:, 1].max())) + pad, surface_h - 1)
        if right < left or bottom < top:
            return None

        layer = pygame.Surface((right - left + 1, bottom - top + 1), pygame.SRCALPHA)
        paint_mask(layer, np.array((left, top), dtype=float))
        coverage = pygame.surfarray.array_alpha(layer).astype(float) / 255.0

        xs, ys = np.meshgrid(
            np.arange(left, right + 1), np.arange(top, bottom + 1), indexing='ij'
        )
        colors = gradient.colors_at(xs, ys)

        rgb = pygame.surfarray.pixels3d(layer)
        rgb[...] = colors[..., :3].astype(np.uint8)
        del rgb
        alpha = pygame.surfarray.pixels_alpha(layer)
        alpha[...] = (colors[..., 3] * coverage).astype(np.uint8)
        del alpha

        return layer, (left, top)


def _clamp_rgba(rgba) -> tuple:
    return tuple(min(max(int(c), 0), 255) for c in rgba)
