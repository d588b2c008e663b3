# silhouettes.py

"""
Static foreground art: a slanted fence and a couple watching the show.

Both are fixed vector paths. Each is filled with a dark two-tone gradient,
then outlined twice with rim light keyed to the firework colors: a wide soft
stroke and a thin sharp one.
"""

import constants
from canvas import LinearGradient, Path


class SilhouetteRenderer:
    """
    Builds the fence and couple paths once for a given panel size and draws
    them on demand.
    """
    def __init__(self, width: int = constants.WIDTH, height: int = constants.HEIGHT):
        self.width = width
        self.height = height

        # Rails run slightly past both edges so their rim light is clipped.
        self.x1 = -4
        self.y1 = height * 3 // 5
        self.x2 = width + 4
        self.y2 = self.y1 + 50

        self.fence_rails = self._build_rails()
        self.fence_supports = self._build_supports()
        self.fence_overlay = self._build_overlay()
        self.couple = self._build_couple()

        self.fence_fill = LinearGradient(
            (self.x1, self.y1 + 50), constants.SHADOW_DARK, (self.x2, self.y2), constants.SHADOW_LIGHT
        )
        self.fence_rim = LinearGradient((self.x1, self.y1 + 50), constants.RIM_PURPLE, (self.x2, self.y2), constants.RIM_WARM)
        self.fence_rim_sharp = LinearGradient(
            (self.x1, self.y1 + 50), constants.RIM_SHARP_GREEN, (self.x2, self.y2), constants.RIM_SHARP_WARM
        )

        base_x, base_y = self._couple_base()
        head = (base_x + 105, base_y - 130)
        self.couple_fill = LinearGradient((base_x - 100, height), constants.SHADOW_DARK, (self.x2, self.y2), constants.SHADOW_LIGHT)
        self.couple_rim = LinearGradient((base_x - 60, self.y1), constants.TRANSPARENT, head, constants.RIM_WARM)
        self.couple_rim_sharp = LinearGradient(
            (base_x - 60, self.y1), constants.COUPLE_RIM_SOFT, head, constants.COUPLE_RIM_BRIGHT
        )

    def draw(self, canvas):
        fence = (self.fence_rails, self.fence_supports)

        for path in fence:
            canvas.fill_path(path, self.fence_fill)
        for path in fence:
            canvas.stroke_path(path, 6, self.fence_rim)
        for path in fence:
            canvas.stroke_path(path, 1, self.fence_rim_sharp)
        # Covers the seams where rails cross supports.
        canvas.fill_path(self.fence_overlay, self.fence_fill)

        canvas.fill_path(self.couple, self.couple_fill)
        canvas.stroke_path(self.couple, 6, self.couple_rim)
        canvas.stroke_path(self.couple, 1, self.couple_rim_sharp)

    def _build_rails(self) -> Path:
        x1, y1, x2, y2 = self.x1, self.y1, self.x2, self.y2
        gap = 100
        rails = Path()
        # lower rail
        rails.move_to(x1, y1 + gap + 15)
        rails.line_to(x1, y1 + gap)
        rails.line_to(x2, y2 + gap)
        rails.line_to(x2, y2 + gap + 15)
        # upper rail
        rails.move_to(x1, y1 + 15)
        rails.line_to(x1, y1)
        rails.line_to(x2, y2)
        rails.line_to(x2, y2 + 15)
        return rails.close()

    def _build_supports(self) -> Path:
        y1, bottom = self.y1, self.height + 1
        left, center, right = self.x2 // 5, self.x2 // 2, self.x2 * 4 // 5
        supports = Path()
        supports.move_to(left, y1 - 15)
        supports.curve_to(left, y1 - 15, left + 7, y1 - 18, left + 15, y1 - 14)
        supports.line_to(left - 10, bottom)
        supports.line_to(left - 25, bottom)

        supports.move_to(right + 15, y1 + 20)
        supports.curve_to(right + 15, y1 + 20, right + 7, y1 + 17, right, y1 + 20)
        supports.line_to(right, bottom)
        supports.line_to(right + 15, bottom)

        supports.move_to(center, y1 + 5)
        supports.curve_to(center, y1 + 5, center + 7, y1 + 2, center + 15, y1 + 6)
        supports.line_to(center + 5, bottom)
        supports.line_to(center - 10, bottom)
        return supports.close()

    def _build_overlay(self) -> Path:
        y1, low = self.y1, self.y2 + 100
        left, center, right = self.x2 // 5, self.x2 // 2, self.x2 * 4 // 5
        quads = [
            ((left - 10, y1 + 17), (left + 4, y1 + 2), (left + 18, y1 + 19), (left + 2, y1 + 36)),
            ((left - 19, low - 35), (left - 6, low - 50), (left + 7, low - 33), (left - 8, low - 20)),
            ((center - 8, y1 + 32), (center + 7, y1 + 17), (center + 20, y1 + 34), (center + 5, y1 + 49)),
            ((center - 13, low - 17), (center + 2, low - 35), (center + 16, low - 15), (center, low - 1)),
            ((right - 5, y1 + 49), (right + 7, y1 + 65), (right + 23, y1 + 48), (right + 5, y1 + 30)),
            ((right - 7, low - 2), (right + 7, low - 20), (right + 21, low - 3), (right + 5, low + 12)),
        ]
        overlay = Path()
        for first, *rest in quads:
            overlay.move_to(*first)
            for point in rest:
                overlay.line_to(*point)
        return overlay.close()

    def _couple_base(self) -> tuple:
        return self.width * 5 // 8 + 20, self.height * 2 // 3

    def _build_couple(self) -> Path:
        bx, by = self._couple_base()
        by2 = by - 100
        bx2 = bx + 100
        bottom = self.height

        p = Path()
        p.move_to(bx, bottom)
        # the man
        p.line_to(bx, by + 20)
        p.line_to(bx - 3, by + 15)
        p.curve_to(bx - 5, by, bx + 4, by - 10, bx + 2, by - 35)
        p.curve_to(bx - 5, by - 15, bx - 15, by + 5, bx - 40, by)
        p.curve_to(bx - 45, by + 3, bx - 60, by - 5, bx - 30, by - 15)
        p.line_to(bx - 22, by - 30)
        p.curve_to(bx - 15, by2 - 13, bx - 15, by2, bx + 18, by2 - 13)
        p.line_to(bx + 18, by2 - 18)
        p.curve_to(bx + 14, by2 - 22, bx + 14, by2 - 15, bx + 7, by2 - 32)
        p.curve_to(bx + 7, by2 - 32, bx - 2, by2 - 43, bx + 5, by2 - 50)
        p.curve_to(bx + 5, by2 - 60, bx - 12, by2 - 66, bx + 30, by2 - 70)
        p.curve_to(bx + 55, by2 - 78, bx + 45, by2 - 25, bx + 35, by2 - 18)
        p.line_to(bx + 35, by2 - 13)
        p.line_to(bx + 70, by2)
        # the woman
        p.line_to(bx + 70, by2 - 10)
        p.line_to(bx + 63, by2 - 11)
        p.curve_to(bx + 63, by2 - 11, bx + 58, by2 - 20, bx + 65, by2 - 37)
        p.line_to(bx + 63, by2 - 39)
        p.curve_to(bx + 50, by2 - 39, bx2, by2 - 80, bx2 + 5, by2 - 30)
        p.line_to(bx2 - 2, by2 + 12)
        p.curve_to(bx2 - 2, by2 + 12, bx2 + 5, by2 + 25, bx2 - 6, by2 + 30)
        p.line_to(bx2 - 2, by - 42)
        p.line_to(bx2 - 6, by - 42)
        p.curve_to(bx2 - 5, by - 35, bx2 - 20, by - 25, bx2 - 1, by - 5)
        p.line_to(bx2 - 5, by)
        p.curve_to(bx2 - 5, by, bx2 + 10, by + 32, bx2 + 5, by + 60)
        p.line_to(bx2 - 2, by + 62)
        p.curve_to(bx2, by + 100, bx2 - 20, by + 100, bx2 + 10, bottom)
        p.line_to(bx2 - 30, bottom)
        p.line_to(bx2 - 40, by + 58)
        p.line_to(bx2 - 48, bottom)
        return p.close()
