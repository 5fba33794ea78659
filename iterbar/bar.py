# iterbar/bar.py
"""
Fixed-width bar rendering with sub-cell shading.
render_bar(fraction, width, glyphs) is pure; ProgressBar keeps the render settings.
"""
import math

import iterbar.config as config
from iterbar.utils import get_logger, glyph_width

logger = get_logger()

def check_glyphs(glyphs):
    if len(glyphs) < 2:
        raise ValueError("glyph table needs at least an empty and a full glyph, got %d" % len(glyphs))
    return glyphs

def render_bar(fraction, width, glyphs=config.DEFAULT_GLYPHS):
    """
    Render `fraction` (0..1) as exactly `width` cells.

    glyphs[0] is the empty cell, glyphs[-1] the full cell, anything in between
    a partial fill. With two glyphs this is a plain filled/empty bar.
    """
    check_glyphs(glyphs)
    if width <= 0:
        return ""
    empty = glyphs[0]
    if fraction <= 0:
        return empty * width
    fraction = min(fraction, 1.0)
    levels = len(glyphs) - 1
    # epsilon keeps fraction == 1.0 inside the glyph table
    units = max(0, math.floor((fraction - config.BAR_EPSILON) * width * levels))
    full_cells, partial = divmod(units, levels)
    return glyphs[-1] * full_cells + glyphs[partial + 1] + empty * (width - full_cells - 1)


class ProgressBar:
    """
    Render settings for one bar: width, glyph table and the current percentage.
    str(bar) renders it.
    """
    def __init__(self, width=config.DEFAULT_WIDTH, glyphs=config.DEFAULT_GLYPHS):
        self._width = int(width)
        self._glyphs = ()
        self._percentage = 0.0
        self.set_glyphs(glyphs)

    def set_width(self, width):
        self._width = int(width)

    def get_width(self):
        return self._width

    def set_glyphs(self, glyphs):
        glyphs = check_glyphs(tuple(glyphs))
        wide = [g for g in glyphs if glyph_width(g) != 1]
        if wide:
            logger.warning("Glyphs %r are not one cell wide; bar width will drift.", wide)
        self._glyphs = glyphs

    def get_glyphs(self):
        return self._glyphs

    def set_percentage(self, fraction):
        self._percentage = float(fraction)

    def get_percentage(self):
        return self._percentage

    def render(self, fraction=None):
        if fraction is None:
            fraction = self._percentage
        return render_bar(fraction, self._width, self._glyphs)

    def __str__(self):
        return self.render()
