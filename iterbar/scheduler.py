# iterbar/scheduler.py
import iterbar.config as config
from iterbar.utils import now_ms


def should_render(state, min_interval, now):
    # first and final frames are never dropped
    if state.first_render or state.is_complete():
        return True
    return now - state.last_render_time >= min_interval


class RenderThrottle:
    """
    Render throttle: before writing a frame, call should_render(); after writing it,
    call mark_rendered(). Keeps output to at most one frame per min_interval ms.
    """
    def __init__(self, min_interval=config.DEFAULT_MININTERVAL_MS, clock=now_ms):
        self.min_interval = int(min_interval)
        self.clock = clock

    def should_render(self, state, now=None):
        if now is None:
            now = self.clock()
        return should_render(state, self.min_interval, now)

    def mark_rendered(self, state, now=None):
        if now is None:
            now = self.clock()
        state.last_render_time = now
        state.first_render = False
