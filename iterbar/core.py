# iterbar/core.py
"""
Progress display for any bounded iteration.
Provides track(), track_range() and track_n(); each returns an IteratorHook whose
hook is a ProgressHook writing one carriage-return line to the sink.

    for item in track(items, "work"):
        process(item)
"""
import copy
import sys
from collections.abc import Sequence

import iterbar.config as config
from iterbar.bar import ProgressBar
from iterbar.hook import IterableCursor, SequenceCursor, make_range_hook
from iterbar.progress import ProgressState
from iterbar.scheduler import RenderThrottle
from iterbar.utils import format_duration, now_ms, vprint


class ProgressHook:
    """
    Hook bound to one traversal: owns the ProgressState, borrows the sink.
    on_advance(cursor) is called once per position, start and end included.
    """
    def __init__(self, end_cursor, total, title=config.DEFAULT_TITLE, file=None,
                 mininterval=config.DEFAULT_MININTERVAL_MS, width=config.DEFAULT_WIDTH,
                 glyphs=config.DEFAULT_GLYPHS, clock=now_ms):
        self.end_cursor = end_cursor
        self.title = title
        self.file = file if file is not None else sys.stderr
        self.clock = clock
        self.state = ProgressState(total, clock=clock)
        self.bar = ProgressBar(width, glyphs)
        self.throttle = RenderThrottle(mininterval, clock=clock)

    def format_frame(self):
        state = self.state
        self.bar.set_percentage(state.fraction)
        # [estimated total < elapsed]
        times = f"[{format_duration(state.estimated_total_ms)}<{format_duration(state.elapsed_ms)}]"
        return f"\r{self.title} [{self.bar}] {state.percent}% {state.current}/{state.total} {times}"

    def _write(self, text):
        self.file.write(text)
        self.file.flush()

    def on_advance(self, cursor):
        if cursor == self.end_cursor:
            self._write(self.format_frame() + "\n")
            vprint("Finished", repr(self.title), "after", format_duration(self.state.elapsed_ms))
            return
        now = self.clock()
        if self.throttle.should_render(self.state, now):
            self._write(self.format_frame())
            self.throttle.mark_rendered(self.state, now)
        # frame above shows the count before this step
        self.state.step()

    __call__ = on_advance


def _hooked(begin_cursor, end_cursor, total, title, file, mininterval, width, glyphs, clock):
    vprint("Tracking", total, "items", f"(title={title!r}, mininterval={mininterval}ms, width={width})")
    hook = ProgressHook(end_cursor, total, title=title, file=file, mininterval=mininterval,
                        width=width, glyphs=glyphs, clock=clock)
    return make_range_hook(begin_cursor, end_cursor, hook)


def track(container, title=config.DEFAULT_TITLE, file=None, mininterval=config.DEFAULT_MININTERVAL_MS,
          width=config.DEFAULT_WIDTH, glyphs=config.DEFAULT_GLYPHS, clock=now_ms):
    """
    Wrap a sized container (list, range, dict, set...) with a progress display.
    The size is taken from len(container).
    """
    total = len(container)
    if isinstance(container, Sequence):
        begin, end = SequenceCursor(container, 0), SequenceCursor(container, total)
    else:
        begin, end = IterableCursor.span(container, total)
    return _hooked(begin, end, total, title, file, mininterval, width, glyphs, clock)


def track_range(begin_cursor, end_cursor, title=config.DEFAULT_TITLE, file=None,
                mininterval=config.DEFAULT_MININTERVAL_MS, width=config.DEFAULT_WIDTH,
                glyphs=config.DEFAULT_GLYPHS, clock=now_ms, total=None):
    """
    Wrap an explicit [begin, end) cursor pair.
    The size is end - begin unless `total` is given (for cursors without subtraction).
    """
    if total is None:
        total = end_cursor - begin_cursor
    return _hooked(begin_cursor, end_cursor, total, title, file, mininterval, width, glyphs, clock)


def track_n(start, size, title=config.DEFAULT_TITLE, file=None, mininterval=config.DEFAULT_MININTERVAL_MS,
            width=config.DEFAULT_WIDTH, glyphs=config.DEFAULT_GLYPHS, clock=now_ms):
    """
    Wrap `size` elements from `start`, which is either a multi-pass cursor
    (SequenceCursor) or any iterable. Iterables may be one-shot; only the
    first `size` items are consumed.
    """
    size = int(size)
    if size < 0:
        raise ValueError(f"size must be >= 0, got {size}")
    if hasattr(start, "advance") and hasattr(start, "get"):
        begin = start
        end = copy.copy(start)
        for _ in range(size):
            end.advance()
    else:
        begin, end = IterableCursor.span(start, size)
    return _hooked(begin, end, size, title, file, mininterval, width, glyphs, clock)
