# iterbar/hook.py
"""
Iterator wrapper with hooks.

A cursor is any object with get(), advance() and ==. IteratorHook wraps a
begin/end cursor pair and calls hook(cursor) at the start of iteration and
after every advance, so a traversal of N elements makes N+1 hook calls.
"""
import copy

from iterbar.utils import vprint


class SequenceCursor:
    """Index position inside an indexable sequence (list, tuple, str, range...)."""
    def __init__(self, sequence, index=0):
        self.sequence = sequence
        self.index = index

    def get(self):
        return self.sequence[self.index]

    def advance(self):
        self.index += 1
        return self

    def __sub__(self, other):
        return self.index - other.index

    def __eq__(self, other):
        if not isinstance(other, SequenceCursor):
            return NotImplemented
        return self.sequence is other.sequence and self.index == other.index

    def __repr__(self):
        return f"SequenceCursor(index={self.index})"


class _Feed:
    # shared by every cursor over the same source
    def __init__(self, iterable, limit):
        self.source = iterable
        self.iterator = None
        self.limit = limit

    def open(self):
        # containers hand out a fresh iterator per pass, one-shot iterators return themselves
        self.iterator = iter(self.source)


class IterableCursor:
    """
    Position inside any iterable, including one-shot iterators and generators.
    The item under the cursor is pulled from the source when the cursor moves
    onto it; nothing is pulled before restart() opens the source at the start
    of a pass. Containers (set, dict) restart from their first item, one-shot
    iterators carry on where they stopped. A source that runs dry before
    `limit` puts the cursor at the end position.
    """
    def __init__(self, feed, position):
        self._feed = feed
        self.position = position
        self._item = None

    @classmethod
    def span(cls, iterable, size):
        feed = _Feed(iterable, size)
        return cls(feed, 0), cls(feed, size)

    def restart(self):
        self._feed.open()
        self._load()
        return self

    def _load(self):
        if self.position >= self._feed.limit:
            self._item = None
            return
        try:
            self._item = next(self._feed.iterator)
        except StopIteration:
            vprint("Source exhausted at", self.position, "of", self._feed.limit, "items")
            self.position = self._feed.limit
            self._item = None

    def get(self):
        return self._item

    def advance(self):
        self.position += 1
        self._load()
        return self

    def __sub__(self, other):
        return self.position - other.position

    def __eq__(self, other):
        if not isinstance(other, IterableCursor):
            return NotImplemented
        return self._feed is other._feed and self.position == other.position

    def __repr__(self):
        return f"IterableCursor(position={self.position}, limit={self._feed.limit})"


class HookedCursor:
    """Cursor that calls its hook with the new position after every advance."""
    def __init__(self, cursor, hook=None):
        self.cursor = cursor
        self.hook = hook

    def get(self):
        return self.cursor.get()

    def advance(self):
        self.cursor.advance()
        if self.hook is not None:
            self.hook(copy.copy(self.cursor))
        return self

    def __eq__(self, other):
        if isinstance(other, HookedCursor):
            other = other.cursor
        return self.cursor == other

    def __ne__(self, other):
        return not self == other


class IteratorHook:
    def __init__(self, begin_cursor, end_cursor, hook):
        self.begin_cursor = begin_cursor
        self.end_cursor = end_cursor
        self.hook = hook

    def begin(self):
        # start of iteration: hook sees the begin position before any element is yielded
        start = self._start_cursor()
        self.hook(copy.copy(start))
        return HookedCursor(start, self.hook)

    def _start_cursor(self):
        cursor = copy.copy(self.begin_cursor)
        # single-pass cursors open their source here, not at wrap time
        restart = getattr(cursor, "restart", None)
        if restart is not None:
            restart()
        return cursor

    def end(self):
        return HookedCursor(copy.copy(self.end_cursor), self.hook)

    def __iter__(self):
        it = self.begin()
        stop = self.end()
        while it != stop:
            yield it.get()
            it.advance()


def make_range_hook(begin_cursor, end_cursor, hook):
    """Build an IteratorHook calling `hook` for every position in [begin, end]."""
    return IteratorHook(begin_cursor, end_cursor, hook)
