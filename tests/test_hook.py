import pytest

from iterbar.hook import HookedCursor, IterableCursor, IteratorHook, SequenceCursor, make_range_hook


def _sequence_hook(data, calls):
    return make_range_hook(SequenceCursor(data, 0), SequenceCursor(data, len(data)), calls.append)


class TestIteratorHook:
    @pytest.mark.parametrize("n", [0, 1, 2, 7])
    def test_n_plus_one_calls(self, n):
        data = list(range(n))
        calls = []
        assert list(_sequence_hook(data, calls)) == data
        assert len(calls) == n + 1
        assert calls[-1] == SequenceCursor(data, n)

    def test_hook_sees_each_position_in_order(self):
        data = "abc"
        calls = []
        list(_sequence_hook(data, calls))
        assert [c.index for c in calls] == [0, 1, 2, 3]

    def test_begin_calls_hook_end_does_not(self):
        data = [1, 2]
        calls = []
        hook = _sequence_hook(data, calls)
        it = hook.begin()
        assert len(calls) == 1
        stop = hook.end()
        assert len(calls) == 1
        assert it != stop
        assert it.get() == 1

    def test_advance_then_hook(self):
        data = [1, 2]
        calls = []
        hook = _sequence_hook(data, calls)
        it = hook.begin()
        it.advance()
        assert calls[-1].index == 1
        assert it.get() == 2
        it.advance()
        assert it == hook.end()
        assert len(calls) == 3

    def test_empty_sequence_single_call_at_end(self):
        calls = []
        hook = _sequence_hook([], calls)
        it = hook.begin()
        assert it == hook.end()
        assert calls == [SequenceCursor(hook.begin_cursor.sequence, 0)]

    def test_stored_begin_not_moved(self):
        data = [1, 2, 3]
        hook = _sequence_hook(data, [])
        list(hook)
        assert hook.begin_cursor.index == 0
        # multi-pass source can be walked again
        assert list(hook) == data

    def test_early_exit_stops_hook_calls(self):
        data = list(range(10))
        calls = []
        for x in _sequence_hook(data, calls):
            if x == 3:
                break
        assert len(calls) == 4
        assert calls[-1] != SequenceCursor(data, 10)


class TestHookedCursor:
    def test_compares_with_raw_cursor(self):
        data = [1]
        assert HookedCursor(SequenceCursor(data, 1)) == SequenceCursor(data, 1)

    def test_no_hook(self):
        data = [1, 2]
        it = HookedCursor(SequenceCursor(data, 0))
        it.advance()
        assert it.get() == 2


class TestSequenceCursor:
    def test_distinct_sequences_never_equal(self):
        assert SequenceCursor([1], 0) != SequenceCursor([1], 0)

    def test_difference(self):
        data = [1, 2, 3]
        assert SequenceCursor(data, 3) - SequenceCursor(data, 1) == 2


class TestIterableCursor:
    def test_generator_source(self):
        gen = (i * 10 for i in range(3))
        begin, end = IterableCursor.span(gen, 3)
        calls = []
        assert list(IteratorHook(begin, end, calls.append)) == [0, 10, 20]
        assert len(calls) == 4
        assert calls[-1] == end

    def test_consumes_only_size_items(self):
        gen = iter(range(100))
        begin, end = IterableCursor.span(gen, 3)
        assert list(IteratorHook(begin, end, lambda c: None)) == [0, 1, 2]
        assert next(gen) == 3

    def test_short_source_reaches_end(self):
        begin, end = IterableCursor.span(iter([1, 2]), 5)
        calls = []
        assert list(IteratorHook(begin, end, calls.append)) == [1, 2]
        assert calls[-1] == end

    def test_empty_span(self):
        begin, end = IterableCursor.span([], 0)
        assert begin == end
        assert end - begin == 0

    def test_container_restarts_each_pass(self):
        begin, end = IterableCursor.span({"a": 1, "b": 2}, 2)
        hook = IteratorHook(begin, end, lambda c: None)
        assert list(hook) == ["a", "b"]
        assert list(hook) == ["a", "b"]

    def test_nothing_pulled_until_begin(self):
        pulled = []

        def source():
            for i in range(5):
                pulled.append(i)
                yield i

        begin, end = IterableCursor.span(source(), 3)
        hook = IteratorHook(begin, end, lambda c: None)
        assert pulled == []
        it = hook.begin()
        assert pulled == [0]
        assert it.get() == 0

    def test_empty_source_meets_end_at_begin(self):
        begin, end = IterableCursor.span(iter([]), 4)
        calls = []
        assert list(IteratorHook(begin, end, calls.append)) == []
        assert calls == [end]
