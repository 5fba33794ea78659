import pytest


class FakeClock:
    """Millisecond clock that only moves when told to."""

    def __init__(self, start=0):
        self.now = start

    def __call__(self):
        return self.now

    def tick(self, ms):
        self.now += ms


@pytest.fixture
def clock():
    return FakeClock()
