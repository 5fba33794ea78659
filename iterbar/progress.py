# iterbar/progress.py
"""
Progress counter plus the time estimates derived from it.
All durations are integer milliseconds.
"""
from iterbar.utils import now_ms


class ProgressState:
    def __init__(self, total, clock=now_ms):
        self.total = max(0, int(total))
        self.clock = clock
        self.current = 0
        self.start_time = 0
        self.current_time = 0
        self.last_render_time = 0
        self.first_render = True
        self.reset()

    def reset(self):
        self.current = 0
        self.first_render = True
        self.start_time = self.clock()
        self.current_time = self.start_time

    def step(self):
        """Advance by one and sample the clock; a no-op once complete."""
        if self.current < self.total:
            self.current += 1
            self.current_time = self.clock()
        return self.current

    def is_complete(self):
        return self.current >= self.total

    @property
    def fraction(self):
        if self.total == 0:
            return 0.0
        return self.current / self.total

    @property
    def percent(self):
        if self.total == 0:
            return 0
        return self.current * 100 // self.total

    @property
    def elapsed_ms(self):
        return self.current_time - self.start_time

    @property
    def estimated_total_ms(self):
        if self.current == 0:
            return 0
        return self.elapsed_ms * self.total // self.current

    @property
    def estimated_remaining_ms(self):
        if self.current == 0:
            return 0
        return self.elapsed_ms * (self.total - self.current) // self.current

    def __repr__(self):
        return f"ProgressState(current={self.current}, total={self.total}, elapsed_ms={self.elapsed_ms})"
