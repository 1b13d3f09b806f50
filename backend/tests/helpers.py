"""
Shared test doubles.
"""


class FakeTicker:
    """Records start/stop calls instead of running a thread."""

    def __init__(self, callback):
        self.callback = callback
        self.starts = []
        self.stops = 0
        self.events = []
        self.running = False

    def start(self, interval_ms):
        self.starts.append(interval_ms)
        self.events.append(("start", interval_ms))
        self.running = True

    def stop(self, wait=True):
        self.stops += 1
        self.events.append(("stop",))
        self.running = False
