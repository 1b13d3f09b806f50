"""
Fixed-period ticker built on the schedule library.

Each start() creates a private Scheduler and a daemon thread that polls it,
so restarting never leaves two tick streams alive. stop() and start() may be
called from inside the tick callback itself.

schedule computes the next run from the moment a job finishes, and the worker
polls every POLL_INTERVAL_SECONDS. The real period is therefore the interval
plus the tick's own running time plus up to one poll interval, so the cadence
drifts slightly later than interval_ms rather than holding a fixed rate.
"""

import logging
import threading
from typing import Callable, Optional

import schedule

logger = logging.getLogger(__name__)

POLL_INTERVAL_SECONDS = 0.005


class Ticker:
    """Calls a callback every interval_ms milliseconds until stopped."""

    def __init__(self, callback: Callable[[], None], poll_interval: float = POLL_INTERVAL_SECONDS):
        self._callback = callback
        self._poll_interval = poll_interval
        self._lock = threading.Lock()
        self._scheduler: Optional[schedule.Scheduler] = None
        self._stop_event: Optional[threading.Event] = None
        self._thread: Optional[threading.Thread] = None
        self.interval_ms: Optional[int] = None

    @property
    def running(self) -> bool:
        return self._stop_event is not None and not self._stop_event.is_set()

    def start(self, interval_ms: int) -> None:
        """Cancel any running schedule and start a new one at interval_ms."""
        if interval_ms <= 0:
            raise ValueError(f"Tick interval must be positive, got {interval_ms}")

        self.stop(wait=False)

        with self._lock:
            stop_event = threading.Event()
            scheduler = schedule.Scheduler()
            scheduler.every(interval_ms / 1000).seconds.do(self._fire, stop_event)
            thread = threading.Thread(
                target=self._run,
                args=(scheduler, stop_event),
                name="snake-ticker",
                daemon=True,
            )
            self._scheduler = scheduler
            self._stop_event = stop_event
            self._thread = thread
            self.interval_ms = interval_ms

        thread.start()
        logger.debug("Ticker started at %sms", interval_ms)

    def stop(self, wait: bool = True) -> None:
        """
        Cancel the schedule.

        With wait=True the worker thread is joined, unless stop() runs on
        that thread. Callers holding a lock the callback needs must pass
        wait=False.
        """
        with self._lock:
            scheduler, stop_event, thread = self._scheduler, self._stop_event, self._thread
            self._scheduler = None
            self._stop_event = None
            self._thread = None

        if stop_event is None:
            return

        stop_event.set()
        scheduler.clear()
        if wait and thread is not None and thread is not threading.current_thread():
            thread.join()
        logger.debug("Ticker stopped")

    def _fire(self, stop_event: threading.Event) -> None:
        if not stop_event.is_set():
            self._callback()

    def _run(self, scheduler: schedule.Scheduler, stop_event: threading.Event) -> None:
        while not stop_event.is_set():
            scheduler.run_pending()
            stop_event.wait(self._poll_interval)
