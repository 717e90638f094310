"""
Periodic tick driver for live capture.
"""
import logging
import threading
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class CaptureClock:
    """
    Single background thread that calls `callback` every `interval` seconds.

    start() while running and stop() while stopped are no-ops. stop() waits
    for an in-flight tick to finish; it never rolls a tick back.
    """

    def __init__(self, interval: float, callback: Callable[[], None], name: str = "netpulse-clock"):
        if interval <= 0:
            raise ValueError(f"interval must be positive, got {interval}")
        self._interval = interval
        self._callback = callback
        self._name = name
        self._lock = threading.Lock()
        self._stop_event: Optional[threading.Event] = None
        self._thread: Optional[threading.Thread] = None

    @property
    def interval(self) -> float:
        return self._interval

    @property
    def running(self) -> bool:
        with self._lock:
            return self._thread is not None

    def start(self) -> bool:
        """Start ticking. Returns False if already running."""
        with self._lock:
            if self._thread is not None:
                return False
            stop_event = threading.Event()
            thread = threading.Thread(
                target=self._run,
                args=(stop_event,),
                name=self._name,
                daemon=True,
            )
            self._stop_event = stop_event
            self._thread = thread
            thread.start()
        logger.debug("Clock started (interval=%.3fs)", self._interval)
        return True

    def stop(self, timeout: float = 1.0) -> bool:
        """Stop ticking. Returns False if not running."""
        with self._lock:
            if self._thread is None:
                return False
            thread, stop_event = self._thread, self._stop_event
            self._thread = None
            self._stop_event = None

        stop_event.set()
        if thread is not threading.current_thread():
            thread.join(timeout=timeout)
        logger.debug("Clock stopped")
        return True

    def _run(self, stop_event: threading.Event) -> None:
        # First tick fires one interval after start
        while not stop_event.wait(self._interval):
            try:
                self._callback()
            except Exception:
                logger.exception("Error in capture tick")
