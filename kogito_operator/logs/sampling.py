"""
Log sampling that bounds the volume of repeated records during error storms
"""

# Standard
from collections import OrderedDict
from typing import Callable, List, Tuple
import logging
import threading
import time

# Upper bound on the number of (level, message) keys tracked at once
MAX_TRACKED_KEYS = 4096


class LogSampler(logging.Filter):
    """Filter that passes the first N records with the same level and message
    within a window and drops the rest of them.

    Each (level, message) key has its own sliding window that opens with the
    first record seen for it. When the window has elapsed, the next record
    opens a new one and the count starts over.
    """

    def __init__(
        self,
        window_seconds: float = 1.0,
        first: int = 100,
        thereafter: int = 0,
        clock: Callable[[], float] = time.monotonic,
        max_keys: int = MAX_TRACKED_KEYS,
    ):
        """Construct with the window shape

        Args:
            window_seconds:  float
                The length of each key's window
            first:  int
                The number of records per key passed within one window
            thereafter:  int
                If positive, every Nth record after the first N within a window
                is also passed
            clock:  Callable[[], float]
                Source of the current time in seconds
            max_keys:  int
                The most keys tracked at once. When a new key would exceed it,
                the key with the oldest window is forgotten.
        """
        super().__init__()
        self.window_seconds = window_seconds
        self.first = first
        self.thereafter = thereafter
        self.max_keys = max_keys
        self._clock = clock
        self._lock = threading.Lock()
        # key -> [window start, count within window], ordered by window start
        self._windows: "OrderedDict[Tuple[int, str], List]" = OrderedDict()

    def filter(self, record: logging.LogRecord) -> bool:
        key = (record.levelno, self._get_message(record))
        with self._lock:
            now = self._clock()
            self._prune(now)
            window = self._windows.get(key)
            if window is None:
                window = [now, 0]
                self._windows[key] = window
                if len(self._windows) > self.max_keys:
                    self._windows.popitem(last=False)
            window[1] += 1
            count = window[1]

        if count <= self.first:
            return True
        return self.thereafter > 0 and (count - self.first) % self.thereafter == 0

    def _prune(self, now: float):
        """Drop keys whose window has elapsed. The oldest windows are at the
        front, so this stops at the first live one. Must hold the lock.
        """
        while self._windows:
            start, _ = next(iter(self._windows.values()))
            if now - start < self.window_seconds:
                break
            self._windows.popitem(last=False)

    @staticmethod
    def _get_message(record: logging.LogRecord) -> str:
        # Records with mismatched args are keyed on the raw template so the
        # formatter can report the error when it is emitted
        try:
            return record.getMessage()
        except (TypeError, ValueError):
            return str(record.msg)
