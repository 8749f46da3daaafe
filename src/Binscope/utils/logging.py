"""In-app log buffer shown by the Logs window."""

import threading
from collections import deque
from datetime import datetime
from typing import Any, NamedTuple

MAX_LOG_ENTRIES = 5000


class LogEntry(NamedTuple):
    time: str
    category: str
    message: str

    def __str__(self):
        return f'[{self.time}] [{self.category}] {self.message}'


class LogBuffer:
    """Thread-safe, bounded log buffer.

    Workers log from their own threads; listeners are told about new entries
    at most once per batch window, from a timer thread.
    """

    def __init__(self, batch_window: float = 0.05, max_entries: int = MAX_LOG_ENTRIES):
        self._entries: deque[LogEntry] = deque(maxlen=max_entries)
        self._callbacks: list[Any] = []
        self._lock = threading.Lock()
        self._batch_window = batch_window
        self._sequence = 0
        self._notify_scheduled = False

    def log(self, category: str, message: str):
        """Record message under category and schedule a listener notification."""
        entry = LogEntry(datetime.now().strftime('%H:%M:%S'), category, message)
        with self._lock:
            self._entries.append(entry)
            self._sequence += 1
            self._schedule_notify()

    def _schedule_notify(self):
        # Caller holds the lock
        if self._notify_scheduled or not self._callbacks:
            return
        self._notify_scheduled = True
        timer = threading.Timer(self._batch_window, self._notify_callbacks)
        timer.daemon = True
        timer.start()

    def _notify_callbacks(self):
        with self._lock:
            self._notify_scheduled = False
            callbacks = list(self._callbacks)

        for callback in callbacks:
            try:
                callback()
            except Exception:
                continue

    @property
    def sequence(self) -> int:
        """Number of entries ever logged; grows even once old entries drop off."""
        return self._sequence

    def entries(self, category: str | None = None) -> list[LogEntry]:
        with self._lock:
            if category is None:
                return list(self._entries)
            return [entry for entry in self._entries if entry.category == category]

    def categories(self) -> list[str]:
        """Categories present in the buffer, sorted."""
        with self._lock:
            return sorted({entry.category for entry in self._entries})

    def get_all(self, category: str | None = None) -> list[str]:
        """Formatted entries, optionally only those of one category."""
        return [str(entry) for entry in self.entries(category)]

    def get_text(self, category: str | None = None) -> str:
        lines = self.get_all(category)
        return '\n'.join(lines) if lines else 'No logs yet.'

    def clear(self):
        with self._lock:
            self._entries.clear()
            self._sequence += 1

    def add_callback(self, callback: Any):
        with self._lock:
            self._callbacks.append(callback)

    def remove_callback(self, callback: Any):
        with self._lock:
            if callback in self._callbacks:
                self._callbacks.remove(callback)


# Global log buffer
log_buffer = LogBuffer()
