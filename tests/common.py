"""Shared helpers for the test suite."""

import os
import time
from dataclasses import dataclass

from PyQt6.QtCore import QCoreApplication
from PyQt6.QtWidgets import QApplication

from Binscope.hex import MemoryByteSource, ReadFailure


_qapp: QApplication | None = None


def create_qapp() -> QApplication:
    """Return the shared QApplication, creating it on the offscreen platform.

    The instance is kept at module level so it outlives every test class.
    """
    global _qapp
    os.environ.setdefault('QT_QPA_PLATFORM', 'offscreen')
    if _qapp is None:
        _qapp = QApplication.instance() or QApplication([])
    return _qapp


def wait_until(predicate, timeout: float = 5.0) -> bool:
    """Process Qt events until predicate() holds or timeout expires."""
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        QCoreApplication.processEvents()
        if predicate():
            return True
        time.sleep(0.005)
    return predicate()


@dataclass
class PendingFetch:
    job: object
    callback: object
    timeout_ms: int
    resolved: bool = False


class ManualFetcher:
    """Holds page reads until the test resolves them."""

    def __init__(self):
        self.calls: list[PendingFetch] = []

    def fetch(self, job, callback, timeout_ms=0):
        self.calls.append(PendingFetch(job, callback, timeout_ms))

    @property
    def pending(self) -> list[PendingFetch]:
        return [call for call in self.calls if not call.resolved]

    def complete(self, index: int = -1):
        """Run a held read and deliver whatever it produced."""
        call = self.calls[index]
        call.resolved = True
        try:
            data = call.job()
        except Exception as e:
            call.callback(None, e)
            return
        call.callback(data, None)

    def deliver(self, data=None, error=None, index: int = -1):
        """Deliver an arbitrary outcome without running the read."""
        call = self.calls[index]
        call.resolved = True
        call.callback(data, error)

    def time_out(self, index: int = -1):
        self.deliver(error=ReadFailure('Timed out'), index=index)

    def drain(self, limit: int = 10_000):
        """Complete reads until nothing is pending."""
        for _ in range(limit):
            open_indexes = [i for i, call in enumerate(self.calls) if not call.resolved]
            if not open_indexes:
                return
            self.complete(open_indexes[0])


class CountingSource(MemoryByteSource):
    """Memory source that counts reads and can fail selected pages."""

    def __init__(self, data: bytes, name: str = 'test'):
        super().__init__(data, name)
        self.reads: list[int] = []
        self.fail_pages: dict[int, Exception] = {}

    def read_page(self, index, page_size):
        self.reads.append(index)
        if index in self.fail_pages:
            raise self.fail_pages[index]
        return super().read_page(index, page_size)
