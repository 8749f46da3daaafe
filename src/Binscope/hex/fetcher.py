"""Background page reads delivered back onto the UI thread."""

from collections.abc import Callable
from functools import partial

from PyQt6.QtCore import QObject, QTimer, pyqtSignal

from ..utils import run_in_thread
from .source import ReadFailure

FetchCallback = Callable[[bytes | None, BaseException | None], None]


class ThreadedPageFetcher(QObject):
    """Runs blocking page reads on daemon threads.

    Each fetch resolves exactly once on the thread that owns the fetcher:
    with the data, with the read error, or with a ReadFailure when the
    timeout fires first. Whatever arrives after that is dropped.
    """

    _delivered = pyqtSignal(int, object, object)  # fetch id, data, error

    def __init__(self, parent=None):
        super().__init__(parent)
        self._pending: dict[int, FetchCallback] = {}
        self._next_id = 0
        self._delivered.connect(self._deliver)

    @property
    def pending_count(self) -> int:
        return len(self._pending)

    def fetch(self, job: Callable[[], bytes], callback: FetchCallback, timeout_ms: int = 0):
        """Start job() in the background and report its outcome to callback."""
        self._next_id += 1
        fetch_id = self._next_id
        self._pending[fetch_id] = callback
        run_in_thread(self._run)(fetch_id, job)
        if timeout_ms > 0:
            QTimer.singleShot(timeout_ms, partial(self._expire, fetch_id, timeout_ms))

    def _run(self, fetch_id: int, job: Callable[[], bytes]):
        """Worker thread body; never touches Qt objects directly."""
        try:
            data = job()
        except Exception as e:
            self._delivered.emit(fetch_id, None, e)
            return
        self._delivered.emit(fetch_id, data, None)

    def _deliver(self, fetch_id: int, data, error):
        if (callback := self._pending.pop(fetch_id, None)) is not None:
            callback(data, error)

    def _expire(self, fetch_id: int, timeout_ms: int):
        if (callback := self._pending.pop(fetch_id, None)) is not None:
            callback(None, ReadFailure(f'Timed out after {timeout_ms} ms'))
