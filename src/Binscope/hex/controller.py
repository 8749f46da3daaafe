"""Single-flight page loading for the hex workspace."""

from functools import partial

from PyQt6.QtCore import QObject, pyqtSignal

from ..project import total_pages_for
from ..utils import DEFAULT_PAGE_SIZE, FETCH_TIMEOUT_MS, log_buffer
from .fetcher import ThreadedPageFetcher
from .render import DisplayLine, render
from .session import Session
from .source import ByteSource, HexSourceError, OutOfRange, ReadFailure, SourceUnavailable


class FetchController(QObject):
    """Sole writer of the Session.

    At most one page read is outstanding at any time, and only the page right
    after the last loaded one can be requested. Every read is tagged with the
    session epoch and a ticket; results that no longer match are dropped.
    """

    changed = pyqtSignal()
    page_loaded = pyqtSignal(int)
    failed = pyqtSignal(str)

    def __init__(
        self,
        fetcher=None,
        page_size: int = DEFAULT_PAGE_SIZE,
        timeout_ms: int = FETCH_TIMEOUT_MS,
        parent=None,
    ):
        super().__init__(parent)
        self.fetcher = fetcher if fetcher is not None else ThreadedPageFetcher(self)
        self.session = Session(page_size)
        self.timeout_ms = timeout_ms
        self.source: ByteSource | None = None
        self.total_size = 0
        self._ticket_counter = 0
        self._active_ticket: tuple[int, int] | None = None
        # Source kept after a failed size query; the next near-end retries it
        self._size_pending = False

    @property
    def has_more(self) -> bool:
        return self.source is not None and (self._size_pending or self.session.has_more)

    @property
    def is_loading(self) -> bool:
        return self.session.fetch_in_flight

    @property
    def error(self) -> str | None:
        return self.session.error

    def lines(self, start_page: int = 0) -> list[DisplayLine]:
        return render(self.session.pages, self.session.page_size, start_page)

    def reset(self, source: ByteSource, page_size: int | None = None):
        """Start a new session for source and request its first page."""
        session = self.session
        page_size = page_size or session.page_size
        if (
            self.source is not None
            and source == self.source
            and page_size == session.page_size
            and session.fetch_in_flight
            and not session.pages
            and not self._size_pending
        ):
            # Page 0 of this very source is already on its way
            return
        if page_size <= 0:
            raise ValueError(f'page_size must be positive, got {page_size}')

        self._active_ticket = None
        self.source = source
        session.page_size = page_size
        self._open_session()

    def _open_session(self) -> bool:
        """Query the source size and start fetching page 0."""
        session = self.session
        try:
            self.total_size = self.source.total_size
        except HexSourceError as e:
            self.total_size = 0
            session.reset(0)
            session.closed = isinstance(e, SourceUnavailable)
            self._size_pending = not session.closed
            self._surface(f'Failed to open source: {e}')
            return False

        self._size_pending = False
        session.reset(total_pages_for(self.total_size, session.page_size))
        log_buffer.log(
            'Hex',
            f'Opened {self.source!r}: {self.total_size} bytes in {session.total_pages} page(s)',
        )
        self.changed.emit()
        self.request_page(0)
        return True

    def close(self):
        """Drop the current source; results still in flight are discarded."""
        self._active_ticket = None
        self._size_pending = False
        self.source = None
        self.total_size = 0
        self.session.reset(0)
        self.changed.emit()

    def request_page(self, index: int) -> bool:
        """Request page index; a no-op unless it is the next page and nothing is in flight."""
        session = self.session
        if (
            self.source is None
            or session.closed
            or session.fetch_in_flight
            or index != session.next_index
            or index >= session.total_pages
        ):
            return False

        self._ticket_counter += 1
        ticket = (session.epoch, self._ticket_counter)
        self._active_ticket = ticket
        session.fetch_in_flight = True
        session.error = None
        self.fetcher.fetch(
            partial(self.source.read_page, index, session.page_size),
            partial(self._on_fetched, ticket, index),
            self.timeout_ms,
        )
        self.changed.emit()
        return True

    def on_viewport_near_end(self) -> bool:
        """Load the next page if one remains and nothing is in flight."""
        if self.session.fetch_in_flight or not self.has_more:
            return False
        if self._size_pending:
            return self._open_session()
        return self.request_page(self.session.next_index)

    def _expected_length(self, index: int) -> tuple[int, int]:
        """Allowed (min, max) length of page index."""
        page_size = self.session.page_size
        if index < self.session.total_pages - 1:
            return page_size, page_size
        return self.total_size - index * page_size, page_size

    def _on_fetched(self, ticket: tuple[int, int], index: int, data, error):
        if ticket != self._active_ticket:
            log_buffer.log('Hex', f'Discarded stale result for page {index}')
            return
        self._active_ticket = None
        session = self.session
        session.fetch_in_flight = False

        if error is None:
            low, high = self._expected_length(index)
            if data is None or not low <= len(data) <= high:
                size = 'no data' if data is None else f'{len(data)} bytes'
                error = ReadFailure(f'Page {index} came back with {size}')
            else:
                session.append(index, data)
                self.page_loaded.emit(index)
                self.changed.emit()
                return

        if isinstance(error, SourceUnavailable):
            session.closed = True
        elif isinstance(error, OutOfRange):
            log_buffer.log('Hex', f'Requested page {index} past the end of {self.source!r}')
        self._surface(f'Failed to load page {index}: {error}')

    def _surface(self, message: str):
        self.session.error = message
        log_buffer.log('Hex', message)
        self.failed.emit(message)
        self.changed.emit()
