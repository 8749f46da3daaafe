"""Per-source paging state of the hex workspace."""

from dataclasses import dataclass, field


@dataclass
class Session:
    """Pages fetched so far for the current source.

    Pages are appended strictly in index order and never removed; a reset
    starts a new epoch so results fetched for an older source can be told
    apart from current ones.
    """

    page_size: int
    total_pages: int = 0
    pages: list[bytes] = field(default_factory=list)
    fetch_in_flight: bool = False
    epoch: int = 0
    error: str | None = None
    closed: bool = False

    def __post_init__(self):
        if self.page_size <= 0:
            raise ValueError(f'page_size must be positive, got {self.page_size}')

    @property
    def loaded_count(self) -> int:
        return len(self.pages)

    @property
    def next_index(self) -> int:
        return len(self.pages)

    @property
    def has_more(self) -> bool:
        return not self.closed and len(self.pages) < self.total_pages

    def reset(self, total_pages: int):
        """Drop every page and start a new epoch."""
        self.pages = []
        self.fetch_in_flight = False
        self.total_pages = total_pages
        self.error = None
        self.closed = False
        self.epoch += 1

    def append(self, index: int, data: bytes):
        """Commit a whole page; only the next page may be appended."""
        if index != len(self.pages):
            raise ValueError(f'Expected page {len(self.pages)}, got page {index}')
        if index >= self.total_pages:
            raise ValueError(f'Page {index} is past the last page ({self.total_pages - 1})')
        self.pages.append(bytes(data))
