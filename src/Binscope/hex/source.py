"""Byte sources the hex workspace pages through."""

from typing import Protocol

from ..project import PageOutOfRange, ProjectNotFound, ProjectRegistry, total_pages_for


class HexSourceError(Exception):
    """Base class for page source errors."""


class SourceUnavailable(HexSourceError):
    """The source handle is invalid or closed. Terminal for a session."""


class ReadFailure(HexSourceError):
    """A single page read failed. The same page may be requested again."""


class OutOfRange(HexSourceError):
    """A page past the end was requested."""


class ByteSource(Protocol):
    """Anything with a size that can be read one page at a time."""

    @property
    def total_size(self) -> int: ...

    def read_page(self, index: int, page_size: int) -> bytes: ...


class MemoryByteSource:
    """Byte source over an in-memory blob, e.g. an archive entry."""

    def __init__(self, data: bytes, name: str = ''):
        self._data = bytes(data)
        self.name = name

    @property
    def total_size(self) -> int:
        return len(self._data)

    def read_page(self, index: int, page_size: int) -> bytes:
        if index < 0 or index >= total_pages_for(len(self._data), page_size):
            raise OutOfRange(f'Page {index} out of range')
        start = index * page_size
        return self._data[start:start + page_size]

    def __repr__(self):
        return f'MemoryByteSource({self.name!r}, {len(self._data)} bytes)'


class ProjectByteSource:
    """Byte source backed by a file project in the registry."""

    def __init__(self, registry: ProjectRegistry, project_id: str):
        self.registry = registry
        self.project_id = project_id

    @property
    def total_size(self) -> int:
        try:
            return self.registry.get_total_size(self.project_id)
        except ProjectNotFound as e:
            raise SourceUnavailable(str(e)) from e
        except OSError as e:
            raise ReadFailure(f'Failed to stat project: {e}') from e

    def read_page(self, index: int, page_size: int) -> bytes:
        try:
            return self.registry.read_page(self.project_id, index, page_size)
        except ProjectNotFound as e:
            raise SourceUnavailable(str(e)) from e
        except PageOutOfRange as e:
            raise OutOfRange(str(e)) from e
        except (OSError, ValueError) as e:
            # ValueError: the handle was closed under us
            raise ReadFailure(f'Failed to read page {index}: {e}') from e

    def __eq__(self, other):
        if not isinstance(other, ProjectByteSource):
            return NotImplemented
        return self.registry is other.registry and self.project_id == other.project_id

    def __hash__(self):
        return hash((id(self.registry), self.project_id))

    def __repr__(self):
        return f'ProjectByteSource({self.project_id!r})'
