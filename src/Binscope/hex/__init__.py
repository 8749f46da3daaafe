"""Paginated hex viewer."""

from .controller import FetchController
from .fetcher import ThreadedPageFetcher
from .render import DisplayLine, render, render_text, to_ascii
from .session import Session
from .source import (
    ByteSource,
    HexSourceError,
    MemoryByteSource,
    OutOfRange,
    ProjectByteSource,
    ReadFailure,
    SourceUnavailable,
)
from .viewport import ViewportMonitor, is_near_end
from .workspace import HexWorkspace

__all__ = [
    'ByteSource',
    'DisplayLine',
    'FetchController',
    'HexSourceError',
    'HexWorkspace',
    'MemoryByteSource',
    'OutOfRange',
    'ProjectByteSource',
    'ReadFailure',
    'Session',
    'SourceUnavailable',
    'ThreadedPageFetcher',
    'ViewportMonitor',
    'is_near_end',
    'render',
    'render_text',
    'to_ascii',
]
