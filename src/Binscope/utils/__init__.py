"""Utility package."""

from .logging import LogBuffer, LogEntry, log_buffer
from .paths import (
    APP_AUTHOR,
    APP_NAME,
    APP_VERSION,
    BYTES_PER_LINE,
    CONFIG_DIR,
    CONFIG_FILE,
    DEFAULT_PAGE_SIZE,
    DEFAULT_SETTINGS,
    FETCH_TIMEOUT_MS,
    MAX_PAGE_SIZE,
    MAX_RECENT_PROJECTS,
    MIN_PAGE_SIZE,
    NEAR_END_THRESHOLD,
    get_icon_path,
)
from .threading import run_in_thread


def format_size(size_bytes: float) -> str:
    """Format size in bytes to human-readable string."""
    for unit in ['B', 'KB', 'MB', 'GB']:
        if size_bytes < 1024.0:
            return f'{size_bytes:.1f} {unit}'
        size_bytes /= 1024.0
    return f'{size_bytes:.1f} TB'


__all__ = [
    'APP_AUTHOR',
    'APP_NAME',
    'APP_VERSION',
    'BYTES_PER_LINE',
    'CONFIG_DIR',
    'CONFIG_FILE',
    'DEFAULT_PAGE_SIZE',
    'DEFAULT_SETTINGS',
    'FETCH_TIMEOUT_MS',
    'LogBuffer',
    'LogEntry',
    'MAX_PAGE_SIZE',
    'MAX_RECENT_PROJECTS',
    'MIN_PAGE_SIZE',
    'NEAR_END_THRESHOLD',
    'format_size',
    'get_icon_path',
    'log_buffer',
    'run_in_thread',
]
