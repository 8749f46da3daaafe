"""Application paths and constants."""

import os
import sys
from pathlib import Path

# Application metadata
APP_NAME = 'Binscope'
APP_VERSION = '0.3.0'
APP_AUTHOR = 'Binscope contributors'

# Icon
ICON_FILENAME = 'binscope.ico'


def _default_config_dir() -> Path:
    """Get the per-user config directory for the current platform."""
    if override := os.environ.get('BINSCOPE_CONFIG_DIR'):
        return Path(override)
    if sys.platform == 'win32':
        return Path.home() / 'AppData' / 'Local' / APP_NAME
    if sys.platform == 'darwin':
        return Path.home() / 'Library' / 'Application Support' / APP_NAME
    base = os.environ.get('XDG_CONFIG_HOME') or Path.home() / '.config'
    return Path(base) / APP_NAME


# Application directories
CONFIG_DIR = _default_config_dir()
CONFIG_FILE = CONFIG_DIR / 'settings.json'

# Hex workspace
DEFAULT_PAGE_SIZE = 8 * 1024
MIN_PAGE_SIZE = 16
MAX_PAGE_SIZE = 1024 * 1024
BYTES_PER_LINE = 16
NEAR_END_THRESHOLD = 10  # lines; a QPlainTextEdit scroll bar counts text lines
FETCH_TIMEOUT_MS = 10_000
MAX_RECENT_PROJECTS = 10

# Default settings
DEFAULT_SETTINGS = {
    'theme': 'System',  # System, Light, Dark
    'page_size': DEFAULT_PAGE_SIZE,
    'near_end_threshold': NEAR_END_THRESHOLD,
    'fetch_timeout_ms': FETCH_TIMEOUT_MS,
    'recent_projects': [],
    'last_open_dir': '',
}


def get_icon_path() -> Path | None:
    """Get the path to the application icon file."""
    path = Path(getattr(sys, '_MEIPASS', Path(__file__).parent.parent)) / ICON_FILENAME
    return path if path.exists() else None
