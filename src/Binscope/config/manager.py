"""Configuration management."""

import json
import threading
from copy import deepcopy
from pathlib import Path

from ..utils import (
    CONFIG_FILE,
    DEFAULT_SETTINGS,
    MAX_PAGE_SIZE,
    MAX_RECENT_PROJECTS,
    MIN_PAGE_SIZE,
    log_buffer,
)

THEMES = ('System', 'Light', 'Dark')


class ConfigManager:
    """Manages application settings."""

    def __init__(self, config_file: Path | None = None):
        self._lock = threading.Lock()
        self.config_file = Path(config_file) if config_file else CONFIG_FILE
        self.settings = self._load_settings()

    def _load_settings(self) -> dict:
        """Load settings from disk."""
        if self.config_file.exists():
            try:
                with self.config_file.open(encoding='utf-8') as f:
                    loaded = json.load(f)
                if isinstance(loaded, dict):
                    return {**deepcopy(DEFAULT_SETTINGS), **loaded}
                log_buffer.log('Config', f'Ignoring malformed settings in {self.config_file}')
            except (json.JSONDecodeError, OSError) as e:
                log_buffer.log('Config', f'Failed to load settings: {e}')
        return deepcopy(DEFAULT_SETTINGS)

    def _save_settings(self):
        """Save settings to disk."""
        with self._lock:
            try:
                self.config_file.parent.mkdir(parents=True, exist_ok=True)
                with self.config_file.open('w', encoding='utf-8') as f:
                    json.dump(self.settings, f, indent=2)
            except OSError as e:
                log_buffer.log('Config', f'Failed to save settings: {e}')

    @property
    def theme(self) -> str:
        """Get theme setting."""
        theme = self.settings.get('theme', 'System')
        return theme if theme in THEMES else 'System'

    @theme.setter
    def theme(self, value: str):
        """Set theme setting."""
        if value not in THEMES:
            raise ValueError(f'Unknown theme: {value}')
        self.settings['theme'] = value
        self._save_settings()

    @property
    def page_size(self) -> int:
        """Get hex page size, clamped to a multiple of 16 within limits."""
        return self._clamp_page_size(self.settings.get('page_size'))

    @page_size.setter
    def page_size(self, value: int):
        """Set hex page size (applies to the next opened source)."""
        self.settings['page_size'] = self._clamp_page_size(value)
        self._save_settings()

    @staticmethod
    def _clamp_page_size(value) -> int:
        try:
            size = int(value)
        except (TypeError, ValueError):
            return DEFAULT_SETTINGS['page_size']
        size = max(MIN_PAGE_SIZE, min(MAX_PAGE_SIZE, size))
        return size - size % 16

    @property
    def near_end_threshold(self) -> int:
        """Get distance from the bottom (in text lines) that triggers the next page."""
        value = self.settings.get('near_end_threshold', DEFAULT_SETTINGS['near_end_threshold'])
        return max(0, int(value))

    @near_end_threshold.setter
    def near_end_threshold(self, value: int):
        self.settings['near_end_threshold'] = max(0, int(value))
        self._save_settings()

    @property
    def fetch_timeout_ms(self) -> int:
        """Get page fetch timeout in milliseconds (0 disables the timeout)."""
        value = self.settings.get('fetch_timeout_ms', DEFAULT_SETTINGS['fetch_timeout_ms'])
        return max(0, int(value))

    @fetch_timeout_ms.setter
    def fetch_timeout_ms(self, value: int):
        self.settings['fetch_timeout_ms'] = max(0, int(value))
        self._save_settings()

    @property
    def recent_projects(self) -> list[str]:
        """Get recently opened project paths, most recent first."""
        return list(self.settings.get('recent_projects', []))

    def add_recent_project(self, path: str):
        """Move a path to the front of the recent projects list."""
        recent = [p for p in self.recent_projects if p != path]
        recent.insert(0, path)
        self.settings['recent_projects'] = recent[:MAX_RECENT_PROJECTS]
        self._save_settings()

    def clear_recent_projects(self):
        """Forget all recent projects."""
        self.settings['recent_projects'] = []
        self._save_settings()

    @property
    def last_open_dir(self) -> str:
        """Get the directory the open dialog starts in."""
        return self.settings.get('last_open_dir', '')

    @last_open_dir.setter
    def last_open_dir(self, value: str):
        self.settings['last_open_dir'] = value
        self._save_settings()
