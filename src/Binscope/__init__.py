"""Desktop shell for browsing Java, Android and raw binary files."""

from .utils.paths import APP_VERSION as __version__

__all__ = ['__version__']
