"""Application entrypoint."""

import sys

from PyQt6.QtWidgets import QApplication

from .config import ConfigManager
from .gui import MainWindow, ThemeManager
from .project import project_registry
from .utils import APP_NAME, APP_VERSION, log_buffer


def main():
    """Main application entry point."""
    app = QApplication(sys.argv)
    app.setApplicationName(APP_NAME)
    app.setApplicationVersion(APP_VERSION)

    # Initialize config manager
    config_manager = ConfigManager()
    ThemeManager.apply_theme(config_manager.theme)
    log_buffer.log('App', f'{APP_NAME} v{APP_VERSION} starting')

    window = MainWindow(config_manager, project_registry)
    window.show()

    # Paths passed on the command line open straight away
    for arg in app.arguments()[1:]:
        if not arg.startswith('-'):
            window.open_path(arg)
            break

    sys.exit(app.exec())


if __name__ == '__main__':
    main()
