"""GUI package."""

from .about import AboutWindow
from .logs import LogsWindow
from .main_window import MainWindow
from .project_workspace import ProjectWorkspace, build_directory_tree
from .theme import ThemeManager
from .welcome import WelcomePage

__all__ = [
    'AboutWindow',
    'LogsWindow',
    'MainWindow',
    'ProjectWorkspace',
    'ThemeManager',
    'WelcomePage',
    'build_directory_tree',
]
