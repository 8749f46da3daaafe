"""Main application window."""

import zipfile
from pathlib import Path

from PyQt6.QtGui import QAction, QActionGroup, QIcon
from PyQt6.QtWidgets import QFileDialog, QMainWindow, QMessageBox, QStackedWidget

from ..config import THEMES
from ..project import ProjectNotFound, ProjectRegistry
from ..utils import APP_NAME, APP_VERSION, get_icon_path, log_buffer
from .about import AboutWindow
from .logs import LogsWindow
from .project_workspace import ProjectWorkspace
from .theme import ThemeManager
from .welcome import WelcomePage


class MainWindow(QMainWindow):
    """Top-level window: welcome page or the open project."""

    def __init__(self, config_manager, registry: ProjectRegistry, fetcher=None, parent=None):
        super().__init__(parent)
        self.config_manager = config_manager
        self.registry = registry
        self.project_id: str | None = None

        # Keep references to open windows to prevent garbage collection
        self.open_windows = []

        self.setWindowTitle(f'{APP_NAME} v{APP_VERSION}')
        self.resize(1100, 700)
        self.setAcceptDrops(True)
        if icon_path := get_icon_path():
            self.setWindowIcon(QIcon(str(icon_path)))

        self._setup_ui(fetcher)
        self._create_menu()
        self._refresh_recent()

    def _setup_ui(self, fetcher):
        """Setup the UI."""
        self.stack = QStackedWidget()

        self.welcome_page = WelcomePage()
        self.welcome_page.open_file_requested.connect(self._select_file)
        self.welcome_page.open_folder_requested.connect(self._select_folder)
        self.welcome_page.path_selected.connect(self.open_path)
        self.stack.addWidget(self.welcome_page)

        self.workspace = ProjectWorkspace(self.registry, self.config_manager, fetcher)
        self.stack.addWidget(self.workspace)

        self.setCentralWidget(self.stack)
        self.statusBar().showMessage('Ready')

    def _create_menu(self):
        """Create the menu bar."""
        menu_bar = self.menuBar()

        file_menu = menu_bar.addMenu('&File')
        open_file_action = QAction('Open &File...', self)
        open_file_action.setShortcut('Ctrl+O')
        open_file_action.triggered.connect(self._select_file)
        file_menu.addAction(open_file_action)

        open_folder_action = QAction('Open F&older...', self)
        open_folder_action.triggered.connect(self._select_folder)
        file_menu.addAction(open_folder_action)

        self.recent_menu = file_menu.addMenu('&Recent Projects')

        close_action = QAction('&Close Project', self)
        close_action.triggered.connect(self.close_project)
        file_menu.addAction(close_action)

        file_menu.addSeparator()
        quit_action = QAction('&Quit', self)
        quit_action.setShortcut('Ctrl+Q')
        quit_action.triggered.connect(self.close)
        file_menu.addAction(quit_action)

        view_menu = menu_bar.addMenu('&View')
        theme_menu = view_menu.addMenu('&Theme')
        theme_group = QActionGroup(self)
        for theme in THEMES:
            action = QAction(theme, self)
            action.setCheckable(True)
            action.setChecked(theme == self.config_manager.theme)
            action.triggered.connect(lambda _checked, t=theme: self._set_theme(t))
            theme_group.addAction(action)
            theme_menu.addAction(action)

        help_menu = menu_bar.addMenu('&Help')
        logs_action = QAction('&Logs', self)
        logs_action.triggered.connect(self._show_logs)
        help_menu.addAction(logs_action)
        about_action = QAction('&About', self)
        about_action.triggered.connect(self._show_about)
        help_menu.addAction(about_action)

    def _refresh_recent(self):
        recent = self.config_manager.recent_projects
        self.welcome_page.set_recent_projects(recent)

        self.recent_menu.clear()
        for path in recent:
            action = QAction(path, self)
            action.triggered.connect(lambda _checked, p=path: self.open_path(p))
            self.recent_menu.addAction(action)
        if recent:
            self.recent_menu.addSeparator()
            clear_action = QAction('Clear Recent', self)
            clear_action.triggered.connect(self._clear_recent)
            self.recent_menu.addAction(clear_action)
        self.recent_menu.setEnabled(bool(recent))

    def _clear_recent(self):
        self.config_manager.clear_recent_projects()
        self._refresh_recent()

    def _select_file(self):
        path, _ = QFileDialog.getOpenFileName(
            self, 'Open File', self.config_manager.last_open_dir,
            'All Files (*);;Java (*.jar *.class);;Android (*.apk)',
        )
        if path:
            self.open_path(path)

    def _select_folder(self):
        path = QFileDialog.getExistingDirectory(
            self, 'Open Folder', self.config_manager.last_open_dir
        )
        if path:
            self.open_path(path)

    def open_path(self, path: str) -> bool:
        """Open a file or folder as the current project."""
        log_buffer.log('App', f'Opening project at path: {path}')
        self.welcome_page.set_selected_path(path)
        try:
            project_id = self.registry.create_project(path)
        except (ProjectNotFound, OSError) as e:
            log_buffer.log('App', f'Failed to open project: {e}')
            QMessageBox.warning(self, 'Open Project', f'Failed to open project:\n{e}')
            return False

        try:
            self.workspace.load_project(project_id)
        except (ProjectNotFound, OSError, zipfile.BadZipFile) as e:
            self.registry.close(project_id)
            log_buffer.log('App', f'Failed to load project: {e}')
            QMessageBox.warning(self, 'Open Project', f'Failed to load project:\n{e}')
            return False

        if self.project_id is not None:
            self.registry.close(self.project_id)
        self.project_id = project_id

        resolved = str(self.registry.get_path(project_id))
        self.config_manager.add_recent_project(resolved)
        self.config_manager.last_open_dir = str(Path(resolved).parent)
        self._refresh_recent()

        project_type = self.registry.query_type(project_id)
        self.setWindowTitle(f'{APP_NAME} - {Path(resolved).name}')
        self.statusBar().showMessage(f'{project_type.value} project: {resolved}')
        self.stack.setCurrentWidget(self.workspace)
        return True

    def close_project(self):
        if self.project_id is None:
            return
        self.workspace.clear()
        self.registry.close(self.project_id)
        self.project_id = None
        self.setWindowTitle(f'{APP_NAME} v{APP_VERSION}')
        self.statusBar().showMessage('Ready')
        self.stack.setCurrentWidget(self.welcome_page)

    def _set_theme(self, theme: str):
        self.config_manager.theme = theme
        ThemeManager.apply_theme(theme)

    def _show_window(self, window):
        self.open_windows = [w for w in self.open_windows if w.isVisible()]
        self.open_windows.append(window)
        window.show()

    def _show_logs(self):
        self._show_window(LogsWindow())

    def _show_about(self):
        self._show_window(AboutWindow())

    def dragEnterEvent(self, event):
        """Accept local file drops."""
        if event.mimeData().hasUrls():
            event.acceptProposedAction()

    def dropEvent(self, event):
        """Open the first dropped local path."""
        for url in event.mimeData().urls():
            if url.isLocalFile():
                self.open_path(url.toLocalFile())
                event.acceptProposedAction()
                return

    def closeEvent(self, event):
        """Release open projects on exit."""
        self.workspace.clear()
        self.registry.close_all()
        self.project_id = None
        super().closeEvent(event)
