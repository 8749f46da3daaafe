"""Welcome page shown when no project is open."""

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QListWidget,
    QListWidgetItem,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from ..utils import APP_NAME


class WelcomePage(QWidget):
    """Open buttons plus the recent projects list."""

    open_file_requested = pyqtSignal()
    open_folder_requested = pyqtSignal()
    path_selected = pyqtSignal(str)

    def __init__(self, parent=None):
        super().__init__(parent)
        self._setup_ui()

    def _setup_ui(self):
        """Setup the UI."""
        layout = QVBoxLayout()
        layout.setContentsMargins(40, 40, 40, 40)
        layout.addStretch()

        title_label = QLabel(APP_NAME)
        title_label.setStyleSheet('font-size: 20pt; font-weight: bold;')
        title_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(title_label)

        hint_label = QLabel('Open a file or folder, or drop one onto this window.')
        hint_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(hint_label)

        buttons = QHBoxLayout()
        buttons.addStretch()
        open_file_btn = QPushButton('Select File...')
        open_file_btn.clicked.connect(self.open_file_requested)
        buttons.addWidget(open_file_btn)
        open_folder_btn = QPushButton('Select Folder...')
        open_folder_btn.clicked.connect(self.open_folder_requested)
        buttons.addWidget(open_folder_btn)
        buttons.addStretch()
        layout.addLayout(buttons)

        self.selected_label = QLabel('')
        self.selected_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.selected_label.setStyleSheet('color: #888;')
        layout.addWidget(self.selected_label)

        recent_label = QLabel('Recent projects')
        recent_label.setStyleSheet('font-weight: bold;')
        layout.addWidget(recent_label)

        self.recent_list = QListWidget()
        self.recent_list.setMaximumHeight(180)
        self.recent_list.itemActivated.connect(self._on_recent_activated)
        layout.addWidget(self.recent_list)

        layout.addStretch()
        self.setLayout(layout)

    def set_selected_path(self, path: str):
        self.selected_label.setText(f'Selected Path: {path}' if path else '')

    def set_recent_projects(self, paths: list[str]):
        self.recent_list.clear()
        for path in paths:
            item = QListWidgetItem(path)
            item.setData(Qt.ItemDataRole.UserRole, path)
            self.recent_list.addItem(item)
        if not paths:
            placeholder = QListWidgetItem('No recent projects')
            placeholder.setFlags(Qt.ItemFlag.NoItemFlags)
            self.recent_list.addItem(placeholder)

    def _on_recent_activated(self, item: QListWidgetItem):
        if path := item.data(Qt.ItemDataRole.UserRole):
            self.path_selected.emit(path)
