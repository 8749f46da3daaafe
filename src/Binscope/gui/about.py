"""About window."""

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QIcon
from PyQt6.QtWidgets import QDialog, QLabel, QPushButton, QVBoxLayout

from ..utils import APP_AUTHOR, APP_NAME, APP_VERSION, get_icon_path
from .theme import ThemeManager


class AboutWindow(QDialog):
    """About dialog window."""

    def __init__(self, parent=None):
        super().__init__(parent)
        # Apply theme immediately to prevent white flicker
        ThemeManager.apply_to_widget(self)

        self.setWindowTitle(f'About {APP_NAME}')
        self.setFixedSize(350, 180)
        self._setup_ui()

        if icon_path := get_icon_path():
            self.setWindowIcon(QIcon(str(icon_path)))

    def _setup_ui(self):
        """Setup the UI."""
        layout = QVBoxLayout()
        layout.setSpacing(5)
        layout.setContentsMargins(20, 20, 20, 20)

        name_label = QLabel(APP_NAME)
        name_label.setStyleSheet('font-size: 14pt; font-weight: bold;')
        name_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(name_label)

        version_label = QLabel(f'Version {APP_VERSION}')
        version_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(version_label)

        blurb_label = QLabel('Browse Java, Android and raw binary files.')
        blurb_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(blurb_label)

        author_label = QLabel(APP_AUTHOR)
        author_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(author_label)

        layout.addStretch()

        close_btn = QPushButton('Close')
        close_btn.setFixedWidth(100)
        close_btn.clicked.connect(self.accept)
        layout.addWidget(close_btn, alignment=Qt.AlignmentFlag.AlignCenter)

        self.setLayout(layout)
