"""Logs window."""

from PyQt6.QtCore import Qt, QTimer
from PyQt6.QtGui import QFont, QIcon
from PyQt6.QtWidgets import QComboBox, QDialog, QHBoxLayout, QPushButton, QTextEdit, QVBoxLayout

from ..utils import APP_NAME, get_icon_path, log_buffer
from .theme import ThemeManager


class LogsWindow(QDialog):
    """Logs viewer window."""

    def __init__(self, parent=None):
        super().__init__(parent)
        ThemeManager.apply_to_widget(self)
        self.setWindowTitle(f'{APP_NAME} - Logs')
        self.resize(600, 400)

        # Set window flags to allow minimize/maximize
        self.setWindowFlags(
            Qt.WindowType.Window |
            Qt.WindowType.WindowMinimizeButtonHint |
            Qt.WindowType.WindowMaximizeButtonHint |
            Qt.WindowType.WindowCloseButtonHint
        )

        self._last_sequence = -1
        self._setup_ui()
        self._set_icon()
        self._start_updates()

    def _set_icon(self):
        """Set window icon."""
        if icon_path := get_icon_path():
            self.setWindowIcon(QIcon(str(icon_path)))

    def _setup_ui(self):
        """Setup the UI."""
        layout = QVBoxLayout()
        layout.setContentsMargins(10, 10, 10, 10)

        self.text_edit = QTextEdit()
        self.text_edit.setReadOnly(True)
        font = QFont('Consolas', 10)
        font.setStyleHint(QFont.StyleHint.Monospace)
        self.text_edit.setFont(font)
        layout.addWidget(self.text_edit)

        buttons = QHBoxLayout()
        self.category_combo = QComboBox()
        self.category_combo.addItem('All')
        self.category_combo.currentIndexChanged.connect(self._refresh)
        buttons.addWidget(self.category_combo)
        buttons.addStretch()
        clear_btn = QPushButton('Clear')
        clear_btn.clicked.connect(self._clear_logs)
        buttons.addWidget(clear_btn)
        layout.addLayout(buttons)

        self.setLayout(layout)

    def _start_updates(self):
        """Start periodic updates."""
        self.timer = QTimer(self)
        self.timer.timeout.connect(self._update_logs)
        self.timer.start(250)
        self._update_logs()

    def _selected_category(self) -> str | None:
        if self.category_combo.currentIndex() <= 0:
            return None
        return self.category_combo.currentText()

    def _update_logs(self):
        """Redraw when something was logged since the last update."""
        if log_buffer.sequence == self._last_sequence:
            return
        self._last_sequence = log_buffer.sequence

        selected = self.category_combo.currentText()
        self.category_combo.blockSignals(True)
        self.category_combo.clear()
        self.category_combo.addItems(['All', *log_buffer.categories()])
        index = self.category_combo.findText(selected)
        self.category_combo.setCurrentIndex(max(index, 0))
        self.category_combo.blockSignals(False)
        self._refresh()

    def _refresh(self):
        self.text_edit.setPlainText(log_buffer.get_text(self._selected_category()))
        scrollbar = self.text_edit.verticalScrollBar()
        scrollbar.setValue(scrollbar.maximum())

    def _clear_logs(self):
        log_buffer.clear()
        self._update_logs()

    def closeEvent(self, event):
        """Handle window close event."""
        self.timer.stop()
        super().closeEvent(event)
