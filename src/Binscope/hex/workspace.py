"""Hex workspace widget."""

from PyQt6.QtCore import QTimer
from PyQt6.QtGui import QFont, QTextCursor
from PyQt6.QtWidgets import QLabel, QPlainTextEdit, QVBoxLayout, QWidget

from ..utils import DEFAULT_PAGE_SIZE, FETCH_TIMEOUT_MS, NEAR_END_THRESHOLD, format_size
from .controller import FetchController
from .render import render_text
from .source import ByteSource
from .viewport import ViewportMonitor


class HexWorkspace(QWidget):
    """Scrolling offset/hex/ASCII view that loads pages as the user scrolls."""

    def __init__(
        self,
        fetcher=None,
        page_size: int = DEFAULT_PAGE_SIZE,
        threshold: int = NEAR_END_THRESHOLD,
        timeout_ms: int = FETCH_TIMEOUT_MS,
        parent=None,
    ):
        super().__init__(parent)
        self.controller = FetchController(fetcher, page_size, timeout_ms, parent=self)
        self._title = ''
        # (epoch, pages already in the text view)
        self._rendered = (-1, 0)
        self._setup_ui()

        self.monitor = ViewportMonitor(self.text_view.verticalScrollBar(), threshold, parent=self)
        self.monitor.near_end.connect(self.controller.on_viewport_near_end)
        self.controller.changed.connect(self._on_changed)
        self.controller.page_loaded.connect(self._on_page_loaded)

    def _setup_ui(self):
        """Setup the UI."""
        layout = QVBoxLayout()
        layout.setContentsMargins(0, 0, 0, 0)

        self.header_label = QLabel('No content')
        self.header_label.setStyleSheet('font-weight: bold; padding: 4px;')
        layout.addWidget(self.header_label)

        self.text_view = QPlainTextEdit()
        self.text_view.setReadOnly(True)
        self.text_view.setLineWrapMode(QPlainTextEdit.LineWrapMode.NoWrap)
        self.text_view.setFont(self._get_monospace_font())
        self.text_view.setPlaceholderText('No data')
        layout.addWidget(self.text_view, stretch=1)

        self.status_label = QLabel('')
        self.status_label.setStyleSheet('color: #888; padding: 2px 4px;')
        layout.addWidget(self.status_label)

        self.setLayout(layout)

    def _get_monospace_font(self):
        """Get a monospace font."""
        font = QFont('Consolas', 10)
        font.setStyleHint(QFont.StyleHint.Monospace)
        return font

    def open_source(self, source: ByteSource, title: str = '', page_size: int | None = None):
        """Show a new source from its first page."""
        self._title = title or repr(source)
        self.controller.reset(source, page_size)

    def close_source(self):
        self._title = ''
        self.controller.close()

    def _on_changed(self):
        session = self.controller.session
        epoch, rendered = self._rendered
        if epoch != session.epoch or rendered > session.loaded_count:
            with self.monitor.paused():
                self.text_view.clear()
            rendered = 0
        if rendered < session.loaded_count:
            self._append_pages(rendered)
        self._rendered = (session.epoch, session.loaded_count)
        self._update_labels()

    def _append_pages(self, start_page: int):
        text = render_text(self.controller.lines(start_page=start_page))
        if not text:
            return
        scroll_bar = self.text_view.verticalScrollBar()
        position = scroll_bar.value()
        # appendPlainText follows the bottom; keep the reader where they were
        with self.monitor.paused():
            if start_page == 0:
                self.text_view.setPlainText(text)
                self.text_view.moveCursor(QTextCursor.MoveOperation.Start)
                position = 0
            else:
                self.text_view.appendPlainText(text)
            scroll_bar.setValue(position)

    def _on_page_loaded(self, _index: int):
        # A short page may not fill the viewport, so no scroll event would follow
        QTimer.singleShot(0, self.monitor.check)

    def _update_labels(self):
        controller = self.controller
        session = controller.session
        if controller.source is None:
            self.header_label.setText('No content')
        else:
            self.header_label.setText(
                f'{self._title}  |  {format_size(controller.total_size)}  |  '
                f'{session.loaded_count}/{session.total_pages} page(s)'
            )

        if session.error:
            self.status_label.setText(session.error)
            self.status_label.setStyleSheet('color: #d9534f; padding: 2px 4px;')
            return
        self.status_label.setStyleSheet('color: #888; padding: 2px 4px;')
        if controller.is_loading:
            self.status_label.setText('Loading more...')
        elif controller.has_more:
            self.status_label.setText('Scroll down to load more')
        elif controller.source is not None:
            self.status_label.setText(f'End of data ({controller.total_size} bytes)')
        else:
            self.status_label.setText('')
