"""Scroll position tracking for on-demand page loading."""

from contextlib import contextmanager

from PyQt6.QtCore import QObject, pyqtSignal
from PyQt6.QtWidgets import QScrollBar

from ..utils import NEAR_END_THRESHOLD


def is_near_end(
    scroll_offset: int,
    visible_height: int,
    content_height: int,
    threshold: int = NEAR_END_THRESHOLD,
) -> bool:
    """True when the bottom of the viewport is within threshold of the content end."""
    return scroll_offset + visible_height >= content_height - threshold


class ViewportMonitor(QObject):
    """Emits near_end whenever a scroll bar gets close to its maximum.

    May fire repeatedly for the same position; listeners are expected to
    ignore signals they cannot act on.
    """

    near_end = pyqtSignal()

    def __init__(self, scroll_bar: QScrollBar, threshold: int = NEAR_END_THRESHOLD, parent=None):
        super().__init__(parent)
        self.scroll_bar = scroll_bar
        self.threshold = threshold
        self.enabled = True
        scroll_bar.valueChanged.connect(self.check)
        scroll_bar.rangeChanged.connect(self.check)

    @contextmanager
    def paused(self):
        """Suppress near_end while the content is being rebuilt."""
        self.enabled = False
        try:
            yield
        finally:
            self.enabled = True

    def check(self, *_args) -> bool:
        """Re-evaluate the current position, emitting near_end if close to the end."""
        if not self.enabled:
            return False
        bar = self.scroll_bar
        visible = bar.pageStep()
        # QScrollBar ranges over the hidden part only; content = range + page
        content = bar.maximum() - bar.minimum() + visible
        if is_near_end(bar.value() - bar.minimum(), visible, content, self.threshold):
            self.near_end.emit()
            return True
        return False
