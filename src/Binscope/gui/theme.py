"""Theme management for PyQt6."""

from PyQt6.QtGui import QColor, QPalette
from PyQt6.QtWidgets import QApplication, QWidget

LIGHT_COLORS = {
    QPalette.ColorRole.Window: (240, 240, 240),
    QPalette.ColorRole.WindowText: (0, 0, 0),
    QPalette.ColorRole.Base: (255, 255, 255),
    QPalette.ColorRole.AlternateBase: (245, 245, 245),
    QPalette.ColorRole.ToolTipBase: (255, 255, 220),
    QPalette.ColorRole.ToolTipText: (0, 0, 0),
    QPalette.ColorRole.Text: (0, 0, 0),
    QPalette.ColorRole.Button: (240, 240, 240),
    QPalette.ColorRole.ButtonText: (0, 0, 0),
    QPalette.ColorRole.BrightText: (255, 0, 0),
    QPalette.ColorRole.Link: (0, 0, 255),
    QPalette.ColorRole.Highlight: (0, 120, 215),
    QPalette.ColorRole.HighlightedText: (255, 255, 255),
}

DARK_COLORS = {
    QPalette.ColorRole.Window: (53, 53, 53),
    QPalette.ColorRole.WindowText: (255, 255, 255),
    QPalette.ColorRole.Base: (35, 35, 35),
    QPalette.ColorRole.AlternateBase: (53, 53, 53),
    QPalette.ColorRole.ToolTipBase: (25, 25, 25),
    QPalette.ColorRole.ToolTipText: (255, 255, 255),
    QPalette.ColorRole.Text: (255, 255, 255),
    QPalette.ColorRole.Button: (53, 53, 53),
    QPalette.ColorRole.ButtonText: (255, 255, 255),
    QPalette.ColorRole.BrightText: (255, 0, 0),
    QPalette.ColorRole.Link: (42, 130, 218),
    QPalette.ColorRole.Highlight: (42, 130, 218),
    QPalette.ColorRole.HighlightedText: (0, 0, 0),
}


class ThemeManager:
    """Manages application theme."""

    @staticmethod
    def apply_theme(theme: str):
        """Apply a theme to the application."""
        app = QApplication.instance()
        if not app:
            return

        app.setStyle('Fusion')
        if theme == 'Light':
            app.setPalette(ThemeManager._build_palette(LIGHT_COLORS))
        elif theme == 'Dark':
            app.setPalette(ThemeManager._build_palette(DARK_COLORS))
        else:  # System
            app.setPalette(app.style().standardPalette())

    @staticmethod
    def apply_to_widget(widget: QWidget):
        """Apply current theme to a specific widget immediately to prevent white flicker."""
        app = QApplication.instance()
        if not app:
            return
        widget.setPalette(app.palette())
        widget.setAutoFillBackground(True)

    @staticmethod
    def _build_palette(colors: dict) -> QPalette:
        palette = QPalette()
        for role, rgb in colors.items():
            palette.setColor(role, QColor(*rgb))
        return palette
