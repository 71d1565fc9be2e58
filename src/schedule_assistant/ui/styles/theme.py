from __future__ import annotations

from PyQt6.QtGui import QBrush, QColor, QPalette
from PyQt6.QtWidgets import QApplication, QTableWidgetItem

from ...config import AppPalette
from ...domain import CalendarCell


def apply_palette(app: QApplication, palette: AppPalette) -> None:
    qt_palette = QPalette()
    roles = {
        QPalette.ColorRole.Window: palette.background_primary,
        QPalette.ColorRole.WindowText: palette.text_primary,
        QPalette.ColorRole.Base: palette.surface,
        QPalette.ColorRole.Text: palette.text_primary,
        QPalette.ColorRole.PlaceholderText: palette.text_muted,
        QPalette.ColorRole.Button: palette.accent_primary,
        QPalette.ColorRole.ButtonText: palette.background_primary,
        QPalette.ColorRole.Highlight: palette.selected_highlight,
        QPalette.ColorRole.HighlightedText: palette.text_primary,
    }
    for role, color in roles.items():
        qt_palette.setColor(role, QColor(color))
    qt_palette.setColor(QPalette.ColorGroup.Disabled, QPalette.ColorRole.Text, QColor(palette.text_muted))
    qt_palette.setColor(QPalette.ColorGroup.Disabled, QPalette.ColorRole.ButtonText, QColor(palette.text_muted))
    app.setPalette(qt_palette)
    app.setStyleSheet(palette.as_stylesheet())


def style_cell(item: QTableWidgetItem, cell: CalendarCell, palette: AppPalette, *, selected: bool) -> None:
    foreground, background = palette.cell_colors(in_month=cell.in_month, is_today=cell.is_today, selected=selected)
    item.setForeground(QBrush(QColor(foreground)))
    if background is not None:
        item.setBackground(QBrush(QColor(background)))
