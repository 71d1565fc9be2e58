from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class AppPalette:
    background_primary: str = "#030712"
    background_secondary: str = "#050b18"
    surface: str = "#0c162c"
    accent_primary: str = "#7dd3fc"
    text_primary: str = "#f8fafc"
    text_secondary: str = "#c7d2fe"
    text_muted: str = "#64748b"
    border_strong: str = "#243657"
    today_highlight: str = "#1e3a5f"
    selected_highlight: str = "#3b1d3f"

    def cell_colors(self, *, in_month: bool, is_today: bool, selected: bool) -> Tuple[str, Optional[str]]:
        """Foreground and optional background for one calendar cell."""

        foreground = self.text_primary if in_month else self.text_muted
        if selected:
            return foreground, self.selected_highlight
        if is_today:
            return foreground, self.today_highlight
        return foreground, None

    def as_stylesheet(self) -> str:
        """Global stylesheet for the calendar window."""

        return f"""
        QWidget {{
            background-color: {self.background_primary};
            color: {self.text_primary};
            font-family: 'Hiragino Sans', 'Noto Sans JP', 'Segoe UI', Arial, sans-serif;
            font-size: 13px;
        }}
        QPushButton {{
            background-color: {self.accent_primary};
            color: #031525;
            border: none;
            padding: 8px 14px;
            border-radius: 10px;
            font-weight: 600;
        }}
        QPushButton#chip {{
            background-color: transparent;
            color: {self.accent_primary};
            border: 1px solid {self.accent_primary};
            border-radius: 999px;
            padding: 4px 12px;
        }}
        QLineEdit, QTextEdit {{
            background-color: {self.background_secondary};
            color: {self.text_primary};
            border: 1px solid {self.border_strong};
            border-radius: 8px;
            padding: 6px 10px;
        }}
        QTableWidget {{
            background-color: {self.surface};
            gridline-color: {self.border_strong};
            border: 1px solid {self.border_strong};
        }}
        QLabel#selectedDate {{
            color: {self.text_secondary};
        }}
        QLabel#calendarTitle {{
            font-size: 18px;
            font-weight: 700;
        }}
        """
