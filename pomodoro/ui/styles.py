"""QSS stylesheet and colours for Pomodoro."""

from __future__ import annotations

_DEFAULT_PALETTE: dict[str, str] = {
    "bg":         "#1A1A2E",
    "surface":    "#2A2A4A",
    "accent":     "#FF6B6B",   # tomato red
    "text":       "#E2E2F0",
    "text_muted": "#7A7A9A",
    "danger":     "#F38BA8",
    "border":     "#313154",
}


def get_palette() -> dict[str, str]:
    return dict(_DEFAULT_PALETTE)


def build_stylesheet(palette: dict[str, str]) -> str:
    """Return the application-wide QSS for *palette*."""
    p = palette
    return f"""
        QWidget {{
            background-color: {p['bg']};
            color: {p['text']};
            font-size: 14px;
        }}
        QLabel#timeLabel {{
            font-size: 56px;
            font-weight: 600;
        }}
        QLabel#messageLabel {{
            color: {p['text_muted']};
            font-size: 16px;
        }}
        QLabel#cyclesLabel {{
            color: {p['accent']};
            font-size: 64px;
            font-weight: 700;
        }}
        QPushButton {{
            background-color: {p['surface']};
            border: 1px solid {p['border']};
            border-radius: 18px;
            padding: 8px 22px;
        }}
        QPushButton#primaryButton {{
            background-color: {p['accent']};
            color: {p['bg']};
            font-weight: 600;
        }}
        QPushButton#dangerButton {{
            color: {p['danger']};
        }}
        QPushButton:disabled {{
            color: {p['text_muted']};
        }}
    """
