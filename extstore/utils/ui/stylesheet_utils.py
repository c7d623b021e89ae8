"""Module: stylesheet_utils.py.

Author: Michael Economou
Date: 2026-02-02

Stylesheet rendering for the progress button.

All functions are pure: they take colors and values and return a QSS string,
so widgets only decide *when* to apply a stylesheet.
"""

from extstore.config import COLORS, PROGRESS_STOP_GAP

ACCENT_TOKEN = "@ACCENT"


def render_accent_style(base_style: str, accent_color: str) -> str:
    """Replace every ``@ACCENT`` token of ``base_style`` with ``accent_color``.

    Example:
        >>> render_accent_style("QToolButton { color: @ACCENT; }", "#ff0000")
        'QToolButton { color: #ff0000; }'

    """
    return base_style.replace(ACCENT_TOKEN, accent_color)


def render_progress_style(
    progress: float, accent_color: str, background_color: str = COLORS["12DP"]
) -> str:
    """Render a QToolButton stylesheet drawing ``progress`` as a hard-edged gradient.

    The accent fills the button up to ``progress`` (0..1) and the background
    color takes over ``PROGRESS_STOP_GAP`` later.
    """
    stop_left = progress
    stop_right = stop_left + PROGRESS_STOP_GAP
    return (
        "QToolButton {"
        "background-color:"
        "  qlineargradient("
        "    spread:pad,"
        "    x1:0, y1:0, x2:1, y2:0,"
        f"    stop: {stop_left} {accent_color},"
        f"    stop:{stop_right} {background_color}"
        "  );"
        f"  border-color: transparent transparent {accent_color} transparent;"
        "  color: white;"
        "}"
    )


def render_completed_style(accent_color: str) -> str:
    """Render the stylesheet of a button whose operation has completed."""
    return f"QToolButton {{ border: none; background-color: {accent_color}; color: white}}"
