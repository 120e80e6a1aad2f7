"""Terminal rendition of the open app window."""

from __future__ import annotations

from os_controller.window_manager import WindowManager
from ui.icons import resolve_icon


def render_window(window_manager: WindowManager) -> list[str]:
    """Title bar plus sandbox body; empty when nothing is open."""
    app = window_manager.open_app
    if app is None:
        return []
    icon = resolve_icon(app.icon)
    title_bar = f"{icon.glyph} {app.title}"
    lines = [title_bar + "  (close: 'close')", "-" * max(len(title_bar), 24)]
    if window_manager.sandbox is not None:
        lines.extend(window_manager.sandbox.render())
    return lines
