"""Status bar container for the bottom of the TUI."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from textual.containers import Horizontal

if TYPE_CHECKING:
    from statly.tui.widgets.file_stats import FileStatsWidget

logger = logging.getLogger(__name__)


class StatusBar(Horizontal):
    """Hosts status widgets keyed by their ``WIDGET_ID``.

    Widgets with an alignment below 0.5 sit on the left, the rest dock
    right. Widgets added before the bar is mounted are installed at once
    and shown when the bar mounts.
    """

    DEFAULT_CSS = """
    StatusBar {
        height: 1;
        dock: bottom;
        background: $surface;
        color: $text-muted;
    }
    StatusBar > .-align-right {
        dock: right;
    }
    """

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._widgets: dict[str, FileStatsWidget] = {}

    def on_mount(self) -> None:
        pending = [w for w in self._widgets.values() if w.parent is None]
        if pending:
            self.mount(*pending)

    @property
    def widget_ids(self) -> list[str]:
        return list(self._widgets)

    def get_widget(self, widget_id: str) -> FileStatsWidget | None:
        return self._widgets.get(widget_id)

    def add_widget(self, widget: FileStatsWidget) -> None:
        """Install *widget*, showing it now if the bar is mounted."""
        widget_id = widget.WIDGET_ID
        if widget_id in self._widgets:
            self.remove_widget(widget_id)
        self._widgets[widget_id] = widget
        if widget.alignment >= 0.5:
            widget.add_class("-align-right")
        if self.is_mounted:
            self.mount(widget)
        widget.install(self)
        logger.debug("Installed status widget %s", widget_id)

    def remove_widget(self, widget_id: str) -> None:
        widget = self._widgets.pop(widget_id, None)
        if widget is None:
            return
        widget.dispose()
        if widget.is_mounted:
            widget.remove()
        logger.debug("Removed status widget %s", widget_id)

    def update_widget(self, widget_id: str) -> None:
        """Repaint the widget registered under *widget_id*."""
        widget = self._widgets.get(widget_id)
        if widget is not None:
            widget.refresh()

    def dispose_widgets(self) -> None:
        for widget_id in list(self._widgets):
            self.remove_widget(widget_id)
