"""TUI widget components."""

from statly.tui.widgets.file_stats import FileStatsWidget, FileStatsWidgetFactory
from statly.tui.widgets.status_bar import StatusBar

__all__ = [
    "FileStatsWidget",
    "FileStatsWidgetFactory",
    "StatusBar",
]
