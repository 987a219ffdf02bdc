"""File stats widget: characters, lines and size of the selected file.

The widget keeps one line of text, ``"<chars>:<lines> / <size>"``, and
recomputes it whenever the editor selection moves or a document changes.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from textual.reactive import reactive
from textual.widgets import Static

from statly.editor import EditorManager
from statly.events.bus import Event, Subscription
from statly.events.types import DOCUMENT_CHANGED, SELECTION_CHANGED
from statly.stats import FileSnapshot

if TYPE_CHECKING:
    from statly.tui.widgets.status_bar import StatusBar

logger = logging.getLogger(__name__)

WIDGET_ID = "Statly"
DISPLAY_NAME = "File Info Widget"
TOOLTIP = "Number of lines and file size"
ALIGN_LEFT = 0.0


class FileStatsWidget(Static):
    """Status bar entry for the currently selected file."""

    DEFAULT_CSS = """
    FileStatsWidget {
        width: auto;
        height: 1;
        padding: 0 1;
    }
    """

    WIDGET_ID = WIDGET_ID
    alignment = ALIGN_LEFT

    displayed_text: reactive[str] = reactive("")

    def __init__(self, editor: EditorManager, **kwargs) -> None:
        super().__init__(**kwargs)
        self._editor = editor
        self._status_bar: StatusBar | None = None
        self._subscriptions: list[Subscription] = []

    def on_mount(self) -> None:
        self.tooltip = TOOLTIP

    def render(self) -> str:
        return self.displayed_text

    def get_text(self) -> str:
        return self.displayed_text

    def install(self, status_bar: StatusBar | None) -> None:
        """Attach to *status_bar* and start following the editor."""
        if self._subscriptions:
            self.dispose()
        self._status_bar = status_bar
        bus = self._editor.bus
        self._subscriptions = [
            bus.subscribe(SELECTION_CHANGED, self._on_selection_changed),
            bus.subscribe(DOCUMENT_CHANGED, self._on_document_changed),
        ]
        self.recompute()

    def dispose(self) -> None:
        """Detach from the bus and forget the status bar.

        Teardown is best effort: a handle the bus already dropped is
        logged and skipped.
        """
        subscriptions, self._subscriptions = self._subscriptions, []
        for subscription in subscriptions:
            try:
                subscription.close()
            except Exception as e:
                logger.debug("Ignoring error releasing %r: %s", subscription, e)
        self._status_bar = None

    def recompute(self) -> None:
        file = self._editor.selected_file
        if file is None:
            self.displayed_text = ""
        else:
            snapshot = FileSnapshot.capture(file, self._editor.selected_document)
            self.displayed_text = snapshot.render()

        if self._status_bar is not None:
            self._status_bar.update_widget(self.WIDGET_ID)

    def _on_selection_changed(self, event: Event) -> None:
        self.recompute()

    def _on_document_changed(self, event: Event) -> None:
        self.recompute()


class FileStatsWidgetFactory:
    """Creates one ``FileStatsWidget`` per editor session."""

    id = WIDGET_ID
    display_name = DISPLAY_NAME

    def create_widget(self, editor: EditorManager) -> FileStatsWidget:
        return FileStatsWidget(editor, id="file-stats")
