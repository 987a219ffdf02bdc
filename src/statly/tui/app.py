"""Statly TUI: a small editor host for the status bar widgets.

Layout:
  +----------------------------------------------+
  | Statly - notes.txt                           |
  +----------------------------------------------+
  |                                              |
  |  file text (editable)                        |
  |                                              |
  +----------------------------------------------+
  | 120:5 / 500 B                                |
  +----------------------------------------------+
  | ^S Save  ^W Close  ^Q Quit                   |
  +----------------------------------------------+
"""

from __future__ import annotations

from textual import on
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer, Header, TextArea

from statly.config import Config
from statly.editor import EditorManager
from statly.events.bus import Event, Subscription
from statly.events.types import SELECTION_CHANGED
from statly.exceptions import EditorError
from statly.tui.theme import STATLY_DARK
from statly.tui.widgets import FileStatsWidgetFactory, StatusBar


class StatlyApp(App):
    """Editor pane over an ``EditorManager`` with a file stats status bar."""

    TITLE = "Statly"

    CSS = """
    #editor {
        height: 1fr;
    }
    """

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit", show=True, priority=True),
        Binding("ctrl+s", "save", "Save", show=True, priority=True),
        Binding("ctrl+w", "close_file", "Close", show=True, priority=True),
        Binding("ctrl+pagedown", "next_file", "Next file"),
        Binding("ctrl+pageup", "previous_file", "Previous file"),
    ]

    def __init__(
        self,
        editor: EditorManager,
        *,
        config: Config | None = None,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self._editor = editor
        self._config = config or Config()
        self._selection_subscription: Subscription | None = None
        self._status_bar: StatusBar | None = None

    def compose(self) -> ComposeResult:
        yield Header()
        yield TextArea(id="editor")
        yield StatusBar(id="status-bar")
        yield Footer()

    def on_mount(self) -> None:
        self.register_theme(STATLY_DARK)
        self.theme = "statly-dark"

        self._selection_subscription = self._editor.bus.subscribe(
            SELECTION_CHANGED, self._on_selection_changed,
        )
        self._status_bar = self.query_one("#status-bar", StatusBar)
        if self._config.widget.enabled:
            factory = FileStatsWidgetFactory()
            self._status_bar.add_widget(factory.create_widget(self._editor))
        self._show_selected()
        self.query_one("#editor", TextArea).focus()

    def on_unmount(self) -> None:
        if self._status_bar is not None:
            self._status_bar.dispose_widgets()
        if self._selection_subscription is not None:
            self._selection_subscription.close()
            self._selection_subscription = None

    def _on_selection_changed(self, event: Event) -> None:
        self._show_selected()

    def _show_selected(self) -> None:
        area = self.query_one("#editor", TextArea)
        file = self._editor.selected_file
        document = self._editor.selected_document
        if file is None:
            self.sub_title = ""
            area.load_text("")
            area.read_only = True
        elif document is None:
            self.sub_title = f"{file.name} (binary)"
            area.load_text("")
            area.read_only = True
        else:
            self.sub_title = file.name
            area.load_text(document.text)
            area.read_only = False

    @on(TextArea.Changed, "#editor")
    def _on_text_changed(self, event: TextArea.Changed) -> None:
        if self._editor.selected_document is None:
            return
        self._editor.edit(event.text_area.text)

    def action_save(self) -> None:
        try:
            self._editor.save()
        except EditorError as e:
            self.notify(str(e), severity="error", timeout=5)
            return
        self.notify(f"Saved {self._editor.selected_file.name}", timeout=2)

    def action_close_file(self) -> None:
        try:
            self._editor.close()
        except EditorError as e:
            self.notify(str(e), severity="warning", timeout=3)

    def action_next_file(self) -> None:
        self._editor.select_offset(1)

    def action_previous_file(self) -> None:
        self._editor.select_offset(-1)
