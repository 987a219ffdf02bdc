"""Textual front end: editor pane and status bar."""
