"""Event type constants for Statly."""

# Editor selection events
SELECTION_CHANGED = "selection_changed"
FILE_OPENED = "file_opened"
FILE_CLOSED = "file_closed"

# Document events
DOCUMENT_CHANGED = "document_changed"
