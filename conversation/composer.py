"""Draft input: the rich-text box, its key handling and the file picker."""

from collections.abc import Iterable

from conversation.models import FileHandle, Message
from conversation.store import ConversationStore

# Commands the front end may run against the rich-text box
FORMAT_COMMANDS = frozenset({
    "bold",
    "italic",
    "underline",
    "strikeThrough",
    "insertOrderedList",
    "insertUnorderedList",
    "removeFormat",
})


class UnknownFormatCommand(ValueError):
    pass


def is_submit_key(key: str, shift: bool) -> bool:
    """Enter sends; Shift+Enter inserts a line break."""
    return key == "Enter" and not shift


class Composer:
    def __init__(self, store: ConversationStore):
        self._store = store
        self.body = ""

    def set_body(self, text: str) -> None:
        with self._store.lock:
            self.body = text

    def handle_key(self, key: str, shift: bool = False) -> Message | None:
        if not is_submit_key(key, shift):
            return None
        return self.submit()

    def submit(self) -> Message | None:
        # Body is read and cleared under the store lock so a double submit sends once
        with self._store.lock:
            message = self._store.compose_message(self.body)
            if message is not None:
                self.body = ""
        return message

    def apply_format(self, command: str) -> str:
        if command not in FORMAT_COMMANDS:
            raise UnknownFormatCommand(f"Unknown format command: {command!r}")
        return command

    def stage_files(self, handles: Iterable[FileHandle]) -> None:
        self._store.stage_files(handles)

    def unstage_file(self, index: int) -> FileHandle | None:
        return self._store.unstage_file(index)
