"""Display formatting for timestamps, attachment sizes and message text."""

from datetime import datetime

from conversation.models import Attachment, FileHandle, Message


def format_time(dt: datetime) -> str:
    """Format a datetime as a 12-hour clock time, e.g. '9:05 AM'."""
    hour = dt.hour % 12 or 12
    suffix = "AM" if dt.hour < 12 else "PM"
    return f"{hour}:{dt.minute:02d} {suffix}"


def format_size_kb(size_bytes: int) -> str:
    """Byte count to KB with one decimal: 1536 -> '1.5 KB'."""
    return f"{size_bytes / 1024:.1f} KB"


def to_attachment(handle: FileHandle) -> Attachment:
    return Attachment(name=handle.name, size=format_size_kb(handle.size))


def flatten_content(message: Message) -> str:
    """Join a message's content blocks into one line of text."""
    return " ".join(message.content)
