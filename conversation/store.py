"""In-memory state for one conversation view: messages, reply selection, staged files."""

import asyncio
import itertools
import logging
import threading
from collections.abc import Callable, Iterable
from datetime import datetime

from conversation.config import Settings
from conversation.formatting import flatten_content, format_time, to_attachment
from conversation.models import FileHandle, Message, Reply, User
from conversation.seed import seed_messages

logger = logging.getLogger(__name__)

ATTACHMENTS_ONLY_CONTENT = "Attachment(s) added"

Scheduler = Callable[[Callable[[], None]], None]


def call_soon(callback: Callable[[], None]) -> None:
    """Run callback after the current event-loop work, or right away without a loop."""
    try:
        loop = asyncio.get_running_loop()
    except RuntimeError:
        callback()
        return
    loop.call_soon(callback)


class ConversationStore:
    """Owns the message list and the draft state of a single view.

    All mutation goes through the methods below. None of them raise for
    user input: unknown ids, empty sends and bad staging indices are no-ops.
    Every method runs under ``lock``; callers that need several steps to
    happen together (read the draft, send, render) hold it themselves.
    """

    def __init__(
        self,
        messages: Iterable[Message],
        local_user: User,
        default_placeholder: str,
        reply_placeholder: str,
        clock: Callable[[], datetime] = datetime.now,
        scheduler: Scheduler = call_soon,
    ):
        self._messages: list[Message] = list(messages)
        self._local_user = local_user
        self._default_placeholder = default_placeholder
        self._reply_placeholder = reply_placeholder
        self._clock = clock
        self._scheduler = scheduler

        self._selected_id: int | None = None
        self._staged: list[FileHandle] = []
        self._placeholder = default_placeholder
        self._scroll_listeners: list[Callable[[], None]] = []
        self.lock = threading.RLock()

        start = max((m.id for m in self._messages), default=0) + 1
        self._ids = itertools.count(start)

    @classmethod
    def seeded(cls, settings: Settings, **kwargs) -> "ConversationStore":
        return cls(
            seed_messages(),
            local_user=User(name=settings.local_user_name, role=settings.local_user_role),
            default_placeholder=settings.default_placeholder,
            reply_placeholder=settings.reply_placeholder,
            **kwargs,
        )

    # --- Read access ---

    @property
    def messages(self) -> list[Message]:
        with self.lock:
            return list(self._messages)

    @property
    def staged_files(self) -> list[FileHandle]:
        with self.lock:
            return list(self._staged)

    @property
    def selected_id(self) -> int | None:
        return self._selected_id

    @property
    def is_replying(self) -> bool:
        return self._selected_id is not None

    @property
    def placeholder(self) -> str:
        return self._placeholder

    @property
    def local_user(self) -> User:
        return self._local_user

    def get_message(self, message_id: int) -> Message | None:
        with self.lock:
            for message in self._messages:
                if message.id == message_id:
                    return message
        return None

    # --- Selection ---

    def select_for_reply(self, message_id: int) -> None:
        """Toggle the reply target. Selecting the current target clears it."""
        with self.lock:
            if self._selected_id == message_id:
                self.clear_selection()
                return
            self._selected_id = message_id
            self._update_placeholder()

    def clear_selection(self) -> None:
        with self.lock:
            self._selected_id = None
            self._update_placeholder()

    def describe_selection(self) -> tuple[str, str]:
        """Return ("Replying to {name}", flattened text), or empty strings."""
        with self.lock:
            if self._selected_id is None:
                return "", ""
            message = self.get_message(self._selected_id)
        if message is None:
            return "", ""
        return f"Replying to {message.user.name}", flatten_content(message)

    def _update_placeholder(self) -> None:
        self._placeholder = (
            self._reply_placeholder if self._selected_id is not None else self._default_placeholder
        )

    # --- Staging ---

    def stage_files(self, handles: Iterable[FileHandle]) -> None:
        with self.lock:
            self._staged.extend(handles)

    def unstage_file(self, index: int) -> FileHandle | None:
        """Remove the staged file at index. Out-of-range (or negative) is a no-op."""
        with self.lock:
            if not 0 <= index < len(self._staged):
                logger.debug("Ignoring unstage of index %d (%d staged)", index, len(self._staged))
                return None
            return self._staged.pop(index)

    # --- Sending ---

    def compose_message(
        self,
        body_text: str,
        staged_files: list[FileHandle] | None = None,
    ) -> Message | None:
        """Append a new message from the draft and reset the draft state.

        Returns the new message, or None when there was nothing to send.
        Attachment sizes are taken from the handles as they are now, not
        as they were when staged.
        """
        with self.lock:
            message = self._compose_locked(body_text, staged_files)
        if message is not None:
            self._scheduler(self._notify_scroll)
        return message

    def _compose_locked(self, body_text, staged_files):
        body = body_text.strip()
        files = self._staged if staged_files is None else staged_files
        if not body and not files:
            logger.debug("Ignoring empty send")
            return None

        reply_to = None
        if self._selected_id is not None:
            target = self.get_message(self._selected_id)
            if target is None:
                logger.debug("Dropping send: reply target %s not found", self._selected_id)
                return None
            reply_to = Reply(sender_name=target.user.name, content=flatten_content(target))

        message = Message(
            id=next(self._ids),
            user=self._local_user,
            content=(body,) if body else (ATTACHMENTS_ONLY_CONTENT,),
            timestamp=format_time(self._clock()),
            variant="reply" if reply_to is not None else "standard",
            attachments=tuple(to_attachment(f) for f in files),
            reply_to=reply_to,
        )
        self._messages.append(message)
        logger.info(
            "Sent message %d (%s, %d attachment(s))",
            message.id,
            message.variant,
            len(message.attachments),
        )

        self.clear_selection()
        self._staged = []
        return message

    # --- Scroll signal ---

    def on_scroll_to_latest(self, listener: Callable[[], None]) -> None:
        self._scroll_listeners.append(listener)

    def request_scroll(self) -> None:
        self._scheduler(self._notify_scroll)

    def _notify_scroll(self) -> None:
        for listener in list(self._scroll_listeners):
            try:
                listener()
            except Exception:
                logger.debug("Scroll listener failed", exc_info=True)
