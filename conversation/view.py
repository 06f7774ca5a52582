"""The view that hosts one conversation: owns the store and builds render state."""

from conversation.composer import Composer
from conversation.config import Settings
from conversation.formatting import format_size_kb
from conversation.models import MessageView, StagedFileView, ViewState
from conversation.store import ConversationStore


class ConversationView:
    def __init__(self, store: ConversationStore):
        self.store = store
        self.lock = store.lock
        self.composer = Composer(store)
        self._scroll_pending = False
        store.on_scroll_to_latest(self._scroll_to_bottom)
        # The first render lands at the bottom of the seeded history
        store.request_scroll()

    @classmethod
    def from_settings(cls, settings: Settings) -> "ConversationView":
        return cls(ConversationStore.seeded(settings))

    def _scroll_to_bottom(self) -> None:
        self._scroll_pending = True

    def take_scroll_request(self) -> bool:
        pending, self._scroll_pending = self._scroll_pending, False
        return pending

    def render(self) -> ViewState:
        with self.lock:
            return self._render_locked()

    def _render_locked(self) -> ViewState:
        store = self.store
        label, content = store.describe_selection()
        local_name = store.local_user.name
        return ViewState(
            messages=[
                MessageView(
                    message=m,
                    is_sent=m.user.name == local_name,
                    is_selected=m.id == store.selected_id,
                )
                for m in store.messages
            ],
            selected_id=store.selected_id,
            placeholder=store.placeholder,
            reply_label=label,
            reply_content=content,
            draft_body=self.composer.body,
            staged_files=[
                StagedFileView(index=i, name=f.name, size=format_size_kb(f.size))
                for i, f in enumerate(store.staged_files)
            ],
            scroll_to_latest=self.take_scroll_request(),
        )
