"""Tests for the render state built by ConversationView."""

from conversation.models import FileHandle
from conversation.view import ConversationView


def test_first_render_requests_scroll_once(store):
    view = ConversationView(store)
    assert view.render().scroll_to_latest is True
    assert view.render().scroll_to_latest is False


def test_render_flags_sent_and_selected(store):
    view = ConversationView(store)
    store.select_for_reply(3)

    state = view.render()

    by_id = {m.message.id: m for m in state.messages}
    assert by_id[4].is_sent and not by_id[3].is_sent
    assert by_id[3].is_selected and not by_id[4].is_selected
    assert state.selected_id == 3
    assert state.reply_label == "Replying to Alice Freeman"
    assert state.placeholder == store.placeholder


def test_send_sets_scroll_flag_again(store):
    view = ConversationView(store)
    view.render()

    view.composer.set_body("hello")
    view.composer.submit()

    state = view.render()
    assert state.scroll_to_latest is True
    assert state.messages[-1].message.content == ("hello",)
    assert state.draft_body == ""


def test_staged_files_rendered_with_sizes(store):
    view = ConversationView(store)
    store.stage_files([FileHandle(name="a.pdf", size=1024), FileHandle(name="b.png", size=2560)])

    staged = view.render().staged_files

    assert [(f.index, f.name, f.size) for f in staged] == [(0, "a.pdf", "1.0 KB"), (1, "b.png", "2.5 KB")]
