"""Tests for the draft input: key handling, formatting, file picking."""

import pytest

from conversation.composer import Composer, UnknownFormatCommand, is_submit_key
from conversation.models import FileHandle


@pytest.fixture
def composer(store) -> Composer:
    return Composer(store)


class TestKeys:
    def test_enter_without_shift_submits(self):
        assert is_submit_key("Enter", shift=False)

    def test_shift_enter_and_other_keys_do_not(self):
        assert not is_submit_key("Enter", shift=True)
        assert not is_submit_key("a", shift=False)

    def test_enter_sends_and_clears_body(self, composer, store):
        composer.set_body("<b>hello</b>")

        message = composer.handle_key("Enter")

        assert message.content == ("<b>hello</b>",)
        assert composer.body == ""
        assert store.messages[-1] == message

    def test_shift_enter_keeps_draft(self, composer, store):
        composer.set_body("line one")
        count = len(store.messages)

        assert composer.handle_key("Enter", shift=True) is None
        assert composer.body == "line one"
        assert len(store.messages) == count


class TestSubmit:
    def test_empty_submit_leaves_body(self, composer):
        composer.set_body("   ")
        assert composer.submit() is None
        assert composer.body == "   "

    def test_submit_with_staged_files_only(self, composer, store):
        composer.stage_files([FileHandle(name="a.txt", size=512)])
        message = composer.submit()
        assert message.attachments[0].size == "0.5 KB"
        assert store.staged_files == []

    def test_unstage_through_composer(self, composer, store):
        composer.stage_files([FileHandle(name="a.txt", size=1), FileHandle(name="b.txt", size=2)])
        assert composer.unstage_file(0).name == "a.txt"
        assert [f.name for f in store.staged_files] == ["b.txt"]


class TestFormat:
    @pytest.mark.parametrize("command", ["bold", "italic", "underline", "insertUnorderedList"])
    def test_known_commands_pass_through(self, composer, command):
        assert composer.apply_format(command) == command

    def test_unknown_command_raises(self, composer):
        with pytest.raises(UnknownFormatCommand):
            composer.apply_format("deleteEverything")
