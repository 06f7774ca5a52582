"""Tests for environment-driven settings."""

from conversation.config import Settings, get_settings


def test_defaults():
    settings = Settings(_env_file=None)
    assert settings.port == 8000
    assert settings.local_user_name == "You"
    assert settings.reply_placeholder == "Type your reply..."


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("CONVERSATION_LOCAL_USER_NAME", "Dana")
    monkeypatch.setenv("CONVERSATION_PORT", "9001")
    get_settings.cache_clear()
    try:
        settings = get_settings()
        assert settings.local_user_name == "Dana"
        assert settings.port == 9001
    finally:
        get_settings.cache_clear()
