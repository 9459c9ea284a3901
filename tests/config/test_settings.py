"""Tests for codec settings."""

from apiresource.config import CodecSettings


def test_defaults():
    settings = CodecSettings(_env_file=None)

    assert settings.warn_on_dropped_relationships is True
    assert settings.sort_keys is False
    assert settings.indent is None
    assert settings.encoding == "utf-8"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("APIRESOURCE_CODEC_SORT_KEYS", "true")
    monkeypatch.setenv("APIRESOURCE_CODEC_INDENT", "4")
    monkeypatch.setenv("APIRESOURCE_CODEC_WARN_ON_DROPPED_RELATIONSHIPS", "false")

    settings = CodecSettings(_env_file=None)

    assert settings.sort_keys is True
    assert settings.indent == 4
    assert settings.warn_on_dropped_relationships is False


def test_explicit_values_win(monkeypatch):
    monkeypatch.setenv("APIRESOURCE_CODEC_INDENT", "4")

    assert CodecSettings(_env_file=None, indent=1).indent == 1
