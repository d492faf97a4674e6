import pytest
from banglish_converter import convert
from banglish_converter.config import Settings, get_settings
from banglish_converter.correction import correct_text
from banglish_converter.converter import _transliterator, get_transliterator


@pytest.fixture
def fresh_settings(monkeypatch, tmp_path):
    """Settings and transliterator caches rebuilt from a clean environment"""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("BANGLISH_DEBOUNCE_MS", raising=False)
    monkeypatch.delenv("BANGLISH_DICTIONARY_PATH", raising=False)
    get_settings.cache_clear()
    get_transliterator.cache_clear()
    yield
    get_settings.cache_clear()
    get_transliterator.cache_clear()


def test_defaults(fresh_settings):
    settings = Settings()
    assert settings.DEBOUNCE_MS == 100
    assert settings.DICTIONARY_PATH is None


def test_environment_overrides(fresh_settings, monkeypatch):
    monkeypatch.setenv("BANGLISH_DEBOUNCE_MS", "250")
    assert get_settings().DEBOUNCE_MS == 250


def test_default_transliterator_without_dictionary(fresh_settings):
    assert get_transliterator() is _transliterator


def test_dictionary_path_extends_common_words(fresh_settings, monkeypatch, tmp_path):
    path = tmp_path / "extra.yaml"
    path.write_text("bhai: ভাই\n", encoding="utf-8")
    monkeypatch.setenv("BANGLISH_DICTIONARY_PATH", str(path))

    transliterator = get_transliterator()
    assert transliterator is not _transliterator
    assert transliterator("ami bhai") == "আমি ভাই"


def test_convert_uses_configured_dictionary(fresh_settings, monkeypatch, tmp_path):
    """convert() and correct_text() agree once a dictionary file is configured"""
    path = tmp_path / "extra.yaml"
    path.write_text("bhai: ভাই\n", encoding="utf-8")
    monkeypatch.setenv("BANGLISH_DICTIONARY_PATH", str(path))

    assert convert("bhai") == "ভাই"
    assert convert("ami bhai") == "আমি ভাই"
    assert convert("bhai") == correct_text("bhai")
