import pytest
from banglish_converter.converter import _BanglishTransliterator
from banglish_converter.dictionary import (
    dictionary_from_mapping,
    load_dictionary,
    merge_dictionaries,
)
from banglish_converter.tables import COMMON_WORDS, TableError


def write_yaml(tmp_path, content):
    path = tmp_path / "words.yaml"
    path.write_text(content, encoding="utf-8")
    return path


def test_load_dictionary(tmp_path):
    path = write_yaml(tmp_path, "bhai: ভাই\nBondhu: বন্ধু\n")
    table = load_dictionary(path)

    assert dict(table) == {"bhai": "ভাই", "bondhu": "বন্ধু"}


def test_empty_file_gives_empty_dictionary(tmp_path):
    path = write_yaml(tmp_path, "")
    assert len(load_dictionary(path)) == 0


@pytest.mark.parametrize(
    "content,message",
    [
        ("bhai: ভাই\nbhai: ভায়া\n", "duplicate dictionary word"),
        ("bhai: ভাই\nBhai: ভায়া\n", "duplicate pattern"),
        ("'': ভাই\n", "empty pattern"),
        ("- bhai\n- bondhu\n", "expected a mapping"),
        ("123: ভাই\n", "entries must be strings"),
        ("bhai:\n", "entries must be strings"),
    ],
)
def test_bad_dictionary_files_fail(tmp_path, content, message):
    path = write_yaml(tmp_path, content)
    with pytest.raises(TableError, match=message):
        load_dictionary(path)


def test_merge_dictionaries_overrides_base():
    extra = dictionary_from_mapping("extra", {"ami": "আমিই", "bhai": "ভাই"})
    merged = merge_dictionaries(COMMON_WORDS, extra)

    assert merged["ami"] == "আমিই"
    assert merged["bhai"] == "ভাই"
    assert merged["tumi"] == COMMON_WORDS["tumi"]
    # Base table is untouched
    assert COMMON_WORDS["ami"] == "আমি"


def test_loaded_dictionary_drives_conversion(tmp_path):
    path = write_yaml(tmp_path, "bhai: ভাই\n")
    merged = merge_dictionaries(COMMON_WORDS, load_dictionary(path))
    transliterator = _BanglishTransliterator(dictionary=merged)

    assert transliterator("ami bhai") == "আমি ভাই"
    assert transliterator("bhaiya") == "ভাiযা"
