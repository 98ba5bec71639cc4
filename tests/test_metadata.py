"""Tests for the metadata store and PDF text encoding."""
import pytest

from pdfdocument.encoding import BOM, decode_pdf_text, encode_pdf_text
from pdfdocument.metadata import MetadataStore


def test_defaults_are_empty():
    store = MetadataStore()

    assert store.get("author") == ""
    assert store.get("keywords") == ""
    assert store.custom_properties == {}
    assert store.is_utf8 is False


def test_set_returns_new_store():
    store = MetadataStore()
    updated = store.set("title", "Annual report")

    assert updated is not store
    assert updated.get("title") == "Annual report"
    assert store.get("title") == ""


def test_set_keeps_other_fields():
    store = MetadataStore(author="Alice", creator="tool")
    updated = store.set("subject", "Budget")

    assert updated.author == "Alice"
    assert updated.creator == "tool"
    assert updated.subject == "Budget"


def test_field_names_are_case_insensitive():
    store = MetadataStore().set("Author", "Alice")

    assert store.get("AUTHOR") == "Alice"


def test_unknown_field_raises():
    with pytest.raises(KeyError):
        MetadataStore().get("producer")
    with pytest.raises(KeyError):
        MetadataStore().set("producer", "x")


def test_get_without_field_returns_everything():
    store = MetadataStore(author="Alice").with_custom_properties({"Project": "X"})

    assert store.get() == {
        "author": "Alice",
        "creator": "",
        "subject": "",
        "title": "",
        "keywords": "",
        "custom_properties": {"Project": "X"},
    }


def test_keywords_are_joined():
    store = MetadataStore().with_keywords("a", "b", "c")

    assert store.keywords == "a, b, c"


def test_utf8_values_are_transcoded():
    store = MetadataStore().set("title", "Grüße", is_utf8=True)

    assert store.title.startswith(BOM)
    assert store.title != "Grüße"
    assert decode_pdf_text(store.title) == "Grüße"
    assert store.is_utf8 is True


def test_custom_transcoder():
    store = MetadataStore(transcoder=str.upper).set("author", "alice", is_utf8=True)

    assert store.author == "ALICE"


def test_custom_properties_replace_not_merge():
    store = MetadataStore().with_custom_properties({"a": "1", "b": "2"})
    store = store.with_custom_properties({"c": "3"})

    assert dict(store.custom_properties) == {"c": "3"}


def test_custom_properties_are_copied_and_read_only():
    properties = {"a": "1"}
    store = MetadataStore().with_custom_properties(properties)
    properties["b"] = "2"

    assert dict(store.custom_properties) == {"a": "1"}
    with pytest.raises(TypeError):
        store.custom_properties["c"] = "3"


def test_custom_properties_keep_order():
    store = MetadataStore().with_custom_properties({"z": "1", "a": "2", "m": "3"})

    assert list(store.custom_properties) == ["z", "a", "m"]


def test_pdf_text_encoding():
    assert encode_pdf_text("A") == "\xfe\xff\x00A"
    assert decode_pdf_text("\xfe\xff\x00A") == "A"
    assert decode_pdf_text("plain") == "plain"


def test_encoded_fields_are_tracked():
    store = MetadataStore().set("title", "Grüße", is_utf8=True).set("author", "\xfe\xffAB")

    assert store.encoded == frozenset({"title"})
    assert store.text("title") == "Grüße"
    assert store.text("author") == "\xfe\xffAB"


def test_verbatim_set_clears_encoded_flag():
    store = MetadataStore().set("title", "A", is_utf8=True).set("title", "\xfe\xffB")

    assert store.encoded == frozenset()
    assert store.text("title") == "\xfe\xffB"


def test_equal_stores_hash_equally():
    first = MetadataStore(author="Alice").with_custom_properties({"a": "1"})
    second = MetadataStore(author="Alice").with_custom_properties({"a": "1"})

    assert first == second
    assert hash(first) == hash(second)
    assert len({first, second}) == 1
