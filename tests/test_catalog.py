"""Tests for the example catalog."""

import pytest

import catalog

EXPECTED_TOPICS = (
    "break", "say-as", "audio", "paragraph", "sub",
    "prosody", "emphasis", "speed", "volume", "pitch",
)


def test_topics_in_catalog_order():
    assert catalog.topics() == EXPECTED_TOPICS


@pytest.mark.parametrize("topic", EXPECTED_TOPICS)
def test_every_topic_has_a_compact_document(topic):
    document = catalog.lookup(topic)
    assert document
    assert document.startswith("<speak>")
    assert document.endswith("</speak>")
    assert "\n" not in document
    assert "  " not in document
    assert " <" not in document
    assert "> " not in document


def test_break_document():
    assert catalog.lookup("break") == (
        '<speak>Step 1, take a deep breath.<break time="200ms" strength="weak"/>'
        "Step 2, exhale.</speak>"
    )


def test_unknown_topic_is_absent():
    assert catalog.lookup("whisper") is None
    assert catalog.lookup("") is None


def test_catalog_is_read_only():
    with pytest.raises(TypeError):
        catalog.CATALOG["break"] = "<speak/>"


def test_build_catalog_escapes_values():
    built = catalog.build_catalog([("sum", "<speak>{equation}</speak>", {"equation": '"1 + 1 > 1"'})])
    assert dict(built) == {"sum": "<speak>&quot;1 + 1 &gt; 1&quot;</speak>"}


def test_build_catalog_rejects_duplicates():
    with pytest.raises(ValueError, match="break"):
        catalog.build_catalog([("break", "<speak/>", {}), ("break", "<speak/>", {})])


def test_build_catalog_tolerates_stray_braces_and_missing_values():
    built = catalog.build_catalog([
        ("brace", "<speak>a { b</speak>", {}),
        ("missing", "<speak>Say {word}.</speak>", {}),
    ])
    assert built["brace"] == "<speak>a { b</speak>"
    assert built["missing"] == "<speak>Say .</speak>"
