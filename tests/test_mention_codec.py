"""Tests for the canonical mention encoding."""

import pytest

from teamboard.domain.mentions import (
    MentionSegment,
    TextSegment,
    decode_content,
    encode_mention,
    extract_target_ids,
    has_mentions,
    to_plain_text,
)


@pytest.mark.parametrize(
    "content",
    [
        "",
        "plain text",
        "mail me at bob@example.com",
        "[link](https://example.com)",
        "@[no id]",
        "@[empty id]()",
        "@[   ](  )",
        "@[unterminated](abc",
        "@[nested [brackets]](x)",
        "@ alone and @@ twice",
        "trailing escape @[a](b\\",
        "line one\n@[two\nlines",
    ],
)
def test_content_without_mentions_is_a_single_literal(content):
    assert decode_content(content) == [TextSegment(content)]


def test_none_content_decodes_to_empty_literal():
    assert decode_content(None) == [TextSegment("")]


@pytest.mark.parametrize(
    ("name", "target_id"),
    [
        ("Jane Doe", "LDA0001"),
        ("Ana [QA] (lead)", "id(1)"),
        ("back\\slash", "x]y"),
        ("@someone", "@id"),
        ("", "J1"),
    ],
)
@pytest.mark.parametrize(
    ("prefix", "suffix"),
    [
        ("", ""),
        ("Hi ", " there"),
        ("@[", "]"),
        ("@[a](", ")"),
        ("@[a](b", "(c)"),
        ("@[x\\", "]("),
        ("((]]@", "@[y]"),
        ("\\", "\\"),
    ],
)
def test_encoded_mention_survives_surrounding_text(name, target_id, prefix, suffix):
    content = prefix + encode_mention(name, target_id) + suffix

    mentions = [s for s in decode_content(content) if isinstance(s, MentionSegment)]

    assert mentions == [MentionSegment(display_name=name, target_id=target_id)]


def test_decode_keeps_segment_order_and_merges_literals():
    content = "Ping @[Jane](J1), cc @[no id] and @[Bob](B1)."

    assert decode_content(content) == [
        TextSegment("Ping "),
        MentionSegment("Jane", "J1"),
        TextSegment(", cc @[no id] and "),
        MentionSegment("Bob", "B1"),
        TextSegment("."),
    ]


def test_encode_escapes_structural_characters():
    assert encode_mention("A [b]", "c(d)") == "@[A \\[b\\]](c\\(d\\))"


@pytest.mark.parametrize("target_id", ["", " ", "\n", " \t "])
def test_encode_requires_target_id(target_id):
    with pytest.raises(ValueError):
        encode_mention("b]b", target_id)


def test_extract_target_ids_collapses_duplicates():
    assert extract_target_ids("@[A](1) @[A](1)") == {"1"}
    assert extract_target_ids("@[A](1) and @[B](2)") == {"1", "2"}
    assert extract_target_ids("nobody here") == set()


def test_has_mentions_and_plain_text():
    content = "Design review: @[Mia Chen](LDA0005) to update wireframes."

    assert has_mentions(content) is True
    assert has_mentions("@[Mia Chen]") is False
    assert to_plain_text(content) == "Design review: @Mia Chen to update wireframes."
    assert to_plain_text("@[](X1) hi") == "@member hi"
