from unittest.mock import MagicMock

import pytest

from novelizer.transcript.models import MessageKind, RawMessage
from novelizer.transcript.parser import (
    classify_message,
    is_out_of_character,
    parse_messages,
)


def raw(text: str | None, author: str | None = "Alice") -> RawMessage:
    return RawMessage(author=author, text=text, is_user=False, sent_at="2024-01-01")


class TestOutOfCharacterFilter:
    def test_ooc_messages_are_dropped_by_default(self) -> None:
        messages = [
            raw("Hello there"),
            raw("((brb, dinner))"),
            raw("(OOC: this is fun)"),
            raw("Goodbye"),
        ]

        result = parse_messages(messages, include_ooc=False, include_actions=True)

        assert [m.content for m in result] == ["Hello there", "Goodbye"]

    def test_ooc_messages_kept_when_included(self) -> None:
        result = parse_messages(
            [raw("((thinking to myself))")], include_ooc=True, include_actions=True
        )

        assert len(result) == 1
        assert result[0].content == "((thinking to myself))"
        assert result[0].kind == MessageKind.DIALOGUE

    def test_thinking_aside_absent_when_excluded(self) -> None:
        result = parse_messages(
            [raw("((thinking to myself))")], include_ooc=False, include_actions=True
        )

        assert result == []

    def test_marker_only_counts_at_start(self) -> None:
        """A parenthetical later in the line is in-character text."""
        assert not is_out_of_character("She smiled ((softly))")
        assert not is_out_of_character(" ((leading space))")
        assert is_out_of_character("(OOC: later)")

    def test_order_is_preserved(self) -> None:
        texts = [f"line {i}" for i in range(20)]
        messages = [raw(t) if i % 3 else raw(f"(( {t} ))") for i, t in enumerate(texts)]

        result = parse_messages(messages, include_ooc=False, include_actions=False)

        assert [m.content for m in result] == [t for i, t in enumerate(texts) if i % 3]


class TestClassification:
    def test_fully_wrapped_line_is_action(self) -> None:
        assert classify_message("*waves hello*", include_actions=False) == (
            MessageKind.ACTION
        )

    def test_wrapped_line_with_whitespace_is_action(self) -> None:
        assert classify_message("  *nods*\n", include_actions=True) == MessageKind.ACTION

    def test_partial_emphasis_is_mixed_with_actions(self) -> None:
        assert classify_message("*waves* hello there", include_actions=True) == (
            MessageKind.MIXED
        )

    def test_partial_emphasis_is_dialogue_without_actions(self) -> None:
        assert classify_message("*waves* hello there", include_actions=False) == (
            MessageKind.DIALOGUE
        )

    def test_plain_text_is_dialogue(self) -> None:
        assert classify_message("Hello!", include_actions=True) == MessageKind.DIALOGUE


class TestDefaults:
    def test_missing_author_defaults_to_unknown(self) -> None:
        result = parse_messages(
            [raw("Hi", author=None)], include_ooc=False, include_actions=True
        )

        assert result[0].author == "Unknown"

    def test_missing_text_defaults_to_empty(self) -> None:
        result = parse_messages([raw(None)], include_ooc=False, include_actions=True)

        assert result[0].content == ""
        assert result[0].kind == MessageKind.DIALOGUE

    def test_missing_is_user_defaults_to_false(self) -> None:
        result = parse_messages(
            [RawMessage(text="Hi")], include_ooc=False, include_actions=True
        )

        assert result[0].is_user is False
        assert result[0].sent_at is None

    def test_fields_copied_from_raw_message(self) -> None:
        message = RawMessage(author="Bob", text="Yo", is_user=True, sent_at=1700000000)

        result = parse_messages([message], include_ooc=False, include_actions=True)

        assert result[0].author == "Bob"
        assert result[0].is_user is True
        assert result[0].sent_at == 1700000000

    def test_parsed_message_is_frozen(self) -> None:
        result = parse_messages([raw("Hi")], include_ooc=False, include_actions=True)

        with pytest.raises(AttributeError):
            result[0].content = "changed"  # type: ignore


def test_metrics_hook_receives_counts() -> None:
    metrics_hook = MagicMock()

    parse_messages(
        [raw("a"), raw("((b))"), raw("c")],
        include_ooc=False,
        include_actions=True,
        metrics_hook=metrics_hook,
    )

    metrics_hook.increment.assert_any_call("transcript_messages_parsed", 2)
    metrics_hook.increment.assert_any_call("transcript_messages_filtered", 1)
