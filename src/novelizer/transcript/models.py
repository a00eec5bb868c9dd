# src/novelizer/transcript/models.py

from dataclasses import dataclass
from enum import Enum
from typing import Any

# Chat exports store send dates either as display strings or epoch numbers.
Timestamp = str | int | float | None


class MessageKind(str, Enum):
    """How a transcript line reads once turned into prose."""

    DIALOGUE = "dialogue"
    ACTION = "action"
    MIXED = "mixed"


@dataclass(frozen=True)
class RawMessage:
    """A message as the host chat log stores it.

    Every field may be missing. Defaults are applied by the parser, not here.
    """

    author: str | None = None
    text: str | None = None
    is_user: bool | None = None
    sent_at: Timestamp = None

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> "RawMessage":
        """Build from a chat export record (`name`, `mes`, `is_user`, `send_date`)."""
        return cls(
            author=record.get("name"),
            text=record.get("mes"),
            is_user=record.get("is_user"),
            sent_at=record.get("send_date"),
        )


@dataclass(frozen=True)
class ParsedMessage:
    """A filtered, classified transcript line. Immutable."""

    author: str
    content: str
    is_user: bool
    sent_at: Timestamp
    kind: MessageKind


@dataclass(frozen=True)
class ChatLog:
    """A loaded chat export: header metadata plus its messages in order."""

    character_name: str | None
    messages: list[RawMessage]
