# src/novelizer/transcript/parser.py

import logging
from collections.abc import Iterable

from novelizer.observability import names
from novelizer.observability.base import MetricsHook, NoOpMetricsHook

from .models import MessageKind, ParsedMessage, RawMessage

logger = logging.getLogger(__name__)

OOC_PREFIXES = ("((", "(OOC:")
EMPHASIS_MARKER = "*"
UNKNOWN_AUTHOR = "Unknown"


def is_out_of_character(text: str) -> bool:
    return text.startswith(OOC_PREFIXES)


def classify_message(text: str, *, include_actions: bool) -> MessageKind:
    """Classify a line as action, mixed or dialogue.

    A line fully wrapped in emphasis markers is an action. A line that only
    contains a marker is mixed when actions are included, dialogue otherwise.
    """
    stripped = text.strip()
    if stripped.startswith(EMPHASIS_MARKER) and stripped.endswith(EMPHASIS_MARKER):
        return MessageKind.ACTION
    if include_actions and EMPHASIS_MARKER in stripped:
        return MessageKind.MIXED
    return MessageKind.DIALOGUE


def parse_messages(
    messages: Iterable[RawMessage],
    *,
    include_ooc: bool,
    include_actions: bool,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> list[ParsedMessage]:
    """Filter and classify raw messages, preserving their order.

    Malformed records never raise: missing fields fall back to defaults.
    """
    parsed: list[ParsedMessage] = []
    dropped = 0

    for message in messages:
        text = message.text or ""
        if not include_ooc and is_out_of_character(text):
            dropped += 1
            continue

        parsed.append(
            ParsedMessage(
                author=message.author or UNKNOWN_AUTHOR,
                content=text,
                is_user=bool(message.is_user),
                sent_at=message.sent_at,
                kind=classify_message(text, include_actions=include_actions),
            )
        )

    logger.debug("Parsed %d messages, dropped %d OOC", len(parsed), dropped)
    metrics_hook.increment(names.TRANSCRIPT_MESSAGES_PARSED, len(parsed))
    metrics_hook.increment(names.TRANSCRIPT_MESSAGES_FILTERED, dropped)
    return parsed
