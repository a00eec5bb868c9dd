# src/novelizer/transcript/loader.py

import json
import logging
from pathlib import Path
from typing import Any

from novelizer.errors import ConfigurationError

from .models import ChatLog, RawMessage

logger = logging.getLogger(__name__)


def load_chat_log(path: str | Path) -> ChatLog:
    """Load a JSON Lines chat export.

    The first line may be a header carrying `character_name` instead of
    a message; it is recognised by having no `mes` key. Blank
    lines are skipped.
    """
    file_path = Path(path)
    logger.info("Loading chat log from %s", file_path)
    try:
        lines = file_path.read_text(encoding="utf-8").splitlines()
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigurationError(f"Cannot read chat log '{file_path}': {exc}") from exc

    records: list[dict[str, Any]] = []
    for line_number, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        try:
            record = json.loads(line)
        except json.JSONDecodeError as exc:
            raise ConfigurationError(
                f"Invalid JSON on line {line_number} of '{file_path}': {exc.msg}"
            ) from exc
        if not isinstance(record, dict):
            raise ConfigurationError(
                f"Line {line_number} of '{file_path}' is not a JSON object"
            )
        records.append(record)

    header: dict[str, Any] = {}
    if records and "mes" not in records[0]:
        header = records.pop(0)

    messages = [RawMessage.from_record(r) for r in records]
    logger.info("Loaded %d messages from %s", len(messages), file_path)
    return ChatLog(
        character_name=header.get("character_name"),
        messages=messages,
    )
