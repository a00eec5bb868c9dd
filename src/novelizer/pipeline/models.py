# src/novelizer/pipeline/models.py

from dataclasses import dataclass, field


@dataclass(frozen=True)
class GeneratedChapter:
    title: str
    content: str
    source_message_count: int


@dataclass
class Document:
    """The assembled novel. Chapters are only ever appended, in order."""

    title: str
    chapters: list[GeneratedChapter] = field(default_factory=list)
