from .models import Document, GeneratedChapter
from .orchestrator import (
    DEFAULT_CHARACTER_NAME,
    NovelGenerator,
    ProgressCallback,
    document_title,
    generate_novel,
    spacing_from_settings,
)
from .spacing import NO_SPACING, ChapterSpacing

__all__ = [
    "DEFAULT_CHARACTER_NAME",
    "NO_SPACING",
    "ChapterSpacing",
    "Document",
    "GeneratedChapter",
    "NovelGenerator",
    "ProgressCallback",
    "document_title",
    "generate_novel",
    "spacing_from_settings",
]
