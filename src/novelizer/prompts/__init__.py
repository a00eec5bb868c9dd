from .builder import (
    STYLE_LABELS,
    NarrativeStyle,
    build_chapter_prompt,
    default_chapter_prompt,
    format_transcript,
    style_label,
)
from .prompt import Prompt
from .prompts_library import PromptsLibrary

__all__ = [
    "NarrativeStyle",
    "Prompt",
    "PromptsLibrary",
    "STYLE_LABELS",
    "build_chapter_prompt",
    "default_chapter_prompt",
    "format_transcript",
    "style_label",
]
