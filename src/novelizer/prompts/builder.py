# src/novelizer/prompts/builder.py

from functools import lru_cache
from typing import Literal

from novelizer.chunking.chapters import Chapter

from .prompt import Prompt
from .prompts_library import PromptsLibrary

NarrativeStyle = Literal["first_person", "third_person", "omniscient"]

CHAPTER_PROMPT_NAME = "novel_chapter"
CHAPTER_PROMPT_VERSION = "1.0"

STYLE_LABELS: dict[str, str] = {
    "first_person": "first person",
    "third_person": "third person",
    "omniscient": "omniscient",
}


@lru_cache(maxsize=1)
def default_chapter_prompt() -> Prompt:
    """The packaged chapter template. Loaded once per process."""
    return PromptsLibrary().get(CHAPTER_PROMPT_NAME, CHAPTER_PROMPT_VERSION)


def style_label(narrative_style: str) -> str:
    try:
        return STYLE_LABELS[narrative_style]
    except KeyError:
        raise ValueError(f"Unknown narrative style: {narrative_style}") from None


def format_transcript(chapter: Chapter) -> str:
    return "\n\n".join(f"{m.author}: {m.content}" for m in chapter.messages)


def build_chapter_prompt(
    chapter: Chapter,
    *,
    narrative_style: str,
    prompt: Prompt | None = None,
) -> str:
    """Render the prompt asking the model to rewrite one chapter as prose.

    Deterministic: the same chapter, style and template give the same string.
    """
    template = prompt or default_chapter_prompt()
    return template.render(
        narrative_style=style_label(narrative_style),
        chat_content=format_transcript(chapter),
    )
