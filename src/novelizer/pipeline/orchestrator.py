# src/novelizer/pipeline/orchestrator.py

import logging
from collections.abc import Callable, Sequence
from time import monotonic

from novelizer.chunking.chapters import Chapter, segment_chapters
from novelizer.config import NovelSettings
from novelizer.errors import ConfigurationError
from novelizer.llms.base import LLMClient
from novelizer.llms.factory import create_llm_client
from novelizer.observability import names
from novelizer.observability.base import MetricsHook, NoOpMetricsHook
from novelizer.prompts.builder import build_chapter_prompt
from novelizer.prompts.prompt import Prompt
from novelizer.transcript.models import ParsedMessage, RawMessage
from novelizer.transcript.parser import parse_messages

from .models import Document, GeneratedChapter
from .spacing import ChapterSpacing

logger = logging.getLogger(__name__)

DEFAULT_CHARACTER_NAME = "Character"

# (stage, completed, total); stages are "parsing", "generating" and "done"
ProgressCallback = Callable[[str, int, int], None]


def document_title(character_name: str | None) -> str:
    name = (character_name or "").strip() or DEFAULT_CHARACTER_NAME
    return f"A Story with {name}"


def spacing_from_settings(settings: NovelSettings) -> ChapterSpacing:
    return ChapterSpacing(
        delay_seconds=settings.chapter_delay,
        after_last=settings.pause_after_last,
    )


class NovelGenerator:
    """Turns filtered messages into a Document, one chapter at a time.

    Chapters are generated strictly in order. The first provider failure
    aborts the run and the partial document is dropped.
    """

    def __init__(
        self,
        client: LLMClient,
        settings: NovelSettings,
        *,
        spacing: ChapterSpacing | None = None,
        prompt: Prompt | None = None,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self.client = client
        self.settings = settings
        self.spacing = spacing or spacing_from_settings(settings)
        self.prompt = prompt
        self.metrics_hook = metrics_hook

    async def generate(
        self,
        messages: Sequence[ParsedMessage],
        *,
        character_name: str | None = None,
        on_progress: ProgressCallback | None = None,
    ) -> Document:
        start = monotonic()
        chapters = segment_chapters(
            messages,
            chapter_length=self.settings.chapter_length,
            metrics_hook=self.metrics_hook,
        )
        document = Document(title=document_title(character_name))
        total = len(chapters)
        logger.info(
            "Generating '%s': %d messages in %d chapters",
            document.title,
            len(messages),
            total,
        )

        try:
            for completed, chapter in enumerate(chapters, start=1):
                document.chapters.append(await self.generate_chapter(chapter))
                if on_progress:
                    on_progress("generating", completed, total)
                await self.spacing.pause(completed, total)
        except Exception:
            self.metrics_hook.increment(names.PIPELINE_RUNS_FAILED)
            logger.error(
                "Novel generation failed after %d of %d chapters",
                len(document.chapters),
                total,
            )
            raise

        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(names.PIPELINE_RUN_DURATION, elapsed_ms)
        logger.info("Generated %d chapters in %.0fms", total, elapsed_ms)
        return document

    async def generate_chapter(self, chapter: Chapter) -> GeneratedChapter:
        start = monotonic()
        prompt = build_chapter_prompt(
            chapter,
            narrative_style=self.settings.narrative_style,
            prompt=self.prompt,
        )
        logger.debug("Generating %s from %d messages", chapter.title, len(chapter.messages))

        content = await self.client.generate(
            prompt,
            temperature=self.settings.temperature,
            max_tokens=self.settings.max_tokens,
        )

        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(names.PIPELINE_CHAPTER_DURATION, elapsed_ms)
        self.metrics_hook.increment(names.PIPELINE_CHAPTERS_GENERATED)
        return GeneratedChapter(
            title=chapter.title,
            content=content,
            source_message_count=len(chapter.messages),
        )


async def generate_novel(
    transcript: Sequence[RawMessage],
    settings: NovelSettings,
    *,
    character_name: str | None = None,
    client: LLMClient | None = None,
    spacing: ChapterSpacing | None = None,
    on_progress: ProgressCallback | None = None,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> Document:
    """Run the whole transcript -> Document pipeline.

    Args:
        transcript: Raw chat messages in order.
        settings: Run settings.
        character_name: Active character, used for the document title.
        client: Provider client. Built from settings when omitted.
        spacing: Pause policy between chapters. Built from settings when omitted.
        on_progress: Called as (stage, completed, total).
        metrics_hook: Optional metrics hook for observability.

    Raises:
        ConfigurationError: Missing API key, empty transcript, or nothing left
            after filtering. Raised before any request is sent.
        UnsupportedProviderError: Unknown provider in settings.
        ProviderError: A provider request failed; the run is aborted.
    """
    if not settings.api_key:
        raise ConfigurationError("Please set your API key in settings first!")
    if not transcript:
        raise ConfigurationError("No chat history found!")

    if on_progress:
        on_progress("parsing", 0, len(transcript))
    parsed = parse_messages(
        transcript,
        include_ooc=settings.include_ooc,
        include_actions=settings.include_actions,
        metrics_hook=metrics_hook,
    )
    if not parsed:
        raise ConfigurationError("No valid messages found to convert!")

    if client is None:
        client = create_llm_client(settings.to_llm_config(), metrics_hook)

    generator = NovelGenerator(
        client,
        settings,
        spacing=spacing,
        metrics_hook=metrics_hook,
    )
    document = await generator.generate(
        parsed, character_name=character_name, on_progress=on_progress
    )
    if on_progress:
        on_progress("done", len(document.chapters), len(document.chapters))
    return document
