from collections.abc import Sequence
from dataclasses import dataclass
from time import monotonic

from novelizer.observability import names
from novelizer.observability.base import MetricsHook, NoOpMetricsHook
from novelizer.transcript.models import ParsedMessage


@dataclass(frozen=True)
class Chapter:
    title: str
    messages: tuple[ParsedMessage, ...]


def chapter_title(index: int) -> str:
    return f"Chapter {index}"


def segment_chapters(
    messages: Sequence[ParsedMessage],
    *,
    chapter_length: int,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> list[Chapter]:
    started = monotonic()
    if chapter_length <= 0:
        raise ValueError("chapter_length must be > 0")

    chapters = []
    for number, start in enumerate(range(0, len(messages), chapter_length), start=1):
        end = start + chapter_length
        chapters.append(
            Chapter(
                title=chapter_title(number),
                messages=tuple(messages[start:end]),
            )
        )

    elapsed_ms = 1000 * (monotonic() - started)
    metrics_hook.record_latency(names.SEGMENTATION_DURATION, elapsed_ms)
    metrics_hook.increment(names.SEGMENTATION_CHAPTERS_CREATED, len(chapters))
    return chapters
