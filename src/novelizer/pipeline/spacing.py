# src/novelizer/pipeline/spacing.py

import asyncio
import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChapterSpacing:
    """Pause inserted between provider calls.

    `after_last` also pauses once the final chapter is done, which only
    delays the result.
    """

    delay_seconds: float = 1.0
    after_last: bool = False

    def __post_init__(self) -> None:
        if self.delay_seconds < 0:
            raise ValueError("delay_seconds must be >= 0")

    def should_pause(self, completed: int, total: int) -> bool:
        if self.delay_seconds == 0:
            return False
        return completed < total or self.after_last

    async def pause(self, completed: int, total: int) -> None:
        if not self.should_pause(completed, total):
            return
        logger.debug(
            "Pausing %.2fs after chapter %d/%d", self.delay_seconds, completed, total
        )
        await asyncio.sleep(self.delay_seconds)


NO_SPACING = ChapterSpacing(delay_seconds=0.0)
