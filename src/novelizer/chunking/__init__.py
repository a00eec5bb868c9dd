from .chapters import Chapter, chapter_title, segment_chapters

__all__ = [
    "Chapter",
    "chapter_title",
    "segment_chapters",
]
