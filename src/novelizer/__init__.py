# Chapters
from .chunking import Chapter, segment_chapters

# Settings
from .config import NovelSettings, SettingsStore

# Errors
from .errors import (
    ConfigurationError,
    NovelizerError,
    ProviderError,
    UnsupportedProviderError,
)

# Export
from .export import export_document, export_filename, write_export

# LLMs
from .llms import LLMClient, LLMConfig, create_llm_client

# Observability
from .observability import MetricsHook, NoOpMetricsHook

# Pipeline
from .pipeline import (
    ChapterSpacing,
    Document,
    GeneratedChapter,
    NovelGenerator,
    generate_novel,
)

# Prompts
from .prompts import Prompt, PromptsLibrary, build_chapter_prompt

# Transcript
from .transcript import (
    ChatLog,
    MessageKind,
    ParsedMessage,
    RawMessage,
    load_chat_log,
    parse_messages,
)

__all__ = [
    # Chapters
    "Chapter",
    "segment_chapters",
    # Settings
    "NovelSettings",
    "SettingsStore",
    # Errors
    "ConfigurationError",
    "NovelizerError",
    "ProviderError",
    "UnsupportedProviderError",
    # Export
    "export_document",
    "export_filename",
    "write_export",
    # LLMs
    "LLMClient",
    "LLMConfig",
    "create_llm_client",
    # Observability
    "MetricsHook",
    "NoOpMetricsHook",
    # Pipeline
    "ChapterSpacing",
    "Document",
    "GeneratedChapter",
    "NovelGenerator",
    "generate_novel",
    # Prompts
    "Prompt",
    "PromptsLibrary",
    "build_chapter_prompt",
    # Transcript
    "ChatLog",
    "MessageKind",
    "ParsedMessage",
    "RawMessage",
    "load_chat_log",
    "parse_messages",
]
