# src/novelizer/export/exporter.py

import logging
import re
from pathlib import Path

from novelizer.errors import ConfigurationError
from novelizer.pipeline.models import Document

logger = logging.getLogger(__name__)

HTML_STYLE = (
    "body{font-family:serif;line-height:1.6;max-width:800px;margin:0 auto;"
    "padding:20px;}h1{text-align:center;}h2{border-bottom:1px solid #ccc;"
    "padding-bottom:10px;}.chapter{margin-bottom:2em;}"
)

FILE_EXTENSIONS = {"markdown": "md", "html": "html"}
MEDIA_TYPES = {"html": "text/html"}
UNSAFE_FILENAME_CHARS = re.compile(r"[^a-z0-9]", re.IGNORECASE)


def export_markdown(document: Document) -> str:
    parts = [f"# {document.title}\n\n"]
    for chapter in document.chapters:
        parts.append(f"## {chapter.title}\n\n")
        parts.append(f"{chapter.content}\n\n---\n\n")
    return "".join(parts)


def export_html(document: Document) -> str:
    """Standalone HTML page. Each newline in a chapter starts a new paragraph.

    Titles and content are inserted as-is, so model output may carry markup.
    """
    parts = [
        "<!DOCTYPE html><html><head>",
        f"<title>{document.title}</title>",
        f"<style>{HTML_STYLE}</style>",
        f"</head><body><h1>{document.title}</h1>",
    ]
    for chapter in document.chapters:
        paragraphs = chapter.content.replace("\n", "</p><p>")
        parts.append(
            f'<div class="chapter"><h2>{chapter.title}</h2><p>{paragraphs}</p></div>'
        )
    parts.append("</body></html>")
    return "".join(parts)


def export_plain(document: Document) -> str:
    parts = [f"{document.title}\n{'=' * len(document.title)}\n\n"]
    for chapter in document.chapters:
        parts.append(f"{chapter.title}\n{'-' * len(chapter.title)}\n\n")
        parts.append(f"{chapter.content}\n\n\n")
    return "".join(parts)


def export_document(document: Document, output_format: str) -> str:
    """Render a document. Unknown formats fall back to plain text."""
    if output_format == "markdown":
        return export_markdown(document)
    if output_format == "html":
        return export_html(document)
    if output_format != "plain":
        logger.warning("Unknown output format %r, exporting plain text", output_format)
    return export_plain(document)


def export_extension(output_format: str) -> str:
    return FILE_EXTENSIONS.get(output_format, "txt")


def export_media_type(output_format: str) -> str:
    return MEDIA_TYPES.get(output_format, "text/plain")


def export_filename(document: Document, output_format: str) -> str:
    stem = UNSAFE_FILENAME_CHARS.sub("_", document.title)
    return f"{stem}.{export_extension(output_format)}"


def write_export(
    document: Document, output_format: str, directory: str | Path
) -> Path:
    """Write the rendered document into `directory` and return its path."""
    path = Path(directory) / export_filename(document, output_format)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(export_document(document, output_format), encoding="utf-8")
    except OSError as exc:
        raise ConfigurationError(f"Cannot write export to '{path}': {exc}") from exc
    logger.info(
        "Exported %d chapters to %s (%s)",
        len(document.chapters),
        path,
        export_media_type(output_format),
    )
    return path
