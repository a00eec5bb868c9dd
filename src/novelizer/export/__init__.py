from .exporter import (
    export_document,
    export_extension,
    export_filename,
    export_html,
    export_markdown,
    export_media_type,
    export_plain,
    write_export,
)

__all__ = [
    "export_document",
    "export_extension",
    "export_filename",
    "export_html",
    "export_markdown",
    "export_media_type",
    "export_plain",
    "write_export",
]
