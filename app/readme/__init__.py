"""README document package for status block rendering and splicing."""

from .document import (
    README_END_MARKER,
    README_FILENAME,
    README_START_MARKER,
    ReadmeEncodingError,
    ReadmeError,
    ReadmeMarkerError,
    ReadmeNotFoundError,
    readme_render_status_markdown,
    readme_resolve_path,
    readme_splice_status_block,
    readme_update_file,
)

__all__ = [
    "README_END_MARKER",
    "README_FILENAME",
    "README_START_MARKER",
    "ReadmeEncodingError",
    "ReadmeError",
    "ReadmeMarkerError",
    "ReadmeNotFoundError",
    "readme_render_status_markdown",
    "readme_resolve_path",
    "readme_splice_status_block",
    "readme_update_file",
]
