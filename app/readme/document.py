"""README status block rendering and marker-delimited splicing."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Final

from app.domain import StatusPayload

README_FILENAME: Final[str] = "README.md"
README_START_MARKER: Final[str] = "<!-- API_STATUS_START -->"
README_END_MARKER: Final[str] = "<!-- API_STATUS_END -->"

logger = logging.getLogger(__name__)


class ReadmeError(Exception):
    """Base exception for README document failures."""


class ReadmeNotFoundError(ReadmeError, FileNotFoundError):
    """README file is missing from the workspace root."""


class ReadmeMarkerError(ReadmeError, ValueError):
    """README markers are missing or out of order."""


class ReadmeEncodingError(ReadmeError, ValueError):
    """README content cannot be decoded as UTF-8."""


def readme_render_status_markdown(payload: StatusPayload) -> str:
    """Render the Markdown status block for a validated payload.

    Args:
        payload: Validated status payload.

    Returns:
        str: Markdown block without leading or trailing newline.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    lines = [
        "## API Status",
        "",
        f"- Status: {payload.status}",
        f"- Service: {payload.service}",
        f"- Timestamp: {payload.timestamp}",
    ]
    if payload.uptime is not None:
        lines.append(f"- Uptime: {payload.uptime} seconds")
    return "\n".join(lines)


def readme_splice_status_block(
    content: str,
    markdown: str,
    start_marker: str = README_START_MARKER,
    end_marker: str = README_END_MARKER,
) -> str:
    """Replace the region between the markers with `markdown`.

    Everything up to and including the start marker, and everything from the
    end marker onward, is preserved byte for byte. The new region is the
    Markdown surrounded by single newlines.

    Args:
        content: Current document text.
        markdown: Replacement block.
        start_marker: Literal opening marker.
        end_marker: Literal closing marker.

    Returns:
        str: Updated document text.

    Raises:
        ReadmeMarkerError: Raised when a marker is missing or the end marker
            precedes the start marker.
    """

    start_index = content.find(start_marker)
    end_index = content.find(end_marker)
    if start_index == -1 or end_index == -1:
        raise ReadmeMarkerError("README.md must contain API_STATUS_START and API_STATUS_END markers")

    region_start = start_index + len(start_marker)
    if end_index < region_start:
        raise ReadmeMarkerError("README.md is malformed: API_STATUS_END marker appears before API_STATUS_START")

    return f"{content[:region_start]}\n{markdown}\n{content[end_index:]}"


def readme_resolve_path(workspace: str | Path) -> Path:
    """Return the README path under a workspace root, requiring it to exist.

    Args:
        workspace: Repository checkout root.

    Returns:
        Path: Existing README file path.

    Raises:
        ReadmeNotFoundError: Raised when the README file does not exist.
    """

    readme_path = Path(workspace) / README_FILENAME
    if not readme_path.is_file():
        raise ReadmeNotFoundError(f"{README_FILENAME} not found in repository root")
    return readme_path


def readme_update_file(readme_path: Path, markdown: str) -> str:
    """Splice `markdown` into the README file and overwrite it in place.

    The file is written only after splicing succeeds.

    Args:
        readme_path: README file path.
        markdown: Replacement block.

    Returns:
        str: Updated document text as written.

    Raises:
        ReadmeEncodingError: Raised when the file is not valid UTF-8.
        ReadmeMarkerError: Raised when markers are missing or out of order.
        OSError: Raised when the file cannot be read or written.
    """

    # newline="" keeps the document's own line endings untouched
    try:
        with readme_path.open("r", encoding="utf-8", newline="") as readme_file:
            current_content = readme_file.read()
    except UnicodeDecodeError as error:
        raise ReadmeEncodingError(f"{readme_path.name} is not valid UTF-8: {error}") from error
    updated_content = readme_splice_status_block(current_content, markdown)
    with readme_path.open("w", encoding="utf-8", newline="") as readme_file:
        readme_file.write(updated_content)
    logger.info("%s updated successfully", readme_path.name)
    return updated_content
