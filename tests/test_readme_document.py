"""Tests for README status block rendering and marker splicing."""

from __future__ import annotations

from pathlib import Path

import pytest

from app.domain import StatusPayload
from app.readme import (
    README_END_MARKER,
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


def test_readme_render_status_markdown_without_uptime() -> None:
    """Render heading and three fields when uptime is absent."""

    markdown = readme_render_status_markdown(StatusPayload(status="ok", service="svc", timestamp="t0"))

    assert markdown == "## API Status\n\n- Status: ok\n- Service: svc\n- Timestamp: t0"


def test_readme_render_status_markdown_with_uptime() -> None:
    """Append an uptime line when the payload carries uptime."""

    markdown = readme_render_status_markdown(StatusPayload(status="ok", service="svc", timestamp="t0", uptime=42))

    assert markdown.endswith("- Timestamp: t0\n- Uptime: 42 seconds")


def test_readme_splice_replaces_only_region_between_markers() -> None:
    """Replace the marked region and keep surrounding text byte-identical.

    Returns:
        None: Assertions validate splice output.

    Raises:
        AssertionError: Raised when content outside markers changes.
    """

    content = f"# Title\r\nA{README_START_MARKER}X{README_END_MARKER}B\n\ntrailer"

    updated = readme_splice_status_block(content, "Y")

    assert updated == f"# Title\r\nA{README_START_MARKER}\nY\n{README_END_MARKER}B\n\ntrailer"


def test_readme_splice_is_idempotent() -> None:
    """Produce the same document when applied twice with the same block."""

    content = f"intro\n{README_START_MARKER}\nold\n{README_END_MARKER}\nfooter\n"

    once = readme_splice_status_block(content, "## API Status\n\n- Status: ok")
    twice = readme_splice_status_block(once, "## API Status\n\n- Status: ok")

    assert once == twice


@pytest.mark.parametrize(
    "content",
    [
        "no markers at all",
        f"only start {README_START_MARKER}",
        f"only end {README_END_MARKER}",
    ],
)
def test_readme_splice_rejects_missing_markers(content: str) -> None:
    """Raise ReadmeMarkerError when either marker is absent."""

    with pytest.raises(ReadmeMarkerError, match="must contain API_STATUS_START and API_STATUS_END"):
        readme_splice_status_block(content, "Y")


def test_readme_splice_rejects_end_marker_before_start_marker() -> None:
    """Treat reversed markers as a malformed document."""

    content = f"{README_END_MARKER} middle {README_START_MARKER}"

    with pytest.raises(ReadmeMarkerError, match="malformed"):
        readme_splice_status_block(content, "Y")


def test_readme_resolve_path_requires_existing_readme(tmp_path: Path) -> None:
    """Raise ReadmeNotFoundError when the workspace has no README."""

    with pytest.raises(ReadmeNotFoundError, match="README.md not found in repository root"):
        readme_resolve_path(tmp_path)

    (tmp_path / "README.md").write_text("x", encoding="utf-8")
    assert readme_resolve_path(str(tmp_path)) == tmp_path / "README.md"


def test_readme_update_file_rewrites_in_place(tmp_path: Path) -> None:
    """Overwrite the README with the spliced content.

    Args:
        tmp_path: Pytest temporary directory fixture.

    Returns:
        None: Assertions validate persisted content.

    Raises:
        AssertionError: Raised when persisted content is incorrect.
    """

    readme_path = tmp_path / "README.md"
    readme_path.write_bytes(f"top\r\n{README_START_MARKER}{README_END_MARKER}\r\nbottom".encode("utf-8"))

    readme_update_file(readme_path, "BLOCK")

    assert readme_path.read_bytes() == f"top\r\n{README_START_MARKER}\nBLOCK\n{README_END_MARKER}\r\nbottom".encode(
        "utf-8"
    )


def test_readme_update_file_leaves_file_untouched_when_markers_missing(tmp_path: Path) -> None:
    """Do not write the README when splicing fails."""

    readme_path = tmp_path / "README.md"
    original_bytes = b"# Project\n\nno markers here\n"
    readme_path.write_bytes(original_bytes)

    with pytest.raises(ReadmeMarkerError):
        readme_update_file(readme_path, "BLOCK")

    assert readme_path.read_bytes() == original_bytes


def test_readme_update_file_rejects_non_utf8_content(tmp_path: Path) -> None:
    """Raise a README error for undecodable bytes and leave the file untouched."""

    readme_path = tmp_path / "README.md"
    original_bytes = b"\xff\xfe" + f"{README_START_MARKER}\n{README_END_MARKER}\n".encode("utf-8")
    readme_path.write_bytes(original_bytes)

    with pytest.raises(ReadmeEncodingError, match="README.md is not valid UTF-8") as error_info:
        readme_update_file(readme_path, "BLOCK")

    assert isinstance(error_info.value, ReadmeError)
    assert readme_path.read_bytes() == original_bytes
