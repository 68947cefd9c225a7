from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

import pytest

from filedrop.media.file_links import build_delete_url, build_file_url, build_info_url
from filedrop.media.file_preview import (
    build_file_preview,
    format_modified,
    human_readable_size,
    preview_kind,
)
from filedrop.media.media_models import StoredFile, guess_content_type

pytestmark = pytest.mark.unit


@pytest.mark.parametrize(
    ("size", "expected"),
    [
        (0, "0.00 B"),
        (1023, "1023.00 B"),
        (1024, "1.00 KB"),
        (1536, "1.50 KB"),
        (5 * 1024 * 1024, "5.00 MB"),
        (3 * 1024**4, "3.00 TB"),
        (2048 * 1024**4, "2048.00 TB"),
    ],
)
def test_human_readable_size(size: int, expected: str) -> None:
    assert human_readable_size(size) == expected


def test_format_modified() -> None:
    moment = datetime(2024, 3, 9, 7, 5, 1, tzinfo=timezone.utc)

    assert format_modified(moment) == "2024-03-09 07:05:01"
    assert format_modified(None) == "Unknown"


@pytest.mark.parametrize(
    ("filename", "content_type", "kind"),
    [
        ("a.png", "image/png", "image"),
        ("a.jpg", "image/jpeg", "image"),
        ("a.mp4", "video/mp4", "video"),
        ("a.txt", "text/plain", None),
        ("noext", "application/octet-stream", None),
    ],
)
def test_content_type_and_preview_kind(filename: str, content_type: str, kind: str | None) -> None:
    assert guess_content_type(filename) == content_type
    assert preview_kind(content_type) == kind


def test_build_file_preview() -> None:
    stored = StoredFile(
        name="AbC123xy.mp4",
        path=Path("/tmp/AbC123xy.mp4"),
        size_bytes=2048,
        modified_at=datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc),
    )

    preview = build_file_preview(stored, "https://files.test/file/AbC123xy.mp4")

    assert preview.kind == "video"
    assert preview.content_type == "video/mp4"
    assert preview.description == "Size: 2.00 KB · Last modified: 2024-01-02 03:04:05"
    assert (preview.player_width, preview.player_height) == (996, 626)


def test_link_builders_strip_and_quote() -> None:
    assert build_file_url("https://files.test/", "a b.png") == "https://files.test/file/a%20b.png"
    assert build_info_url("https://files.test", "AbC123xy") == "https://files.test/AbC123xy"
    assert (
        build_delete_url("https://files.test", "cafe", "AbC123xy.png")
        == "https://files.test/delete/cafe/AbC123xy.png"
    )
