"""Helpers for building public file URLs."""

from __future__ import annotations

from urllib.parse import quote


def _join(base_url: str, *segments: str) -> str:
    base = base_url.rstrip("/")
    tail = "/".join(quote(segment, safe="") for segment in segments)
    return f"{base}/{tail}"


def build_file_url(base_url: str, name: str) -> str:
    """URL of the raw download endpoint."""
    return _join(base_url, "file", name)


def build_info_url(base_url: str, name: str) -> str:
    """URL of the HTML preview page."""
    return _join(base_url, name)


def build_delete_url(base_url: str, token: str, name: str) -> str:
    return _join(base_url, "delete", token, name)


__all__ = ["build_delete_url", "build_file_url", "build_info_url"]
