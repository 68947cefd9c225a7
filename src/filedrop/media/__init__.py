"""Stored file handling: naming, storage and preview metadata."""
