"""Authenticated upload and signed delete endpoints."""
