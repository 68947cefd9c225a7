"""Unauthenticated routes serving stored files."""
