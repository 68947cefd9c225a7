"""Upload credential checks."""
