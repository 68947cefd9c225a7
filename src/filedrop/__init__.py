"""filedrop: authenticated file uploads with signed delete links."""

__version__ = "0.1.0"
