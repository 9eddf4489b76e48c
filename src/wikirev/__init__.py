"""WikiRev - revisioned wiki page store."""

__version__ = "1.0.0"
