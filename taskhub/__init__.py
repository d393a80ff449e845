"""Task storage in SQLite, a task service layer and a request handler."""

__version__ = "0.1.0"
__all__ = ["database", "handler", "models", "repository", "service"]