"""Token-aware text splitting service for embedding pipelines."""

__version__ = "1.0.0"
