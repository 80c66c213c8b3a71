"""QueryGuard — query-string validation for FastAPI routes."""

__version__ = "1.0.0"
