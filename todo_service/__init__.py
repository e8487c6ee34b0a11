"""Todo Service - a MongoDB-backed todo list API."""

__version__ = "1.0.0"
