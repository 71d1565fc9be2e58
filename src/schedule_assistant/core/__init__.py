"""Filesystem locations shared by the store, logging and settings."""

from .config import APP_NAME, CACHE_FILE, DATA_DIR, EXPORT_DIR, LOG_DIR

__all__ = ["APP_NAME", "CACHE_FILE", "DATA_DIR", "EXPORT_DIR", "LOG_DIR"]
