"""
Observability module.

Logging configuration and safe log helpers.
"""

from docrag.observability.logger import configure_logging

__all__ = ["configure_logging"]
