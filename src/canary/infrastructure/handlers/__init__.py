"""Built-in error handlers."""

from canary.infrastructure.handlers.default_handler import DefaultHandler

__all__ = ["DefaultHandler"]
