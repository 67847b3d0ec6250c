"""FastAPI integration."""

from canary.infrastructure.api.resource_guard import (
    ResourceGuard,
    build_context,
    extract_action,
    raise_if_halted,
)

__all__ = ["ResourceGuard", "build_context", "extract_action", "raise_if_halted"]
