"""Persistence adapters."""

from canary.infrastructure.persistence.resource_loader import SQLAlchemyResourceLoader

__all__ = ["SQLAlchemyResourceLoader"]
