"""Domain entities for Canary.

Entities are plain data structures describing a single authorization check.
They have no dependencies on infrastructure or external frameworks.
"""

from canary.domain.entities.authorization_context import AuthorizationContext
from canary.domain.entities.authorization_options import (
    AuthorizationOptions,
    coerce_options,
)
from canary.domain.entities.collaborators import Ability, ResourceLoader
from canary.domain.entities.error_handler import (
    CallableHandler,
    Handler,
    NamedFunctionHandler,
)

__all__ = [
    "Ability",
    "AuthorizationContext",
    "AuthorizationOptions",
    "CallableHandler",
    "Handler",
    "NamedFunctionHandler",
    "ResourceLoader",
    "coerce_options",
]
