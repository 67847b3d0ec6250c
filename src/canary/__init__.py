"""Canary - resource loading and authorization for FastAPI.

Loads the resource a request targets, checks whether the current user may
act on it, and stops the request with an error handler when not.
"""

__version__ = "0.1.0"

from canary.core.exceptions import CanaryError, InvalidConfigurationError
from canary.domain.entities import (
    AuthorizationContext,
    AuthorizationOptions,
    CallableHandler,
    NamedFunctionHandler,
)
from canary.domain.services import (
    ErrorHandlerResolver,
    ResourceAuthorizer,
    apply_error_handler,
    get_resource_id,
    get_resource_name,
    is_action_valid,
    is_persisted,
    is_required,
    non_id_actions,
    preload_if_needed,
    should_handle_not_found,
    validate_options,
)

__all__ = [
    "__version__",
    "AuthorizationContext",
    "AuthorizationOptions",
    "CallableHandler",
    "CanaryError",
    "ErrorHandlerResolver",
    "InvalidConfigurationError",
    "NamedFunctionHandler",
    "ResourceAuthorizer",
    "apply_error_handler",
    "get_resource_id",
    "get_resource_name",
    "is_action_valid",
    "is_persisted",
    "is_required",
    "non_id_actions",
    "preload_if_needed",
    "should_handle_not_found",
    "validate_options",
]
