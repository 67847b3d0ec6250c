"""Domain services for Canary.

Services hold the authorization decisions and the load/authorize flow.
They have no dependencies on infrastructure or external frameworks.
"""

from canary.domain.services.error_handler_resolver import (
    ErrorHandlerResolver,
    apply_error_handler,
    resolve_handler,
)
from canary.domain.services.option_resolver import (
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
from canary.domain.services.resource_authorizer import ResourceAuthorizer

__all__ = [
    "ErrorHandlerResolver",
    "ResourceAuthorizer",
    "apply_error_handler",
    "get_resource_id",
    "get_resource_name",
    "is_action_valid",
    "is_persisted",
    "is_required",
    "non_id_actions",
    "preload_if_needed",
    "resolve_handler",
    "should_handle_not_found",
    "validate_options",
]
