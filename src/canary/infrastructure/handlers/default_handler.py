"""Built-in error handlers.

Used when neither the options nor the settings name another handler.
"""

from fastapi import status

from canary.core.logging import get_logger
from canary.domain.entities.authorization_context import AuthorizationContext

logger = get_logger(__name__)

UNAUTHORIZED_DETAIL = "You are not authorized to access this resource."
NOT_FOUND_DETAIL = "Not Found"


class DefaultHandler:
    """Halts the context with a 403 or 404 response."""

    @staticmethod
    def unauthorized_handler(context: AuthorizationContext) -> AuthorizationContext:
        logger.info("Halting request: unauthorized", action=context.action)
        return context.halt(status.HTTP_403_FORBIDDEN, UNAUTHORIZED_DETAIL)

    @staticmethod
    def not_found_handler(context: AuthorizationContext) -> AuthorizationContext:
        logger.info("Halting request: resource not found", action=context.action)
        return context.halt(status.HTTP_404_NOT_FOUND, NOT_FOUND_DETAIL)
