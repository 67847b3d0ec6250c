"""Request-scoped carrier passed through the authorization flow."""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from starlette.requests import Request


@dataclass
class AuthorizationContext:
    """Context passed to the authorization flow and to error handlers.

    Attributes:
        action: Name of the operation being authorized (e.g. "show").
        params: Request parameters (path and query) keyed by name.
        assigns: Request-scoped values such as the loaded resource and the
            current user.
        request: The FastAPI/Starlette Request object, when there is one.
        halted: Whether a handler stopped the pipeline.
        status_code: HTTP status recorded by the halting handler.
        detail: Message recorded by the halting handler.
    """

    action: str
    params: dict[str, Any] = field(default_factory=dict)
    assigns: dict[str, Any] = field(default_factory=dict)
    request: Optional["Request"] = None
    halted: bool = False
    status_code: int | None = None
    detail: str | None = None

    def assign(self, key: str, value: Any) -> "AuthorizationContext":
        """Store a request-scoped value and return the context."""
        self.assigns[key] = value
        return self

    def halt(self, status_code: int, detail: str) -> "AuthorizationContext":
        """Stop the pipeline with the given status and message."""
        self.halted = True
        self.status_code = status_code
        self.detail = detail
        return self
