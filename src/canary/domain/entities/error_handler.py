"""Error handler references.

A handler is any unary callable over an ``AuthorizationContext``. Handler
references in options come in two shapes, each mapped to one implementation:

- ``NamedFunctionHandler``: a target (module, class or object) plus the name
  of the function to call on it.
- ``CallableHandler``: a plain callable used as is.
"""

from dataclasses import dataclass
from typing import Any, Callable, Protocol, runtime_checkable

from canary.domain.entities.authorization_context import AuthorizationContext


@runtime_checkable
class Handler(Protocol):
    """Produces the failure response for an authorization context."""

    def __call__(self, context: AuthorizationContext) -> Any:
        ...


@dataclass(frozen=True)
class NamedFunctionHandler:
    """Calls ``target.<function_name>(context)``."""

    target: Any
    function_name: str

    def __call__(self, context: AuthorizationContext) -> Any:
        return getattr(self.target, self.function_name)(context)


@dataclass(frozen=True)
class CallableHandler:
    """Calls a callable directly."""

    func: Callable[[AuthorizationContext], Any]

    def __call__(self, context: AuthorizationContext) -> Any:
        return self.func(context)
