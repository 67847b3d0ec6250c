"""Error handler resolution and invocation.

Handlers are looked up in the options first, then in the default handler
injected into the resolver, then in ``Settings.error_handler``.
"""

import importlib
import inspect
from typing import Any

from canary.core.config import get_settings
from canary.core.exceptions import InvalidConfigurationError
from canary.core.logging import get_logger
from canary.domain.entities.authorization_context import AuthorizationContext
from canary.domain.entities.authorization_options import coerce_options
from canary.domain.entities.error_handler import (
    CallableHandler,
    Handler,
    NamedFunctionHandler,
)
from canary.domain.services.option_resolver import OptionsLike

logger = get_logger(__name__)

HANDLER_KEYS = ("unauthorized_handler", "not_found_handler")


def import_reference(path: str) -> Any:
    """Import ``"package.module:attribute"`` and return the attribute.

    Raises:
        InvalidConfigurationError: If the path is malformed or cannot be imported.
    """
    module_name, _, attribute = path.partition(":")
    if not module_name or not attribute:
        raise InvalidConfigurationError(
            f"Invalid error handler import path, expected 'package.module:attribute', got: {path!r}"
        )
    try:
        target: Any = importlib.import_module(module_name)
    except ImportError as e:
        raise InvalidConfigurationError(
            f"Invalid error handler, cannot import module of {path!r}"
        ) from e
    for part in attribute.split("."):
        try:
            target = getattr(target, part)
        except AttributeError as e:
            raise InvalidConfigurationError(
                f"Invalid error handler, {path!r} does not exist"
            ) from e
    return target


def resolve_handler(reference: Any, handler_key: str) -> Handler:
    """Turn a handler reference into a ``Handler``.

    Accepted references:
        - ``(target, "function_name")``
        - a module or class exposing a function named ``handler_key``
        - any other object exposing a callable ``handler_key`` attribute
        - a plain callable
        - an import string resolving to one of the above

    Raises:
        InvalidConfigurationError: If the reference fits none of these shapes.
            The message includes the offending value.
    """
    if isinstance(reference, str):
        reference = import_reference(reference)

    if isinstance(reference, tuple):
        if len(reference) == 2 and isinstance(reference[1], str):
            target, function_name = reference
            if callable(getattr(target, function_name, None)):
                return NamedFunctionHandler(target, function_name)
        raise _invalid_handler(reference)

    if callable(getattr(reference, handler_key, None)):
        return NamedFunctionHandler(reference, handler_key)

    if callable(reference) and not inspect.ismodule(reference) and not inspect.isclass(reference):
        return CallableHandler(reference)

    raise _invalid_handler(reference)


def _invalid_handler(reference: Any) -> InvalidConfigurationError:
    return InvalidConfigurationError(
        "Invalid error handler, expected a module or a tuple with a module and a function, "
        f"got: {reference!r}"
    )


class ErrorHandlerResolver:
    """Resolves and invokes error handlers for failed lookups and denials.

    Args:
        default_handler: Handler reference used when the options name none.
            Falls back to ``Settings.error_handler``, read on every lookup.

    Example:
        resolver = ErrorHandlerResolver(default_handler=MyHandlers)
        context = resolver.apply(context, "not_found_handler", options)
    """

    def __init__(self, default_handler: Any = None) -> None:
        self.default_handler = default_handler

    def get_handler(self, handler_key: str, options: OptionsLike) -> Handler:
        options = coerce_options(options)
        reference = getattr(options, handler_key, None) if handler_key in HANDLER_KEYS else None
        # false and None both mean "not configured"
        if not reference:
            reference = self.default_handler or get_settings().error_handler
        return resolve_handler(reference, handler_key)

    def apply(
        self,
        context: AuthorizationContext,
        handler_key: str,
        options: OptionsLike,
    ) -> Any:
        """Invoke the resolved handler with the context and return its result."""
        handler = self.get_handler(handler_key, options)
        logger.debug(
            "Applying error handler",
            handler_key=handler_key,
            action=context.action,
        )
        return handler(context)


def apply_error_handler(
    context: AuthorizationContext,
    handler_key: str,
    options: OptionsLike,
    default_handler: Any = None,
) -> Any:
    """Apply the error handler to the context.

    Uses ``Settings.error_handler`` as the default when none is passed.
    """
    return ErrorHandlerResolver(default_handler).apply(context, handler_key, options)
