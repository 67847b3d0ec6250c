"""Authorization option resolver.

Pure decision functions shared by the loading and authorization steps:
resource id extraction, action filtering, resource naming, not-found
decisions, preloading and option validation. None of them keep state.
"""

import re
import sys
from collections.abc import Mapping
from typing import Any

from canary.core.exceptions import InvalidConfigurationError
from canary.core.logging import get_logger
from canary.domain.entities.authorization_context import AuthorizationContext
from canary.domain.entities.authorization_options import (
    ONLY_EXCEPT_CONFLICT,
    AuthorizationOptions,
    coerce_options,
)
from canary.domain.entities.collaborators import ResourceLoader

logger = get_logger(__name__)

OptionsLike = AuthorizationOptions | Mapping[str, Any] | None

BASE_NON_ID_ACTIONS = frozenset({"index", "new", "create"})

_ACRONYM_BOUNDARY = re.compile(r"([A-Z]+)([A-Z][a-z])")
_WORD_BOUNDARY = re.compile(r"([a-z\d])([A-Z])")


def get_resource_id(
    params: Mapping[str, Any] | AuthorizationContext,
    options: OptionsLike,
) -> Any | None:
    """Get the resource id from the request params.

    Args:
        params: Request params, or a context whose params are used.
        options: Authorization options; ``id_name`` selects the param key.

    Returns:
        The value under ``id_name`` (default "id"), or None if missing.

    Example:
        get_resource_id({"user_id": "7"}, {"id_name": "user_id"})  # "7"
    """
    if isinstance(params, AuthorizationContext):
        params = params.params
    options = coerce_options(options)
    return params.get("id" if options.id_name is None else options.id_name)


def is_action_valid(action: str, options: OptionsLike) -> bool:
    """Check if an action is in scope of the ``only``/``except`` filters.

    Raises:
        InvalidConfigurationError: If both ``only`` and ``except`` are given.
    """
    options = coerce_options(options)
    if options.has_only and options.has_except:
        raise InvalidConfigurationError(ONLY_EXCEPT_CONFLICT)
    if options.has_except:
        return not _matches(action, options.except_)
    if options.has_only:
        return _matches(action, options.only)
    return True


def _matches(action: str, value: Any) -> bool:
    if isinstance(value, (list, tuple, set, frozenset)):
        return action in value
    return action == value


def is_required(options: OptionsLike) -> bool:
    """Whether a missing resource is a failure. Defaults to True."""
    options = coerce_options(options)
    if not options.is_set("required"):
        return True
    return bool(options.required)


def is_persisted(options: OptionsLike) -> bool:
    """Legacy check: True if ``persisted`` or ``required`` is truthy.

    Both default to False here, unlike ``is_required``.
    """
    options = coerce_options(options)
    return bool(options.persisted) or bool(options.required)


def get_resource_name(action: str, options: OptionsLike) -> str:
    """Get the assign key of the resource.

    ``as`` wins when given. Otherwise the model's simple name is converted
    to snake case and pluralized for the "index" action when the resource
    is not persisted.

    Example:
        get_resource_name("show", {"model": Post})   # "post"
        get_resource_name("index", {"model": Post})  # "posts"
        get_resource_name("index", {"model": Post, "as": "my_posts"})  # "my_posts"

    Raises:
        InvalidConfigurationError: If neither ``as`` nor ``model`` is given.
    """
    options = coerce_options(options)
    if options.as_ is not None:
        return options.as_
    if options.model is None:
        raise InvalidConfigurationError(
            "Either the :model or the :as option is required to name the resource"
        )

    name = underscore(options.model.__name__)
    if action == "index" and not is_persisted(options):
        name = f"{name}s"
    return sys.intern(name)


def underscore(name: str) -> str:
    """Convert a CamelCase identifier to snake_case (``HTTPRequest`` -> ``http_request``)."""
    name = _ACRONYM_BOUNDARY.sub(r"\1_\2", name)
    name = _WORD_BOUNDARY.sub(r"\1_\2", name)
    return name.replace("-", "_").lower()


def non_id_actions(options: OptionsLike) -> frozenset[str]:
    """Actions that proceed without a resource id, plus deprecated extras."""
    options = coerce_options(options)
    if options.non_id_actions:
        return BASE_NON_ID_ACTIONS | frozenset(options.non_id_actions)
    return BASE_NON_ID_ACTIONS


def should_handle_not_found(
    action: str,
    assigns: Mapping[str, Any],
    options: OptionsLike,
) -> bool:
    """Check if the not-found handler must fire for this action.

    True when the resource is missing from assigns and either the resource
    is required or the action normally carries an id. ``required`` takes
    precedence over the non-id exemption.
    """
    options = coerce_options(options)
    resource = assigns.get(get_resource_name(action, options))
    if resource is not None:
        return False
    return is_required(options) or action not in non_id_actions(options)


def preload_if_needed(records: Any, loader: ResourceLoader, options: OptionsLike) -> Any:
    """Preload associations on the loaded record(s) when ``preload`` is set.

    Returns None for None and the records untouched when nothing is to be
    preloaded. Otherwise returns whatever ``loader.preload`` returns, which
    is an awaitable for async loaders.
    """
    if records is None:
        return None
    options = coerce_options(options)
    if options.preload is None:
        return records
    return loader.preload(records, options.preload)


def validate_options(options: OptionsLike) -> AuthorizationOptions:
    """Validate options and warn about deprecated keys.

    The options are returned unchanged; warnings never abort processing.
    """
    options = coerce_options(options)
    if options.is_set("persisted"):
        logger.warning(
            "The `persisted` option is deprecated and will be removed in a future release. "
            "Use `required` instead.",
            option="persisted",
        )
    if options.is_set("non_id_actions"):
        logger.warning(
            "The `non_id_actions` option is deprecated and will be removed in a future release. "
            "Use a separate authorize_resource step for those actions and `except` "
            "to exclude them here.",
            option="non_id_actions",
        )
    return options
