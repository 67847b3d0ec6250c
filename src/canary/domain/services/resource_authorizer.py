"""Resource loading and authorization flow.

Runs the linear flow over an ``AuthorizationContext``:
extract id -> load resource -> check action -> check presence ->
authorize -> invoke the error handler if needed.
"""

import inspect
from typing import Any

from canary.core.exceptions import InvalidConfigurationError
from canary.core.logging import LoggingContext, get_logger
from canary.domain.entities.authorization_context import AuthorizationContext
from canary.domain.entities.authorization_options import AuthorizationOptions
from canary.domain.entities.collaborators import Ability, ResourceLoader
from canary.domain.services.error_handler_resolver import ErrorHandlerResolver
from canary.domain.services.option_resolver import (
    OptionsLike,
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

logger = get_logger(__name__)


async def _resolve(value: Any) -> Any:
    if inspect.isawaitable(value):
        return await value
    return value


class ResourceAuthorizer:
    """Loads resources into the context and checks the actor's ability.

    Args:
        ability: Decides ``can(actor, action, resource)``.
        resolver: Error handler resolver. When omitted, handlers fall back to
            ``Settings.error_handler``.
    """

    def __init__(
        self,
        ability: Ability,
        resolver: ErrorHandlerResolver | None = None,
    ) -> None:
        self.ability = ability
        self.resolver = resolver or ErrorHandlerResolver()

    async def load_resource(
        self,
        context: AuthorizationContext,
        loader: ResourceLoader,
        options: OptionsLike,
    ) -> AuthorizationContext:
        """Load the resource for the current action and assign it.

        Index actions on non-persisted resources load every record under the
        pluralized name. Non-id actions on optional resources assign None.
        Anything else is fetched by id. Fires the not-found handler when the
        resource is missing and must be present.
        """
        options = validate_options(options)
        action = context.action
        if not is_action_valid(action, options):
            return context

        model = options.model
        if model is None:
            raise InvalidConfigurationError("The :model option is required to load a resource")
        name = get_resource_name(action, options)

        with LoggingContext(action=action, resource_name=name):
            if action == "index" and not is_persisted(options):
                resource = await _resolve(loader.all(model))
            elif action in non_id_actions(options) and not is_required(options):
                resource = None
            else:
                resource = await self._fetch(context, loader, options)
            resource = await _resolve(preload_if_needed(resource, loader, options))

            logger.debug("Resource loaded", found=resource is not None)
            context.assign(name, resource)

            if should_handle_not_found(action, context.assigns, options):
                return self._apply(context, "not_found_handler", options)
            return context

    async def authorize_resource(
        self,
        context: AuthorizationContext,
        options: OptionsLike,
    ) -> AuthorizationContext:
        """Check the current user's ability on the assigned resource.

        The model class stands in for the resource when nothing was loaded.
        Sets the ``authorized`` assign and fires the unauthorized handler on
        denial.
        """
        options = validate_options(options)
        action = context.action
        if not is_action_valid(action, options):
            return context

        name = get_resource_name(action, options)

        with LoggingContext(action=action, resource_name=name):
            if should_handle_not_found(action, context.assigns, options):
                return self._apply(context, "not_found_handler", options)

            resource = context.assigns.get(name)
            if resource is None:
                resource = options.model
            actor = context.assigns.get(options.current_user)

            allowed = bool(await _resolve(self.ability.can(actor, action, resource)))
            context.assign("authorized", allowed)
            if not allowed:
                logger.warning("Authorization denied")
                return self._apply(context, "unauthorized_handler", options)
            return context

    async def load_and_authorize_resource(
        self,
        context: AuthorizationContext,
        loader: ResourceLoader,
        options: OptionsLike,
    ) -> AuthorizationContext:
        """Load the resource, then authorize it unless loading halted."""
        context = await self.load_resource(context, loader, options)
        if context.halted:
            return context
        return await self.authorize_resource(context, options)

    async def _fetch(
        self,
        context: AuthorizationContext,
        loader: ResourceLoader,
        options: AuthorizationOptions,
    ) -> Any:
        resource_id = get_resource_id(context, options)
        if resource_id is None:
            return None
        return await _resolve(loader.get_by(options.model, options.id_field, resource_id))

    def _apply(
        self,
        context: AuthorizationContext,
        handler_key: str,
        options: AuthorizationOptions,
    ) -> AuthorizationContext:
        return self.resolver.apply(context, handler_key, options)
