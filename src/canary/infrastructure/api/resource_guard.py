"""FastAPI dependencies that load and authorize resources.

Example:
    guard = ResourceGuard(ability=PostAbility(), loader_dependency=get_loader)

    @app.get("/posts/{id}")
    async def show_post(
        context: AuthorizationContext = Depends(guard.load_and_authorize_resource(model=Post)),
    ):
        return context.assigns["post"]
"""

from typing import Any, Awaitable, Callable

from fastapi import Depends, HTTPException, Request

from canary.core.exceptions import InvalidConfigurationError
from canary.core.logging import get_logger
from canary.domain.entities.authorization_context import AuthorizationContext
from canary.domain.entities.authorization_options import AuthorizationOptions, coerce_options
from canary.domain.entities.collaborators import Ability, ResourceLoader
from canary.domain.services.error_handler_resolver import ErrorHandlerResolver
from canary.domain.services.resource_authorizer import ResourceAuthorizer

logger = get_logger(__name__)

CONTEXT_STATE_KEY = "authorization_contexts"


def extract_action(method: str, path_params: dict[str, Any], id_name: str = "id") -> str:
    """Derive the action name from the HTTP method.

    Args:
        method: HTTP method (GET, POST, PUT, PATCH, DELETE).
        path_params: Path parameters of the matched route.
        id_name: Path parameter carrying the resource id.

    Returns:
        Action name (index, show, create, update, delete).
    """
    method = method.upper()
    has_id = id_name in path_params
    if method == "POST":
        return "create"
    elif method in ("PUT", "PATCH"):
        return "update"
    elif method == "DELETE":
        return "delete"
    else:
        return "show" if has_id else "index"


def build_context(request: Request, action: str | None, options: AuthorizationOptions) -> AuthorizationContext:
    """Create the context for a request and action, or reuse the stored one.

    Contexts are kept per action on ``request.state``, so chained
    dependencies for the same action share loaded resources while a
    dependency for another action gets its own context. Params are the
    query params overlaid by the path params. The actor is read from
    ``request.state.<current_user>``.
    """
    if action is None:
        id_name = "id" if options.id_name is None else options.id_name
        action = extract_action(request.method, request.path_params, id_name)

    contexts = getattr(request.state, CONTEXT_STATE_KEY, None)
    if contexts is None:
        contexts = {}
        setattr(request.state, CONTEXT_STATE_KEY, contexts)

    context = contexts.get(action)
    if context is None:
        params: dict[str, Any] = dict(request.query_params)
        params.update(request.path_params)
        context = AuthorizationContext(action=action, params=params, request=request)
        contexts[action] = context

    if options.current_user not in context.assigns:
        context.assign(options.current_user, getattr(request.state, options.current_user, None))
    return context


def raise_if_halted(context: AuthorizationContext) -> AuthorizationContext:
    """Turn a halted context into an HTTPException."""
    if context.halted:
        logger.debug(
            "Authorization flow halted",
            action=context.action,
            status_code=context.status_code,
        )
        raise HTTPException(
            status_code=context.status_code or 403,
            detail=context.detail,
        )
    return context


class ResourceGuard:
    """Factory of FastAPI dependencies running the authorization flow.

    Args:
        ability: Decides ``can(actor, action, resource)``.
        loader_dependency: FastAPI dependency providing a ``ResourceLoader``.
            Required for the loading dependencies.
        resolver: Error handler resolver. Defaults to one falling back to
            ``Settings.error_handler``.
    """

    def __init__(
        self,
        ability: Ability,
        loader_dependency: Callable[..., Any] | None = None,
        resolver: ErrorHandlerResolver | None = None,
    ) -> None:
        self.loader_dependency = loader_dependency
        self.authorizer = ResourceAuthorizer(ability, resolver)

    def load_resource(self, action: str | None = None, **options: Any) -> Callable[..., Awaitable[AuthorizationContext]]:
        """Dependency that loads the resource into the context assigns."""
        return self._loading_dependency(self.authorizer.load_resource, action, options)

    def load_and_authorize_resource(
        self, action: str | None = None, **options: Any
    ) -> Callable[..., Awaitable[AuthorizationContext]]:
        """Dependency that loads the resource and then authorizes it."""
        return self._loading_dependency(self.authorizer.load_and_authorize_resource, action, options)

    def authorize_resource(self, action: str | None = None, **options: Any) -> Callable[..., Awaitable[AuthorizationContext]]:
        """Dependency that authorizes the resource already in the assigns."""
        opts = self._prepare(options)
        authorizer = self.authorizer

        async def dependency(request: Request) -> AuthorizationContext:
            context = build_context(request, action, opts)
            context = await authorizer.authorize_resource(context, opts)
            return raise_if_halted(context)

        return dependency

    def _loading_dependency(
        self,
        step: Callable[[AuthorizationContext, ResourceLoader, AuthorizationOptions], Awaitable[AuthorizationContext]],
        action: str | None,
        options: dict[str, Any],
    ) -> Callable[..., Awaitable[AuthorizationContext]]:
        if self.loader_dependency is None:
            raise InvalidConfigurationError("ResourceGuard needs a loader_dependency to load resources")
        opts = self._prepare(options)

        async def dependency(
            request: Request,
            loader: Any = Depends(self.loader_dependency),
        ) -> AuthorizationContext:
            context = build_context(request, action, opts)
            context = await step(context, loader, opts)
            return raise_if_halted(context)

        return dependency

    @staticmethod
    def _prepare(options: dict[str, Any]) -> AuthorizationOptions:
        # Invalid options fail at route definition, not on the first request
        return coerce_options(options)
