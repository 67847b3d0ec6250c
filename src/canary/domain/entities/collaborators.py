"""Protocols for the collaborators the authorization flow calls into."""

from typing import Any, Awaitable, Protocol, runtime_checkable


@runtime_checkable
class ResourceLoader(Protocol):
    """Persistence layer used to fetch and preload resources.

    Implementations may be synchronous or return awaitables.
    """

    def get_by(self, model: type[Any], field: str, value: Any) -> Any | Awaitable[Any]:
        ...

    def all(self, model: type[Any]) -> list[Any] | Awaitable[list[Any]]:
        ...

    def preload(self, records: Any, associations: str | list[str]) -> Any | Awaitable[Any]:
        ...


@runtime_checkable
class Ability(Protocol):
    """Decides whether an actor may perform an action on a resource.

    ``resource`` is either a loaded record, a list of records, or the model
    class itself when no record applies (e.g. "new" or "create").
    """

    def can(self, actor: Any, action: str, resource: Any) -> bool | Awaitable[bool]:
        ...
