"""Authorization options entity.

Options configure how a resource is located, loaded and authorized for a
single plug/dependency. They are an explicit struct: unknown keys and
contradictory filters are rejected when the options are built, not when a
request is processed.
"""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from canary.core.exceptions import InvalidConfigurationError

ONLY_EXCEPT_CONFLICT = "You can't use both :except and :only options"


class AuthorizationOptions(BaseModel):
    """Options for loading and authorizing a resource.

    Attributes:
        model: Model class of the resource (its simple name drives the assign key).
        id_name: Request parameter holding the resource id (default "id").
        id_field: Model attribute matched against the id (default "id").
        as_: Explicit assign key for the loaded resource (alias "as").
        only: Action or actions the check applies to.
        except_: Action or actions excluded from the check (alias "except").
        required: Whether a missing resource is a failure. Absent means True.
        persisted: Deprecated, use ``required``.
        non_id_actions: Deprecated extra actions that need no id.
        preload: Association name or names to eagerly load.
        current_user: Assign key holding the acting user.
        unauthorized_handler: Handler reference used when access is denied.
        not_found_handler: Handler reference used when the resource is missing.
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
        populate_by_name=True,
        arbitrary_types_allowed=True,
    )

    model: type[Any] | None = None
    id_name: str | None = None
    id_field: str = "id"
    as_: str | None = Field(default=None, alias="as")
    only: str | list[str] | None = None
    except_: str | list[str] | None = Field(default=None, alias="except")
    required: bool | None = None
    persisted: bool | None = None
    non_id_actions: list[str] | None = None
    preload: str | list[str] | None = None
    current_user: str = "current_user"
    unauthorized_handler: Any = None
    not_found_handler: Any = None

    @model_validator(mode="after")
    def check_only_except(self) -> "AuthorizationOptions":
        """Reject options that set both ``only`` and ``except``."""
        if self.has_only and self.has_except:
            raise ValueError(ONLY_EXCEPT_CONFLICT)
        return self

    @property
    def has_only(self) -> bool:
        return "only" in self.model_fields_set

    @property
    def has_except(self) -> bool:
        return "except_" in self.model_fields_set

    def is_set(self, name: str) -> bool:
        """Check whether an option was given explicitly, whatever its value."""
        return name in self.model_fields_set


def coerce_options(
    options: "AuthorizationOptions | Mapping[str, Any] | None",
) -> AuthorizationOptions:
    """Build ``AuthorizationOptions`` from a mapping, or pass an instance through.

    Args:
        options: An options instance, a mapping of option names, or None.

    Returns:
        AuthorizationOptions: The validated options.

    Raises:
        InvalidConfigurationError: If the options contain unknown keys,
            invalid values or both ``only`` and ``except``.
    """
    if isinstance(options, AuthorizationOptions):
        return options
    if options is None:
        return AuthorizationOptions()
    if not isinstance(options, Mapping):
        raise InvalidConfigurationError(
            f"Expected a mapping of authorization options, got: {options!r}"
        )
    try:
        return AuthorizationOptions.model_validate(dict(options))
    except ValidationError as e:
        messages = "; ".join(_format_error(error) for error in e.errors())
        raise InvalidConfigurationError(
            f"Invalid authorization options: {messages}"
        ) from e


def _format_error(error: Mapping[str, Any]) -> str:
    message = error["msg"].removeprefix("Value error, ")
    location = ".".join(str(part) for part in error.get("loc", ()))
    return f"{location}: {message}" if location else message
