"""SQLAlchemy implementation of the resource loader."""

from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from canary.core.exceptions import InvalidConfigurationError
from canary.core.logging import get_logger

logger = get_logger(__name__)


class SQLAlchemyResourceLoader:
    """Loads resources and their associations through an async session."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize the loader.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def get_by(self, model: type[Any], field: str, value: Any) -> Any | None:
        """Get a single record whose ``field`` equals ``value``.

        Args:
            model: Mapped model class.
            field: Name of the mapped attribute to match.
            value: Value to match, usually the id from the request params.

        Returns:
            The record if found, None otherwise.

        Raises:
            InvalidConfigurationError: If the model has no such attribute.
        """
        column = getattr(model, field, None)
        if column is None:
            raise InvalidConfigurationError(
                f"{model.__name__} has no attribute {field!r} to look resources up by"
            )
        result = await self.session.execute(select(model).where(column == value))
        return result.scalar_one_or_none()

    async def all(self, model: type[Any]) -> list[Any]:
        """Get every record of the model."""
        result = await self.session.execute(select(model))
        return list(result.scalars().all())

    async def preload(self, records: Any, associations: str | list[str]) -> Any:
        """Eagerly load the named relationships on a record or list of records.

        Returns:
            The same record or list, with the relationships loaded.
        """
        names = [associations] if isinstance(associations, str) else list(associations)
        items = records if isinstance(records, list) else [records]
        for item in items:
            await self.session.refresh(item, attribute_names=names)
        logger.debug("Associations preloaded", associations=names, count=len(items))
        return records
