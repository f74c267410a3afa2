"""Link Repository — SQLAlchemy implementation of the LinkRepository protocol.

Invariants:
    - One store round trip per method (list, lookup, insert or delete)
    - Every SQLAlchemyError leaves as StoreError with a generic message;
      the driver detail is only logged
    - Listings ordered by created_at descending
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from linkvault.core.errors import StoreError
from linkvault.models.link import Link

logger = logging.getLogger(__name__)

FETCH_FAILED = "Failed to fetch links"
FETCH_ONE_FAILED = "Failed to fetch link"
CREATE_FAILED = "Failed to create link"
DELETE_FAILED = "Failed to delete link"


@asynccontextmanager
async def _store_operation(
    db: AsyncSession, message: str, operation: str,
) -> AsyncIterator[None]:
    try:
        yield
    except SQLAlchemyError as e:
        await db.rollback()
        logger.error(
            f"Store {operation} failed: {e}",
            extra={"operation": operation},
            exc_info=True,
        )
        raise StoreError(message, operation) from e


class SqlLinkRepository:
    """Link persistence over an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def list_all(self) -> list[Link]:
        async with _store_operation(self._db, FETCH_FAILED, "list"):
            result = await self._db.execute(
                select(Link).order_by(Link.created_at.desc()),
            )
            return list(result.scalars().all())

    async def list_by_email(self, student_email: str) -> list[Link]:
        async with _store_operation(self._db, FETCH_FAILED, "list_by_email"):
            result = await self._db.execute(
                select(Link)
                .where(Link.student_email == student_email)
                .order_by(Link.created_at.desc()),
            )
            return list(result.scalars().all())

    async def create(
        self, *, title: str, url: str, description: str,
        student_email: str, owner_token: str,
    ) -> Link:
        link = Link(
            title=title, url=url, description=description,
            student_email=student_email, owner_token=owner_token,
        )
        async with _store_operation(self._db, CREATE_FAILED, "create"):
            self._db.add(link)
            await self._db.commit()
            await self._db.refresh(link)
        return link

    async def get(
        self, link_id: UUID, failure_message: str = FETCH_ONE_FAILED,
    ) -> Link | None:
        """Look up one link; callers pick the message a store failure reports."""
        async with _store_operation(self._db, failure_message, "get"):
            result = await self._db.execute(
                select(Link).where(Link.id == link_id),
            )
            return result.scalar_one_or_none()

    async def delete(self, link: Link) -> None:
        async with _store_operation(self._db, DELETE_FAILED, "delete"):
            await self._db.delete(link)
            await self._db.commit()
