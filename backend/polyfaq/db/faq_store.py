"""Document store adapter for the durable FAQ table.

The store is the system of record. Each insert commits its own transaction,
so a record is either fully persisted with all locale maps or not at all.
"""

from collections.abc import Sequence

import structlog
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from polyfaq.core.exceptions import PersistenceError
from polyfaq.models.faq import FAQ

logger = structlog.get_logger(__name__)


class FAQStore:
    """CRUD over the ``faqs`` table using one request-scoped session."""

    def __init__(self, db: AsyncSession) -> None:
        self._db = db

    async def find_all(self) -> Sequence[FAQ]:
        """All FAQs, oldest first."""
        try:
            result = await self._db.execute(
                select(FAQ).order_by(FAQ.created_at.asc(), FAQ.id.asc())
            )
            faqs = result.scalars().all()
        except SQLAlchemyError as e:
            logger.error("faq_find_all_failed", error=str(e))
            raise PersistenceError(f"FAQ query failed: {e}") from e

        logger.debug("faq_find_all_ok", count=len(faqs))
        return faqs

    async def insert(self, faq: FAQ) -> FAQ:
        """Persist ``faq`` and return it with identity and timestamps assigned."""
        try:
            self._db.add(faq)
            await self._db.commit()
        except SQLAlchemyError as e:
            await self._db.rollback()
            logger.error("faq_insert_failed", error=str(e))
            raise PersistenceError(f"FAQ insert failed: {e}") from e

        logger.info("faq_inserted", faq_id=str(faq.id))
        return faq
