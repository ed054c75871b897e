"""FAQ ORM model.

``question`` and ``answer`` map locale code to text, e.g.
``{"en": "What is X?", "hi": "...", "bn": "..."}``.
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime
from sqlalchemy.dialects.postgresql import JSONB, UUID
from sqlalchemy.orm import Mapped, mapped_column

from polyfaq.db.postgres import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class FAQ(Base):
    __tablename__ = "faqs"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4
    )
    question: Mapped[dict[str, str]] = mapped_column(
        JSONB, nullable=False, default=dict
    )
    answer: Mapped[dict[str, str]] = mapped_column(
        JSONB, nullable=False, default=dict
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, index=True
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, onupdate=_utcnow
    )

    def text_for(self, locale: str) -> tuple[str, str] | None:
        """Stored (question, answer) for ``locale``, or None if not materialized."""
        question = (self.question or {}).get(locale)
        answer = (self.answer or {}).get(locale)
        if question is None or answer is None:
            return None
        return question, answer

    def canonical_text(self, canonical: str) -> tuple[str, str]:
        return (self.question or {}).get(canonical, ""), (self.answer or {}).get(canonical, "")
