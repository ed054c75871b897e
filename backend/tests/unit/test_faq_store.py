"""Unit tests for FAQStore against a mocked AsyncSession."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from polyfaq.core.exceptions import PersistenceError
from polyfaq.db.faq_store import FAQStore
from polyfaq.models.faq import FAQ


def _make_mock_db(rows: list | None = None) -> MagicMock:
    db = MagicMock()
    db.add = MagicMock()
    db.commit = AsyncMock()
    db.rollback = AsyncMock()
    result = MagicMock()
    result.scalars.return_value.all.return_value = rows or []
    db.execute = AsyncMock(return_value=result)
    return db


class TestFindAll:

    @pytest.mark.asyncio
    async def test_returns_rows(self) -> None:
        rows = [FAQ(question={"en": "q"}, answer={"en": "a"})]
        store = FAQStore(_make_mock_db(rows))

        assert list(await store.find_all()) == rows

    @pytest.mark.asyncio
    async def test_driver_error_becomes_persistence_error(self) -> None:
        db = _make_mock_db()
        db.execute.side_effect = OperationalError("SELECT", {}, Exception("gone"))
        store = FAQStore(db)

        with pytest.raises(PersistenceError):
            await store.find_all()


class TestInsert:

    @pytest.mark.asyncio
    async def test_adds_and_commits(self) -> None:
        db = _make_mock_db()
        store = FAQStore(db)
        faq = FAQ(question={"en": "q"}, answer={"en": "a"})

        assert await store.insert(faq) is faq
        db.add.assert_called_once_with(faq)
        db.commit.assert_awaited_once()
        db.rollback.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_constraint_violation_rolls_back(self) -> None:
        db = _make_mock_db()
        db.commit.side_effect = IntegrityError("INSERT", {}, Exception("dup"))
        store = FAQStore(db)

        with pytest.raises(PersistenceError):
            await store.insert(FAQ(question={"en": "q"}, answer={"en": "a"}))
        db.rollback.assert_awaited_once()
