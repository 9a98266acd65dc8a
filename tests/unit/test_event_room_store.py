"""
tests/unit/test_event_room_store.py

Unit tests for eventrooms.storage.event_room_store.

Coverage
--------
  - match_filter: no filters → []; each filter adds one clause
  - find_by_keys: found / not found; eager-load only when requested
  - delete_by_keys: found → True; not found → False; flush called
  - list_page: zero matches short-circuits the data query
  - list_page: (rows, total) tuple returned with id ordering
"""
from __future__ import annotations

import uuid
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from eventrooms.storage import event_room_store


def _session() -> AsyncMock:
    return AsyncMock()


def _scalar_one_or_none_result(value: object) -> MagicMock:
    result = MagicMock()
    result.scalar_one_or_none.return_value = value
    return result


def _mock_event_room() -> SimpleNamespace:
    return SimpleNamespace(id=uuid.uuid4(), event_id=uuid.uuid4(), room_id=uuid.uuid4())


# ---------------------------------------------------------------------------
# match_filter
# ---------------------------------------------------------------------------

class TestMatchFilter:
    def test_no_filters_matches_everything(self) -> None:
        assert event_room_store.match_filter() == []

    def test_event_filter_only(self) -> None:
        criteria = event_room_store.match_filter(event_id=uuid.uuid4())
        assert len(criteria) == 1
        assert criteria[0].left.name == "event_id"

    def test_room_filter_only(self) -> None:
        criteria = event_room_store.match_filter(room_id=uuid.uuid4())
        assert len(criteria) == 1
        assert criteria[0].left.name == "room_id"

    def test_both_filters(self) -> None:
        event_id, room_id = uuid.uuid4(), uuid.uuid4()
        criteria = event_room_store.match_filter(event_id, room_id)
        assert [c.left.name for c in criteria] == ["event_id", "room_id"]
        assert [c.right.value for c in criteria] == [event_id, room_id]


# ---------------------------------------------------------------------------
# find_by_keys
# ---------------------------------------------------------------------------

class TestFindByKeys:
    @pytest.mark.asyncio
    async def test_found_returns_row(self) -> None:
        row = _mock_event_room()
        with patch.object(event_room_store.gateway, "find_one", new_callable=AsyncMock, return_value=row):
            result = await event_room_store.find_by_keys(_session(), row.event_id, row.room_id)
        assert result is row

    @pytest.mark.asyncio
    async def test_not_found_returns_none(self) -> None:
        with patch.object(event_room_store.gateway, "find_one", new_callable=AsyncMock, return_value=None):
            result = await event_room_store.find_by_keys(_session(), uuid.uuid4(), uuid.uuid4())
        assert result is None

    @pytest.mark.asyncio
    async def test_no_eager_load_by_default(self) -> None:
        with patch.object(event_room_store.gateway, "find_one", new_callable=AsyncMock, return_value=None) as find_one:
            await event_room_store.find_by_keys(_session(), uuid.uuid4(), uuid.uuid4())
        assert find_one.await_args.kwargs["include"] == ()

    @pytest.mark.asyncio
    async def test_include_related_loads_event_and_room(self) -> None:
        with patch.object(event_room_store.gateway, "find_one", new_callable=AsyncMock, return_value=None) as find_one:
            await event_room_store.find_by_keys(
                _session(), uuid.uuid4(), uuid.uuid4(), include_related=True
            )
        assert find_one.await_args.kwargs["include"] == event_room_store.RELATED

    @pytest.mark.asyncio
    async def test_filters_on_both_keys(self) -> None:
        event_id, room_id = uuid.uuid4(), uuid.uuid4()
        with patch.object(event_room_store.gateway, "find_one", new_callable=AsyncMock, return_value=None) as find_one:
            await event_room_store.find_by_keys(_session(), event_id, room_id)
        criteria = find_one.await_args.args[2:]
        assert [c.right.value for c in criteria] == [event_id, room_id]


# ---------------------------------------------------------------------------
# delete_by_keys
# ---------------------------------------------------------------------------

class TestDeleteByKeys:
    @pytest.mark.asyncio
    async def test_found_returns_true(self) -> None:
        session = _session()
        session.execute.return_value = _scalar_one_or_none_result(uuid.uuid4())
        assert await event_room_store.delete_by_keys(session, uuid.uuid4(), uuid.uuid4()) is True

    @pytest.mark.asyncio
    async def test_not_found_returns_false(self) -> None:
        session = _session()
        session.execute.return_value = _scalar_one_or_none_result(None)
        assert await event_room_store.delete_by_keys(session, uuid.uuid4(), uuid.uuid4()) is False

    @pytest.mark.asyncio
    async def test_flush_called_after_delete(self) -> None:
        session = _session()
        session.execute.return_value = _scalar_one_or_none_result(None)
        await event_room_store.delete_by_keys(session, uuid.uuid4(), uuid.uuid4())
        session.flush.assert_awaited()
        session.commit.assert_not_awaited()


# ---------------------------------------------------------------------------
# list_page
# ---------------------------------------------------------------------------

class TestListPage:
    @pytest.mark.asyncio
    async def test_zero_matches_skips_data_query(self) -> None:
        with (
            patch.object(event_room_store.gateway, "count", new_callable=AsyncMock, return_value=0),
            patch.object(event_room_store.gateway, "find_page", new_callable=AsyncMock) as find_page,
        ):
            rows, total = await event_room_store.list_page(_session(), event_id=uuid.uuid4())
        assert rows == []
        assert total == 0
        find_page.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_returns_rows_and_total(self) -> None:
        rows = [_mock_event_room() for _ in range(3)]
        with (
            patch.object(event_room_store.gateway, "count", new_callable=AsyncMock, return_value=13),
            patch.object(event_room_store.gateway, "find_page", new_callable=AsyncMock, return_value=rows) as find_page,
        ):
            result, total = await event_room_store.list_page(_session(), page=2, page_size=10)
        assert result == rows
        assert total == 13
        kwargs = find_page.await_args.kwargs
        assert kwargs["page"] == 2
        assert kwargs["page_size"] == 10
        assert kwargs["include"] == event_room_store.RELATED
        assert str(kwargs["order_by"][0]) == "event_rooms.id ASC"
