"""
Tests for the history service.
"""

import pytest
import pytest_asyncio

from inventory_backend.services.history_service import (
    add_history,
    delete_history,
    get_history,
    update_history,
)
from inventory_backend.utils.errors import BackendError


@pytest_asyncio.fixture
async def seeded(memory_client):
    await add_history(memory_client, {"item_id": 1, "employee_id": 10, "action": "IN", "quantity_change": 5})
    await add_history(memory_client, {"item_id": 1, "employee_id": 20, "action": "OUT", "quantity_change": -2})
    await add_history(memory_client, {"item_id": 2, "employee_id": 10, "action": "OUT", "quantity_change": -1})
    return memory_client


class TestGetHistory:

    @pytest.mark.asyncio
    async def test_no_filters(self, supabase_client):
        query = supabase_client.table.return_value

        await get_history(supabase_client)

        supabase_client.table.assert_called_once_with("history")
        query.eq.assert_not_called()
        query.order.assert_called_once_with("created_at", desc=True)

    @pytest.mark.asyncio
    async def test_both_filters_applied(self, supabase_client):
        query = supabase_client.table.return_value

        await get_history(supabase_client, item_id=1, employee_id=10)

        query.eq.assert_any_call("item_id", 1)
        query.eq.assert_any_call("employee_id", 10)
        assert query.eq.call_count == 2

    @pytest.mark.asyncio
    async def test_filters_are_anded(self, seeded):
        records = await get_history(seeded, item_id=1, employee_id=10)

        assert len(records) == 1
        assert records[0]["action"] == "IN"

    @pytest.mark.asyncio
    async def test_single_filter_newest_first(self, seeded):
        records = await get_history(seeded, employee_id=10)

        assert [r["item_id"] for r in records] == [2, 1]


class TestUpdateAndDeleteHistory:

    @pytest.mark.asyncio
    async def test_update_refreshes_updated_at(self, seeded):
        record = (await get_history(seeded, item_id=2))[0]

        updated = await update_history(seeded, {"id": record["id"], "notes": "recount"})

        assert updated["notes"] == "recount"
        assert updated["updated_at"] >= record["updated_at"]

    @pytest.mark.asyncio
    async def test_update_missing_record(self, memory_client):
        with pytest.raises(BackendError):
            await update_history(memory_client, {"id": 99, "notes": "x"})

    @pytest.mark.asyncio
    async def test_delete(self, seeded):
        record = (await get_history(seeded, item_id=2))[0]

        assert await delete_history(seeded, record["id"]) == {"success": True}
        assert await get_history(seeded, item_id=2) == []
