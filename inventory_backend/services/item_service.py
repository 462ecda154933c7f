"""
Inventory item service.

CRUD for the items table plus case-insensitive name search.
"""

import logging
from typing import Any, Dict, List, Union

from supabase import Client

from inventory_backend.schemas.items import ItemCreate, ItemUpdate
from inventory_backend.services.common import (
    as_model,
    rows_of,
    run_query,
    single_row,
    utc_now_iso,
)
from inventory_backend.utils.constants import DELETE_SUCCESS, ITEMS_TABLE

logger = logging.getLogger(__name__)


def escape_like(value: str) -> str:
    """Escape LIKE wildcards so they match literally."""
    return (
        value.replace("\\", "\\\\")
        .replace("%", "\\%")
        .replace("_", "\\_")
    )


async def get_items(supabase_client: Client) -> List[Dict[str, Any]]:
    """
    Fetch all items, newest first.

    Returns:
        List of item dicts ordered by created_at descending
    """
    logger.debug("Fetching all items")

    result = run_query(
        supabase_client.table(ITEMS_TABLE)
        .select("*")
        .order("created_at", desc=True),
        "items.select"
    )

    items = rows_of(result)
    logger.info(f"Found {len(items)} items")

    return items


async def search_items(supabase_client: Client, query: str) -> List[Dict[str, Any]]:
    """
    Find items whose name contains query, ignoring case.

    Args:
        supabase_client: Supabase client
        query: Substring to look for; % and _ are matched literally

    Returns:
        List of matching item dicts
    """
    pattern = f"%{escape_like(query)}%"
    logger.debug(f"Searching items with pattern {pattern!r}")

    result = run_query(
        supabase_client.table(ITEMS_TABLE)
        .select("*")
        .ilike("name", pattern),
        "items.search"
    )

    items = rows_of(result)
    logger.info(f"Item search {query!r} matched {len(items)} items")

    return items


async def add_item(
    supabase_client: Client,
    item: Union[ItemCreate, Dict[str, Any]]
) -> Dict[str, Any]:
    """
    Insert a new item.

    Args:
        supabase_client: Supabase client
        item: ItemCreate or an equivalent dict

    Returns:
        The inserted item row

    Raises:
        pydantic.ValidationError: If item is invalid
        BackendError: If the insert fails
    """
    payload = as_model(ItemCreate, item).model_dump(exclude_none=True)
    now = utc_now_iso()
    payload["created_at"] = now
    payload["updated_at"] = now

    logger.info(f"Creating item name={payload.get('name')!r}")

    result = run_query(
        supabase_client.table(ITEMS_TABLE).insert(payload),
        "items.insert"
    )

    created = single_row(result, "items.insert")
    logger.info(f"Item created: {created.get('id')}")

    return created


async def update_item(
    supabase_client: Client,
    item: Union[ItemUpdate, Dict[str, Any]]
) -> Dict[str, Any]:
    """
    Update an item by id.

    Only fields present in item are written; updated_at is refreshed.

    Returns:
        The updated item row

    Raises:
        BackendError: If the update fails or no item has that id
    """
    update = as_model(ItemUpdate, item)
    payload = update.model_dump(exclude_unset=True)
    payload["updated_at"] = utc_now_iso()

    logger.info(f"Updating item {update.id}: {sorted(k for k in payload if k != 'id')}")

    result = run_query(
        supabase_client.table(ITEMS_TABLE)
        .update(payload)
        .eq("id", update.id),
        "items.update"
    )

    return single_row(result, "items.update")


async def delete_item(supabase_client: Client, item_id: Union[int, str]) -> Dict[str, bool]:
    """
    Delete an item by id.

    Does not check that the item existed.

    Returns:
        {"success": True}
    """
    logger.info(f"Deleting item {item_id}")

    run_query(
        supabase_client.table(ITEMS_TABLE)
        .delete()
        .eq("id", item_id),
        "items.delete"
    )

    return dict(DELETE_SUCCESS)
