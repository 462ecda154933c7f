"""
Stock history service.

History rows link an item and/or an employee to an event. Reads can be
narrowed by either id; both filters together are ANDed.
"""

import logging
from typing import Any, Dict, List, Optional, Union

from supabase import Client

from inventory_backend.schemas.history import HistoryCreate, HistoryUpdate
from inventory_backend.services.common import (
    as_model,
    rows_of,
    run_query,
    single_row,
    utc_now_iso,
)
from inventory_backend.utils.constants import DELETE_SUCCESS, HISTORY_TABLE

logger = logging.getLogger(__name__)


async def get_history(
    supabase_client: Client,
    item_id: Optional[Union[int, str]] = None,
    employee_id: Optional[Union[int, str]] = None
) -> List[Dict[str, Any]]:
    """
    Fetch history records, newest first.

    Args:
        supabase_client: Supabase client
        item_id: Only records for this item (optional)
        employee_id: Only records for this employee (optional)

    Returns:
        List of history dicts ordered by created_at descending
    """
    logger.debug(f"Fetching history (item_id={item_id}, employee_id={employee_id})")

    query = supabase_client.table(HISTORY_TABLE).select("*")

    if item_id is not None:
        query = query.eq("item_id", item_id)
    if employee_id is not None:
        query = query.eq("employee_id", employee_id)

    result = run_query(query.order("created_at", desc=True), "history.select")

    records = rows_of(result)
    logger.info(f"Found {len(records)} history records")

    return records


async def add_history(
    supabase_client: Client,
    record: Union[HistoryCreate, Dict[str, Any]]
) -> Dict[str, Any]:
    """
    Record a history event.

    Returns:
        The inserted history row
    """
    payload = as_model(HistoryCreate, record).model_dump(exclude_none=True)
    now = utc_now_iso()
    payload["created_at"] = now
    payload["updated_at"] = now

    logger.info(
        f"Recording history action={payload.get('action')} "
        f"item_id={payload.get('item_id')} employee_id={payload.get('employee_id')}"
    )

    result = run_query(
        supabase_client.table(HISTORY_TABLE).insert(payload),
        "history.insert"
    )

    return single_row(result, "history.insert")


async def update_history(
    supabase_client: Client,
    record: Union[HistoryUpdate, Dict[str, Any]]
) -> Dict[str, Any]:
    """
    Update a history record by id and refresh updated_at.

    Raises:
        BackendError: If the update fails or no record has that id
    """
    update = as_model(HistoryUpdate, record)
    payload = update.model_dump(exclude_unset=True)
    payload["updated_at"] = utc_now_iso()

    logger.info(f"Updating history record {update.id}")

    result = run_query(
        supabase_client.table(HISTORY_TABLE)
        .update(payload)
        .eq("id", update.id),
        "history.update"
    )

    return single_row(result, "history.update")


async def delete_history(supabase_client: Client, history_id: Union[int, str]) -> Dict[str, bool]:
    logger.info(f"Deleting history record {history_id}")

    run_query(
        supabase_client.table(HISTORY_TABLE)
        .delete()
        .eq("id", history_id),
        "history.delete"
    )

    return dict(DELETE_SUCCESS)
