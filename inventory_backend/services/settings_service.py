"""
Application settings service.

Settings are key/value rows in the settings table, unique on
setting_key. Only the low-stock threshold is managed today.
"""

import logging
from typing import Any, Dict, Optional, cast

import httpx
from postgrest.exceptions import APIError
from supabase import Client

from inventory_backend.config import settings
from inventory_backend.services.common import run_query, single_row
from inventory_backend.utils.constants import SETTING_KEYS, SETTINGS_TABLE

logger = logging.getLogger(__name__)

LOW_STOCK_THRESHOLD_KEY = SETTING_KEYS['LOW_STOCK_THRESHOLD']


async def update_low_stock_threshold(supabase_client: Client, threshold: int) -> Dict[str, Any]:
    """
    Set the low-stock threshold, creating the setting row if needed.

    Args:
        supabase_client: Supabase client
        threshold: Stock level at or below which items count as low

    Returns:
        The stored setting row

    Raises:
        ValueError: If threshold is negative
        BackendError: If the upsert fails
    """
    if threshold < 0:
        raise ValueError("Low stock threshold must be >= 0")

    logger.info(f"Setting {LOW_STOCK_THRESHOLD_KEY} to {threshold}")

    result = run_query(
        supabase_client.table(SETTINGS_TABLE).upsert(
            {
                "setting_key": LOW_STOCK_THRESHOLD_KEY,
                "setting_value": threshold,
            },
            on_conflict="setting_key"
        ),
        "settings.upsert"
    )

    return single_row(result, "settings.upsert")


async def get_low_stock_threshold(supabase_client: Client) -> Optional[Dict[str, Any]]:
    """
    Fetch the low-stock threshold setting row.

    Returns:
        The setting row, or None if it was never set. A backend error on
        this read is logged and also yields None.
    """
    try:
        result = (
            supabase_client.table(SETTINGS_TABLE)
            .select("*")
            .eq("setting_key", LOW_STOCK_THRESHOLD_KEY)
            .limit(1)
            .execute()
        )
    except APIError as e:
        logger.warning(
            f"Could not read {LOW_STOCK_THRESHOLD_KEY}, treating as unset: "
            f"code={e.code} message={e.message}"
        )
        return None
    except httpx.HTTPError as e:
        logger.warning(f"Could not reach Supabase for {LOW_STOCK_THRESHOLD_KEY}, treating as unset: {e}")
        return None

    if not result.data or len(result.data) == 0:
        logger.debug(f"{LOW_STOCK_THRESHOLD_KEY} not configured")
        return None

    return cast(Dict[str, Any], result.data[0])


async def get_low_stock_threshold_value(
    supabase_client: Client,
    default: Optional[int] = None
) -> Optional[int]:
    """
    The low-stock threshold as an int.

    Falls back to default, or settings.DEFAULT_LOW_STOCK_THRESHOLD when
    default is None, if the setting is missing or not numeric.
    """
    fallback = settings.DEFAULT_LOW_STOCK_THRESHOLD if default is None else default

    row = await get_low_stock_threshold(supabase_client)
    if row is None:
        return fallback

    try:
        return int(row.get("setting_value"))
    except (TypeError, ValueError):
        logger.warning(f"{LOW_STOCK_THRESHOLD_KEY} has non-numeric value, using {fallback}")
        return fallback
