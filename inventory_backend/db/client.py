"""
Supabase client factory.

Clients are built explicitly and handed to the services (or to
InventoryDataAccess). Nothing here caches a client, so tests can pass
a fake one and each caller owns its own connection settings.
"""

import logging
from typing import Optional

from supabase import Client, create_client

from inventory_backend.config import settings

logger = logging.getLogger(__name__)


def create_supabase_client(
    url: Optional[str] = None,
    key: Optional[str] = None,
) -> Client:
    """
    Create a Supabase client for the inventory tables.

    Args:
        url: Supabase project URL (defaults to settings.SUPABASE_URL)
        key: Publishable key (defaults to settings.SUPABASE_KEY)

    Returns:
        A new Supabase client

    Raises:
        ValueError: If no URL or key is available

    Example:
        >>> client = create_supabase_client()
        >>> data = InventoryDataAccess(client)
        >>> items = await data.get_items()
    """
    supabase_url = url or settings.SUPABASE_URL
    supabase_key = key or settings.SUPABASE_KEY

    if not supabase_url or not supabase_key:
        raise ValueError(
            "Supabase URL and key are required. "
            "Set SUPABASE_URL and SUPABASE_KEY or pass them explicitly."
        )

    client: Client = create_client(
        supabase_url=supabase_url,
        supabase_key=supabase_key
    )

    logger.debug("Created Supabase client")

    return client
