"""
Helpers shared by the inventory services.

Every service call runs exactly one PostgREST request through
run_query(), which turns postgrest APIError into BackendError.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Type, TypeVar, Union, cast

import httpx
from postgrest.exceptions import APIError
from pydantic import BaseModel

from inventory_backend.utils.errors import BackendError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def utc_now_iso() -> str:
    """Current time as a UTC ISO-8601 string."""
    return datetime.now(timezone.utc).isoformat()


def as_model(model_cls: Type[ModelT], value: Union[ModelT, BaseModel, Dict[str, Any]]) -> ModelT:
    """
    Coerce a dict (or another model) into model_cls.

    Raises:
        pydantic.ValidationError: If the fields don't satisfy model_cls
    """
    if isinstance(value, model_cls):
        return value
    if isinstance(value, BaseModel):
        value = value.model_dump(exclude_unset=True)
    return model_cls.model_validate(value)


def run_query(query: Any, operation: str) -> Any:
    """
    Execute a prepared query builder.

    Args:
        query: A supabase query builder ready for .execute()
        operation: Short label for logs, e.g. "items.select"

    Returns:
        The APIResponse from supabase

    Raises:
        BackendError: If Supabase reports an error or cannot be reached
    """
    try:
        return query.execute()
    except APIError as e:
        logger.error(f"Supabase {operation} failed: code={e.code} message={e.message}", exc_info=True)
        raise BackendError.from_api_error(e) from e
    except httpx.HTTPError as e:
        logger.error(f"Supabase {operation} transport failure: {e}", exc_info=True)
        raise BackendError.from_transport_error(e) from e


def rows_of(result: Any) -> List[Dict[str, Any]]:
    """Rows from an APIResponse, never None."""
    return cast(List[Dict[str, Any]], getattr(result, "data", None) or [])


def single_row(result: Any, operation: str) -> Dict[str, Any]:
    """
    The one row a mutation returned.

    Raises:
        BackendError: If no row came back (e.g. update on a missing id)
    """
    rows = rows_of(result)
    if len(rows) == 0:
        logger.warning(f"Supabase {operation} returned no rows")
        raise BackendError(f"{operation} returned no rows", code="NOT_FOUND")
    return rows[0]
