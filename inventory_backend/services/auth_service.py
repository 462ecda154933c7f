"""
Employee login.

Matches an employee by normalized email and PIN digest. Every failure
mode collapses to AuthenticationError("LOGIN_FAILED") so callers can't
tell a wrong email from a wrong PIN.
"""

from typing import Any, Dict, cast

import httpx
from postgrest.exceptions import APIError
from supabase import Client

from inventory_backend.auth.pin import hash_pin
from inventory_backend.schemas.employees import normalize_email
from inventory_backend.utils.constants import EMPLOYEES_TABLE
from inventory_backend.utils.errors import AuthenticationError
from inventory_backend.utils.logging import get_logger

logger = get_logger(__name__)


async def login(
    supabase_client: Client,
    email: str,
    password: str
) -> Dict[str, Any]:
    """
    Authenticate an employee with email and PIN.

    Args:
        supabase_client: Supabase client
        email: Login email (case and surrounding whitespace ignored)
        password: Raw PIN

    Returns:
        The matching employee row

    Raises:
        AuthenticationError: If zero or several employees match, the input
            is blank, or Supabase reports an error
    """
    if (
        not isinstance(email, str) or not email.strip()
        or not isinstance(password, str) or not password
    ):
        logger.warning("Login rejected: blank or non-string email or PIN")
        raise AuthenticationError()

    try:
        result = (
            supabase_client.table(EMPLOYEES_TABLE)
            .select("*")
            .eq("email", normalize_email(email))
            .eq("pin_hash", hash_pin(password))
            .limit(2)
            .execute()
        )
    except APIError as e:
        logger.warning(f"Login failed: backend error code={e.code}")
        raise AuthenticationError() from e
    except httpx.HTTPError as e:
        logger.warning(f"Login failed: transport error {type(e).__name__}")
        raise AuthenticationError() from e

    rows = result.data or []
    if len(rows) != 1:
        logger.warning(f"Login failed: {len(rows)} matching employees")
        raise AuthenticationError()

    employee: Dict[str, Any] = cast(Dict[str, Any], rows[0])
    logger.info(f"Employee {employee.get('id')} logged in")

    return employee
