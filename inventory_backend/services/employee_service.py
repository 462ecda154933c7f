"""
Employee service.

PINs are hashed here and never written in clear: the raw pin field is
removed from every payload before it reaches Supabase.
"""

import logging
from typing import Any, Dict, List, Union

from supabase import Client

from inventory_backend.auth.pin import hash_pin
from inventory_backend.schemas.employees import EmployeeCreate, EmployeeUpdate
from inventory_backend.services.common import (
    as_model,
    rows_of,
    run_query,
    single_row,
    utc_now_iso,
)
from inventory_backend.utils.constants import DELETE_SUCCESS, EMPLOYEES_TABLE

logger = logging.getLogger(__name__)


async def get_employees(supabase_client: Client) -> List[Dict[str, Any]]:
    """Fetch all employees, newest first."""
    result = run_query(
        supabase_client.table(EMPLOYEES_TABLE)
        .select("*")
        .order("created_at", desc=True),
        "employees.select"
    )

    employees = rows_of(result)
    logger.info(f"Found {len(employees)} employees")

    return employees


async def add_employee(
    supabase_client: Client,
    employee: Union[EmployeeCreate, Dict[str, Any]]
) -> Dict[str, Any]:
    """
    Create an employee.

    Args:
        supabase_client: Supabase client
        employee: EmployeeCreate or an equivalent dict; must include pin

    Returns:
        The inserted employee row

    Raises:
        pydantic.ValidationError: If employee is invalid
        BackendError: If the insert fails (e.g. duplicate email)
    """
    new_employee = as_model(EmployeeCreate, employee)
    payload = new_employee.model_dump(exclude_none=True, exclude={"pin", "pin_hash"})
    payload["pin_hash"] = hash_pin(new_employee.pin)
    now = utc_now_iso()
    payload["created_at"] = now
    payload["updated_at"] = now

    logger.info(f"Creating employee email={new_employee.email}")

    result = run_query(
        supabase_client.table(EMPLOYEES_TABLE).insert(payload),
        "employees.insert"
    )

    created = single_row(result, "employees.insert")
    logger.info(f"Employee created: {created.get('id')}")

    return created


async def update_employee(
    supabase_client: Client,
    employee: Union[EmployeeUpdate, Dict[str, Any]]
) -> Dict[str, Any]:
    """
    Update an employee by id.

    A new pin_hash is derived only when a non-empty pin is given;
    otherwise the stored hash is left alone.

    Returns:
        The updated employee row

    Raises:
        BackendError: If the update fails or no employee has that id
    """
    update = as_model(EmployeeUpdate, employee)
    payload = update.model_dump(exclude_unset=True, exclude={"pin"})
    # pin_hash is only ever derived from a pin, never taken from the caller
    payload.pop("pin_hash", None)
    if update.pin:
        payload["pin_hash"] = hash_pin(update.pin)
    payload["updated_at"] = utc_now_iso()

    logger.info(
        f"Updating employee {update.id}: "
        f"{sorted(k for k in payload if k not in ('id', 'pin_hash'))}, "
        f"pin_changed={bool(update.pin)}"
    )

    result = run_query(
        supabase_client.table(EMPLOYEES_TABLE)
        .update(payload)
        .eq("id", update.id),
        "employees.update"
    )

    return single_row(result, "employees.update")


async def delete_employee(supabase_client: Client, employee_id: Union[int, str]) -> Dict[str, bool]:
    """Delete an employee by id. Returns {"success": True}."""
    logger.info(f"Deleting employee {employee_id}")

    run_query(
        supabase_client.table(EMPLOYEES_TABLE)
        .delete()
        .eq("id", employee_id),
        "employees.delete"
    )

    return dict(DELETE_SUCCESS)
