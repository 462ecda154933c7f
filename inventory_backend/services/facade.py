"""
InventoryDataAccess: the data-access facade used by the app.

Wraps the service functions around one injected Supabase client so callers
don't pass the client on every call, and tests can hand in a fake.

Example:
    >>> from inventory_backend.db import create_supabase_client
    >>> data = InventoryDataAccess(create_supabase_client())
    >>> employee = await data.login("ana@example.com", "1234")
    >>> items = await data.search_items("wid")
"""

from typing import Any, Dict, List, Optional, Union

from supabase import Client

from inventory_backend.schemas import (
    EmployeeCreate,
    EmployeeUpdate,
    HistoryCreate,
    HistoryUpdate,
    ItemCreate,
    ItemUpdate,
    TaskCreate,
    TaskUpdate,
)
from inventory_backend.services import (
    auth_service,
    employee_service,
    history_service,
    item_service,
    settings_service,
    task_service,
)

RowId = Union[int, str]
Row = Dict[str, Any]


class InventoryDataAccess:
    """
    One coroutine per domain operation, each a single Supabase round trip.

    Args:
        client: Supabase client used for every call
        task_id_generator: Source of task ids (defaults to the
            process-wide generator)
    """

    def __init__(
        self,
        client: Client,
        task_id_generator: Optional[task_service.TaskIdGenerator] = None
    ):
        self.client = client
        self.task_id_generator = task_id_generator or task_service.default_task_id_generator

    # --- Auth ---

    async def login(self, email: str, password: str) -> Row:
        return await auth_service.login(self.client, email, password)

    # --- Items ---

    async def get_items(self) -> List[Row]:
        return await item_service.get_items(self.client)

    async def search_items(self, query: str) -> List[Row]:
        return await item_service.search_items(self.client, query)

    async def add_item(self, item: Union[ItemCreate, Row]) -> Row:
        return await item_service.add_item(self.client, item)

    async def update_item(self, item: Union[ItemUpdate, Row]) -> Row:
        return await item_service.update_item(self.client, item)

    async def delete_item(self, item_id: RowId) -> Dict[str, bool]:
        return await item_service.delete_item(self.client, item_id)

    # --- Employees ---

    async def get_employees(self) -> List[Row]:
        return await employee_service.get_employees(self.client)

    async def add_employee(self, employee: Union[EmployeeCreate, Row]) -> Row:
        return await employee_service.add_employee(self.client, employee)

    async def update_employee(self, employee: Union[EmployeeUpdate, Row]) -> Row:
        return await employee_service.update_employee(self.client, employee)

    async def delete_employee(self, employee_id: RowId) -> Dict[str, bool]:
        return await employee_service.delete_employee(self.client, employee_id)

    # --- History ---

    async def get_history(
        self,
        item_id: Optional[RowId] = None,
        employee_id: Optional[RowId] = None
    ) -> List[Row]:
        return await history_service.get_history(self.client, item_id=item_id, employee_id=employee_id)

    async def add_history(self, record: Union[HistoryCreate, Row]) -> Row:
        return await history_service.add_history(self.client, record)

    async def update_history(self, record: Union[HistoryUpdate, Row]) -> Row:
        return await history_service.update_history(self.client, record)

    async def delete_history(self, history_id: RowId) -> Dict[str, bool]:
        return await history_service.delete_history(self.client, history_id)

    # --- Tasks ---

    async def add_task(self, task: Union[TaskCreate, Row]) -> Row:
        return await task_service.add_task(self.client, task, id_generator=self.task_id_generator)

    async def get_tasks(self, employee_id: RowId) -> List[Row]:
        return await task_service.get_tasks(self.client, employee_id)

    async def update_task(self, task: Union[TaskUpdate, Row]) -> Row:
        return await task_service.update_task(self.client, task)

    async def delete_task(self, task_id: str) -> Dict[str, bool]:
        return await task_service.delete_task(self.client, task_id)

    # --- Settings ---

    async def update_low_stock_threshold(self, threshold: int) -> Row:
        return await settings_service.update_low_stock_threshold(self.client, threshold)

    async def get_low_stock_threshold(self) -> Optional[Row]:
        return await settings_service.get_low_stock_threshold(self.client)

    async def get_low_stock_threshold_value(self, default: Optional[int] = None) -> Optional[int]:
        return await settings_service.get_low_stock_threshold_value(self.client, default=default)
