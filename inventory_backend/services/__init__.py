"""
Service layer for the inventory backend.

Each function takes a Supabase client first and performs exactly one
query or mutation. InventoryDataAccess bundles them around one client.
"""

from .auth_service import login
from .employee_service import (
    add_employee,
    delete_employee,
    get_employees,
    update_employee,
)
from .history_service import (
    add_history,
    delete_history,
    get_history,
    update_history,
)
from .item_service import (
    add_item,
    delete_item,
    get_items,
    search_items,
    update_item,
)
from .settings_service import (
    get_low_stock_threshold,
    get_low_stock_threshold_value,
    update_low_stock_threshold,
)
from .task_service import (
    TaskIdGenerator,
    add_task,
    delete_task,
    get_tasks,
    update_task,
)
from .facade import InventoryDataAccess

__all__ = [
    "login",
    "get_items",
    "search_items",
    "add_item",
    "update_item",
    "delete_item",
    "get_employees",
    "add_employee",
    "update_employee",
    "delete_employee",
    "get_history",
    "add_history",
    "update_history",
    "delete_history",
    "TaskIdGenerator",
    "add_task",
    "get_tasks",
    "update_task",
    "delete_task",
    "get_low_stock_threshold",
    "get_low_stock_threshold_value",
    "update_low_stock_threshold",
    "InventoryDataAccess",
]
