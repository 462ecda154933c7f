"""
Pydantic schemas for the inventory data-access layer.

One create model and one partial update model per entity. Every model
accepts extra fields so columns not listed here are forwarded unchanged.
"""

from .employees import EmployeeCreate, EmployeeUpdate
from .history import HistoryCreate, HistoryUpdate
from .items import ItemCreate, ItemUpdate
from .tasks import TaskCreate, TaskUpdate

__all__ = [
    "EmployeeCreate",
    "EmployeeUpdate",
    "HistoryCreate",
    "HistoryUpdate",
    "ItemCreate",
    "ItemUpdate",
    "TaskCreate",
    "TaskUpdate",
]
