"""
Employee task service.

Tasks are addressed by task_id, a string of the form "TASK<unix-ms>".
The generator keeps that format but never hands out the same id twice
within one process, even when two tasks are created in the same
millisecond. Ids are not coordinated across processes.
"""

import logging
import threading
import time
from typing import Any, Callable, Dict, List, Optional, Union

from supabase import Client

from inventory_backend.schemas.tasks import TaskCreate, TaskUpdate
from inventory_backend.services.common import (
    as_model,
    rows_of,
    run_query,
    single_row,
    utc_now_iso,
)
from inventory_backend.utils.constants import DELETE_SUCCESS, TASK_ID_PREFIX, TASKS_TABLE

logger = logging.getLogger(__name__)


def _unix_ms() -> int:
    return time.time_ns() // 1_000_000


class TaskIdGenerator:
    """
    Issues "TASK<ms>" identifiers that increase strictly per process.

    Args:
        clock: Returns the current Unix time in milliseconds
    """

    def __init__(self, clock: Optional[Callable[[], int]] = None):
        self._clock = clock or _unix_ms
        self._last = 0
        self._lock = threading.Lock()

    def next_id(self) -> str:
        with self._lock:
            stamp = max(self._clock(), self._last + 1)
            self._last = stamp
        return f"{TASK_ID_PREFIX}{stamp}"


default_task_id_generator = TaskIdGenerator()


async def add_task(
    supabase_client: Client,
    task: Union[TaskCreate, Dict[str, Any]],
    id_generator: Optional[TaskIdGenerator] = None
) -> Dict[str, Any]:
    """
    Create a task with a generated task_id.

    created_at is stamped; updated_at stays unset until the first update.

    Args:
        supabase_client: Supabase client
        task: TaskCreate or an equivalent dict
        id_generator: Source of task ids (defaults to the process-wide one)

    Returns:
        The inserted task row
    """
    generator = id_generator or default_task_id_generator
    payload = as_model(TaskCreate, task).model_dump(exclude_none=True)
    payload["task_id"] = generator.next_id()
    payload["created_at"] = utc_now_iso()

    logger.info(f"Creating task {payload['task_id']} for employee {payload.get('employee_id')}")

    result = run_query(
        supabase_client.table(TASKS_TABLE).insert(payload),
        "tasks.insert"
    )

    return single_row(result, "tasks.insert")


async def get_tasks(supabase_client: Client, employee_id: Union[int, str]) -> List[Dict[str, Any]]:
    """Fetch one employee's tasks, newest first."""
    result = run_query(
        supabase_client.table(TASKS_TABLE)
        .select("*")
        .eq("employee_id", employee_id)
        .order("created_at", desc=True),
        "tasks.select"
    )

    tasks = rows_of(result)
    logger.info(f"Found {len(tasks)} tasks for employee {employee_id}")

    return tasks


async def update_task(
    supabase_client: Client,
    task: Union[TaskUpdate, Dict[str, Any]]
) -> Dict[str, Any]:
    """
    Update a task matched by task_id and refresh updated_at.

    Raises:
        BackendError: If the update fails or no task has that task_id
    """
    update = as_model(TaskUpdate, task)
    payload = update.model_dump(exclude_unset=True)
    payload["updated_at"] = utc_now_iso()

    logger.info(f"Updating task {update.task_id}")

    result = run_query(
        supabase_client.table(TASKS_TABLE)
        .update(payload)
        .eq("task_id", update.task_id),
        "tasks.update"
    )

    return single_row(result, "tasks.update")


async def delete_task(supabase_client: Client, task_id: str) -> Dict[str, bool]:
    """Delete a task by task_id. Succeeds even if it did not exist."""
    logger.info(f"Deleting task {task_id}")

    run_query(
        supabase_client.table(TASKS_TABLE)
        .delete()
        .eq("task_id", task_id),
        "tasks.delete"
    )

    return dict(DELETE_SUCCESS)
