"""
Pydantic schemas for employee tasks.

Tasks are keyed by a generated task_id string, never by a database id.
"""

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class TaskCreate(BaseModel):
    """Fields for a new task. task_id and created_at are set by the service."""
    model_config = ConfigDict(extra="allow")

    employee_id: Optional[Union[int, str]] = Field(None, description="Assignee employee id")
    title: Optional[str] = None
    description: Optional[str] = None
    status: Optional[str] = Field(None, examples=["pending", "in_progress", "done"])
    due_date: Optional[str] = Field(None, description="ISO-8601 date")


class TaskUpdate(BaseModel):
    """Partial update for a task, matched by task_id."""
    model_config = ConfigDict(extra="allow")

    task_id: str = Field(..., min_length=1, description="Generated task identifier")
    employee_id: Optional[Union[int, str]] = None
    title: Optional[str] = None
    description: Optional[str] = None
    status: Optional[str] = None
    due_date: Optional[str] = None
