"""
Pydantic schemas for stock history records.
"""

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class HistoryCreate(BaseModel):
    """A stock movement or other item/employee event."""
    model_config = ConfigDict(extra="allow")

    item_id: Optional[Union[int, str]] = Field(None, description="Related item id")
    employee_id: Optional[Union[int, str]] = Field(None, description="Employee who acted")
    action: Optional[str] = Field(None, description="Event type", examples=["IN", "OUT", "ADJUST"])
    quantity_change: Optional[Union[int, float]] = Field(None, description="Signed change in stock")
    notes: Optional[str] = None


class HistoryUpdate(BaseModel):
    """Partial update for a history record."""
    model_config = ConfigDict(extra="allow")

    id: Union[int, str] = Field(..., description="History record primary key")
    item_id: Optional[Union[int, str]] = None
    employee_id: Optional[Union[int, str]] = None
    action: Optional[str] = None
    quantity_change: Optional[Union[int, float]] = None
    notes: Optional[str] = None
