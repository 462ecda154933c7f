"""
Pydantic schemas for inventory items.

Items carry whatever columns the items table has; only the ones the app
reads are named here and none of them is mandatory.
"""

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field

Number = Union[int, float]


class ItemCreate(BaseModel):
    """
    Fields for a new inventory item.

    created_at / updated_at are stamped by the service, not the caller.
    """
    model_config = ConfigDict(extra="allow")

    name: Optional[str] = Field(
        None,
        description="Item display name (searched case-insensitively)",
        examples=["Widget", "Packing tape"]
    )
    sku: Optional[str] = Field(None, description="Stock keeping unit code")
    category: Optional[str] = Field(None, description="Free-form category label")
    quantity: Optional[Number] = Field(None, description="Amount currently in stock")
    unit: Optional[str] = Field(None, description="Unit of measure", examples=["pcs", "box", "kg"])
    location: Optional[str] = Field(None, description="Shelf or storage location")
    description: Optional[str] = Field(None, description="Optional notes")


class ItemUpdate(BaseModel):
    """
    Partial update for an item.

    Only fields explicitly provided are written.
    """
    model_config = ConfigDict(extra="allow")

    id: Union[int, str] = Field(..., description="Item primary key")
    name: Optional[str] = None
    sku: Optional[str] = None
    category: Optional[str] = None
    quantity: Optional[Number] = None
    unit: Optional[str] = None
    location: Optional[str] = None
    description: Optional[str] = None
