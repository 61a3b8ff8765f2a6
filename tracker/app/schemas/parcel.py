"""
Parcel Pydantic schemas.

Defines the entity shapes the store accepts and returns.
"""

from pydantic import BaseModel, Field
from tracker.app.models.parcel_enums import ParcelStatus


class ParcelBase(BaseModel):
    """Fields supplied by the caller when a parcel is created."""
    client: int = Field(..., description="Owning client id")
    status: str = Field(default=ParcelStatus.REGISTERED.value, description="Current status")
    address: str = Field(..., description="Delivery address")
    created_at: str = Field(..., description="Creation timestamp, RFC3339")


class ParcelCreate(ParcelBase):
    """Schema for adding a new parcel."""


class ParcelRead(ParcelBase):
    """Schema for a stored parcel."""
    number: int
    
    class Config:
        from_attributes = True
