"""Pydantic schemas for orders."""

from datetime import datetime
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field


class OrderStatus(str, Enum):
    """Payment state of an order."""

    PENDING = "pending"
    PAID = "paid"

    def toggled(self) -> "OrderStatus":
        return OrderStatus.PAID if self is OrderStatus.PENDING else OrderStatus.PENDING


class OrderBase(BaseModel):
    """Base schema for order data."""

    model_config = ConfigDict(populate_by_name=True)

    student_id: int = Field(..., alias="studentId")
    total: float = Field(..., ge=0.01, description="Order amount in USD")
    status: OrderStatus = OrderStatus.PENDING


class OrderCreate(OrderBase):
    """Schema for creating an order."""
    pass


class OrderUpdate(OrderBase):
    """Schema for replacing an order's editable fields."""
    pass


class OrderStatusUpdate(BaseModel):
    """Partial update sent when toggling an order's status."""

    status: OrderStatus


class OrderResponse(OrderBase):
    """Order as returned by the backend."""

    id: int | None = None
    created_at: datetime | None = Field(None, alias="createdAt")


# Entity attribute -> backend query parameter
ORDER_FILTER_PARAMS = {
    "student_id": "studentId",
    "status": "status",
    "min_total": "minTotal",
    "max_total": "maxTotal",
}

ORDER_SORT_PARAMS = {
    "id": "id",
    "student_id": "studentId",
    "status": "status",
    "total": "total",
    "created_at": "createdAt",
}

# Filters that constrain a differently named entity attribute
ORDER_FILTER_FIELDS = {
    "min_total": "total",
    "max_total": "total",
}
