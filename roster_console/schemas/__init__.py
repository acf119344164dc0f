"""Pydantic schemas for backend request/response payloads."""

from roster_console.schemas.student import (
    StudentBase,
    StudentCreate,
    StudentUpdate,
    StudentResponse,
    STUDENT_FILTER_PARAMS,
    STUDENT_SORT_PARAMS,
)
from roster_console.schemas.order import (
    OrderStatus,
    OrderBase,
    OrderCreate,
    OrderUpdate,
    OrderStatusUpdate,
    OrderResponse,
    ORDER_FILTER_PARAMS,
    ORDER_SORT_PARAMS,
    ORDER_FILTER_FIELDS,
)
from roster_console.schemas.page import PageResponse

__all__ = [
    "StudentBase",
    "StudentCreate",
    "StudentUpdate",
    "StudentResponse",
    "STUDENT_FILTER_PARAMS",
    "STUDENT_SORT_PARAMS",
    "OrderStatus",
    "OrderBase",
    "OrderCreate",
    "OrderUpdate",
    "OrderStatusUpdate",
    "OrderResponse",
    "ORDER_FILTER_PARAMS",
    "ORDER_SORT_PARAMS",
    "ORDER_FILTER_FIELDS",
    "PageResponse",
]
