"""Controller for the order list view."""

from roster_console.config import get_settings
from roster_console.controllers.collection import CollectionController
from roster_console.schemas.order import (
    OrderResponse,
    OrderStatusUpdate,
    OrderUpdate,
    ORDER_FILTER_FIELDS,
    ORDER_FILTER_PARAMS,
    ORDER_SORT_PARAMS,
)
from roster_console.services.orders import OrderService
from roster_console.utils.query_state import QueryState, SortDirection


def order_query_state(page_size: int | None = None) -> QueryState:
    """Query state an order list opens with: most recent first."""
    return QueryState(
        filter_params=ORDER_FILTER_PARAMS,
        sort_params=ORDER_SORT_PARAMS,
        default_sort="created_at",
        default_direction=SortDirection.DESC,
        page_size=page_size or get_settings().default_page_size,
    )


class OrderListController(CollectionController[OrderResponse]):
    """Order list, optionally scoped to one student."""

    noun = "order"
    plural = "orders"
    filter_fields = ORDER_FILTER_FIELDS
    update_model = OrderUpdate

    def __init__(
        self,
        service: OrderService | None = None,
        query: QueryState | None = None,
        *,
        student_id: int | None = None,
        paginated: bool = True,
    ):
        super().__init__(
            service or OrderService(),
            query or order_query_state(),
            paginated=paginated,
        )
        if student_id is not None:
            self.query.set_filter("student_id", student_id)

    @property
    def student_id(self) -> int | None:
        return self.query.filters.get("student_id")

    @property
    def total_amount(self) -> float:
        """Sum of the displayed orders' totals."""
        return sum(order.total for order in self.items)

    async def show_student(self, student_id: int | None) -> bool:
        """Scope the list to another student (None shows every order)."""
        return await self.apply_filter_change("student_id", student_id)

    async def toggle_status(self, order: OrderResponse) -> OrderResponse | None:
        """
        Flip an order between pending and paid.

        Args:
            order: The displayed order

        Returns:
            The order as stored after the change, or None on failure
        """
        if order.id is None:
            raise ValueError("Cannot change the status of an order without an id")
        if self._closed:
            return None

        self.error_message = ""
        self.submitting = True
        try:
            updated = await self.service.patch(
                order.id,
                OrderStatusUpdate(status=order.status.toggled()),
            )
        except Exception as e:
            self._fail(e, "Failed to update order status")
            return None
        finally:
            self.submitting = False

        await self._apply_updated(updated)
        return updated
