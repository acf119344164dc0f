"""Client for the backend's order collection."""

from pydantic import BaseModel

from roster_console.schemas.order import OrderResponse
from roster_console.services.base import CollectionService, dump_payload


class OrderService(CollectionService[OrderResponse]):
    """Paginated, filterable access to ``/orders``."""

    resource = "orders"
    entity_model = OrderResponse

    async def patch(self, order_id: int, partial: BaseModel | dict) -> OrderResponse:
        """
        Apply a partial update, e.g. a status change.

        Args:
            order_id: ID of the order to change
            partial: Only the fields to change

        Returns:
            The order as stored after the change
        """
        data = await self._request("PATCH", f"/{order_id}", json=dump_payload(partial))
        return self._parse(data)

    async def list_for_student(self, student_id: int) -> list[OrderResponse]:
        """Get every order of one student, unpaginated."""
        data = await self._request("GET", params={"studentId": student_id})
        return [self._parse(item) for item in data or []]
