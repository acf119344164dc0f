"""Scriptable in-memory collaborator for controller tests."""

import asyncio

from pydantic import BaseModel

from roster_console.errors import NotFoundFailure
from roster_console.schemas import OrderResponse, OrderStatus, StudentResponse
from roster_console.services.base import dump_payload
from roster_console.utils.pagination import PageResult, page_count


class FakeCollectionService:
    """
    Holds entities in a list and serves them page by page.

    ``errors`` maps an operation name ("fetch_page", "create", ...) to the
    exception that operation raises. ``gates`` maps a page index to an
    event a fetch of that page waits on before answering. A page past the
    end is clamped to the last page unless ``clamp_pages`` is turned off.
    """

    def __init__(self, model: type[BaseModel], items: list | None = None):
        self.model = model
        self.items = list(items or [])
        self.fetches: list[dict] = []
        self.calls: list[tuple] = []
        self.errors: dict[str, Exception] = {}
        self.gates: dict[int, asyncio.Event] = {}
        self.clamp_pages = True
        self._next_id = max((item.id for item in self.items), default=0) + 1

    def _raise_if_failing(self, operation: str) -> None:
        error = self.errors.get(operation)
        if error is not None:
            raise error

    async def fetch_page(self, query: dict) -> PageResult:
        self.fetches.append(query)
        gate = self.gates.get(query["page"])
        if gate is not None:
            await gate.wait()
        self._raise_if_failing("fetch_page")

        size = query["size"]
        total = len(self.items)
        pages = page_count(total, size)
        page = query["page"]
        if self.clamp_pages:
            page = min(page, max(pages - 1, 0))
        return PageResult(
            items=self.items[page * size:(page + 1) * size],
            page_index=page,
            page_count=pages,
            total_count=total,
            page_size=size,
        )

    async def create(self, payload):
        self.calls.append(("create", payload))
        self._raise_if_failing("create")
        entity = self.model.model_validate({**dump_payload(payload), "id": self._next_id})
        self._next_id += 1
        self.items.append(entity)
        return entity

    def _index_of(self, entity_id: int) -> int:
        for index, item in enumerate(self.items):
            if item.id == entity_id:
                return index
        raise NotFoundFailure(None, 404)

    async def update(self, entity_id: int, payload):
        self.calls.append(("update", entity_id, payload))
        self._raise_if_failing("update")
        index = self._index_of(entity_id)
        entity = self.model.model_validate({**dump_payload(payload), "id": entity_id})
        self.items[index] = entity
        return entity

    async def patch(self, entity_id: int, partial):
        self.calls.append(("patch", entity_id, partial))
        self._raise_if_failing("patch")
        index = self._index_of(entity_id)
        current = self.items[index].model_dump(by_alias=True)
        entity = self.model.model_validate({**current, **dump_payload(partial)})
        self.items[index] = entity
        return entity

    async def delete(self, entity_id: int) -> None:
        self.calls.append(("delete", entity_id))
        self._raise_if_failing("delete")
        del self.items[self._index_of(entity_id)]


def make_students(count: int) -> list[StudentResponse]:
    return [
        StudentResponse(id=i, name=f"Student {i:02d}", grade=f"{i % 12 + 1}", school="Lincoln High")
        for i in range(1, count + 1)
    ]


def make_orders(count: int, student_id: int = 1) -> list[OrderResponse]:
    return [
        OrderResponse(
            id=i,
            student_id=student_id,
            total=10.0 * i,
            status=OrderStatus.PENDING if i % 2 else OrderStatus.PAID,
        )
        for i in range(1, count + 1)
    ]
