"""Coordinates a collection view's query state, page fetches and mutations."""

import asyncio
import logging
from collections.abc import Coroutine, Mapping
from dataclasses import replace
from enum import Enum
from typing import Any, Generic, TypeVar

from roster_console.errors import ConsoleError, failure_message
from roster_console.utils.pagination import PageGap, PageResult, item_range, page_window
from roster_console.utils.query_state import QueryState

logger = logging.getLogger(__name__)

T = TypeVar("T")


class LoadStatus(str, Enum):
    """Status of a collection view."""

    IDLE = "idle"
    LOADING = "loading"
    ERROR = "error"


class CollectionController(Generic[T]):
    """
    Owns the page a list view displays and keeps it consistent with its query.

    The view calls the ``async`` operations in response to user events and
    re-reads ``page``, ``loading`` and ``error_message`` afterwards.
    Collaborator failures are caught here and surface as ``error_message``;
    the previously held page is left untouched when an operation fails.

    Only the most recently issued fetch may update ``page``: every refresh
    takes a sequence token and results carrying an older token are dropped.

    With ``paginated=True`` (the default) mutations re-fetch the current
    page so counts and ordering stay those of the server. With
    ``paginated=False`` the whole collection is held client side and
    mutations splice the held list instead.
    """

    noun = "item"
    plural = "items"
    # Filter keys that constrain a differently named entity attribute
    filter_fields: Mapping[str, str] = {}
    # Payload model an edited entity is sent as; None sends the entity itself
    update_model: type | None = None

    def __init__(self, service: Any, query: QueryState, *, paginated: bool = True):
        self.service = service
        self.query = query
        self.paginated = paginated

        self.page: PageResult[T] = PageResult.empty(query.page_size)
        self.loading = False
        self.submitting = False
        self.error_message = ""

        self._request_seq = 0
        self._tasks: set[asyncio.Task] = set()
        self._refresh_task: asyncio.Task | None = None
        self._closed = False

    # ============ Derived state ============

    @property
    def status(self) -> LoadStatus:
        if self.loading:
            return LoadStatus.LOADING
        if self.error_message:
            return LoadStatus.ERROR
        return LoadStatus.IDLE

    @property
    def items(self) -> list[T]:
        return self.page.items

    @property
    def current_page(self) -> int:
        return self.page.page_index

    @property
    def total_pages(self) -> int:
        return self.page.page_count

    @property
    def total_count(self) -> int:
        return self.page.total_count

    @property
    def visible_pages(self) -> list[int | PageGap]:
        return page_window(self.current_page, self.total_pages)

    @property
    def item_range(self) -> tuple[int, int]:
        return item_range(self.current_page, self.page.page_size, self.total_count)

    @property
    def closed(self) -> bool:
        return self._closed

    # ============ Fetching ============

    async def refresh(self, page: int | None = None) -> bool:
        """
        Fetch a page for the current query and make it the displayed page.

        Args:
            page: Page to fetch (0-indexed), defaults to the current page

        Returns:
            True if the fetched page was adopted
        """
        if self._closed:
            return False
        if page is None:
            page = self.current_page

        self._request_seq += 1
        token = self._request_seq
        self.loading = True
        self.error_message = ""
        query = {**self.query.to_query(), "page": page}

        try:
            result = await self.service.fetch_page(query)
        except Exception as e:
            if self._is_stale(token):
                logger.debug(f"Ignoring failure of superseded {self.plural} request for page {page}")
                return False
            self._fail(e, f"Failed to load {self.plural}")
            self.loading = False
            return False

        if self._is_stale(token):
            logger.debug(f"Discarding stale {self.plural} response for page {page}")
            return False

        self.page = result
        # The server may clamp the page; its index is authoritative
        self.query.page = result.page_index
        self.loading = False
        return True

    async def apply_filter_change(self, key: str, value: Any) -> bool:
        self.query.set_filter(key, value)
        self.query.reset_to_first_page()
        return await self.refresh(0)

    async def apply_filters(self, values: Mapping[str, Any]) -> bool:
        self.query.set_filters(values)
        self.query.reset_to_first_page()
        return await self.refresh(0)

    async def clear_filters(self) -> bool:
        self.query.clear_filters()
        self.query.reset_to_first_page()
        return await self.refresh(0)

    async def apply_sort_change(self, column: str) -> bool:
        """Sort by column, flipping the direction if it is already active."""
        self.query.set_sort(column)
        self.query.reset_to_first_page()
        return await self.refresh(0)

    async def change_page_size(self, page_size: int) -> bool:
        self.query.set_page_size(page_size)
        self.query.reset_to_first_page()
        return await self.refresh(0)

    async def change_page(self, page: int) -> bool:
        """Go to a page; out of range or current pages are ignored."""
        if page < 0 or page >= self.total_pages or page == self.current_page:
            return False
        return await self.refresh(page)

    async def next_page(self) -> bool:
        return await self.change_page(self.current_page + 1)

    async def previous_page(self) -> bool:
        return await self.change_page(self.current_page - 1)

    # ============ Mutations ============

    async def create(self, payload: Any) -> T | None:
        """
        Create an entity and bring the displayed page up to date.

        Args:
            payload: Fields of the new entity

        Returns:
            The created entity, or None if the backend rejected it
        """
        if self._closed:
            return None
        self.error_message = ""
        self.submitting = True
        try:
            created = await self.service.create(payload)
        except Exception as e:
            self._fail(e, f"Failed to create {self.noun}")
            return None
        finally:
            self.submitting = False

        if self._closed:
            return created
        if self.paginated:
            await self.refresh(self.current_page)
        else:
            self.page = self.page.with_items([*self.page.items, created], self.total_count + 1)
        return created

    async def update(self, entity: T) -> T | None:
        """
        Save an edited entity.

        The stored entity replaces the displayed one in place. In a
        paginated collection the page is re-fetched instead when the edit
        changed a field the active sort or filters depend on.
        """
        entity_id = getattr(entity, "id", None)
        if entity_id is None:
            raise ValueError(f"Cannot update a {self.noun} without an id")
        if self._closed:
            return None

        self.error_message = ""
        self.submitting = True
        try:
            updated = await self.service.update(entity_id, self._update_payload(entity))
        except Exception as e:
            self._fail(e, f"Failed to update {self.noun}")
            return None
        finally:
            self.submitting = False

        await self._apply_updated(updated)
        return updated

    async def remove(self, entity_id: int) -> bool:
        """Delete an entity and drop it from the displayed page."""
        if self._closed:
            return False
        self.error_message = ""
        self.submitting = True
        try:
            await self.service.delete(entity_id)
        except Exception as e:
            self._fail(e, f"Failed to delete {self.noun}")
            return False
        finally:
            self.submitting = False

        if self._closed:
            return True
        if self.paginated:
            await self._refetch_after_removal(entity_id)
        else:
            items = [item for item in self.page.items if getattr(item, "id", None) != entity_id]
            removed = len(self.page.items) - len(items)
            self.page = self.page.with_items(items, max(self.total_count - removed, 0))
        return True

    async def _refetch_after_removal(self, entity_id: int) -> None:
        if not await self.refresh(self.current_page):
            if not self._closed:
                # Keep the load error but stop showing the deleted entity
                self._drop_from_page(entity_id)
            return
        last_page = self.page.page_count - 1
        # Removing the only item of the trailing page leaves nothing to show
        if self.page.is_empty and 0 <= last_page < self.page.page_index:
            await self.refresh(last_page)

    async def _apply_updated(self, updated: T) -> None:
        if self._closed:
            return
        index = self._index_of(getattr(updated, "id", None))
        if index is None:
            return
        previous = self.page.items[index]
        if self.paginated and self._changes_position(previous, updated):
            await self.refresh(self.current_page)
            return
        items = list(self.page.items)
        items[index] = updated
        self.page = replace(self.page, items=items)

    def _drop_from_page(self, entity_id: int) -> None:
        items = [item for item in self.page.items if getattr(item, "id", None) != entity_id]
        removed = len(self.page.items) - len(items)
        if removed:
            self.page = replace(self.page, items=items, total_count=max(self.total_count - removed, 0))

    def _update_payload(self, entity: T) -> Any:
        if self.update_model is None:
            return entity
        return self.update_model.model_validate(entity.model_dump())

    def _index_of(self, entity_id: Any) -> int | None:
        if entity_id is None:
            return None
        for index, item in enumerate(self.page.items):
            if getattr(item, "id", None) == entity_id:
                return index
        return None

    def _changes_position(self, before: T, after: T) -> bool:
        """Whether an edit touched a field the active sort or filters use."""
        fields = {self.query.sort_column}
        fields.update(self.filter_fields.get(key, key) for key in self.query.filters)
        return any(getattr(before, name, None) != getattr(after, name, None) for name in fields)

    def _fail(self, error: Exception, default: str) -> None:
        if self._closed:
            logger.debug(f"Ignoring failure after close: {default}")
            return
        self.error_message = failure_message(error, default)
        if isinstance(error, ConsoleError):
            logger.warning(f"{default}: {error!r}")
        else:
            logger.exception(f"{default}: unexpected error")

    def _is_stale(self, token: int) -> bool:
        return self._closed or token != self._request_seq

    # ============ Lifetime ============

    def schedule(self, operation: Coroutine) -> asyncio.Task:
        """Run an operation as a task owned by this controller."""
        if self._closed:
            operation.close()
            raise RuntimeError(f"{type(self).__name__} is closed")
        task = asyncio.ensure_future(operation)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    def schedule_refresh(self, page: int | None = None) -> asyncio.Task:
        """Start a refresh in the background, cancelling a previously scheduled one."""
        if self._refresh_task is not None and not self._refresh_task.done():
            self._refresh_task.cancel()
        self._refresh_task = self.schedule(self.refresh(page))
        return self._refresh_task

    def close(self) -> None:
        """Cancel pending work; late results are discarded from now on."""
        self._closed = True
        for task in list(self._tasks):
            task.cancel()
        self.loading = False
        self.submitting = False

    async def aclose(self) -> None:
        tasks = list(self._tasks)
        self.close()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)
        self.loading = False
        self.submitting = False

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.aclose()
