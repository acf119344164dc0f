"""Controller for the student list view."""

from roster_console.config import get_settings
from roster_console.controllers.collection import CollectionController
from roster_console.schemas.student import (
    StudentResponse,
    StudentUpdate,
    STUDENT_FILTER_PARAMS,
    STUDENT_SORT_PARAMS,
)
from roster_console.services.students import StudentService
from roster_console.utils.query_state import QueryState, SortDirection


def student_query_state(page_size: int | None = None) -> QueryState:
    """Query state a student list opens with: oldest first, no filters."""
    return QueryState(
        filter_params=STUDENT_FILTER_PARAMS,
        sort_params=STUDENT_SORT_PARAMS,
        default_sort="id",
        default_direction=SortDirection.ASC,
        page_size=page_size or get_settings().default_page_size,
    )


class StudentListController(CollectionController[StudentResponse]):
    """Paginated student list with a single selected student."""

    noun = "student"
    plural = "students"
    update_model = StudentUpdate

    def __init__(
        self,
        service: StudentService | None = None,
        query: QueryState | None = None,
        *,
        paginated: bool = True,
    ):
        super().__init__(
            service or StudentService(),
            query or student_query_state(),
            paginated=paginated,
        )
        self.selected: StudentResponse | None = None

    def select(self, student: StudentResponse) -> None:
        self.selected = student

    def is_selected(self, student: StudentResponse) -> bool:
        return self.selected is not None and self.selected.id == student.id

    async def update(self, entity: StudentResponse) -> StudentResponse | None:
        updated = await super().update(entity)
        if updated is not None and self.is_selected(updated):
            self.selected = updated
        return updated

    async def remove(self, entity_id: int) -> bool:
        removed = await super().remove(entity_id)
        if removed and self.selected is not None and self.selected.id == entity_id:
            self.selected = None
        return removed
