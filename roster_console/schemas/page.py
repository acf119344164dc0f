"""Wire format of a paginated collection response."""

from typing import Generic, TypeVar
from pydantic import BaseModel, ConfigDict, Field

from roster_console.utils.pagination import PageResult

T = TypeVar("T")


class PageResponse(BaseModel, Generic[T]):
    """Offset-paginated page as serialized by the backend."""

    model_config = ConfigDict(populate_by_name=True)

    content: list[T] = Field(default_factory=list)
    total_elements: int = Field(0, alias="totalElements")
    total_pages: int = Field(0, alias="totalPages")
    size: int
    number: int = Field(0, description="Page index (0-indexed)")
    first: bool = True
    last: bool = True
    empty: bool = True

    def to_result(self) -> PageResult[T]:
        """Convert to the page held by a controller, keeping server values as-is."""
        return PageResult(
            items=list(self.content),
            page_index=self.number,
            page_count=self.total_pages,
            total_count=self.total_elements,
            page_size=self.size,
        )
