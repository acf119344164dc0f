"""Client for the backend's student collection."""

from roster_console.schemas.student import StudentResponse
from roster_console.services.base import CollectionService


class StudentService(CollectionService[StudentResponse]):
    """Paginated, filterable access to ``/students``."""

    resource = "students"
    entity_model = StudentResponse
