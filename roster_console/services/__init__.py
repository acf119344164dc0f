"""Backend collaborators for the console's collections."""

from roster_console.services.base import CollectionService
from roster_console.services.students import StudentService
from roster_console.services.orders import OrderService

__all__ = ["CollectionService", "StudentService", "OrderService"]
