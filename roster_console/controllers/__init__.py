"""Controllers backing the console's list views."""

from roster_console.controllers.collection import CollectionController, LoadStatus
from roster_console.controllers.students import StudentListController, student_query_state
from roster_console.controllers.orders import OrderListController, order_query_state

__all__ = [
    "CollectionController",
    "LoadStatus",
    "StudentListController",
    "student_query_state",
    "OrderListController",
    "order_query_state",
]
