"""Shared fixtures for the console tests."""

import httpx
import pytest

from fake_backend import FakeBackend
from fakes import FakeCollectionService, make_orders, make_students
from roster_console.schemas import OrderResponse, StudentResponse
from roster_console.services import OrderService, StudentService

BASE_URL = "http://testserver"


@pytest.fixture
def backend():
    """Backend seeded with three students and their orders."""
    fake = FakeBackend()
    ada = fake.add_student("Ada Lovelace", "10", "Lincoln High")
    alan = fake.add_student("Alan Turing", "11", "Roosevelt Academy")
    fake.add_student("Grace Hopper", "10", "Lincoln High")
    fake.add_order(ada["id"], 25.5, "pending")
    fake.add_order(ada["id"], 99.99, "paid")
    fake.add_order(alan["id"], 12.0, "pending")
    return fake


@pytest.fixture
def transport(backend):
    return httpx.ASGITransport(app=backend.app)


@pytest.fixture
def student_service(transport):
    return StudentService(BASE_URL, transport=transport, retry_attempts=1)


@pytest.fixture
def order_service(transport):
    return OrderService(BASE_URL, transport=transport, retry_attempts=1)


@pytest.fixture
def fake_students():
    """Twenty-five students served ten per page."""
    return FakeCollectionService(StudentResponse, make_students(25))


@pytest.fixture
def fake_orders():
    return FakeCollectionService(OrderResponse, make_orders(6))
