"""Pytest configuration and fixtures."""

from collections import deque
from datetime import datetime

import pytest

from models.customer import Customer
from repositories.customer_repo import CustomerRepository
from repositories.reservation_repo import ReservationRepository


class FakeDatabase:
    """Store client double: records every statement and replays queued rows."""

    def __init__(self):
        self.calls: list[tuple[str, tuple]] = []
        self._results: deque = deque()

    def queue(self, *results: list[dict]) -> None:
        """Queue result sets, one per upcoming query."""
        self._results.extend(results)

    def query(self, sql, params=()):
        self.calls.append((sql, tuple(params)))
        if self._results:
            return self._results.popleft()
        return []

    @property
    def last_sql(self) -> str:
        return " ".join(self.calls[-1][0].split())

    @property
    def last_params(self) -> tuple:
        return self.calls[-1][1]


def customer_row(id, first, last, phone=None, notes="", **extra) -> dict:
    """A row shaped like the customer SELECT aliases."""
    return {
        "id": id,
        "firstName": first,
        "lastName": last,
        "phone": phone,
        "notes": notes,
        **extra,
    }


def reservation_row(id, customer_id, num_guests=2, start_at=None, notes="") -> dict:
    """A row shaped like the reservation SELECT aliases."""
    return {
        "id": id,
        "customerId": customer_id,
        "numGuests": num_guests,
        "startAt": start_at or datetime(2024, 5, 1, 19, 30),
        "notes": notes,
    }


@pytest.fixture
def fake_db() -> FakeDatabase:
    """Fresh store double for each test."""
    return FakeDatabase()


@pytest.fixture
def customer_repo(fake_db: FakeDatabase) -> CustomerRepository:
    return CustomerRepository(fake_db)


@pytest.fixture
def reservation_repo(fake_db: FakeDatabase) -> ReservationRepository:
    return ReservationRepository(fake_db)


@pytest.fixture
def jane() -> Customer:
    """Unsaved sample customer."""
    return Customer(first_name="Jane", last_name="Doe", phone="555-0100", notes="Window seat")
