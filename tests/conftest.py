# tests/conftest.py
import random
from datetime import datetime

import pytest

from app.core.database import build_engine
from app.main import app
from app.ticket.numbers import TicketNumberRegistry
from app.ticket.services import TicketService, get_ticket_service
from app.ticket.store import TicketStore

FIXED_NOW = datetime(2024, 3, 5, 14, 30, 15)


def _make_service(low: int = 1000, high: int = 9999, seed: int = 7) -> TicketService:
    store = TicketStore(build_engine("sqlite://"))
    registry = TicketNumberRegistry(low=low, high=high, rng=random.Random(seed))
    return TicketService(store, registry, clock=lambda: FIXED_NOW)


@pytest.fixture
def make_service():
    return _make_service


@pytest.fixture
def service() -> TicketService:
    return _make_service()


@pytest.fixture(autouse=True)
def fresh_api_service(service):
    app.dependency_overrides[get_ticket_service] = lambda: service
    yield
    app.dependency_overrides.clear()
