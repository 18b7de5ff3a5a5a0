# tests/test_services.py
import logging
import random
import threading

import pytest

from app.core.database import build_engine
from app.ticket.exceptions import EmptyFieldError, InvalidCategoryError, NumbersExhaustedError
from app.ticket.numbers import TicketNumberRegistry
from app.ticket.schemas import TicketCreate
from app.ticket.services import TicketService
from app.ticket.store import TicketStore


def payload(name="Printer", description="Paper jam", category="IT"):
    return TicketCreate(name=name, description=description, category=category)


def test_ids_are_sequential_across_categories(service):
    ids = [
        service.create_ticket(payload(category=category)).ticket_id
        for category in ["IT", "HR", "Finance", "it", "hr"]
    ]
    assert ids == [1, 2, 3, 4, 5]


def test_category_is_normalized_and_admin_assigned(service):
    ticket = service.create_ticket(payload(category="hr"))
    assert ticket.category == "HR"
    assert ticket.assigned_to == "Bob"
    assert ticket.status == "Open"


def test_empty_name_consumes_nothing(service):
    with pytest.raises(EmptyFieldError) as exc_info:
        service.create_ticket(payload(name="   "))
    assert exc_info.value.field == "name"
    assert service.get_all_tickets() == []

    ticket = service.create_ticket(payload())
    assert ticket.ticket_id == 1


def test_empty_description_rejected(service):
    with pytest.raises(EmptyFieldError) as exc_info:
        service.create_ticket(payload(description=""))
    assert exc_info.value.field == "description"


def test_invalid_category_rejected(service):
    with pytest.raises(InvalidCategoryError):
        service.create_ticket(payload(category="Sales"))


def test_ticket_numbers_unique_per_category_until_exhausted(make_service):
    service = make_service(low=1000, high=1019)
    numbers = [service.create_ticket(payload()).ticket_number for _ in range(20)]
    assert sorted(numbers) == list(range(1000, 1020))

    with pytest.raises(NumbersExhaustedError):
        service.create_ticket(payload())

    # exhaustion does not burn an ID
    assert service.create_ticket(payload(category="HR")).ticket_id == 21


def test_get_ticket(service):
    created = service.create_ticket(payload(name="Badge"))
    found = service.get_ticket(created.ticket_id)
    assert found.name == "Badge"
    assert found.ticket_number == created.ticket_number
    assert service.get_ticket(999) is None


def test_get_all_in_creation_order(service):
    for name in ["a", "b", "c"]:
        service.create_ticket(payload(name=name))
    assert [t.name for t in service.get_all_tickets()] == ["a", "b", "c"]


def test_duplicate_content_allowed(service):
    first = service.create_ticket(payload())
    second = service.create_ticket(payload())
    assert first.ticket_id != second.ticket_id
    assert first.ticket_number != second.ticket_number


def test_concurrent_creates_keep_invariants(service):
    errors = []

    def worker():
        try:
            for _ in range(25):
                service.create_ticket(payload())
        except Exception as exc:  # surfaced through the assertion below
            errors.append(exc)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert errors == []
    tickets = service.get_all_tickets()
    assert [t.ticket_id for t in tickets] == list(range(1, 201))
    assert len({t.ticket_number for t in tickets}) == 200


def test_service_rebuilds_registry_from_existing_store():
    engine = build_engine("sqlite://")
    first = TicketService(TicketStore(engine), TicketNumberRegistry(low=1, high=2, rng=random.Random(0)))
    first.create_ticket(payload())

    registry = TicketNumberRegistry(low=1, high=2, rng=random.Random(0))
    second = TicketService(TicketStore(engine), registry)
    assert len(registry.issued("IT")) == 1

    ticket = second.create_ticket(payload())
    assert ticket.ticket_id == 2
    with pytest.raises(NumbersExhaustedError):
        second.create_ticket(payload())


def test_store_counter_starts_at_one():
    store = TicketStore(build_engine("sqlite://"))
    assert store.next_id() == 1
    assert store.next_id() == 2
    assert store.all() == []
    assert store.find_by_id(1) is None


def test_create_logs_remaining_numbers(make_service, caplog):
    service = make_service(low=1000, high=1004)
    with caplog.at_level(logging.INFO, logger="app.ticket.services"):
        service.create_ticket(payload())
    assert "4 numbers left" in caplog.text
