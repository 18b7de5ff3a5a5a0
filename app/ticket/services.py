# app/ticket/services.py
import logging
import threading
from collections.abc import Callable
from datetime import datetime
from functools import lru_cache

from app.core.config import get_settings
from app.core.database import engine
from app.ticket.admins import is_valid_category, resolve_admin
from app.ticket.exceptions import EmptyFieldError, InvalidCategoryError, NumbersExhaustedError
from app.ticket.models import STATUS_OPEN, Ticket
from app.ticket.numbers import TicketNumberRegistry
from app.ticket.schemas import TicketCreate
from app.ticket.store import TicketStore

logger = logging.getLogger(__name__)


class TicketService:
    """Validates ticket requests and records them.

    The service owns the ticket store and the ticket number registry. Every
    read and write goes through a single lock, so the ID counter, the
    per-category number sets and the record list always change together.
    """

    def __init__(
        self,
        store: TicketStore,
        registry: TicketNumberRegistry | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self._store = store
        self._registry = registry or TicketNumberRegistry()
        self._clock = clock
        self._lock = threading.Lock()
        for ticket in store.all():
            self._registry.reserve(ticket.category, ticket.ticket_number)

    def create_ticket(self, payload: TicketCreate) -> Ticket:
        name = payload.name.strip()
        description = payload.description.strip()
        category = payload.category.strip()

        if not name:
            raise EmptyFieldError("name")
        if not description:
            raise EmptyFieldError("description")
        if not is_valid_category(category):
            raise InvalidCategoryError(category)

        category = category.upper()
        with self._lock:
            # Number first: an exhausted category must not burn a ticket ID
            try:
                number = self._registry.issue(category)
            except NumbersExhaustedError:
                logger.error("No ticket numbers left for category %s", category)
                raise
            ticket = Ticket(
                ticket_id=self._store.next_id(),
                ticket_number=number,
                name=name,
                description=description,
                category=category,
                assigned_to=resolve_admin(category),
                status=STATUS_OPEN,
                created_at=self._clock(),
            )
            self._store.append(ticket)
            remaining = self._registry.remaining(category)

        logger.info(
            "Created ticket %d (%s-%d) assigned to %s, %d numbers left",
            ticket.ticket_id, ticket.category, ticket.ticket_number, ticket.assigned_to, remaining,
        )
        return ticket

    def get_ticket(self, ticket_id: int) -> Ticket | None:
        with self._lock:
            return self._store.find_by_id(ticket_id)

    def get_all_tickets(self) -> list[Ticket]:
        with self._lock:
            return self._store.all()


@lru_cache
def get_ticket_service() -> TicketService:
    settings = get_settings()
    registry = TicketNumberRegistry(max_attempts=settings.TICKET_NUMBER_MAX_ATTEMPTS)
    return TicketService(TicketStore(engine), registry)
