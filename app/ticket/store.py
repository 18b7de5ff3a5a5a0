# app/ticket/store.py
from sqlalchemy import func, select
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from app.core.database import Base
from app.ticket.models import Ticket


class TicketStore:
    """Append-only ticket records plus the sequential ticket ID counter.

    Not thread-safe on its own; ``TicketService`` guards it with its lock.
    """

    def __init__(self, engine: Engine):
        Base.metadata.create_all(bind=engine)
        self._sessions = sessionmaker(
            bind=engine, autoflush=False, expire_on_commit=False
        )
        with self._sessions() as db:
            self._counter = db.scalar(select(func.max(Ticket.ticket_id))) or 0

    def next_id(self) -> int:
        self._counter += 1
        return self._counter

    def append(self, ticket: Ticket) -> Ticket:
        with self._sessions() as db:
            db.add(ticket)
            db.commit()
        return ticket

    def find_by_id(self, ticket_id: int) -> Ticket | None:
        with self._sessions() as db:
            return db.get(Ticket, ticket_id)

    def all(self) -> list[Ticket]:
        with self._sessions() as db:
            return list(db.scalars(select(Ticket).order_by(Ticket.ticket_id)))
