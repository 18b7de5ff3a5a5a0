# app/ticket/models.py
from sqlalchemy import Column, DateTime, Integer, String, UniqueConstraint
from app.core.database import Base

STATUS_OPEN = "Open"


class Ticket(Base):
    __tablename__ = "tickets"
    __table_args__ = (
        UniqueConstraint("category", "ticket_number", name="uq_tickets_category_number"),
    )

    ticket_id = Column(Integer, primary_key=True, autoincrement=False)
    ticket_number = Column(Integer, nullable=False)
    name = Column(String, nullable=False)
    description = Column(String, nullable=False)
    category = Column(String, index=True, nullable=False)
    assigned_to = Column(String, nullable=False)
    status = Column(String, default=STATUS_OPEN, nullable=False)
    created_at = Column(DateTime, nullable=False)

    def __repr__(self) -> str:
        return f"<Ticket {self.ticket_id} {self.category}-{self.ticket_number}>"
