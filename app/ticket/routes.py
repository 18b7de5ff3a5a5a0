# app/ticket/routes.py
import logging

from fastapi import APIRouter, Depends, HTTPException, Path
from app.ticket.admins import categories, resolve_admin
from app.ticket.exceptions import EmptyFieldError, InvalidCategoryError, NumbersExhaustedError
from app.ticket.schemas import CategoryOut, TicketCreate, TicketOut
from app.ticket.services import TicketService, get_ticket_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Tickets"])

# SQLite INTEGER range
MIN_TICKET_ID = -(2**63)
MAX_TICKET_ID = 2**63 - 1


@router.post("/create", response_model=TicketOut)
def create(ticket: TicketCreate, service: TicketService = Depends(get_ticket_service)):
    try:
        return service.create_ticket(ticket)
    except (EmptyFieldError, InvalidCategoryError) as exc:
        logger.warning("Rejected ticket: %s", exc)
        raise HTTPException(status_code=400, detail="Invalid input")
    except NumbersExhaustedError:
        raise HTTPException(status_code=409, detail="Ticket numbers exhausted for category")


# Without this, other verbs would fall through to the static mount at "/"
@router.api_route(
    "/create",
    methods=["GET", "HEAD", "PUT", "PATCH", "DELETE", "OPTIONS"],
    include_in_schema=False,
)
def create_wrong_method():
    raise HTTPException(status_code=405, detail="Method Not Allowed", headers={"Allow": "POST"})


@router.get("/tickets", response_model=list[TicketOut])
def list_all(service: TicketService = Depends(get_ticket_service)):
    return service.get_all_tickets()


@router.get("/ticket/id/{ticket_id}", response_model=TicketOut)
def get(
    ticket_id: int = Path(..., ge=MIN_TICKET_ID, le=MAX_TICKET_ID),
    service: TicketService = Depends(get_ticket_service),
):
    ticket = service.get_ticket(ticket_id)
    if not ticket:
        raise HTTPException(status_code=404, detail="Ticket not found")
    return ticket


# Empty or multi-segment ids, e.g. /api/ticket/id/ or /api/ticket/id/1/2
@router.get("/ticket/id/{rest:path}", include_in_schema=False)
def get_malformed(rest: str):
    raise HTTPException(status_code=400, detail="Invalid ticket ID")


@router.get("/categories", response_model=list[CategoryOut])
def list_categories():
    return [CategoryOut(category=category, admin=resolve_admin(category)) for category in categories()]
