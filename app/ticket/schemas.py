# app/ticket/schemas.py
from datetime import datetime

from pydantic import AliasChoices, BaseModel, Field


# The bundled web page posts capitalized keys; both spellings are accepted.
class TicketCreate(BaseModel):
    name: str = Field(..., validation_alias=AliasChoices("name", "Name"))
    description: str = Field(..., validation_alias=AliasChoices("description", "Description"))
    category: str = Field(..., validation_alias=AliasChoices("category", "Category"))


class TicketOut(BaseModel):
    ticket_id: int
    ticket_number: int
    name: str
    description: str
    category: str
    assigned_to: str
    status: str
    created_at: datetime

    model_config = {"from_attributes": True}


class CategoryOut(BaseModel):
    category: str
    admin: str
