# app/ticket/exceptions.py


class TicketError(Exception):
    """Base class for rejected ticket requests."""


class EmptyFieldError(TicketError):
    def __init__(self, field: str):
        super().__init__(f"{field} cannot be empty")
        self.field = field


class InvalidCategoryError(TicketError):
    def __init__(self, category: str):
        super().__init__(f"invalid category: {category!r}")
        self.category = category


class NumbersExhaustedError(TicketError):
    """Every ticket number of a category has already been issued."""

    def __init__(self, category: str):
        super().__init__(f"ticket numbers exhausted for category {category}")
        self.category = category
