# app/cli.py
"""Interactive console front-end for the ticket service."""
import argparse
import sys
from typing import TextIO

from app.core.logging import configure_logging
from app.ticket.exceptions import InvalidCategoryError, NumbersExhaustedError
from app.ticket.models import Ticket
from app.ticket.schemas import TicketCreate
from app.ticket.services import TicketService, get_ticket_service

MENU = (
    "\n===== Ticket Management System =====\n"
    "1. Create Ticket\n"
    "2. View Tickets\n"
    "3. Exit\n"
)
TIME_FORMAT = "%d-%m-%Y %H:%M:%S"
RULE = "-------------------------------"


class TicketMenu:
    def __init__(self, service: TicketService, stdin: TextIO | None = None, stdout: TextIO | None = None):
        self.service = service
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout

    def say(self, text: str = "") -> None:
        print(text, file=self.stdout)

    def ask(self, prompt: str) -> str | None:
        """Prompt for one line; None at end of input."""
        self.stdout.write(prompt)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            return None
        return line.strip()

    def run(self) -> None:
        while True:
            self.stdout.write(MENU)
            choice = self.ask("Choose option: ")
            if choice is None or choice == "3":
                return
            if choice == "1":
                self.create_ticket()
            elif choice == "2":
                self.view_tickets()
            else:
                self.say("Invalid choice! Please select 1, 2, or 3.")

    def create_ticket(self) -> None:
        name = self.ask("Enter Ticket Name: ")
        if not name:
            self.say("Ticket Name cannot be empty!")
            return
        description = self.ask("Enter Description: ")
        if not description:
            self.say("Description cannot be empty!")
            return
        category = self.ask("Enter Category (IT/HR/Finance): ") or ""

        payload = TicketCreate(name=name, description=description, category=category)
        try:
            ticket = self.service.create_ticket(payload)
        except InvalidCategoryError:
            self.say("Invalid Category! Ticket not created.")
            return
        except NumbersExhaustedError as exc:
            self.say(f"No ticket numbers left for category {exc.category}. Ticket not created.")
            return

        self.say("\nTicket Created Successfully!")
        self.say(f"Ticket ID: {ticket.ticket_id}")
        self.say(f"Ticket Number: {ticket.ticket_number}")
        self.say(f"Assigned To: {ticket.assigned_to}")
        self.say(f"Created At: {ticket.created_at.strftime(TIME_FORMAT)}")

    def view_tickets(self) -> None:
        tickets = self.service.get_all_tickets()
        if not tickets:
            self.say("No tickets found.")
            return
        for ticket in tickets:
            self.print_ticket(ticket)

    def print_ticket(self, ticket: Ticket) -> None:
        self.say("\n" + RULE)
        self.say(f"Ticket ID     : {ticket.ticket_id}")
        self.say(f"Ticket Number : {ticket.ticket_number}")
        self.say(f"Name          : {ticket.name}")
        self.say(f"Description   : {ticket.description}")
        self.say(f"Category      : {ticket.category}")
        self.say(f"Assigned To   : {ticket.assigned_to}")
        self.say(f"Status        : {ticket.status}")
        self.say(f"Created At    : {ticket.created_at.strftime(TIME_FORMAT)}")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Helpdesk ticket console")
    parser.add_argument("--log-level", default="WARNING")
    args = parser.parse_args(argv)

    configure_logging(args.log_level)
    TicketMenu(get_ticket_service()).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
