# app/ticket/admins.py
from pydantic import BaseModel, ConfigDict

NO_ADMIN = "No Admin Found"


class Admin(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    category: str


ADMINS: tuple[Admin, ...] = (
    Admin(name="Alice", category="IT"),
    Admin(name="Bob", category="HR"),
    Admin(name="Charlie", category="Finance"),
)


def find_admin(category: str) -> Admin | None:
    for admin in ADMINS:
        if admin.category.casefold() == category.casefold():
            return admin
    return None


def resolve_admin(category: str) -> str:
    admin = find_admin(category)
    return admin.name if admin else NO_ADMIN


def is_valid_category(category: str) -> bool:
    return find_admin(category) is not None


def categories() -> list[str]:
    return [admin.category for admin in ADMINS]
