# app/core/database.py
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import StaticPool

from app.core.config import get_settings

Base = declarative_base()


def is_memory_url(url: str) -> bool:
    return url in ("sqlite://", "sqlite:///") or ":memory:" in url


def build_engine(url: str) -> Engine:
    """Create an engine; in-memory SQLite shares one connection across threads."""
    if not url.startswith("sqlite"):
        return create_engine(url)

    connect_args = {"check_same_thread": False}
    if is_memory_url(url):
        return create_engine(url, connect_args=connect_args, poolclass=StaticPool)
    return create_engine(url, connect_args=connect_args)


settings = get_settings()
engine = build_engine(settings.DATABASE_URL)
