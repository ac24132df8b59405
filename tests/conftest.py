"""
Shared pytest fixtures for all tests.

Provides a database engine, an ORM schema with authors and books, and
sessions bound to it. Set DATABASE_URL (or put it in a .env file) to run the
integration tests against a real database; in-memory SQLite is used
otherwise.
"""

import os
from pathlib import Path

import pytest
from dotenv import load_dotenv
from sqlalchemy import ForeignKey, String, create_engine
from sqlalchemy.orm import (
    DeclarativeBase,
    Mapped,
    Session,
    mapped_column,
    relationship,
)
from sqlalchemy.pool import StaticPool

env_path = Path(__file__).parent.parent / ".env"
if env_path.exists():
    load_dotenv(env_path)


class Base(DeclarativeBase):
    pass


class Author(Base):
    __tablename__ = "author"
    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    books: Mapped[list["Book"]] = relationship(back_populates="author")


class Book(Base):
    __tablename__ = "book"
    id: Mapped[int] = mapped_column(primary_key=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    author_id: Mapped[int] = mapped_column(ForeignKey("author.id"), nullable=False)
    author: Mapped[Author] = relationship(back_populates="books")


@pytest.fixture(scope="session")
def db_url():
    """Database URL from environment, in-memory SQLite by default."""
    return os.environ.get("DATABASE_URL", "sqlite://")


@pytest.fixture(scope="function")
def db_engine(db_url):
    """SQLAlchemy engine with the author/book schema and a few rows."""
    if db_url.startswith("sqlite"):
        engine = create_engine(
            db_url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    else:
        engine = create_engine(db_url, pool_pre_ping=True)

    Base.metadata.create_all(engine)
    with Session(engine) as session:
        tolkien = Author(name="J.R.R. Tolkien")
        le_guin = Author(name="Ursula K. Le Guin")
        session.add_all(
            [
                Book(title="The Hobbit", author=tolkien),
                Book(title="The Silmarillion", author=tolkien),
                Book(title="A Wizard of Earthsea", author=le_guin),
            ]
        )
        session.commit()

    yield engine

    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture(scope="function")
def db_session(db_engine):
    """ORM session on the test engine."""
    with Session(db_engine) as session:
        yield session
