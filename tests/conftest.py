import os
import re

os.environ.setdefault("DATABASE_URL", "sqlite://")

from typing import AsyncGenerator, Callable

import pytest
from fastapi import FastAPI
from httpx import AsyncClient, ASGITransport
from sqlalchemy import event
from sqlalchemy.exc import OperationalError
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, Session, create_engine

import portfolio_tracker.models  # noqa: F401
from portfolio_tracker.core import security
from portfolio_tracker.core.security import create_access_token
from portfolio_tracker.database import get_session
from portfolio_tracker.main import app as main_app
from portfolio_tracker.models.user import User


@pytest.fixture()
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture()
def db(engine) -> Callable[[], Session]:
    """Opens a fresh session, so assertions see what the routes committed."""
    return lambda: Session(engine)


@pytest.fixture()
def app(engine) -> FastAPI:
    def override_get_session():
        with Session(engine) as session:
            yield session

    main_app.dependency_overrides[get_session] = override_get_session
    yield main_app
    main_app.dependency_overrides.clear()
    security.REVOKED_TOKENS.clear()


@pytest.fixture()
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


async def register_and_login(client: AsyncClient, email: str, password: str = "secret123") -> dict:
    resp = await client.post("/auth/register", json={"email": email, "password": password})
    assert resp.status_code == 201, resp.text
    resp = await client.post("/auth/login", data={"username": email, "password": password})
    assert resp.status_code == 200, resp.text
    return {"Authorization": f"Bearer {resp.json()['access_token']}"}


@pytest.fixture()
async def auth_headers(client) -> dict:
    return await register_and_login(client, "alice@example.com")


@pytest.fixture()
async def other_headers(client) -> dict:
    return await register_and_login(client, "bob@example.com")


AAPL = {
    "symbol": "aapl",
    "name": "Apple Inc.",
    "type": "stock",
    "quantity": 100,
    "purchase_price": 150.00,
    "current_price": 155.00,
}


@pytest.fixture()
def aapl_payload() -> dict:
    return dict(AAPL)


@pytest.fixture()
def login(client) -> Callable:
    async def _login(email: str, password: str = "secret123") -> dict:
        return await register_and_login(client, email, password)
    return _login


@pytest.fixture()
def no_portfolio_headers(db) -> dict:
    """A signed-in user that has no portfolio row."""
    with db() as session:
        user = User(email="nofolio@example.com", hashed_password="x")
        session.add(user)
        session.commit()
        token = create_access_token({"sub": str(user.id)})
    return {"Authorization": f"Bearer {token}"}


STATEMENT_TARGETS = {
    "INSERT": r"^INSERT INTO {}\b",
    "UPDATE": r"^UPDATE {}\b",
    "DELETE": r"^DELETE FROM {}\b",
    "SELECT": r"^SELECT\b.*\bFROM {}\b",
}


@pytest.fixture()
def fail_statements(engine) -> Callable[[str, str], None]:
    """
    fail_statements("INSERT", "watchlist") makes every matching statement
    raise OperationalError until the test ends, like an unreachable store.
    """
    listeners = []

    def _fail(verb: str, table: str) -> None:
        pattern = re.compile(STATEMENT_TARGETS[verb].format(re.escape(table)), re.DOTALL)

        def before_cursor_execute(conn, cursor, statement, parameters, context, executemany):
            if pattern.search(statement.replace('"', "")):
                raise OperationalError(statement, parameters, Exception("store unavailable"))

        event.listen(engine, "before_cursor_execute", before_cursor_execute)
        listeners.append(before_cursor_execute)

    yield _fail
    for listener in listeners:
        event.remove(engine, "before_cursor_execute", listener)
