import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool

from app.api import create_app
from app.data.database import build_engine, build_session_factory, init_db


@pytest.fixture
def engine():
    """In-memory SQLite shared by every session of one test."""
    engine = build_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return build_session_factory(engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(session_factory):
    app = create_app(session_factory)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def add_products(session_factory):
    """Insert products directly, returns their ids."""
    from app.data.models import ProductModel

    def _add(*rows):
        session = session_factory()
        try:
            models = [ProductModel(name=name, price=price) for name, price in rows]
            session.add_all(models)
            session.commit()
            return [m.id for m in models]
        finally:
            session.close()

    return _add
