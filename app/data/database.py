# app/data/database.py
from sqlalchemy import create_engine
from sqlalchemy.engine import URL, Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from fastapi import Request

from app.utils.settings import DB_USERNAME, DB_PASSWORD, DB_NAME, DB_HOST

Base = declarative_base()


def database_url(username: str, password: str, database: str) -> URL:
    # URL.create escapes credentials, no string formatting of secrets
    return URL.create(
        "postgresql+psycopg2",
        username=username,
        password=password,
        host=DB_HOST,
        database=database,
    )


def build_engine(url: URL | str | None = None, **kwargs) -> Engine:
    if url is None:
        url = database_url(DB_USERNAME, DB_PASSWORD, DB_NAME)
    kwargs.setdefault("pool_pre_ping", True)
    return create_engine(url, **kwargs)


def build_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, autoflush=False, autocommit=False)


def init_db(engine: Engine) -> None:
    """Create the products table when it is missing. Existing tables are left untouched."""
    from app.data.models import ProductModel  # noqa: F401  registers the table on Base

    Base.metadata.create_all(bind=engine)


def get_db(request: Request):
    #session per request, factory comes from the app that serves it
    db: Session = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
