# app/api/__init__.py
from fastapi import FastAPI
from sqlalchemy.orm import sessionmaker

from app.api.errors import register_error_handlers
from app.api.routers import products
from app.data.database import build_engine, build_session_factory


def create_app(session_factory: sessionmaker | None = None) -> FastAPI:
    if session_factory is None:
        session_factory = build_session_factory(build_engine())

    app = FastAPI(title="Product Service", version="1.0.0")
    app.state.session_factory = session_factory

    register_error_handlers(app)
    app.include_router(products.router)
    return app
