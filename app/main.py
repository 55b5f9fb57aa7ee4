# app/main.py
import uvicorn

from app.api import create_app
from app.data.database import build_engine, build_session_factory, init_db
from app.utils.settings import HOST, PORT
from app.utils.logging import get_logger

logger = get_logger("app.main")


def build_app():
    engine = build_engine()

    logger.info("Initializing database")
    try:
        init_db(engine)
    except Exception as e:
        logger.error(f"Failed to create tables: {e}")
        raise
    logger.info("Products table ready")

    return create_app(build_session_factory(engine))


if __name__ == "__main__":
    uvicorn.run(build_app(), host=HOST, port=PORT)
