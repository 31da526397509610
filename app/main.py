# app/main.py
from app.api import create_app
from app.data.database import Base, engine
from app.data.seed import seed
from app.utils.settings import SEED_DEFAULT_DATA
from app.utils.logging import get_logger
import uvicorn

# IMPORT WSZYSTKICH MODELI NA POCZATKU (PRZED JAKIMKOLWIEK CREATE_ALL)
from app.data import models  # noqa: F401

logger = get_logger(__name__)


def init_db():
    logger.info(f"Models registered in Base.metadata: {list(Base.metadata.tables.keys())}")
    try:
        Base.metadata.create_all(bind=engine)
    except Exception as e:
        logger.error(f"Failed to create tables: {e}")
        raise
    logger.info("Database tables created")

    if SEED_DEFAULT_DATA:
        seed()


init_db()

app = create_app()

if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8000)
