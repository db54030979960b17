import logging
import time

from sqlalchemy import create_engine
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import sessionmaker

from blogful.config import DATABASE_URL, DB_CONNECT_ATTEMPTS
from blogful.models import Base

logger = logging.getLogger(__name__)

connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}
engine = create_engine(DATABASE_URL, connect_args=connect_args)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def wait_for_db(max_attempts: int = DB_CONNECT_ATTEMPTS, delay: int = 1) -> None:
    """Attempt to connect to the database until it is ready."""
    for attempt in range(1, max_attempts + 1):
        try:
            with engine.connect():
                return
        except OperationalError:
            logger.warning("Database not ready (attempt %s/%s)", attempt, max_attempts)
            time.sleep(delay)
    raise RuntimeError("Database is not ready")


def init_db() -> None:
    Base.metadata.create_all(bind=engine)
