# shop/data/init_db.py
from sqlalchemy.engine import Engine

from shop.data.database import Base, engine
from shop.utils.logging import get_logger
from shop.utils.retry import db_retry

logger = get_logger(__name__)


@db_retry()
def init_db(bind: Engine | None = None) -> None:
    # registers every table on Base.metadata
    import shop.data.models  # noqa: F401

    bind = bind or engine
    logger.info(f"Creating tables: {sorted(Base.metadata.tables)}")
    Base.metadata.create_all(bind=bind)
    logger.info("Database tables ready")
