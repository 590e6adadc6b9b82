import logging
from app.database.database import Base, engine
from app.models.contact_messages import *

logger = logging.getLogger(__name__)


def create_all_tables(bind=None):
    logger.info("Creating tables in the database...")
    Base.metadata.create_all(bind=bind or engine)
    logger.info("All tables created")
