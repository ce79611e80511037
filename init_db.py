"""
Database initialization script
Creates all tables and, when credentials are given, the first admin account

Usage:
    python init_db.py                      # tables only, admin from DEFAULT_ADMIN_* env vars
    python init_db.py admin s3cretPass     # tables plus the given admin
"""
import logging
import sys

from bizdirectory.core.config import DEFAULT_ADMIN_PASSWORD, DEFAULT_ADMIN_USERNAME
from bizdirectory.crud.admins import ensure_default_admin
from bizdirectory.database import Base, SessionLocal, engine
import bizdirectory.models  # noqa: F401

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def init_db(username: str = DEFAULT_ADMIN_USERNAME, password: str = DEFAULT_ADMIN_PASSWORD):
    """Initialize database with all tables and the bootstrap admin"""
    try:
        logger.info("Creating all database tables...")
        Base.metadata.create_all(bind=engine)
        logger.info("✓ Database tables created successfully!")

        if not (username and password):
            logger.info("No admin credentials given, skipping admin creation")
            return

        db = SessionLocal()
        try:
            if ensure_default_admin(db, username, password):
                logger.info(f"✓ Admin account '{username}' created")
            else:
                logger.info(f"Admin account '{username}' already exists")
        finally:
            db.close()

        logger.info("\nDatabase initialization complete!")
        logger.info("You can now start the FastAPI server.")

    except Exception as e:
        logger.error(f"✗ Error initializing database: {str(e)}")
        raise


if __name__ == "__main__":
    if len(sys.argv) == 3:
        init_db(sys.argv[1], sys.argv[2])
    else:
        init_db()
