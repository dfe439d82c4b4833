import os
import contextlib
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from core.config_loader import DatabaseConfig
from database.models import Base

DATABASE_URL = os.environ.get("DATABASE_URL", DatabaseConfig().url)

engine = create_engine(DATABASE_URL)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

def init_db(bind=None):
    """Create the seekers/investment_firms/investors tables if missing."""
    Base.metadata.create_all(bind=bind or engine)

@contextlib.contextmanager
def db_session_scope(session_factory=None):
    """Provide a transactional scope around a series of operations."""
    session: Session = (session_factory or SessionLocal)()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
