"""
SQLAlchemy engine and session setup.

The `urls` table is the authoritative owner of code uniqueness:
its unique constraint is what finally rejects a duplicate code.
"""

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from shortener_core.config import settings


# SQLite needs this flag to share a connection across threads
connect_args = (
    {"check_same_thread": False}
    if settings.database_url.startswith("sqlite")
    else {}
)

engine = create_engine(settings.database_url, connect_args=connect_args)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    """Yield a session and always close it afterwards"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
