from sqlalchemy import Column, Integer, String, DateTime, Boolean
from sqlalchemy.sql import func
from shortener_core.database.connection import Base


class URL(Base):
    """
    Stored short URL.

    Only the columns the uniqueness contract needs are modelled here.
    The code is the public key of the record and never changes once written.
    """
    __tablename__ = "urls"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    # unique=True is the authoritative duplicate check; the generator's
    # lookup is only an optimistic pre-check
    code = Column(String(64), unique=True, nullable=False, index=True)
    long_url = Column(String, nullable=False)
    # Word-pair code if True, compact token otherwise
    is_word_pair = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
