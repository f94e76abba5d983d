import uuid

from sqlalchemy import Column, String, Text, Integer, Numeric, TIMESTAMP, func

from .base import Base


class BowlerSpecs(Base):
    """Saved release characteristics, at most one row per user."""
    __tablename__ = 'bowler_specs'

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(String(64), nullable=False, unique=True)

    speed = Column(Numeric(4, 1), nullable=False)  # mph
    rev_rate = Column(Integer, nullable=False)  # rpm
    playing_style = Column(Text, nullable=False)  # stroker|tweener|cranker|power_player

    updated_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())
