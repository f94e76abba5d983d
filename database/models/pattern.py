import uuid

from sqlalchemy import Column, String, Text, Integer, Numeric, Boolean, Index

from .base import Base


class OilPattern(Base):
    """Lane oil pattern reference data, shared by all users."""
    __tablename__ = 'oil_patterns'

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(Text, nullable=False)
    category = Column(Text, nullable=False)  # pba|wtba|kegel|custom

    length = Column(Integer, nullable=False)  # feet
    volume = Column(Numeric(4, 1), nullable=False)  # mL, read back as Decimal
    ratio = Column(Text, nullable=False)  # e.g. "3.06:1"
    difficulty = Column(Text, nullable=False)  # easy|medium|hard
    description = Column(Text, nullable=True)

    is_custom = Column(Boolean, nullable=False, default=False)
    created_by = Column(String(64), nullable=True)

    __table_args__ = (
        Index('idx_oil_patterns_category', 'category'),
    )
