import uuid

from sqlalchemy import Column, String, Text, Integer, Numeric, TIMESTAMP, ForeignKey, Index, func

from .base import Base


class PerformanceData(Base):
    """One logged game: which ball, on which pattern, and how it went."""
    __tablename__ = 'performance_data'

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(String(64), nullable=False)
    ball_id = Column(String(36), ForeignKey('bowling_balls.id', ondelete='CASCADE'), nullable=False)
    pattern_id = Column(String(36), ForeignKey('oil_patterns.id'), nullable=False)

    venue = Column(Text, nullable=False)
    score = Column(Integer, nullable=False)
    carry_percentage = Column(Numeric(5, 2), nullable=False)
    entry_angle = Column(Numeric(4, 2), nullable=True)  # degrees

    game_date = Column(TIMESTAMP(timezone=True), nullable=False)
    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())

    __table_args__ = (
        Index('idx_performance_user', 'user_id'),
        Index('idx_performance_game_date', 'game_date'),
    )
