import uuid

from sqlalchemy import Column, String, Text, Integer, Numeric, TIMESTAMP, Index, func

from .base import Base


class BowlingBall(Base):
    """
    A ball in a user's arsenal.

    hook_potential, coverstock_type and core_type feed the match scorer;
    the remaining columns are display and tracking data.
    """
    __tablename__ = 'bowling_balls'

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(String(64), nullable=False)

    name = Column(Text, nullable=False)
    brand = Column(Text, nullable=False)
    weight = Column(Integer, nullable=False)  # pounds

    core_type = Column(Text, nullable=False)  # symmetrical|asymmetrical
    coverstock_type = Column(Text, nullable=False)  # plastic|urethane|reactive
    surface = Column(Text, nullable=False)  # e.g. "2000 Abralon", "Dull 500 Grit"
    drilling = Column(Text, nullable=False)  # e.g. "Pin Up 4.5"
    hook_potential = Column(Text, nullable=False)  # low|medium|high

    games_played = Column(Integer, nullable=False, default=0)
    average_score = Column(Numeric(5, 2), nullable=True)

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())

    __table_args__ = (
        Index('idx_bowling_balls_user', 'user_id'),
    )
