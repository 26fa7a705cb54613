from sqlalchemy import Column, Integer, String, Float, JSON, func, DateTime, Uuid
from sqlalchemy.orm import relationship
from numberpath.core.database import Base
from uuid import uuid4


class Puzzle(Base):
    __tablename__ = "puzzles"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid4)
    level = Column(Integer)
    rows = Column(Integer, nullable=False)
    cols = Column(Integer, nullable=False)
    topology = Column(String, nullable=False, default="orthogonal")
    hidden_rate = Column(Float, nullable=False)
    obstacles = Column(JSON, nullable=False, default=list)  # [[row, col], ...]
    hints = Column(JSON, nullable=False, default=list)  # [[row, col, step], ...]
    full_path = Column(JSON, nullable=False, default=list)  # [[row, col], ...] in step order
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    # relationship
    games = relationship("Game", back_populates="puzzle")
