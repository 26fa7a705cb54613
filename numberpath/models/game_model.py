from sqlalchemy import Column, ForeignKey, Integer, String, JSON, DateTime, func, Uuid
from sqlalchemy.orm import relationship
from numberpath.core.database import Base
from uuid import uuid4


class Game(Base):
    __tablename__ = "games"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid4)
    puzzle_id = Column(Uuid(as_uuid=True), ForeignKey("puzzles.id"), nullable=False)
    level = Column(Integer, nullable=False, default=1)
    topology = Column(String, nullable=False, default="orthogonal")
    status = Column(String, nullable=False, default="playing")
    user_path = Column(JSON, nullable=False, default=list)  # [[row, col], ...]
    revealed_hints = Column(JSON, nullable=False, default=list)  # steps shown on request
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    # relationship
    puzzle = relationship("Puzzle", back_populates="games")
