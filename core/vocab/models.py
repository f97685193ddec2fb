"""
SQLAlchemy ORM model for learner state persistence.

The whole LearnerState lives in a single row (one named slot) as a JSON
document; the schema is owned by the pydantic models, not by columns.
"""

from sqlalchemy import Column, DateTime, String, Text
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class LearnerStateRow(Base):
    """
    One serialized LearnerState per slot.
    """
    __tablename__ = 'learner_state'

    slot = Column(String(255), primary_key=True, nullable=False)
    payload = Column(Text, nullable=False)  # LearnerState.model_dump_json()
    updated_at = Column(DateTime(timezone=True), nullable=False)

    def __repr__(self):
        return f"<LearnerStateRow({self.slot}, updated_at={self.updated_at})>"
