"""
Key/value storage of whole collections.
"""

from sqlalchemy import Column, Text, TIMESTAMP
from sqlalchemy.sql import func

from domain.models.database import Base


class StoredCollection(Base):
    """One JSON document per collection (favorites, planner, grocery, settings)"""

    __tablename__ = "stored_collection"

    key = Column(Text, primary_key=True)
    payload = Column(Text, nullable=False)  # JSON stored as text
    updated_at = Column(
        TIMESTAMP(timezone=True), server_default=func.now(), onupdate=func.now()
    )
