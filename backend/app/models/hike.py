from sqlalchemy import Column, Integer, String, Text, Float, DateTime
from sqlalchemy.sql import func
from app.core.constants import HIKES_TABLE, LOCATION_COORDS_COLUMN
from app.core.date_utils import utcnow
from app.db import Base


class Hike(Base):
    __tablename__ = HIKES_TABLE

    id = Column(Integer, primary_key=True, autoincrement=True)

    name = Column(String, nullable=False)
    location = Column(String, nullable=False)

    # ISO-8601 'YYYY-MM-DD'; text so date DESC sorts chronologically
    date = Column(String, nullable=False)

    parking = Column(String, nullable=False)  # "Yes" / "No"

    length = Column(Float, nullable=False)  # kilometres

    route_type = Column(String, nullable=True)
    difficulty = Column(String, nullable=False)

    description = Column(Text, nullable=True)
    notes = Column(Text, nullable=True)
    weather = Column(Text, nullable=True)

    # JSON array of image references, display order
    photos = Column(Text, nullable=True)

    # JSON object {"latitude": ..., "longitude": ...}
    location_coords = Column(LOCATION_COORDS_COLUMN, Text, nullable=True)

    is_completed = Column(Integer, nullable=False, default=0, server_default="0")
    completed_date = Column(String, nullable=True)

    # Python-side default keeps sub-second precision for the secondary sort
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        server_default=func.now(),
    )
