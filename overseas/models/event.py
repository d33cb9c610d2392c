from sqlalchemy import Column, Integer, String, Text, Boolean, DateTime, Numeric, Enum
from sqlalchemy.sql import func
from overseas.core.database import Base
from overseas.core.constants import EventTypeEnum

class Event(Base):
    __tablename__ = "events"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False)
    slug = Column(String, unique=True, index=True, nullable=False)
    description = Column(Text, nullable=True)
    event_type = Column(Enum(EventTypeEnum), nullable=False, default=EventTypeEnum.WEBINAR)
    start_date = Column(DateTime(timezone=True), nullable=False, index=True)
    end_date = Column(DateTime(timezone=True), nullable=True)
    location = Column(String, nullable=True)
    country = Column(String, nullable=True, index=True)
    is_online = Column(Boolean, default=False)
    meeting_url = Column(String, nullable=True)
    registration_url = Column(String, nullable=True)
    is_free = Column(Boolean, default=True)
    price = Column(Numeric(10, 2, asdecimal=False), nullable=True)
    currency = Column(String(3), nullable=True)
    max_attendees = Column(Integer, nullable=True)
    image_url = Column(String, nullable=True)
    is_published = Column(Boolean, default=False)
    is_featured = Column(Boolean, default=False)
    deleted_at = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())
