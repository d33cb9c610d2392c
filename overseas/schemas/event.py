from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import datetime
from overseas.core.constants import EventTypeEnum


class EventBase(BaseModel):
    title: str
    description: Optional[str] = None
    event_type: EventTypeEnum = EventTypeEnum.WEBINAR
    start_date: datetime
    end_date: Optional[datetime] = None
    location: Optional[str] = None
    country: Optional[str] = None
    is_online: bool = False
    meeting_url: Optional[str] = None
    registration_url: Optional[str] = None
    is_free: bool = True
    price: Optional[float] = Field(None, ge=0)
    currency: Optional[str] = None
    max_attendees: Optional[int] = Field(None, ge=1)
    image_url: Optional[str] = None
    is_published: bool = False
    is_featured: bool = False


class EventCreate(EventBase):
    slug: Optional[str] = None


class EventUpdate(BaseModel):
    title: Optional[str] = None
    slug: Optional[str] = None
    description: Optional[str] = None
    event_type: Optional[EventTypeEnum] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    location: Optional[str] = None
    country: Optional[str] = None
    is_online: Optional[bool] = None
    meeting_url: Optional[str] = None
    registration_url: Optional[str] = None
    is_free: Optional[bool] = None
    price: Optional[float] = Field(None, ge=0)
    currency: Optional[str] = None
    max_attendees: Optional[int] = Field(None, ge=1)
    image_url: Optional[str] = None
    is_published: Optional[bool] = None
    is_featured: Optional[bool] = None


class Event(EventBase):
    model_config = ConfigDict(from_attributes=True)

    id: int
    slug: str
    created_at: Optional[datetime] = None
