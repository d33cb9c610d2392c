from datetime import datetime
from typing import List, Optional
from sqlalchemy import or_
from sqlalchemy.orm import Session

from overseas.crud.base import CRUDBase
from overseas.core.constants import EventTypeEnum
from overseas.models.event import Event
from overseas.schemas.event import EventCreate, EventUpdate

class CRUDEvent(CRUDBase[Event, EventCreate, EventUpdate]):

    def get_by_slug(self, db: Session, slug: str, published_only: bool = True) -> Optional[Event]:
        query = self._query(db).filter(Event.slug == slug)
        if published_only:
            query = query.filter(Event.is_published.is_(True))
        return query.first()

    def get_public(
        self,
        db: Session,
        *,
        now: datetime,
        timeframe: str = "all",
        search: Optional[str] = None,
        event_type: Optional[EventTypeEnum] = None,
        country: Optional[str] = None,
        is_free: Optional[bool] = None,
        is_online: Optional[bool] = None,
        skip: int = 0,
        limit: int = 50,
    ) -> List[Event]:
        query = self._query(db).filter(Event.is_published.is_(True))
        if timeframe == "upcoming":
            query = query.filter(Event.start_date >= now).order_by(Event.start_date.asc())
        elif timeframe == "past":
            query = query.filter(Event.start_date < now).order_by(Event.start_date.desc())
        else:
            query = query.order_by(Event.start_date.asc())
        if search:
            pattern = f"%{search}%"
            query = query.filter(or_(Event.title.ilike(pattern), Event.description.ilike(pattern)))
        if event_type:
            query = query.filter(Event.event_type == event_type)
        if country:
            query = query.filter(Event.country.ilike(country))
        if is_free is not None:
            query = query.filter(Event.is_free.is_(is_free))
        if is_online is not None:
            query = query.filter(Event.is_online.is_(is_online))
        return query.offset(skip).limit(limit).all()

event = CRUDEvent(Event)
