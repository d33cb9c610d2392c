from datetime import datetime
from typing import List, Optional
from sqlalchemy.orm import Session
from fastapi import HTTPException, status

from overseas.core.constants import EventTypeEnum
from overseas.crud.event import event as crud_event
from overseas.models.event import Event
from overseas.schemas.event import EventCreate, EventUpdate
from overseas.utils.identifiers import unique_slug

TIMEFRAMES = ("all", "upcoming", "past")


class EventService:

    def _get_or_404(self, db: Session, event_id: int) -> Event:
        event = crud_event.get(db, id=event_id)
        if not event:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Event not found")
        return event

    def _slug_for(self, db: Session, requested: Optional[str], title: str, current_id: Optional[int] = None) -> str:
        def exists(candidate: str) -> bool:
            found = crud_event.get_by_slug(db, candidate, published_only=False)
            return found is not None and found.id != current_id
        return unique_slug(requested or title, exists)

    def list_public(
        self,
        db: Session,
        *,
        timeframe: str = "all",
        search: Optional[str] = None,
        event_type: Optional[EventTypeEnum] = None,
        country: Optional[str] = None,
        is_free: Optional[bool] = None,
        is_online: Optional[bool] = None,
        skip: int = 0,
        limit: int = 50,
    ) -> List[Event]:
        if timeframe not in TIMEFRAMES:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"timeframe must be one of: {', '.join(TIMEFRAMES)}"
            )
        return crud_event.get_public(
            db,
            now=datetime.utcnow(),
            timeframe=timeframe,
            search=search,
            event_type=event_type,
            country=country,
            is_free=is_free,
            is_online=is_online,
            skip=skip,
            limit=limit,
        )

    def get_public_by_slug(self, db: Session, *, slug: str) -> Event:
        event = crud_event.get_by_slug(db, slug)
        if not event:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Event not found")
        return event

    def list_for_admin(self, db: Session, *, skip: int = 0, limit: int = 100) -> List[Event]:
        return crud_event.get_multi(db, skip=skip, limit=limit)

    def create_event(self, db: Session, *, event_in: EventCreate) -> Event:
        data = event_in.model_dump()
        data["slug"] = self._slug_for(db, event_in.slug, event_in.title)
        return crud_event.create(db, obj_in=data)

    def update_event(self, db: Session, *, event_id: int, event_in: EventUpdate) -> Event:
        event = self._get_or_404(db, event_id)
        data = event_in.model_dump(exclude_unset=True)
        if data.get("slug"):
            data["slug"] = self._slug_for(db, data["slug"], event.title, current_id=event.id)
        return crud_event.update(db, db_obj=event, obj_in=data)

    def delete_event(self, db: Session, *, event_id: int) -> Event:
        self._get_or_404(db, event_id)
        return crud_event.delete(db, id=event_id)


event_service = EventService()
