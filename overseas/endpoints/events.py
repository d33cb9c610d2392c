from typing import List, Optional
from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.orm import Session

from overseas.core.cache import EVENTS_PREFIX
from overseas.core.constants import EventTypeEnum
from overseas.core.decorators import cache_endpoint
from overseas.schemas.event import Event
from overseas.schemas.response import APIResponse
from overseas.services.event import event_service
from overseas.utils import deps

router = APIRouter()


@router.get("", response_model=APIResponse[List[Event]])
@cache_endpoint(ttl=300, key_prefix=f"{EVENTS_PREFIX}:list")
async def list_events(
    request: Request,
    db: Session = Depends(deps.get_db),
    timeframe: str = "all",
    search: Optional[str] = None,
    event_type: Optional[EventTypeEnum] = None,
    country: Optional[str] = None,
    is_free: Optional[bool] = None,
    is_online: Optional[bool] = None,
    skip: int = Query(0, ge=0),
    limit: int = Query(50, ge=1, le=100),
):
    events = event_service.list_public(
        db,
        timeframe=timeframe,
        search=search,
        event_type=event_type,
        country=country,
        is_free=is_free,
        is_online=is_online,
        skip=skip,
        limit=limit,
    )
    return APIResponse(message="Events retrieved successfully", data=[Event.model_validate(e) for e in events])


@router.get("/{slug}", response_model=APIResponse[Event])
def read_event(
    *,
    db: Session = Depends(deps.get_db),
    slug: str
):
    event = event_service.get_public_by_slug(db, slug=slug)
    return APIResponse(message="Event retrieved successfully", data=Event.model_validate(event))
