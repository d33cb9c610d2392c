from typing import List, Tuple, Type
from fastapi import APIRouter, Depends, Request, status
from pydantic import BaseModel
from sqlalchemy.orm import Session

from overseas.core.cache import cache, CONTENT_PREFIX
from overseas.core.decorators import cache_endpoint
from overseas.schemas import content as content_schemas
from overseas.schemas.response import APIResponse
from overseas.services.content import (
    ContentBlockService,
    journey_step_service,
    page_service,
    partner_service,
    statistic_service,
    testimonial_service,
)
from overseas.utils import deps


def create_content_router(
    *,
    service: ContentBlockService,
    slug: str,
    read_schema: Type[BaseModel],
    create_schema: Type[BaseModel],
    update_schema: Type[BaseModel],
) -> Tuple[APIRouter, APIRouter]:
    """Build the public listing router and the admin CRUD router for one block type."""
    public_router = APIRouter()
    admin_router = APIRouter(dependencies=[Depends(deps.require_admin)])
    cache_prefix = f"{CONTENT_PREFIX}:{slug}"
    label = service.label

    @public_router.get(f"/{slug}", response_model=APIResponse[List[read_schema]])
    @cache_endpoint(ttl=600, key_prefix=cache_prefix)
    async def list_public(
        request: Request,
        db: Session = Depends(deps.get_db),
        featured: bool = False
    ):
        blocks = service.list_public(db, featured_only=featured)
        return APIResponse(message=f"{label} list retrieved", data=[read_schema.model_validate(b) for b in blocks])

    @admin_router.get(f"/{slug}", response_model=APIResponse[List[read_schema]])
    def list_all(db: Session = Depends(deps.get_db)):
        blocks = service.list_all(db)
        return APIResponse(message=f"{label} list retrieved", data=[read_schema.model_validate(b) for b in blocks])

    @admin_router.post(f"/{slug}", response_model=APIResponse[read_schema], status_code=status.HTTP_201_CREATED)
    async def create_block(
        *,
        db: Session = Depends(deps.get_transactional_db),
        block_in: create_schema
    ):
        block = service.create(db, block_in=block_in)
        await cache.invalidate_prefix(cache_prefix)
        return APIResponse(message=f"{label} created successfully", data=read_schema.model_validate(block))

    @admin_router.put(f"/{slug}/{{block_id}}", response_model=APIResponse[read_schema])
    async def update_block(
        *,
        db: Session = Depends(deps.get_transactional_db),
        block_id: int,
        block_in: update_schema
    ):
        block = service.update(db, block_id=block_id, block_in=block_in)
        await cache.invalidate_prefix(cache_prefix)
        return APIResponse(message=f"{label} updated successfully", data=read_schema.model_validate(block))

    @admin_router.delete(f"/{slug}/{{block_id}}", response_model=APIResponse[None])
    async def delete_block(
        *,
        db: Session = Depends(deps.get_transactional_db),
        block_id: int
    ):
        service.delete(db, block_id=block_id)
        await cache.invalidate_prefix(cache_prefix)
        return APIResponse(message=f"{label} deleted successfully")

    return public_router, admin_router


CONTENT_ROUTERS = [
    create_content_router(
        service=testimonial_service,
        slug="testimonials",
        read_schema=content_schemas.Testimonial,
        create_schema=content_schemas.TestimonialCreate,
        update_schema=content_schemas.TestimonialUpdate,
    ),
    create_content_router(
        service=partner_service,
        slug="partners",
        read_schema=content_schemas.Partner,
        create_schema=content_schemas.PartnerCreate,
        update_schema=content_schemas.PartnerUpdate,
    ),
    create_content_router(
        service=statistic_service,
        slug="statistics",
        read_schema=content_schemas.Statistic,
        create_schema=content_schemas.StatisticCreate,
        update_schema=content_schemas.StatisticUpdate,
    ),
    create_content_router(
        service=journey_step_service,
        slug="journey-steps",
        read_schema=content_schemas.JourneyStep,
        create_schema=content_schemas.JourneyStepCreate,
        update_schema=content_schemas.JourneyStepUpdate,
    ),
]

pages_public_router, pages_admin_router = create_content_router(
    service=page_service,
    slug="pages",
    read_schema=content_schemas.Page,
    create_schema=content_schemas.PageCreate,
    update_schema=content_schemas.PageUpdate,
)


@pages_public_router.get("/pages/{page_slug}", response_model=APIResponse[content_schemas.Page])
@cache_endpoint(ttl=600, key_prefix=f"{CONTENT_PREFIX}:pages:detail")
async def read_page(
    request: Request,
    page_slug: str,
    db: Session = Depends(deps.get_db)
):
    page = page_service.get_published(db, slug=page_slug)
    return APIResponse(message="Page retrieved successfully", data=content_schemas.Page.model_validate(page))


CONTENT_ROUTERS.append((pages_public_router, pages_admin_router))
