from datetime import datetime
from typing import Any, List, Optional
from sqlalchemy.orm import Session
from fastapi import HTTPException, status
from pydantic import BaseModel

from overseas.crud.content import (
    CRUDContentBlock,
    testimonial as crud_testimonial,
    partner as crud_partner,
    statistic as crud_statistic,
    journey_step as crud_journey_step,
    page as crud_page,
)
from overseas.models.content import Page
from overseas.utils.identifiers import slugify, unique_slug


class ContentBlockService:
    """Public listing and admin editing for one kind of marketing block."""

    def __init__(self, crud: CRUDContentBlock, label: str):
        self.crud = crud
        self.label = label

    def _get_or_404(self, db: Session, block_id: int) -> Any:
        block = self.crud.get(db, id=block_id)
        if not block:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"{self.label} not found")
        return block

    def list_public(self, db: Session, *, featured_only: bool = False) -> List[Any]:
        return self.crud.get_ordered(db, visible_only=True, featured_only=featured_only)

    def list_all(self, db: Session) -> List[Any]:
        return self.crud.get_ordered(db, visible_only=False)

    def create(self, db: Session, *, block_in: BaseModel) -> Any:
        return self.crud.create(db, obj_in=block_in)

    def update(self, db: Session, *, block_id: int, block_in: BaseModel) -> Any:
        block = self._get_or_404(db, block_id)
        return self.crud.update(db, db_obj=block, obj_in=block_in)

    def delete(self, db: Session, *, block_id: int) -> Any:
        self._get_or_404(db, block_id)
        return self.crud.delete(db, id=block_id)


testimonial_service = ContentBlockService(crud_testimonial, "Testimonial")
partner_service = ContentBlockService(crud_partner, "Partner")
statistic_service = ContentBlockService(crud_statistic, "Statistic")
journey_step_service = ContentBlockService(crud_journey_step, "Journey step")


class PageService(ContentBlockService):
    """CMS pages: content blocks addressed by a unique slug."""

    def _slug_for(self, db: Session, requested: Optional[str], title: str, current_id: Optional[int] = None) -> str:
        if requested:
            slug = slugify(requested)
            existing = self.crud.get_by_slug(db, slug)
            if existing is not None and existing.id != current_id:
                raise HTTPException(
                    status_code=status.HTTP_400_BAD_REQUEST,
                    detail="A page with this slug already exists"
                )
            return slug
        return unique_slug(title, lambda candidate: self.crud.get_by_slug(db, candidate) is not None)

    def get_published(self, db: Session, *, slug: str) -> Page:
        page = self.crud.get_published_by_slug(db, slug)
        if not page:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Page not found")
        return page

    def create(self, db: Session, *, block_in: BaseModel) -> Page:
        data = block_in.model_dump()
        data["slug"] = self._slug_for(db, data.get("slug"), data["title"])
        if data["is_published"]:
            data["published_at"] = datetime.utcnow()
        return self.crud.create(db, obj_in=data)

    def update(self, db: Session, *, block_id: int, block_in: BaseModel) -> Page:
        page = self._get_or_404(db, block_id)
        data = block_in.model_dump(exclude_unset=True)
        if data.get("slug"):
            data["slug"] = self._slug_for(db, data["slug"], page.title, current_id=page.id)
        else:
            data.pop("slug", None)
        if data.get("is_published") and not page.published_at:
            data["published_at"] = datetime.utcnow()
        return self.crud.update(db, db_obj=page, obj_in=data)


page_service = PageService(crud_page, "Page")
