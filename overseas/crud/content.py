from typing import List, Optional, Type
from sqlalchemy.orm import Session

from overseas.crud.base import CRUDBase, ModelType
from overseas.models.content import Testimonial, Partner, Statistic, JourneyStep, Page

class CRUDContentBlock(CRUDBase):
    """CRUD for ordered marketing blocks that carry a visibility flag."""

    def __init__(self, model: Type[ModelType], *, order_field: str, visibility_field: str):
        super().__init__(model)
        self.order_column = getattr(model, order_field)
        self.visibility_column = getattr(model, visibility_field)

    def get_ordered(self, db: Session, *, visible_only: bool = True, featured_only: bool = False) -> List[ModelType]:
        query = db.query(self.model)
        if visible_only:
            query = query.filter(self.visibility_column.is_(True))
        if featured_only and hasattr(self.model, "is_featured"):
            query = query.filter(self.model.is_featured.is_(True))
        return query.order_by(self.order_column.asc(), self.model.id.asc()).all()

testimonial = CRUDContentBlock(Testimonial, order_field="position", visibility_field="is_published")
partner = CRUDContentBlock(Partner, order_field="order_index", visibility_field="is_active")
statistic = CRUDContentBlock(Statistic, order_field="order_index", visibility_field="is_active")
journey_step = CRUDContentBlock(JourneyStep, order_field="order_index", visibility_field="is_active")

class CRUDPage(CRUDContentBlock):

    def get_by_slug(self, db: Session, slug: str) -> Optional[Page]:
        return db.query(Page).filter(Page.slug == slug).first()

    def get_published_by_slug(self, db: Session, slug: str) -> Optional[Page]:
        return db.query(Page).filter(Page.slug == slug).filter(Page.is_published.is_(True)).first()

page = CRUDPage(Page, order_field="order_index", visibility_field="is_published")
