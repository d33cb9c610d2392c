from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import datetime
from overseas.core.constants import PartnerTypeEnum


class TestimonialCreate(BaseModel):
    student_name: str
    content: str
    rating: int = Field(5, ge=1, le=5)
    university: Optional[str] = None
    country: Optional[str] = None
    program: Optional[str] = None
    image_url: Optional[str] = None
    is_published: bool = True
    is_featured: bool = False
    position: int = 0


class TestimonialUpdate(BaseModel):
    student_name: Optional[str] = None
    content: Optional[str] = None
    rating: Optional[int] = Field(None, ge=1, le=5)
    university: Optional[str] = None
    country: Optional[str] = None
    program: Optional[str] = None
    image_url: Optional[str] = None
    is_published: Optional[bool] = None
    is_featured: Optional[bool] = None
    position: Optional[int] = None


class Testimonial(TestimonialCreate):
    model_config = ConfigDict(from_attributes=True)

    id: int
    created_at: Optional[datetime] = None


class PartnerCreate(BaseModel):
    name: str
    logo_url: Optional[str] = None
    website_url: Optional[str] = None
    country: Optional[str] = None
    partner_type: PartnerTypeEnum = PartnerTypeEnum.UNIVERSITY
    description: Optional[str] = None
    is_active: bool = True
    is_featured: bool = False
    order_index: int = 0


class PartnerUpdate(BaseModel):
    name: Optional[str] = None
    logo_url: Optional[str] = None
    website_url: Optional[str] = None
    country: Optional[str] = None
    partner_type: Optional[PartnerTypeEnum] = None
    description: Optional[str] = None
    is_active: Optional[bool] = None
    is_featured: Optional[bool] = None
    order_index: Optional[int] = None


class Partner(PartnerCreate):
    model_config = ConfigDict(from_attributes=True)

    id: int
    created_at: Optional[datetime] = None


class StatisticCreate(BaseModel):
    label: str
    value: str
    icon: Optional[str] = None
    prefix: Optional[str] = None
    suffix: Optional[str] = None
    category: Optional[str] = None
    is_active: bool = True
    order_index: int = 0


class StatisticUpdate(BaseModel):
    label: Optional[str] = None
    value: Optional[str] = None
    icon: Optional[str] = None
    prefix: Optional[str] = None
    suffix: Optional[str] = None
    category: Optional[str] = None
    is_active: Optional[bool] = None
    order_index: Optional[int] = None


class Statistic(StatisticCreate):
    model_config = ConfigDict(from_attributes=True)

    id: int
    created_at: Optional[datetime] = None


class JourneyStepCreate(BaseModel):
    title: str
    description: Optional[str] = None
    icon: Optional[str] = None
    cta_text: Optional[str] = None
    cta_link: Optional[str] = None
    category: Optional[str] = None
    is_active: bool = True
    is_featured: bool = False
    order_index: int = 0


class JourneyStepUpdate(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    icon: Optional[str] = None
    cta_text: Optional[str] = None
    cta_link: Optional[str] = None
    category: Optional[str] = None
    is_active: Optional[bool] = None
    is_featured: Optional[bool] = None
    order_index: Optional[int] = None


class JourneyStep(JourneyStepCreate):
    model_config = ConfigDict(from_attributes=True)

    id: int
    created_at: Optional[datetime] = None


class PageCreate(BaseModel):
    title: str = Field(..., min_length=1)
    slug: Optional[str] = None
    content: str = Field(..., min_length=1)
    excerpt: Optional[str] = None
    template: str = "default"
    meta_title: Optional[str] = None
    meta_description: Optional[str] = None
    is_published: bool = False
    order_index: int = 0


class PageUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=1)
    slug: Optional[str] = None
    content: Optional[str] = Field(None, min_length=1)
    excerpt: Optional[str] = None
    template: Optional[str] = None
    meta_title: Optional[str] = None
    meta_description: Optional[str] = None
    is_published: Optional[bool] = None
    order_index: Optional[int] = None


class Page(PageCreate):
    model_config = ConfigDict(from_attributes=True)

    id: int
    slug: str
    published_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
