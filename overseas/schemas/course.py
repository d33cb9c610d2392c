from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, List
from datetime import datetime
from overseas.core.constants import CourseLevelEnum, LessonTypeEnum


class CourseBase(BaseModel):
    title: str
    description: Optional[str] = None
    short_description: Optional[str] = None
    instructor_name: Optional[str] = None
    level: CourseLevelEnum = CourseLevelEnum.BEGINNER
    price: float = Field(0, ge=0)
    currency: Optional[str] = Field(None, min_length=3, max_length=3)
    duration: int = Field(0, ge=0)
    thumbnail_url: Optional[str] = None
    is_featured: bool = False
    max_students: Optional[int] = Field(None, ge=1)


class CourseCreate(CourseBase):
    slug: Optional[str] = None
    is_published: bool = False


class CourseUpdate(BaseModel):
    title: Optional[str] = None
    slug: Optional[str] = None
    description: Optional[str] = None
    short_description: Optional[str] = None
    instructor_name: Optional[str] = None
    level: Optional[CourseLevelEnum] = None
    price: Optional[float] = Field(None, ge=0)
    currency: Optional[str] = Field(None, min_length=3, max_length=3)
    duration: Optional[int] = Field(None, ge=0)
    thumbnail_url: Optional[str] = None
    is_featured: Optional[bool] = None
    max_students: Optional[int] = Field(None, ge=1)


class CourseStatusUpdate(BaseModel):
    is_published: bool


class Course(CourseBase):
    model_config = ConfigDict(from_attributes=True)

    id: int
    slug: str
    is_published: bool
    total_students: int
    rating: float = 0
    total_ratings: int = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class LessonOutline(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    lesson_type: LessonTypeEnum
    duration: int
    order_index: int
    is_free: bool


class ModuleOutline(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: Optional[str] = None
    order_index: int
    lessons: List[LessonOutline] = []


class CourseDetail(Course):
    modules: List[ModuleOutline] = []
    total_lessons: int = 0


class CourseAdmin(Course):
    enrollment_count: int = 0
    module_count: int = 0


class CourseStats(BaseModel):
    total_courses: int
    published_courses: int
    draft_courses: int
    total_enrollments: int
    total_revenue: float
