from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, List
from datetime import datetime
from overseas.core.constants import LessonTypeEnum


class LessonResource(BaseModel):
    title: str
    url: str
    type: Optional[str] = None


class LessonBase(BaseModel):
    title: str
    description: Optional[str] = None
    lesson_type: LessonTypeEnum = LessonTypeEnum.VIDEO
    duration: int = Field(0, ge=0)
    order_index: int = 0
    is_free: bool = False
    is_published: bool = True
    content: Optional[str] = None
    video_url: Optional[str] = None
    resources: Optional[List[LessonResource]] = None


class LessonCreate(LessonBase):
    pass


class LessonUpdate(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    lesson_type: Optional[LessonTypeEnum] = None
    duration: Optional[int] = Field(None, ge=0)
    order_index: Optional[int] = None
    is_free: Optional[bool] = None
    is_published: Optional[bool] = None
    content: Optional[str] = None
    video_url: Optional[str] = None
    resources: Optional[List[LessonResource]] = None


class Lesson(LessonBase):
    model_config = ConfigDict(from_attributes=True)

    id: int
    module_id: int
    created_at: Optional[datetime] = None


class ModuleBase(BaseModel):
    title: str
    description: Optional[str] = None
    order_index: int = 0
    is_published: bool = True


class ModuleCreate(ModuleBase):
    pass


class ModuleUpdate(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    order_index: Optional[int] = None
    is_published: Optional[bool] = None


class Module(ModuleBase):
    model_config = ConfigDict(from_attributes=True)

    id: int
    course_id: int
    lessons: List[Lesson] = []
