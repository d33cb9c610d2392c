from pydantic import Field
from typing import Optional, List, Any, Dict
from datetime import datetime
from overseas.core.constants import EnrollmentStatusEnum, LessonTypeEnum
from overseas.schemas.camel import CamelModel


class CourseSummary(CamelModel):
    id: int
    title: str
    is_published: bool
    price: float
    currency: Optional[str] = None


class Enrollment(CamelModel):
    id: int
    user_id: int
    course_id: int
    status: EnrollmentStatusEnum
    progress: int
    enrolled_at: Optional[datetime] = None
    last_accessed_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None


class AccessResponse(CamelModel):
    has_access: bool
    reason: str
    course: Optional[CourseSummary] = None
    enrollment: Optional[Enrollment] = None
    progress: int = 0


class LessonProgressState(CamelModel):
    is_completed: bool = False
    progress_percentage: int = 0
    last_accessed_at: Optional[datetime] = None


class LearnLesson(CamelModel):
    id: int
    title: str
    description: Optional[str] = None
    type: LessonTypeEnum
    duration: int = 0
    order_index: int = 0
    is_free: bool = False
    video_url: Optional[str] = None
    content: Optional[str] = None
    resources: Optional[List[Dict[str, Any]]] = None
    progress: LessonProgressState = Field(default_factory=LessonProgressState)


class LearnModule(CamelModel):
    id: int
    title: str
    description: Optional[str] = None
    order_index: int = 0
    lessons: List[LearnLesson] = []


class LessonsResponse(CamelModel):
    modules: List[LearnModule]
    has_access: bool = True
    enrollment: Optional[Enrollment] = None


class ProgressUpdateRequest(CamelModel):
    lesson_id: int
    progress_percentage: int = Field(..., ge=0, le=100)
    time_spent: Optional[int] = Field(None, ge=0, description="Seconds spent since the previous update")


class LessonProgress(CamelModel):
    id: int
    lesson_id: int
    is_completed: bool
    progress_percentage: int
    time_spent_seconds: int
    last_accessed_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None


class ProgressUpdateResponse(CamelModel):
    message: str
    enrollment: Enrollment
    lesson_progress: LessonProgress


class ModuleProgress(CamelModel):
    id: int
    title: str
    total_lessons: int
    completed_lessons: int


class ProgressSummary(CamelModel):
    percentage: int
    total_lessons: int
    completed_lessons: int
    enrolled_at: Optional[datetime] = None
    last_accessed_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None
    status: EnrollmentStatusEnum


class CourseProgressResponse(CamelModel):
    enrollment: Enrollment
    progress: ProgressSummary
    course: CourseSummary
    modules: List[ModuleProgress]


class EnrollResponse(CamelModel):
    message: str
    enrollment: Enrollment


class MessageResponse(CamelModel):
    message: str


class MyCourse(CamelModel):
    enrollment: Enrollment
    course: CourseSummary
    slug: str
    thumbnail_url: Optional[str] = None
    instructor_name: Optional[str] = None
    total_lessons: int
    completed_lessons: int
