from sqlalchemy import Column, Integer, String, Text, Boolean, DateTime, ForeignKey, Enum, JSON
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from overseas.core.database import Base
from overseas.core.constants import LessonTypeEnum

class Lesson(Base):
    __tablename__ = "course_lessons"

    id = Column(Integer, primary_key=True, index=True)
    module_id = Column(Integer, ForeignKey("course_modules.id"), nullable=False, index=True)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    lesson_type = Column(Enum(LessonTypeEnum), nullable=False, default=LessonTypeEnum.VIDEO)
    duration = Column(Integer, nullable=False, default=0) # Duration in minutes
    order_index = Column(Integer, nullable=False, default=0)
    is_free = Column(Boolean, default=False)
    is_published = Column(Boolean, default=True)
    content = Column(Text, nullable=True)
    video_url = Column(String, nullable=True)
    resources = Column(JSON, nullable=True) # [{"title", "url", "type"}]
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    module = relationship("CourseModule", back_populates="lessons")
    progress_records = relationship("LessonProgress", back_populates="lesson", cascade="all, delete-orphan")
