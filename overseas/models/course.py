from sqlalchemy import Column, Integer, String, Text, Boolean, DateTime, Numeric, Float, Enum
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from overseas.core.database import Base
from overseas.core.constants import CourseLevelEnum

class Course(Base):
    __tablename__ = "courses"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, index=True, nullable=False)
    slug = Column(String, unique=True, index=True, nullable=False)
    description = Column(Text, nullable=True)
    short_description = Column(String, nullable=True)
    instructor_name = Column(String, nullable=True)
    level = Column(Enum(CourseLevelEnum), nullable=False, default=CourseLevelEnum.BEGINNER)
    price = Column(Numeric(10, 2, asdecimal=False), nullable=False, default=0)
    currency = Column(String(3), nullable=True)
    duration = Column(Integer, nullable=False, default=0) # Duration in minutes
    thumbnail_url = Column(String, nullable=True)
    is_published = Column(Boolean, default=False)
    is_featured = Column(Boolean, default=False)
    max_students = Column(Integer, nullable=True)
    total_students = Column(Integer, nullable=False, default=0)
    rating = Column(Float, nullable=False, default=0) # Average of published reviews
    total_ratings = Column(Integer, nullable=False, default=0)
    deleted_at = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    modules = relationship(
        "CourseModule",
        back_populates="course",
        order_by="[CourseModule.order_index, CourseModule.id]",
        cascade="all, delete-orphan",
    )
    enrollments = relationship("CourseEnrollment", back_populates="course", cascade="all, delete-orphan")
    payments = relationship("CoursePayment", back_populates="course")
    reviews = relationship("CourseReview", back_populates="course", cascade="all, delete-orphan")

    @property
    def is_free(self) -> bool:
        return not self.price or float(self.price) == 0

    @property
    def is_full(self) -> bool:
        return self.max_students is not None and (self.total_students or 0) >= self.max_students
