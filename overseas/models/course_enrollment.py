from sqlalchemy import Column, Integer, String, ForeignKey, DateTime, UniqueConstraint, Enum as SQLEnum, func
from sqlalchemy.orm import relationship
from overseas.core.database import Base
from overseas.core.constants import EnrollmentStatusEnum

class CourseEnrollment(Base):
    __tablename__ = "course_enrollments"
    __table_args__ = (UniqueConstraint("user_id", "course_id", name="uq_course_enrollment_user_course"),)

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    course_id = Column(Integer, ForeignKey("courses.id"), nullable=False, index=True)
    payment_id = Column(String, ForeignKey("course_payments.id"), nullable=True)
    status = Column(SQLEnum(EnrollmentStatusEnum), nullable=False, default=EnrollmentStatusEnum.ACTIVE)
    progress = Column(Integer, nullable=False, default=0)
    enrolled_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    last_accessed_at = Column(DateTime(timezone=True), nullable=True)
    completed_at = Column(DateTime(timezone=True), nullable=True)
    updated_at = Column(DateTime(timezone=True), onupdate=func.now(), nullable=True)

    user = relationship("User", back_populates="course_enrollments")
    course = relationship("Course", back_populates="enrollments")
    payment = relationship("CoursePayment", foreign_keys=[payment_id])
    lesson_progress = relationship("LessonProgress", back_populates="enrollment", cascade="all, delete-orphan")
