"""Imports every mapped class so string relationships resolve and metadata is complete."""
from overseas.models.user import User
from overseas.models.course import Course
from overseas.models.course_module import CourseModule
from overseas.models.lesson import Lesson
from overseas.models.course_enrollment import CourseEnrollment
from overseas.models.lesson_progress import LessonProgress
from overseas.models.payment import CoursePayment
from overseas.models.event import Event
from overseas.models.appointment import Appointment
from overseas.models.consultation_inquiry import ConsultationInquiry
from overseas.models.content import Testimonial, Partner, Statistic, JourneyStep, Page
from overseas.models.course_review import CourseReview
from overseas.models.practice_test import PracticeTest, PracticeTestSection, PracticeQuestion

__all__ = [
    "User",
    "Course",
    "CourseModule",
    "Lesson",
    "CourseEnrollment",
    "LessonProgress",
    "CoursePayment",
    "Event",
    "Appointment",
    "ConsultationInquiry",
    "Testimonial",
    "Partner",
    "Statistic",
    "JourneyStep",
    "Page",
    "CourseReview",
    "PracticeTest",
    "PracticeTestSection",
    "PracticeQuestion",
]
