from enum import Enum


class RoleEnum(str, Enum):
    STUDENT = "STUDENT"
    INSTRUCTOR = "INSTRUCTOR"
    ADMIN = "ADMIN"
    SUPER_ADMIN = "SUPER_ADMIN"

ADMIN_ROLES = (RoleEnum.ADMIN, RoleEnum.SUPER_ADMIN)

class CourseLevelEnum(str, Enum):
    BEGINNER = "BEGINNER"
    INTERMEDIATE = "INTERMEDIATE"
    ADVANCED = "ADVANCED"
    ALL_LEVELS = "ALL_LEVELS"

class LessonTypeEnum(str, Enum):
    VIDEO = "VIDEO"
    TEXT = "TEXT"
    QUIZ = "QUIZ"
    ASSIGNMENT = "ASSIGNMENT"

class EnrollmentStatusEnum(str, Enum):
    ACTIVE = "ACTIVE"
    SUSPENDED = "SUSPENDED"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"

# Statuses that open lesson content of a paid course
ACCESS_GRANTING_STATUSES = (EnrollmentStatusEnum.ACTIVE, EnrollmentStatusEnum.COMPLETED)

class PaymentGatewayEnum(str, Enum):
    RAZORPAY = "razorpay"
    STRIPE = "stripe"

class PaymentStatusEnum(str, Enum):
    PENDING = "PENDING"
    COMPLETED = "COMPLETED"
    FAILED = "FAILED"
    REFUNDED = "REFUNDED"

class EventTypeEnum(str, Enum):
    WEBINAR = "WEBINAR"
    SEMINAR = "SEMINAR"
    WORKSHOP = "WORKSHOP"
    EDUCATION_FAIR = "EDUCATION_FAIR"
    INFO_SESSION = "INFO_SESSION"

class AppointmentStatusEnum(str, Enum):
    SCHEDULED = "SCHEDULED"
    CONFIRMED = "CONFIRMED"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"
    NO_SHOW = "NO_SHOW"
    RESCHEDULED = "RESCHEDULED"

class InquiryQueryTypeEnum(str, Enum):
    UNIVERSITY_SELECTION = "university_selection"
    VISA_GUIDANCE = "visa_guidance"
    DOCUMENT_HELP = "document_help"
    GENERAL_INQUIRY = "general_inquiry"

class InquiryStatusEnum(str, Enum):
    NEW = "NEW"
    CONTACTED = "CONTACTED"
    IN_PROGRESS = "IN_PROGRESS"
    CLOSED = "CLOSED"

class PartnerTypeEnum(str, Enum):
    UNIVERSITY = "UNIVERSITY"
    COLLEGE = "COLLEGE"
    INSTITUTE = "INSTITUTE"
    ORGANIZATION = "ORGANIZATION"

class PracticeTestTypeEnum(str, Enum):
    IELTS = "IELTS"
    TOEFL = "TOEFL"
    PTE = "PTE"
    GRE = "GRE"
    GMAT = "GMAT"
    SAT = "SAT"
    ACT = "ACT"
    DUOLINGO = "DUOLINGO"
    CAEL = "CAEL"
    CELPIP = "CELPIP"
    CUSTOM = "CUSTOM"

class DifficultyLevelEnum(str, Enum):
    EASY = "EASY"
    MEDIUM = "MEDIUM"
    HARD = "HARD"
    EXPERT = "EXPERT"

class QuestionTypeEnum(str, Enum):
    MULTIPLE_CHOICE = "MULTIPLE_CHOICE"
    TRUE_FALSE = "TRUE_FALSE"
    FILL_BLANK = "FILL_BLANK"
    ESSAY = "ESSAY"
    SPEAKING = "SPEAKING"

# Question types answered by picking one of the listed options
CHOICE_QUESTION_TYPES = (QuestionTypeEnum.MULTIPLE_CHOICE, QuestionTypeEnum.TRUE_FALSE)
