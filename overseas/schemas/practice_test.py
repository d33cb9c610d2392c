from pydantic import BaseModel, ConfigDict, Field
from typing import Dict, List, Optional
from datetime import datetime
from overseas.core.constants import DifficultyLevelEnum, PracticeTestTypeEnum, QuestionTypeEnum


class SectionCreate(BaseModel):
    section_name: str = Field(..., min_length=1)
    description: Optional[str] = None
    question_count: int = Field(1, ge=1)
    time_limit: int = Field(1, ge=1, description="Minutes allowed for the section")
    order_index: int = 0
    instructions: Optional[str] = None


class Section(SectionCreate):
    model_config = ConfigDict(from_attributes=True)

    id: int
    test_id: int


class PracticeTestBase(BaseModel):
    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    test_type: PracticeTestTypeEnum
    difficulty_level: DifficultyLevelEnum = DifficultyLevelEnum.MEDIUM
    duration: int = Field(..., ge=1, description="Minutes")
    total_questions: int = Field(0, ge=0)
    passing_score: int = Field(65, ge=0, le=100)
    price: float = Field(0, ge=0)
    is_free: bool = True
    instructions: Optional[str] = None


class PracticeTestCreate(PracticeTestBase):
    slug: Optional[str] = None
    is_published: bool = False
    sections: List[SectionCreate] = []


class PracticeTestUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=1)
    slug: Optional[str] = None
    description: Optional[str] = None
    test_type: Optional[PracticeTestTypeEnum] = None
    difficulty_level: Optional[DifficultyLevelEnum] = None
    duration: Optional[int] = Field(None, ge=1)
    total_questions: Optional[int] = Field(None, ge=0)
    passing_score: Optional[int] = Field(None, ge=0, le=100)
    price: Optional[float] = Field(None, ge=0)
    is_free: Optional[bool] = None
    instructions: Optional[str] = None


class PracticeTestStatusUpdate(BaseModel):
    is_published: bool


class PracticeTest(PracticeTestBase):
    model_config = ConfigDict(from_attributes=True)

    id: int
    slug: str
    is_published: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class PracticeTestDetail(PracticeTest):
    sections: List[Section] = []


class QuestionCreate(BaseModel):
    question_text: str = Field(..., min_length=1)
    question_type: QuestionTypeEnum = QuestionTypeEnum.MULTIPLE_CHOICE
    options: Optional[List[str]] = None
    correct_answer: Optional[str] = None
    explanation: Optional[str] = None
    points: int = Field(1, ge=1)
    difficulty: DifficultyLevelEnum = DifficultyLevelEnum.MEDIUM
    order_index: int = 0


class QuestionUpdate(BaseModel):
    question_text: Optional[str] = Field(None, min_length=1)
    question_type: Optional[QuestionTypeEnum] = None
    options: Optional[List[str]] = None
    correct_answer: Optional[str] = None
    explanation: Optional[str] = None
    points: Optional[int] = Field(None, ge=1)
    difficulty: Optional[DifficultyLevelEnum] = None
    order_index: Optional[int] = None


class Question(QuestionCreate):
    model_config = ConfigDict(from_attributes=True)

    id: int
    section_id: int


class SectionQuestions(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    section_name: str
    question_count: int
    questions: List[Question] = []


class PracticeTestStats(BaseModel):
    total_tests: int
    published_tests: int
    free_tests: int
    tests_by_type: Dict[str, int]
    tests_by_difficulty: Dict[str, int]
    recent_tests: List[PracticeTest]
