from typing import List, Optional
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from overseas.core.constants import DifficultyLevelEnum, PracticeTestTypeEnum
from overseas.schemas.practice_test import (
    PracticeTest,
    PracticeTestCreate,
    PracticeTestDetail,
    PracticeTestStats,
    PracticeTestStatusUpdate,
    PracticeTestUpdate,
    Question,
    QuestionCreate,
    QuestionUpdate,
    SectionQuestions,
)
from overseas.schemas.response import APIResponse, PaginatedData
from overseas.services.practice_test import practice_test_service
from overseas.utils import deps

router = APIRouter(dependencies=[Depends(deps.require_admin)])


@router.get("", response_model=APIResponse[PaginatedData[PracticeTest]])
def list_tests(
    db: Session = Depends(deps.get_db),
    search: Optional[str] = None,
    test_type: Optional[PracticeTestTypeEnum] = None,
    difficulty: Optional[DifficultyLevelEnum] = None,
    is_published: Optional[bool] = None,
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
):
    tests = practice_test_service.list_tests(
        db,
        search=search,
        test_type=test_type,
        difficulty=difficulty,
        is_published=is_published,
        page=page,
        limit=limit,
    )
    return APIResponse(message="Tests retrieved successfully", data=tests)


@router.get("/stats", response_model=APIResponse[PracticeTestStats])
def get_test_stats(db: Session = Depends(deps.get_db)):
    return APIResponse(message="Test statistics retrieved successfully", data=practice_test_service.get_stats(db))


@router.post("", response_model=APIResponse[PracticeTestDetail], status_code=status.HTTP_201_CREATED)
def create_test(
    *,
    db: Session = Depends(deps.get_transactional_db),
    test_in: PracticeTestCreate
):
    test = practice_test_service.create_test(db, test_in=test_in)
    return APIResponse(message="Test created successfully", data=PracticeTestDetail.model_validate(test))


@router.get("/{test_id}", response_model=APIResponse[PracticeTestDetail])
def read_test(
    *,
    db: Session = Depends(deps.get_db),
    test_id: int
):
    test = practice_test_service.get_test(db, test_id=test_id)
    return APIResponse(message="Test retrieved successfully", data=PracticeTestDetail.model_validate(test))


@router.put("/{test_id}", response_model=APIResponse[PracticeTest])
def update_test(
    *,
    db: Session = Depends(deps.get_transactional_db),
    test_id: int,
    test_in: PracticeTestUpdate
):
    test = practice_test_service.update_test(db, test_id=test_id, test_in=test_in)
    return APIResponse(message="Test updated successfully", data=PracticeTest.model_validate(test))


@router.patch("/{test_id}/status", response_model=APIResponse[PracticeTest])
def set_test_status(
    *,
    db: Session = Depends(deps.get_transactional_db),
    test_id: int,
    status_in: PracticeTestStatusUpdate
):
    test = practice_test_service.set_publish_status(db, test_id=test_id, is_published=status_in.is_published)
    state = "published" if test.is_published else "moved to draft"
    return APIResponse(message=f"Test {state}", data=PracticeTest.model_validate(test))


@router.delete("/{test_id}", response_model=APIResponse[PracticeTest])
def delete_test(
    *,
    db: Session = Depends(deps.get_transactional_db),
    test_id: int
):
    test = practice_test_service.delete_test(db, test_id=test_id)
    return APIResponse(message="Test deleted successfully", data=PracticeTest.model_validate(test))


# Questions

@router.get("/{test_id}/questions", response_model=APIResponse[List[SectionQuestions]])
def list_questions(
    *,
    db: Session = Depends(deps.get_db),
    test_id: int
):
    sections = practice_test_service.get_questions(db, test_id=test_id)
    return APIResponse(
        message="Questions retrieved successfully",
        data=[SectionQuestions.model_validate(s) for s in sections]
    )


@router.post(
    "/{test_id}/sections/{section_id}/questions",
    response_model=APIResponse[Question],
    status_code=status.HTTP_201_CREATED
)
def create_question(
    *,
    db: Session = Depends(deps.get_transactional_db),
    test_id: int,
    section_id: int,
    question_in: QuestionCreate
):
    question = practice_test_service.create_question(
        db, test_id=test_id, section_id=section_id, question_in=question_in
    )
    return APIResponse(message="Question created successfully", data=Question.model_validate(question))


@router.put("/{test_id}/questions/{question_id}", response_model=APIResponse[Question])
def update_question(
    *,
    db: Session = Depends(deps.get_transactional_db),
    test_id: int,
    question_id: int,
    question_in: QuestionUpdate
):
    question = practice_test_service.update_question(
        db, test_id=test_id, question_id=question_id, question_in=question_in
    )
    return APIResponse(message="Question updated successfully", data=Question.model_validate(question))


@router.delete("/{test_id}/questions/{question_id}", response_model=APIResponse[Question])
def delete_question(
    *,
    db: Session = Depends(deps.get_transactional_db),
    test_id: int,
    question_id: int
):
    question = practice_test_service.delete_question(db, test_id=test_id, question_id=question_id)
    return APIResponse(message="Question deleted successfully", data=Question.model_validate(question))
