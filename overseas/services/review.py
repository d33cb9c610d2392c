import logging
import math
from sqlalchemy.orm import Session
from fastapi import HTTPException, status

from overseas.core.constants import ACCESS_GRANTING_STATUSES
from overseas.crud.course import course as crud_course
from overseas.crud.course_enrollment import course_enrollment as crud_enrollment
from overseas.crud.course_review import course_review as crud_review
from overseas.models.course import Course
from overseas.models.course_review import CourseReview
from overseas.models.user import User
from overseas.schemas.response import PaginatedData
from overseas.schemas.review import CourseReviews, Review, ReviewCreate, ReviewStatistics

logger = logging.getLogger(__name__)


class ReviewService:

    def _published_course(self, db: Session, course_id: int) -> Course:
        course = crud_course.get(db, id=course_id)
        if not course or not course.is_published:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Course not found")
        return course

    def _statistics(self, db: Session, course_id: int) -> ReviewStatistics:
        counts = crud_review.rating_counts(db, course_id=course_id)
        total = sum(counts.values())
        average = sum(rating * count for rating, count in counts.items()) / total if total else 0
        return ReviewStatistics(
            average_rating=round(average, 1),
            total_reviews=total,
            rating_distribution={rating: counts.get(rating, 0) for rating in range(1, 6)},
        )

    def list_reviews(self, db: Session, *, course_id: int, page: int = 1, limit: int = 10) -> CourseReviews:
        self._published_course(db, course_id)
        items, total = crud_review.get_published_page(db, course_id=course_id, skip=(page - 1) * limit, limit=limit)
        return CourseReviews(
            reviews=PaginatedData[Review](
                items=[Review.model_validate(r) for r in items],
                total=total,
                page=page,
                limit=limit,
                pages=math.ceil(total / limit) if limit else 0,
            ),
            statistics=self._statistics(db, course_id),
        )

    def create_review(self, db: Session, *, course_id: int, user: User, review_in: ReviewCreate) -> CourseReview:
        course = self._published_course(db, course_id)

        enrollment = crud_enrollment.get_by_user_and_course(db, user_id=user.id, course_id=course.id)
        if not enrollment or enrollment.status not in ACCESS_GRANTING_STATUSES:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="You must be enrolled in this course to leave a review"
            )
        if crud_review.get_by_user_and_course(db, user_id=user.id, course_id=course.id):
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="You have already reviewed this course")

        review = crud_review.create(
            db,
            obj_in={"course_id": course.id, "user_id": user.id, **review_in.model_dump()},
            commit=False,
        )

        stats = self._statistics(db, course.id)
        course.rating = stats.average_rating
        course.total_ratings = stats.total_reviews
        db.add(course)
        db.commit()
        db.refresh(review)
        logger.info(f"User {user.id} rated course {course.id} {review.rating}/5")
        return review


review_service = ReviewService()
