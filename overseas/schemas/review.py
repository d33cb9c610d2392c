from pydantic import BaseModel, ConfigDict, Field
from typing import Dict, Optional
from datetime import datetime
from overseas.schemas.response import PaginatedData


class ReviewCreate(BaseModel):
    rating: int = Field(..., ge=1, le=5)
    review_text: Optional[str] = Field(None, min_length=10, max_length=2000)


class Review(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    course_id: int
    user_id: int
    reviewer_name: str
    rating: int
    review_text: Optional[str] = None
    created_at: Optional[datetime] = None


class ReviewStatistics(BaseModel):
    average_rating: float
    total_reviews: int
    rating_distribution: Dict[int, int]


class CourseReviews(BaseModel):
    reviews: PaginatedData[Review]
    statistics: ReviewStatistics
