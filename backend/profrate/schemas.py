"""Pydantic schemas for request / response validation."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


DISTRIBUTION_LABELS = {5: "awesome", 4: "great", 3: "good", 2: "ok", 1: "awful"}


# ── Shared ───────────────────────────────────────────────────────────────────

class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "1.0.0"


class ErrorResponse(BaseModel):
    error: str


# ── Professor / Course ───────────────────────────────────────────────────────

class ProfessorOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: Optional[str] = None
    department: Optional[str] = None
    university: Optional[str] = None


class ProfessorSummary(ProfessorOut):
    averageRating: float = 0.0
    numberOfRatings: int = 0


class CourseOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    professor_id: Optional[int] = None
    name: Optional[str] = None


class ProfessorDetail(ProfessorOut):
    courses: list[CourseOut] = Field(default_factory=list)
    averageRating: str = "0.0"
    numberOfRatings: int = 0
    topTags: list[str] = Field(default_factory=list)


# ── Rating statistics ────────────────────────────────────────────────────────

class RatingStats(BaseModel):
    average_rating: float = 0.0
    number_of_ratings: int = 0
    distribution: dict[int, int] = Field(
        default_factory=lambda: {value: 0 for value in DISTRIBUTION_LABELS}
    )

    def labelled_distribution(self) -> "RatingDistribution":
        return RatingDistribution(**{
            label: self.distribution.get(value, 0)
            for value, label in DISTRIBUTION_LABELS.items()
        })


class RatingDistribution(BaseModel):
    awesome: int = 0
    great: int = 0
    good: int = 0
    ok: int = 0
    awful: int = 0


# ── Ratings ──────────────────────────────────────────────────────────────────

class RatingCreate(BaseModel):
    professor_id: Optional[int] = None
    course_id: Optional[int] = None
    user_id: Optional[str] = None
    rating: Optional[int] = None
    review: Optional[str] = None
    course_type: Optional[str] = None
    grade: Optional[str] = None
    email: Optional[str] = None


class RatingCreated(BaseModel):
    id: int


class RatingOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    professor_id: Optional[int] = None
    course_id: Optional[int] = None
    user_id: Optional[str] = None
    rating: Optional[int] = None
    review: Optional[str] = None
    course_type: Optional[str] = None
    grade: Optional[str] = None
    email: Optional[str] = None
    date: Optional[str] = None
    course_name: Optional[str] = None
