"""API routes – professors, profiles, ratings, health."""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.orm import Session

from profrate.config import Settings
from profrate.database import get_db
from profrate.profiles import get_professor, get_profile, list_courses, verify_scope
from profrate.ratings import list_ratings, submit_rating
from profrate.schemas import (
    CourseOut,
    HealthResponse,
    ProfessorDetail,
    ProfessorOut,
    ProfessorSummary,
    RatingCreate,
    RatingCreated,
    RatingDistribution,
    RatingOut,
)
from profrate.scope import Scope
from profrate.stats import compute_stats, list_professors

logger = logging.getLogger(__name__)

router = APIRouter()


def app_settings(request: Request) -> Settings:
    return request.app.state.settings


def _scope(professor_id: int, course_id: Optional[str], session: Session, settings: Settings,
           verify: bool = True) -> Scope:
    scope = Scope.from_query(professor_id, course_id)
    logger.debug("Resolved scope professor=%d course=%s", scope.professor_id, scope.course_id)
    if verify and settings.enforce_course_scope:
        verify_scope(session, scope)
    return scope


# ── Health ───────────────────────────────────────────────────────────────────

@router.get("/health", response_model=HealthResponse, tags=["health"])
def health():
    return HealthResponse()


# ── Professors ───────────────────────────────────────────────────────────────

@router.get("/professors", response_model=list[ProfessorSummary], tags=["professors"])
def professors_endpoint(search: Optional[str] = Query(None), db: Session = Depends(get_db)):
    return list_professors(db, search)


@router.get("/professors/{professor_id}", response_model=ProfessorOut, tags=["professors"])
def professor_endpoint(professor_id: int, db: Session = Depends(get_db)):
    return ProfessorOut.model_validate(get_professor(db, professor_id))


@router.get("/professors/{professor_id}/courses", response_model=list[CourseOut], tags=["professors"])
def courses_endpoint(professor_id: int, db: Session = Depends(get_db)):
    return [CourseOut.model_validate(c) for c in list_courses(db, professor_id)]


@router.get("/professors/{professor_id}/details", response_model=ProfessorDetail, tags=["professors"])
def details_endpoint(
    professor_id: int,
    course_id: Optional[str] = Query(None, alias="courseId"),
    db: Session = Depends(get_db),
    settings: Settings = Depends(app_settings),
):
    # get_profile checks course ownership only after the professor is found.
    scope = _scope(professor_id, course_id, db, settings, verify=False)
    return get_profile(db, scope, enforce_course_scope=settings.enforce_course_scope)


# ── Ratings ──────────────────────────────────────────────────────────────────

@router.get("/professors/{professor_id}/ratings", response_model=list[RatingOut], tags=["ratings"])
def ratings_endpoint(
    professor_id: int,
    course_id: Optional[str] = Query(None, alias="courseId"),
    db: Session = Depends(get_db),
    settings: Settings = Depends(app_settings),
):
    return list_ratings(db, _scope(professor_id, course_id, db, settings))


@router.get(
    "/professors/{professor_id}/rating-distribution",
    response_model=RatingDistribution,
    tags=["ratings"],
)
def distribution_endpoint(
    professor_id: int,
    course_id: Optional[str] = Query(None, alias="courseId"),
    db: Session = Depends(get_db),
    settings: Settings = Depends(app_settings),
):
    stats = compute_stats(db, _scope(professor_id, course_id, db, settings))
    return stats.labelled_distribution()


@router.post("/ratings", response_model=RatingCreated, tags=["ratings"])
def submit_rating_endpoint(req: RatingCreate, db: Session = Depends(get_db)):
    return RatingCreated(id=submit_rating(db, req))
