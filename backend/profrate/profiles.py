"""Professor reads and the composed detail view."""

import logging

from sqlalchemy.orm import Session

from profrate.errors import MalformedScope, ProfessorNotFound
from profrate.models import Course, Professor
from profrate.schemas import CourseOut, ProfessorDetail
from profrate.scope import Scope
from profrate.stats import compute_stats, format_average
from profrate.tags import DEFAULT_TAG_LIMIT, top_tags

logger = logging.getLogger(__name__)


def get_professor(session: Session, professor_id: int) -> Professor:
    prof = session.query(Professor).filter_by(id=professor_id).first()
    if prof is None:
        raise ProfessorNotFound(professor_id)
    return prof


def list_courses(session: Session, professor_id: int) -> list[Course]:
    return session.query(Course).filter_by(professor_id=professor_id).order_by(Course.id).all()


def verify_scope(session: Session, scope: Scope):
    """Raise MalformedScope if the scope's course is not taught by its professor."""
    if not scope.is_course_scoped:
        return
    owned = (
        session.query(Course.id)
        .filter_by(id=scope.course_id, professor_id=scope.professor_id)
        .first()
    )
    if owned is None:
        raise MalformedScope(scope.professor_id, scope.course_id)


def get_profile(session: Session, scope: Scope, enforce_course_scope: bool = False) -> ProfessorDetail:
    """Compose the single-professor detail view.

    The course list is always the professor's full list; only the rating
    statistics and top tags follow ``scope.course_id``.
    """
    prof = get_professor(session, scope.professor_id)
    if enforce_course_scope:
        verify_scope(session, scope)

    courses = list_courses(session, prof.id)
    stats = compute_stats(session, scope)
    tags = top_tags(session, scope, limit=DEFAULT_TAG_LIMIT)

    logger.debug(
        "Composed profile for professor %d (course=%s): %d ratings, %d tags",
        prof.id, scope.course_id, stats.number_of_ratings, len(tags),
    )
    return ProfessorDetail(
        id=prof.id,
        name=prof.name,
        department=prof.department,
        university=prof.university,
        courses=[CourseOut.model_validate(c) for c in courses],
        averageRating=format_average(stats.average_rating),
        numberOfRatings=stats.number_of_ratings,
        topTags=tags,
    )
