"""Rating intake and scoped rating listing."""

import logging
from datetime import datetime, timezone

from sqlalchemy.orm import Session

from profrate.models import Course, Rating
from profrate.schemas import RatingCreate, RatingOut
from profrate.scope import Scope

logger = logging.getLogger(__name__)


def submission_timestamp(now: datetime = None) -> str:
    """ISO-8601 UTC with millisecond precision, e.g. 2023-05-01T12:00:00.000Z."""
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def submit_rating(session: Session, payload: RatingCreate) -> int:
    """Append one rating row and return its id.

    The submission date is assigned here. Rating range and referential
    integrity are left to the store's own constraints.
    """
    rating = Rating(**payload.model_dump(), date=submission_timestamp())
    session.add(rating)
    session.commit()
    logger.info(
        "Stored rating %d for professor %s (course=%s)",
        rating.id, rating.professor_id, rating.course_id,
    )
    return rating.id


def list_ratings(session: Session, scope: Scope) -> list[RatingOut]:
    """Raw rating rows in ``scope`` with the rated course's name joined in."""
    rows = (
        session.query(Rating, Course.name)
        .outerjoin(Course, Rating.course_id == Course.id)
        .filter(*scope.rating_criteria())
        .order_by(Rating.id)
        .all()
    )
    results = []
    for rating, course_name in rows:
        out = RatingOut.model_validate(rating)
        out.course_name = course_name
        results.append(out)
    return results
