"""Rating aggregation – averages, counts and the five-bucket distribution."""

from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from profrate.models import Professor, Rating
from profrate.schemas import DISTRIBUTION_LABELS, ProfessorSummary, RatingStats
from profrate.scope import Scope


def compute_stats(session: Session, scope: Scope) -> RatingStats:
    """Average, count and per-value distribution of the ratings in ``scope``.

    An empty scope yields average 0.0 with every bucket at 0. Rating values
    outside 1..5 are counted and averaged but have no bucket; such rows are a
    data-integrity problem this function does not repair.
    """
    rows = (
        session.query(Rating.rating, func.count(Rating.id))
        .filter(*scope.rating_criteria())
        .group_by(Rating.rating)
        .all()
    )

    distribution = {value: 0 for value in DISTRIBUTION_LABELS}
    total = 0
    rated = 0
    rating_sum = 0
    for value, count in rows:
        total += count
        if value is None:
            continue
        rated += count
        rating_sum += value * count
        if value in distribution:
            distribution[value] = count

    return RatingStats(
        average_rating=rating_sum / rated if rated else 0.0,
        number_of_ratings=total,
        distribution=distribution,
    )


def format_average(value: float) -> str:
    """Detail-view label: exactly one decimal digit, ties rounded up."""
    return str(Decimal(value).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def list_professors(session: Session, search: Optional[str] = None) -> list[ProfessorSummary]:
    """Professors whose name contains ``search`` (case-insensitive), with raw averages."""
    term = (search or "").lower()
    rows = (
        session.query(
            Professor,
            func.coalesce(func.avg(Rating.rating), 0).label("avg_rating"),
            func.count(Rating.id).label("cnt"),
        )
        .outerjoin(Rating, Rating.professor_id == Professor.id)
        .filter(func.lower(Professor.name).like(f"%{term}%"))
        .group_by(Professor.id)
        .order_by(Professor.id)
        .all()
    )
    return [
        ProfessorSummary(
            id=prof.id,
            name=prof.name,
            department=prof.department,
            university=prof.university,
            averageRating=float(avg_rating),
            numberOfRatings=cnt,
        )
        for prof, avg_rating, cnt in rows
    ]
