"""Tag ranking – the most-weighted descriptive tags for a scope."""

from sqlalchemy import func
from sqlalchemy.orm import Session

from profrate.models import Tag
from profrate.scope import Scope

DEFAULT_TAG_LIMIT = 5


def top_tags(session: Session, scope: Scope, limit: int = DEFAULT_TAG_LIMIT) -> list[str]:
    """Tag texts ordered by summed count, highest first.

    Rows sharing a tag text are summed. Equal totals are ordered by tag text
    ascending.
    """
    if limit <= 0:
        return []

    total = func.sum(Tag.count).label("total_count")
    rows = (
        session.query(Tag.tag, total)
        .filter(*scope.tag_criteria())
        .group_by(Tag.tag)
        .order_by(total.desc(), Tag.tag.asc())
        .limit(limit)
        .all()
    )
    return [tag for tag, _ in rows]
