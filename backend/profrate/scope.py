"""Scope – the (professor, optional course) pair every read path filters on."""

from dataclasses import dataclass
from typing import Optional, Union

from profrate.errors import MalformedScope
from profrate.models import Rating, Tag


@dataclass(frozen=True)
class Scope:
    professor_id: int
    course_id: Optional[int] = None

    @classmethod
    def from_query(cls, professor_id: int, course_id: Union[int, str, None] = None) -> "Scope":
        """Build a scope from gateway input; a blank courseId means no course filter."""
        if course_id is None or (isinstance(course_id, str) and not course_id.strip()):
            return cls(professor_id)
        try:
            return cls(professor_id, int(course_id))
        except ValueError:
            raise MalformedScope(professor_id, course_id, f"Invalid courseId: {course_id!r}") from None

    @property
    def is_course_scoped(self) -> bool:
        return self.course_id is not None

    def rating_criteria(self) -> list:
        """Professor-wide rating reads include every course."""
        criteria = [Rating.professor_id == self.professor_id]
        if self.is_course_scoped:
            criteria.append(Rating.course_id == self.course_id)
        return criteria

    def tag_criteria(self) -> list:
        """Either professor-level tags or one course's tags, never both."""
        criteria = [Tag.professor_id == self.professor_id]
        if self.is_course_scoped:
            criteria.append(Tag.course_id == self.course_id)
        else:
            criteria.append(Tag.course_id.is_(None))
        return criteria
