"""Tests for the composed professor detail view."""

import pytest

from profrate.errors import MalformedScope, ProfessorNotFound
from profrate.models import Course, Professor, Rating
from profrate.profiles import get_professor, get_profile, list_courses, verify_scope
from profrate.scope import Scope


class TestGetProfile:
    def test_professor_wide_detail(self, session, professor):
        detail = get_profile(session, Scope(professor.id))
        assert detail.name == "John Doe"
        assert detail.department == "Computer Science"
        assert detail.university == "MIT"
        assert detail.averageRating == "4.5"
        assert detail.numberOfRatings == 2
        assert detail.topTags == ["Helpful", "Clear", "Tough"]
        assert [c.name for c in detail.courses] == ["Introduction to Programming", "Data Structures"]

    def test_course_scope_keeps_full_course_list(self, session, professor, courses):
        detail = get_profile(session, Scope(professor.id, courses[0].id))
        assert detail.averageRating == "5.0"
        assert detail.numberOfRatings == 1
        assert detail.topTags == ["Engaging", "Challenging"]
        assert len(detail.courses) == 2

    def test_unrated_professor(self, session):
        prof = Professor(name="New Hire", department="Art", university="Yale")
        session.add(prof)
        session.commit()

        detail = get_profile(session, Scope(prof.id))
        assert detail.averageRating == "0.0"
        assert detail.numberOfRatings == 0
        assert detail.topTags == []
        assert detail.courses == []

    def test_tied_average_rounds_up(self, session):
        prof = Professor(name="Half Up", department="Statistics", university="MIT")
        session.add(prof)
        session.flush()
        session.add_all([Rating(professor_id=prof.id, rating=value) for value in (5, 4, 4, 4)])
        session.commit()

        assert get_profile(session, Scope(prof.id)).averageRating == "4.3"

    def test_missing_professor_raises(self, session):
        with pytest.raises(ProfessorNotFound):
            get_profile(session, Scope(404))

    def test_foreign_course_allowed_by_default(self, session, professor):
        other = Professor(name="Jane Smith", department="Physics", university="Harvard")
        session.add(other)
        session.flush()
        foreign = Course(professor_id=other.id, name="Quantum Mechanics")
        session.add(foreign)
        session.commit()

        detail = get_profile(session, Scope(professor.id, foreign.id))
        assert detail.numberOfRatings == 0

    def test_foreign_course_rejected_when_enforced(self, session, professor):
        other = Professor(name="Jane Smith", department="Physics", university="Harvard")
        session.add(other)
        session.flush()
        foreign = Course(professor_id=other.id, name="Quantum Mechanics")
        session.add(foreign)
        session.commit()

        with pytest.raises(MalformedScope):
            get_profile(session, Scope(professor.id, foreign.id), enforce_course_scope=True)


class TestProfessorReads:
    def test_get_professor(self, session, professor):
        assert get_professor(session, professor.id).name == "John Doe"

    def test_get_missing_professor(self, session):
        with pytest.raises(ProfessorNotFound):
            get_professor(session, 12345)

    def test_list_courses(self, session, professor):
        assert len(list_courses(session, professor.id)) == 2
        assert list_courses(session, 999) == []

    def test_verify_scope_accepts_owned_course(self, session, professor, courses):
        verify_scope(session, Scope(professor.id, courses[0].id))
        verify_scope(session, Scope(professor.id))
