"""Tests for rating aggregation and the professor listing."""

import pytest

from profrate.models import Professor, Rating
from profrate.scope import Scope
from profrate.stats import compute_stats, format_average, list_professors


class TestComputeStats:
    def test_professor_wide_scope(self, session, professor):
        stats = compute_stats(session, Scope(professor.id))
        assert stats.average_rating == pytest.approx(4.5)
        assert stats.number_of_ratings == 2
        assert stats.distribution == {5: 1, 4: 1, 3: 0, 2: 0, 1: 0}

    def test_course_scope(self, session, professor, courses):
        stats = compute_stats(session, Scope(professor.id, courses[1].id))
        assert stats.average_rating == pytest.approx(4.0)
        assert stats.number_of_ratings == 1
        assert stats.distribution[4] == 1
        assert stats.distribution[5] == 0

    def test_no_ratings_is_zero_not_nan(self, session):
        prof = Professor(name="Nobody Rated", department="History", university="Yale")
        session.add(prof)
        session.commit()

        stats = compute_stats(session, Scope(prof.id))
        assert stats.average_rating == 0.0
        assert stats.number_of_ratings == 0
        assert stats.distribution == {5: 0, 4: 0, 3: 0, 2: 0, 1: 0}

    def test_distribution_sums_to_count(self, session, professor):
        for value in (1, 2, 2, 3, 5):
            session.add(Rating(professor_id=professor.id, rating=value))
        session.commit()

        stats = compute_stats(session, Scope(professor.id))
        assert sum(stats.distribution.values()) == stats.number_of_ratings == 7
        assert stats.average_rating == pytest.approx((5 + 4 + 1 + 2 + 2 + 3 + 5) / 7)

    def test_labelled_distribution(self, session, professor):
        labelled = compute_stats(session, Scope(professor.id)).labelled_distribution()
        assert labelled.model_dump() == {"awesome": 1, "great": 1, "good": 0, "ok": 0, "awful": 0}


class TestFormatAverage:
    def test_one_decimal(self):
        assert format_average(4.5) == "4.5"
        assert format_average(4.0) == "4.0"
        assert format_average(0) == "0.0"

    def test_rounds(self):
        assert format_average(13 / 3) == "4.3"
        assert format_average(14 / 3) == "4.7"

    def test_exact_ties_round_up(self):
        assert format_average(4.25) == "4.3"
        assert format_average(3.25) == "3.3"
        assert format_average(2.25) == "2.3"
        assert format_average(1.25) == "1.3"


class TestListProfessors:
    def test_returns_raw_average(self, session, professor):
        results = list_professors(session)
        assert len(results) == 1
        assert results[0].name == "John Doe"
        assert results[0].averageRating == pytest.approx(4.5)
        assert results[0].numberOfRatings == 2

    def test_search_is_case_insensitive_substring(self, session, professor):
        session.add(Professor(name="Jane Smith", department="Physics", university="Harvard"))
        session.commit()

        assert [p.name for p in list_professors(session, "DOE")] == ["John Doe"]
        assert [p.name for p in list_professors(session, "j")] == ["John Doe", "Jane Smith"]
        assert list_professors(session, "zzz") == []

    def test_empty_search_matches_all(self, session, professor):
        session.add(Professor(name="Jane Smith", department="Physics", university="Harvard"))
        session.commit()

        assert len(list_professors(session, "")) == 2
        assert len(list_professors(session, None)) == 2

    def test_unrated_professor_has_zero_average(self, session):
        session.add(Professor(name="Bob Johnson", department="Mathematics", university="Stanford"))
        session.commit()

        (result,) = list_professors(session)
        assert result.averageRating == 0.0
        assert result.numberOfRatings == 0
