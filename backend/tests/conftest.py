import pytest
from fastapi.testclient import TestClient

from profrate.config import Settings
from profrate.database import Store
from profrate.main import create_app
from profrate.models import Course, Professor, Rating, Tag


@pytest.fixture
def store():
    s = Store("sqlite://")
    s.init_db()
    yield s
    s.dispose()


@pytest.fixture
def session(store):
    sess = store.session_factory()
    yield sess
    sess.close()


@pytest.fixture
def settings():
    return Settings(database_url="sqlite://", seed_on_startup=False)


@pytest.fixture
def client(store, settings):
    return TestClient(create_app(settings=settings, store=store))


@pytest.fixture
def professor(session):
    """A professor teaching two courses, with ratings [5, 4] and a few tags."""
    prof = Professor(name="John Doe", department="Computer Science", university="MIT")
    session.add(prof)
    session.flush()

    intro = Course(professor_id=prof.id, name="Introduction to Programming")
    structures = Course(professor_id=prof.id, name="Data Structures")
    session.add_all([intro, structures])
    session.flush()

    session.add_all([
        Rating(professor_id=prof.id, course_id=intro.id, user_id="user1", rating=5,
               review="Great professor!", course_type="offline", grade="A",
               email="user1@example.com", date="2023-05-01"),
        Rating(professor_id=prof.id, course_id=structures.id, user_id="user2", rating=4,
               review="Very knowledgeable", course_type="online", grade="B+",
               email="user2@example.com", date="2023-04-15"),
        Tag(professor_id=prof.id, course_id=None, tag="Helpful", count=10),
        Tag(professor_id=prof.id, course_id=None, tag="Clear", count=8),
        Tag(professor_id=prof.id, course_id=None, tag="Tough", count=5),
        Tag(professor_id=prof.id, course_id=intro.id, tag="Engaging", count=6),
        Tag(professor_id=prof.id, course_id=intro.id, tag="Challenging", count=4),
    ])
    session.commit()
    return prof


@pytest.fixture
def courses(session, professor):
    return session.query(Course).filter_by(professor_id=professor.id).order_by(Course.id).all()
