"""Demo data loader – professors, courses, ratings and tags for local development.

Run as a standalone process:
    python -m profrate.seed
"""

import logging

from profrate.config import get_settings
from profrate.database import Store
from profrate.models import Professor, Course, Rating, Tag

logger = logging.getLogger(__name__)

# ── demo data ────────────────────────────────────────────────────────────────

PROFESSORS = [
    ("John Doe", "Computer Science", "MIT"),
    ("Jane Smith", "Physics", "Harvard"),
    ("Bob Johnson", "Mathematics", "Stanford"),
    ("Alice Brown", "Biology", "CalTech"),
    ("Charlie Davis", "Chemistry", "Yale"),
]

# (professor name, course name)
COURSES = [
    ("John Doe", "Introduction to Programming"),
    ("John Doe", "Data Structures"),
    ("John Doe", "Algorithms"),
    ("Jane Smith", "Quantum Mechanics"),
    ("Jane Smith", "Thermodynamics"),
    ("Bob Johnson", "Linear Algebra"),
    ("Bob Johnson", "Calculus"),
    ("Alice Brown", "Molecular Biology"),
    ("Alice Brown", "Genetics"),
    ("Charlie Davis", "Organic Chemistry"),
    ("Charlie Davis", "Inorganic Chemistry"),
]

# (professor, course, user, rating, review, course_type, grade, email, date)
RATINGS = [
    ("John Doe", "Introduction to Programming", "user1", 5, "Great professor!",
     "offline", "A", "user1@example.com", "2023-05-01"),
    ("John Doe", "Data Structures", "user2", 4, "Very knowledgeable",
     "online", "B+", "user2@example.com", "2023-04-15"),
    ("Jane Smith", "Quantum Mechanics", "user3", 5, "Excellent explanations",
     "offline", "A-", "user3@example.com", "2023-05-10"),
    ("Bob Johnson", "Linear Algebra", "user4", 4, "Challenging but rewarding",
     "online", "B", "user4@example.com", "2023-05-05"),
    ("Alice Brown", "Molecular Biology", "user5", 5, "Inspiring lectures",
     "offline", "A+", "user5@example.com", "2023-05-12"),
    ("Charlie Davis", "Organic Chemistry", "user6", 4, "Clear and concise",
     "online", "A-", "user6@example.com", "2023-05-08"),
]

# (professor, course or None for a professor-level tag, tag, count)
TAGS = [
    ("John Doe", None, "Helpful", 10),
    ("John Doe", None, "Clear explanations", 8),
    ("John Doe", None, "Tough grader", 5),
    ("John Doe", "Introduction to Programming", "Engaging", 6),
    ("John Doe", "Introduction to Programming", "Challenging", 4),
    ("Jane Smith", None, "Knowledgeable", 7),
    ("Jane Smith", None, "Inspiring", 5),
    ("Jane Smith", "Quantum Mechanics", "Complex topics", 3),
    ("Bob Johnson", None, "Patient", 6),
    ("Bob Johnson", None, "Approachable", 4),
]


# ── loader ───────────────────────────────────────────────────────────────────

def seed_demo_data(store: Store) -> dict:
    """Insert the demo rows once; professors already present are left untouched."""
    stats = {"professors": 0, "courses": 0, "ratings": 0, "tags": 0}

    with store.session() as session:
        existing = {name for (name,) in session.query(Professor.name)}
        prof_ids: dict[str, int] = {}

        for name, department, university in PROFESSORS:
            if name in existing:
                continue
            prof = Professor(name=name, department=department, university=university)
            session.add(prof)
            session.flush()
            prof_ids[name] = prof.id
            stats["professors"] += 1

        if not prof_ids:
            logger.info("Demo data already present – nothing to seed")
            return stats

        course_ids: dict[str, int] = {}
        for prof_name, course_name in COURSES:
            if prof_name not in prof_ids:
                continue
            course = Course(professor_id=prof_ids[prof_name], name=course_name)
            session.add(course)
            session.flush()
            course_ids[course_name] = course.id
            stats["courses"] += 1

        for prof_name, course_name, user_id, value, review, course_type, grade, email, date in RATINGS:
            if prof_name not in prof_ids:
                continue
            session.add(Rating(
                professor_id=prof_ids[prof_name],
                course_id=course_ids.get(course_name),
                user_id=user_id,
                rating=value,
                review=review,
                course_type=course_type,
                grade=grade,
                email=email,
                date=date,
            ))
            stats["ratings"] += 1

        for prof_name, course_name, tag, count in TAGS:
            if prof_name not in prof_ids:
                continue
            session.add(Tag(
                professor_id=prof_ids[prof_name],
                course_id=course_ids.get(course_name) if course_name else None,
                tag=tag,
                count=count,
            ))
            stats["tags"] += 1

    logger.info(
        "Seed complete – %d profs, %d courses, %d ratings, %d tags",
        stats["professors"],
        stats["courses"],
        stats["ratings"],
        stats["tags"],
    )
    return stats


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    settings = get_settings()
    store = Store(settings.database_url)
    store.init_db()
    seed_demo_data(store)
