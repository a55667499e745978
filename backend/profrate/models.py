"""SQLAlchemy models – professors, the courses they teach, ratings and tags."""

from sqlalchemy import Column, Integer, String, Text, ForeignKey, Index
from sqlalchemy.orm import declarative_base, relationship

Base = declarative_base()


class Professor(Base):
    __tablename__ = "professors"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(256), unique=True)
    department = Column(String(128))
    university = Column(String(128))

    courses = relationship("Course", back_populates="professor")
    ratings = relationship("Rating", back_populates="professor")


class Course(Base):
    __tablename__ = "courses"

    id = Column(Integer, primary_key=True, autoincrement=True)
    professor_id = Column(Integer, ForeignKey("professors.id"))
    name = Column(String(256), unique=True)

    professor = relationship("Professor", back_populates="courses")


class Rating(Base):
    __tablename__ = "ratings"

    id = Column(Integer, primary_key=True, autoincrement=True)
    professor_id = Column(Integer, ForeignKey("professors.id"))
    course_id = Column(Integer, ForeignKey("courses.id"))
    user_id = Column(String(128))
    rating = Column(Integer)              # 1..5, not enforced here
    review = Column(Text)
    course_type = Column(String(32))      # 'online' | 'offline', opaque
    grade = Column(String(8))
    email = Column(String(256))
    date = Column(String(32))             # ISO-8601, server assigned

    professor = relationship("Professor", back_populates="ratings")
    course = relationship("Course")

    __table_args__ = (
        Index("ix_ratings_scope", "professor_id", "course_id"),
    )


class Tag(Base):
    """Administered descriptive tag; ``course_id`` NULL means professor-level."""
    __tablename__ = "tags"

    id = Column(Integer, primary_key=True, autoincrement=True)
    professor_id = Column(Integer, ForeignKey("professors.id"))
    course_id = Column(Integer, ForeignKey("courses.id"))
    tag = Column(String(128))
    count = Column(Integer)

    __table_args__ = (
        Index("ix_tags_scope", "professor_id", "course_id"),
    )
