from sqlalchemy import (
    Column, Integer, String, Boolean, ForeignKey, Text, DateTime, func,
    UniqueConstraint, Index, JSON, literal_column,
)
from sqlalchemy.orm import relationship
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy import Enum as SAEnum
from .database import Base
import enum


class Difficulty(str, enum.Enum):
    beginner = "beginner"
    intermediate = "intermediate"
    advanced = "advanced"
    expert = "expert"


class QuestionType(str, enum.Enum):
    multiple_choice = "multiple_choice"
    true_false = "true_false"
    code_challenge = "code_challenge"


class QuestionDifficulty(str, enum.Enum):
    easy = "easy"
    medium = "medium"
    hard = "hard"


class ProgressStatus(str, enum.Enum):
    not_started = "not_started"
    in_progress = "in_progress"
    completed = "completed"


def _checked(enum_cls, name):
    # VARCHAR + CHECK rather than a native PG enum type
    return SAEnum(
        enum_cls,
        name=name,
        native_enum=False,
        create_constraint=True,
        length=20,
        values_callable=lambda e: [m.value for m in e],
    )


# JSONB on Postgres, plain JSON elsewhere (tests run on SQLite)
JSONList = JSON().with_variant(JSONB(), "postgresql")


# ---------------------------
# CONTENT SUBTREE
# ---------------------------
class Category(Base):
    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, index=True)
    slug = Column(String(100), unique=True, nullable=False)
    name = Column(String(100), nullable=False)
    description = Column(Text, nullable=True)
    icon = Column(String(100), nullable=True)
    order_index = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    topics = relationship(
        "Topic",
        back_populates="category",
        order_by="Topic.order_index.asc()",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self):
        return f"<Category {self.slug}>"


class Topic(Base):
    __tablename__ = "topics"

    id = Column(Integer, primary_key=True, index=True)
    category_id = Column(Integer, ForeignKey("categories.id", ondelete="CASCADE"), index=True, nullable=False)
    slug = Column(String(200), unique=True, nullable=False)
    name = Column(String(200), nullable=False)
    description = Column(Text, nullable=True)
    difficulty_level = Column(_checked(Difficulty, "ck_topic_difficulty"), index=True, nullable=False)
    estimated_time = Column(Integer, nullable=True)  # minutes
    order_index = Column(Integer, nullable=False, default=0)
    icon = Column(String(100), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    category = relationship("Category", back_populates="topics")
    lessons = relationship(
        "Lesson",
        back_populates="topic",
        order_by="Lesson.order_index.asc()",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self):
        return f"<Topic {self.slug}>"


class Lesson(Base):
    __tablename__ = "lessons"

    id = Column(Integer, primary_key=True, index=True)
    topic_id = Column(Integer, ForeignKey("topics.id", ondelete="CASCADE"), index=True, nullable=False)
    slug = Column(String(300), nullable=False)
    title = Column(String(300), nullable=False)
    content = Column(Text, nullable=False)  # markdown body
    summary = Column(Text, nullable=True)
    difficulty_level = Column(_checked(Difficulty, "ck_lesson_difficulty"), index=True, nullable=False)
    estimated_time = Column(Integer, nullable=True)
    order_index = Column(Integer, nullable=False, default=0)
    key_points = Column(JSONList, nullable=False, default=list)      # list[str]
    prerequisites = Column(JSONList, nullable=False, default=list)   # list[lesson slug]

    topic = relationship("Topic", back_populates="lessons")
    code_examples = relationship(
        "CodeExample",
        back_populates="lesson",
        order_by="CodeExample.order_index.asc()",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    quiz_questions = relationship(
        "QuizQuestion",
        back_populates="lesson",
        order_by="QuizQuestion.order_index.asc()",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    __table_args__ = (
        UniqueConstraint("topic_id", "slug", name="uq_lesson_topic_slug"),
    )


def lesson_document():
    """Searchable text of a lesson: title + summary + body."""
    return Lesson.title + " " + func.coalesce(Lesson.summary, "") + " " + Lesson.content


def lesson_tsvector():
    return func.to_tsvector(literal_column("'english'"), lesson_document())


# ranked search projection; GIN needs Postgres, other dialects scan
Index("ix_lessons_search", lesson_tsvector(), postgresql_using="gin").ddl_if(dialect="postgresql")


class CodeExample(Base):
    __tablename__ = "code_examples"

    id = Column(Integer, primary_key=True, index=True)
    lesson_id = Column(Integer, ForeignKey("lessons.id", ondelete="CASCADE"), index=True, nullable=False)
    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=True)
    language = Column(String(50), nullable=False)  # javascript, typescript, csharp, python, sql ...
    code = Column(Text, nullable=False)
    explanation = Column(Text, nullable=True)
    order_index = Column(Integer, nullable=False, default=0)
    is_interactive = Column(Boolean, nullable=False, default=False)

    lesson = relationship("Lesson", back_populates="code_examples")


class QuizQuestion(Base):
    __tablename__ = "quiz_questions"

    id = Column(Integer, primary_key=True, index=True)
    lesson_id = Column(Integer, ForeignKey("lessons.id", ondelete="CASCADE"), index=True, nullable=False)
    question_text = Column(Text, nullable=False)
    question_type = Column(_checked(QuestionType, "ck_quiz_question_type"), nullable=False)
    options = Column(Text, nullable=True)  # canonical compact JSON
    correct_answer = Column(Text, nullable=False)
    explanation = Column(Text, nullable=True)
    difficulty = Column(_checked(QuestionDifficulty, "ck_quiz_difficulty"), nullable=False)
    points = Column(Integer, nullable=False, default=10)
    order_index = Column(Integer, nullable=False, default=0)

    lesson = relationship("Lesson", back_populates="quiz_questions")


# ---------------------------
# USERS & PROGRESS (never written by the seed)
# ---------------------------
class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(100), unique=True, nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    progress = relationship(
        "UserProgress",
        back_populates="user",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


class UserProgress(Base):
    """
    Progress points at a lesson by its authored identity (topic + slug),
    not by lessons.id, so replacing a topic's lessons keeps these rows.
    Dropping the topic itself removes them.
    """
    __tablename__ = "user_progress"

    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False)
    topic_id = Column(Integer, ForeignKey("topics.id", ondelete="CASCADE"), index=True, nullable=False)
    lesson_slug = Column(String(300), nullable=False)
    status = Column(_checked(ProgressStatus, "ck_progress_status"), nullable=False, default=ProgressStatus.not_started)
    progress_percentage = Column(Integer, nullable=False, default=0)
    time_spent = Column(Integer, nullable=False, default=0)  # minutes
    notes = Column(Text, nullable=True)
    started_at = Column(DateTime(timezone=True), nullable=True)
    completed_at = Column(DateTime(timezone=True), nullable=True)
    last_accessed = Column(DateTime(timezone=True), server_default=func.now())

    user = relationship("User", back_populates="progress")

    __table_args__ = (
        UniqueConstraint("user_id", "topic_id", "lesson_slug", name="uq_progress_user_lesson"),
    )
