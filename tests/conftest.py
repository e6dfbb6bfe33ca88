"""Shared fixtures: a throwaway SQLite catalog and an authored content tree in tmp_path."""

import copy
import logging

import pytest
from sqlalchemy import select

from learnhub.database import init_db, make_engine, make_session_maker
from learnhub.models import Category, CodeExample, Lesson, QuizQuestion, Topic

ROUTER_DIR = "frontend/beginner/react-router"

ROUTER_TOPIC = {
    "slug": "react-router",
    "name": "React Router",
    "description": "Client-side routing for single page React applications",
    "estimated_time": 90,
    "order_index": 1,
}

ROUTER_LESSONS = [
    {
        "slug": "router-setup-basics",
        "title": "Router Setup & Basics",
        "summary": "Wrap the app in a router and declare routes",
        "content": "# Router setup\n\nBrowserRouter keeps the UI in sync with the URL.",
        "difficulty_level": "beginner",
        "estimated_time": 30,
        "order_index": 1,
        "key_points": ["BrowserRouter wraps the app", "Routes renders the first match"],
    },
    {
        "slug": "dynamic-routes-protected",
        "title": "Dynamic & Protected Routes",
        "summary": "URL params and auth guards",
        "content": "# Dynamic routes\n\nuseParams reads :id segments; a guard component redirects.",
        "difficulty_level": "beginner",
        "estimated_time": 45,
        "order_index": 2,
        "key_points": ["useParams", "Navigate for redirects"],
    },
]

ROUTER_EXAMPLES = {
    "router-setup-basics": [
        {
            "title": "Minimal router",
            "language": "javascript",
            "code": "<BrowserRouter><Routes><Route path='/' element={<Home />} /></Routes></BrowserRouter>",
            "explanation": "One route at the root.",
        },
    ],
    "dynamic-routes-protected": [
        {
            "title": "Route guard",
            "language": "javascript",
            "code": "return user ? children : <Navigate to='/login' />;",
        },
    ],
}


def _module(**values) -> str:
    return "".join(f"{name} = {value!r}\n" for name, value in values.items())


@pytest.fixture
async def engine(tmp_path):
    eng = make_engine(f"sqlite+aiosqlite:///{tmp_path / 'catalog.db'}")
    await init_db(eng)
    yield eng
    await eng.dispose()


@pytest.fixture
def session_maker(engine):
    return make_session_maker(engine)


@pytest.fixture
def content_root(tmp_path):
    root = tmp_path / "content"
    root.mkdir()
    return root


@pytest.fixture
def write_topic(content_root):
    """Write (or rewrite) a topic directory; a None examples/quiz removes that module."""

    def _write(rel, topic, lessons, examples=None, quiz=None):
        path = content_root / rel
        path.mkdir(parents=True, exist_ok=True)
        (path / "content.py").write_text(_module(topic=topic, lessons=lessons), encoding="utf-8")
        for filename, attr, value in (("examples.py", "examples", examples), ("quiz.py", "quiz", quiz)):
            target = path / filename
            if value is None:
                target.unlink(missing_ok=True)
            else:
                target.write_text(_module(**{attr: value}), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def router_lessons():
    return copy.deepcopy(ROUTER_LESSONS)


@pytest.fixture
def router_examples():
    return copy.deepcopy(ROUTER_EXAMPLES)


@pytest.fixture
def router_tree(write_topic):
    """Scenario tree: frontend/beginner/react-router with two lessons, one example each."""

    def _write(lessons=None, examples=None, quiz=None, topic=None, rel=ROUTER_DIR):
        return write_topic(
            rel,
            topic if topic is not None else copy.deepcopy(ROUTER_TOPIC),
            lessons if lessons is not None else copy.deepcopy(ROUTER_LESSONS),
            examples if examples is not None else copy.deepcopy(ROUTER_EXAMPLES),
            quiz,
        )

    return _write


@pytest.fixture
def snapshot(session_maker):
    """Content rows without surrogate keys, in a deterministic order."""

    async def _snapshot():
        async with session_maker() as db:
            categories = (await db.execute(
                select(Category.slug, Category.name, Category.description, Category.icon, Category.order_index)
                .order_by(Category.slug)
            )).all()
            topics = (await db.execute(
                select(
                    Category.slug, Topic.slug, Topic.name, Topic.description,
                    Topic.difficulty_level, Topic.estimated_time, Topic.order_index,
                )
                .join(Category, Category.id == Topic.category_id)
                .order_by(Topic.slug)
            )).all()
            lessons = (await db.execute(
                select(
                    Topic.slug, Lesson.slug, Lesson.title, Lesson.content, Lesson.summary,
                    Lesson.difficulty_level, Lesson.estimated_time, Lesson.order_index,
                    Lesson.key_points, Lesson.prerequisites,
                )
                .join(Topic, Topic.id == Lesson.topic_id)
                .order_by(Topic.slug, Lesson.slug)
            )).all()
            examples = (await db.execute(
                select(
                    Lesson.slug, CodeExample.title, CodeExample.description, CodeExample.language,
                    CodeExample.code, CodeExample.explanation, CodeExample.order_index,
                    CodeExample.is_interactive,
                )
                .join(Lesson, Lesson.id == CodeExample.lesson_id)
                .order_by(Lesson.slug, CodeExample.order_index)
            )).all()
            quiz = (await db.execute(
                select(
                    Lesson.slug, QuizQuestion.question_text, QuizQuestion.question_type,
                    QuizQuestion.options, QuizQuestion.correct_answer, QuizQuestion.explanation,
                    QuizQuestion.difficulty, QuizQuestion.points, QuizQuestion.order_index,
                )
                .join(Lesson, Lesson.id == QuizQuestion.lesson_id)
                .order_by(Lesson.slug, QuizQuestion.order_index)
            )).all()
        return {
            "categories": [tuple(r) for r in categories],
            "topics": [tuple(r) for r in topics],
            "lessons": [tuple(r) for r in lessons],
            "code_examples": [tuple(r) for r in examples],
            "quiz_questions": [tuple(r) for r in quiz],
        }

    return _snapshot


@pytest.fixture
def restore_root_logging():
    """The CLI reconfigures the root logger; put it back afterwards."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
