# learnhub/services/normalizer.py
"""
Turn the raw records of one topic directory into rows for the catalog.

- validates shapes (TopicRecord / LessonRecord / ...), reporting the
  first failing field as `<file>:<path>`
- fills order_index from the record or its 1-based position
- lessons without a difficulty take the directory's difficulty
- attaches examples/quiz to lessons by slug; unknown keys are dropped
  with a warning
- canonicalizes quiz options to compact JSON text
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Iterable, Optional, Sequence, Type

from pydantic import BaseModel, ValidationError

from learnhub.schemas import CodeExampleRecord, LessonRecord, QuizQuestionRecord, TopicRecord
from learnhub.services.errors import ContentError
from learnhub.services.loader import EXAMPLES_MODULE, QUIZ_MODULE, LoadedTopic
from learnhub.services.walker import CONTENT_MODULE, TopicDir

logger = logging.getLogger(__name__)


@dataclass
class LessonRows:
    lesson: dict[str, Any]
    code_examples: list[dict[str, Any]] = field(default_factory=list)
    quiz_questions: list[dict[str, Any]] = field(default_factory=list)


@dataclass
class TopicRows:
    rel_path: str
    category_slug: str
    topic: dict[str, Any]
    lessons: list[LessonRows] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def slug(self) -> str:
        return self.topic["slug"]


def canonical_options(value: Any) -> Optional[str]:
    """Compact JSON text for structured options; strings are re-encoded when they hold JSON."""
    if value is None:
        return None
    if isinstance(value, str):
        try:
            value = json.loads(value)
        except ValueError:
            return value
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))


def _loc(parts: Iterable[Any]) -> str:
    out = ""
    for p in parts:
        out += f"[{p}]" if isinstance(p, int) else (f".{p}" if out else str(p))
    return out


def _validate(model: Type[BaseModel], raw: Any, rel_path: str, prefix: str) -> BaseModel:
    try:
        return model.model_validate(dict(raw))
    except ValidationError as exc:
        errors = exc.errors()
        first = errors[0]
        where = _loc(first.get("loc", ()))
        location = f"{prefix}.{where}" if where else prefix
        message = first.get("msg", "invalid value")
        if first.get("type") == "missing":
            message = "required field is missing"
        elif first.get("type") == "extra_forbidden":
            message = "unknown field"
        if len(errors) > 1:
            message += f" (+{len(errors) - 1} more)"
        raise ContentError(rel_path, location, message) from exc


def _order(record_value: Optional[int], position: int) -> int:
    return record_value if record_value is not None else position


def _example_row(rec: CodeExampleRecord, position: int) -> dict[str, Any]:
    return {
        "title": rec.title,
        "description": rec.description,
        "language": rec.language,
        "code": rec.code,
        "explanation": rec.explanation,
        "order_index": _order(rec.order_index, position),
        "is_interactive": rec.is_interactive,
    }


def _quiz_row(rec: QuizQuestionRecord, position: int) -> dict[str, Any]:
    return {
        "question_text": rec.question_text,
        "question_type": rec.question_type,
        "options": canonical_options(rec.options),
        "correct_answer": rec.correct_answer,
        "explanation": rec.explanation,
        "difficulty": rec.difficulty,
        "points": rec.points,
        "order_index": _order(rec.order_index, position),
    }


def _children(
    keyed: dict[str, Sequence[Any]] | Any,
    slug: str,
    model: Type[BaseModel],
    rel_path: str,
    filename: str,
    attr: str,
    to_row,
) -> list[dict[str, Any]]:
    rows = []
    for pos, raw in enumerate(keyed.get(slug) or (), start=1):
        rec = _validate(model, raw, rel_path, f"{filename}:{attr}[{slug!r}][{pos - 1}]")
        rows.append(to_row(rec, pos))
    return rows


def normalize_topic(loaded: LoadedTopic, topic_dir: TopicDir, topic_position: int = 1) -> TopicRows:
    rel = loaded.rel_path
    topic = _validate(TopicRecord, loaded.topic, rel, f"{CONTENT_MODULE}:topic")

    out = TopicRows(
        rel_path=rel,
        category_slug=topic_dir.category_slug,
        topic={
            "slug": topic.slug,
            "name": topic.name,
            "description": topic.description,
            "difficulty_level": topic_dir.difficulty,
            "estimated_time": topic.estimated_time,
            "order_index": _order(topic.order_index, topic_position),
            "icon": topic.icon,
        },
    )

    seen: dict[str, int] = {}
    lessons: list[LessonRows] = []
    for pos, raw in enumerate(loaded.lessons, start=1):
        rec = _validate(LessonRecord, raw, rel, f"{CONTENT_MODULE}:lessons[{pos - 1}]")
        if rec.slug in seen:
            raise ContentError(
                rel, f"{CONTENT_MODULE}:lessons[{pos - 1}].slug",
                f"lesson slug {rec.slug!r} already used by lessons[{seen[rec.slug]}]",
            )
        seen[rec.slug] = pos - 1
        lessons.append(LessonRows(
            lesson={
                "slug": rec.slug,
                "title": rec.title,
                "content": rec.content,
                "summary": rec.summary,
                "difficulty_level": rec.difficulty_level or topic_dir.difficulty,
                "estimated_time": rec.estimated_time,
                "order_index": _order(rec.order_index, pos),
                "key_points": list(rec.key_points),
                "prerequisites": list(rec.prerequisites),
            },
            code_examples=_children(
                loaded.examples, rec.slug, CodeExampleRecord, rel, EXAMPLES_MODULE, "examples", _example_row,
            ),
            quiz_questions=_children(
                loaded.quiz, rec.slug, QuizQuestionRecord, rel, QUIZ_MODULE, "quiz", _quiz_row,
            ),
        ))

    # stable: equal order_index keeps declaration order
    out.lessons = sorted(lessons, key=lambda l: l.lesson["order_index"])

    for filename, keyed in ((EXAMPLES_MODULE, loaded.examples), (QUIZ_MODULE, loaded.quiz)):
        for key in keyed:
            if key not in seen:
                msg = f"{rel}: {filename} key {key!r} matches no lesson; dropped"
                logger.warning(msg)
                out.warnings.append(msg)

    return out
