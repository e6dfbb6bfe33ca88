# learnhub/services/catalog.py
from __future__ import annotations
import json
from typing import Any, Optional

from sqlalchemy import select, func, or_, literal_column
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from learnhub.models import Category, Topic, Lesson, Difficulty, lesson_tsvector
from learnhub.schemas import (
    CategoryRead, TopicRead, LessonSummaryRead, LessonRead, CodeExampleRead,
    QuizQuestionRead, LessonSearchHit, TopicStatus, ContentStatus,
)


def decode_options(raw: Optional[str]) -> Any:
    if raw is None:
        return None
    try:
        return json.loads(raw)
    except ValueError:
        return raw


async def list_categories(db: AsyncSession) -> list[CategoryRead]:
    rows = await db.execute(
        select(Category, func.count(Topic.id))
        .outerjoin(Topic, Topic.category_id == Category.id)
        .group_by(Category.id)
        .order_by(Category.order_index, Category.slug)
    )
    out = []
    for cat, topic_count in rows.all():
        item = CategoryRead.model_validate(cat)
        item.topic_count = int(topic_count or 0)
        out.append(item)
    return out


async def get_topic(db: AsyncSession, slug: str) -> TopicRead | None:
    topic = (await db.execute(
        select(Topic)
        .where(Topic.slug == slug)
        .options(selectinload(Topic.lessons), selectinload(Topic.category))
    )).scalars().first()
    if not topic:
        return None
    return TopicRead(
        id=topic.id,
        slug=topic.slug,
        name=topic.name,
        description=topic.description,
        difficulty_level=topic.difficulty_level,
        estimated_time=topic.estimated_time,
        order_index=topic.order_index,
        icon=topic.icon,
        category_slug=topic.category.slug,
        lessons=[LessonSummaryRead.model_validate(l) for l in topic.lessons],
    )


async def get_lesson(db: AsyncSession, topic_slug: str, lesson_slug: str) -> LessonRead | None:
    lesson = (await db.execute(
        select(Lesson)
        .join(Topic, Topic.id == Lesson.topic_id)
        .where(Topic.slug == topic_slug, Lesson.slug == lesson_slug)
        .options(selectinload(Lesson.code_examples), selectinload(Lesson.quiz_questions))
    )).scalars().first()
    if not lesson:
        return None
    return LessonRead(
        id=lesson.id,
        slug=lesson.slug,
        title=lesson.title,
        summary=lesson.summary,
        difficulty_level=lesson.difficulty_level,
        estimated_time=lesson.estimated_time,
        order_index=lesson.order_index,
        content=lesson.content,
        key_points=list(lesson.key_points or []),
        prerequisites=list(lesson.prerequisites or []),
        topic_slug=topic_slug,
        code_examples=[CodeExampleRead.model_validate(e) for e in lesson.code_examples],
        quiz_questions=[
            QuizQuestionRead(
                id=q.id,
                question_text=q.question_text,
                question_type=q.question_type,
                options=decode_options(q.options),
                correct_answer=q.correct_answer,
                explanation=q.explanation,
                difficulty=q.difficulty,
                points=q.points,
                order_index=q.order_index,
            )
            for q in lesson.quiz_questions
        ],
    )


async def search_lessons(
    db: AsyncSession,
    q: str,
    difficulty: Optional[Difficulty] = None,
    category: Optional[str] = None,
    limit: int = 20,
) -> list[LessonSearchHit]:
    q = (q or "").strip()
    if not q:
        return []

    if db.bind.dialect.name == "postgresql":
        tsq = func.plainto_tsquery(literal_column("'english'"), q)
        rank = func.ts_rank(lesson_tsvector(), tsq).label("rank")
        stmt = (
            select(Lesson, Topic, Category.slug, rank)
            .where(lesson_tsvector().op("@@")(tsq))
            .order_by(rank.desc(), Lesson.id)
        )
    else:
        # no text-search engine: plain substring match, unranked
        pattern = f"%{q}%"
        rank = None
        stmt = (
            select(Lesson, Topic, Category.slug)
            .where(or_(
                Lesson.title.ilike(pattern),
                Lesson.summary.ilike(pattern),
                Lesson.content.ilike(pattern),
            ))
            .order_by(Lesson.title, Lesson.id)
        )

    stmt = (
        stmt.select_from(Lesson)
        .join(Topic, Topic.id == Lesson.topic_id)
        .join(Category, Category.id == Topic.category_id)
        .limit(limit)
    )
    if difficulty:
        stmt = stmt.where(Lesson.difficulty_level == Difficulty(difficulty))
    if category:
        stmt = stmt.where(Category.slug == category)

    hits = []
    for row in (await db.execute(stmt)).all():
        lesson, topic, category_slug = row[0], row[1], row[2]
        hits.append(LessonSearchHit(
            id=lesson.id,
            slug=lesson.slug,
            title=lesson.title,
            summary=lesson.summary,
            difficulty_level=lesson.difficulty_level,
            topic_slug=topic.slug,
            topic_name=topic.name,
            category_slug=category_slug,
            rank=float(row[3]) if rank is not None else None,
        ))
    return hits


async def content_status(db: AsyncSession) -> ContentStatus:
    """Lesson counts per topic, and which topics have none yet."""
    rows = await db.execute(
        select(Category.slug, Topic.slug, Topic.name, func.count(Lesson.id))
        .select_from(Topic)
        .join(Category, Category.id == Topic.category_id)
        .outerjoin(Lesson, Lesson.topic_id == Topic.id)
        .group_by(Category.slug, Category.order_index, Topic.id, Topic.slug, Topic.name, Topic.order_index)
        .order_by(Category.order_index, Topic.order_index, Topic.slug)
    )
    status = ContentStatus()
    for cat_slug, topic_slug, topic_name, n in rows.all():
        n = int(n or 0)
        status.topics.append(TopicStatus(
            category_slug=cat_slug, topic_slug=topic_slug, topic_name=topic_name, lesson_count=n,
        ))
        status.total_lessons += n
        if n == 0:
            status.empty_topics.append(topic_slug)
    return status
