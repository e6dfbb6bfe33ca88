# learnhub/services/upsert.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from learnhub.models import Category, CodeExample, Lesson, QuizQuestion, Topic
from learnhub.services.errors import STORE_FAILURES, DuplicateTopicError, StoreError
from learnhub.services.normalizer import TopicRows

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CategorySeed:
    slug: str
    name: str
    description: str
    icon: str
    order_index: int


class UpsertEngine:
    """
    Writes normalized rows into an already-open transaction on `db`.

    Per topic: upsert the topic by slug, delete its lessons (the FK
    cascade takes examples and quiz questions with them), then insert
    lessons and their children fresh. Nothing here commits; the caller
    owns the transaction and rolls it back on any error.
    """

    def __init__(self, db: AsyncSession):
        self.db = db
        self.category_ids: dict[str, int] = {}
        self._topic_dirs: dict[str, str] = {}  # topic slug -> directory that wrote it
        self.loaded_categories: set[str] = set()
        self.loaded = {"topics": 0, "lessons": 0, "code_examples": 0, "quiz_questions": 0}

    async def _run(self, operation: str, directory: Optional[str], stmt):
        try:
            return await self.db.execute(stmt)
        except STORE_FAILURES as exc:
            raise StoreError(operation, directory, exc) from exc

    async def _flush(self, operation: str, directory: Optional[str]):
        try:
            await self.db.flush()
        except STORE_FAILURES as exc:
            raise StoreError(operation, directory, exc) from exc

    # ---------- categories ----------
    async def clear_content(self) -> int:
        """Full clear: remove every category and, by cascade, the whole content subtree."""
        res = await self._run("clear content", None, delete(Category))
        logger.info("Full clear removed %s categories (and their subtree)", res.rowcount)
        return res.rowcount or 0

    async def upsert_categories(self, seeds: Iterable[CategorySeed]) -> dict[str, int]:
        for seed in seeds:
            res = await self._run("select category", None, select(Category).where(Category.slug == seed.slug))
            cat = res.scalars().first()
            if cat is None:
                cat = Category(slug=seed.slug)
                self.db.add(cat)
            cat.name = seed.name
            cat.description = seed.description
            cat.icon = seed.icon
            cat.order_index = seed.order_index
            await self._flush("upsert category", None)
            self.category_ids[seed.slug] = cat.id
        return dict(self.category_ids)

    # ---------- topics ----------
    async def apply_topic(self, rows: TopicRows) -> int:
        rel = rows.rel_path
        first = self._topic_dirs.get(rows.slug)
        if first is not None:
            raise DuplicateTopicError(rel, rows.slug, first)

        category_id = self.category_ids.get(rows.category_slug)
        if category_id is None:
            raise StoreError("resolve category", rel, KeyError(rows.category_slug))

        # 1. upsert topic by slug
        res = await self._run("select topic", rel, select(Topic).where(Topic.slug == rows.slug))
        topic = res.scalars().first()
        if topic is None:
            topic = Topic(slug=rows.slug)
            self.db.add(topic)
        topic.category_id = category_id
        for key, value in rows.topic.items():
            if key != "slug":
                setattr(topic, key, value)
        await self._flush("upsert topic", rel)
        self._topic_dirs[rows.slug] = rel

        # 2. drop old lessons; cascade removes their children
        await self._run("delete lessons", rel, delete(Lesson).where(Lesson.topic_id == topic.id))

        # 3 + 4. fresh lessons with their examples and quiz questions
        for lr in rows.lessons:
            self.db.add(Lesson(
                topic_id=topic.id,
                code_examples=[CodeExample(**r) for r in lr.code_examples],
                quiz_questions=[QuizQuestion(**r) for r in lr.quiz_questions],
                **lr.lesson,
            ))
        await self._flush("insert lessons", rel)

        self.loaded_categories.add(rows.category_slug)
        self.loaded["topics"] += 1
        self.loaded["lessons"] += len(rows.lessons)
        self.loaded["code_examples"] += sum(len(lr.code_examples) for lr in rows.lessons)
        self.loaded["quiz_questions"] += sum(len(lr.quiz_questions) for lr in rows.lessons)

        logger.debug("Applied topic %s from %s (%d lessons)", rows.slug, rel, len(rows.lessons))
        return topic.id

    async def prune_topics(self) -> list[str]:
        """Delete topics of known categories that no directory declared in this run."""
        if not self.category_ids:
            return []
        stmt = select(Topic.slug).where(Topic.category_id.in_(list(self.category_ids.values())))
        if self._topic_dirs:
            stmt = stmt.where(Topic.slug.not_in(list(self._topic_dirs)))
        stale = list((await self._run("select stale topics", None, stmt)).scalars().all())
        if stale:
            await self._run("prune topics", None, delete(Topic).where(Topic.slug.in_(stale)))
            logger.info("Pruned %d stale topics: %s", len(stale), ", ".join(sorted(stale)))
        return stale

    async def counts(self) -> dict[str, int]:
        out = {}
        for key, model in (
            ("categories", Category),
            ("topics", Topic),
            ("lessons", Lesson),
            ("code_examples", CodeExample),
            ("quiz_questions", QuizQuestion),
        ):
            res = await self._run(f"count {key}", None, select(func.count()).select_from(model))
            out[key] = int(res.scalar_one())
        return out
