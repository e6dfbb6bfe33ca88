from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from learnhub.database import get_db
from learnhub.models import Difficulty
from learnhub.schemas import CategoryRead, LessonRead, LessonSearchHit, TopicRead
from learnhub.services import catalog

router = APIRouter(prefix="/api", tags=["catalog"])


@router.get("/categories", response_model=list[CategoryRead])
async def categories(db: AsyncSession = Depends(get_db)):
    return await catalog.list_categories(db)


# declared before /topics/{slug}/... so "search" is never read as a slug
@router.get("/lessons/search", response_model=list[LessonSearchHit])
async def lesson_search(
    q: str = Query(..., min_length=1),
    difficulty: Optional[Difficulty] = None,
    category: Optional[str] = None,
    limit: int = Query(20, ge=1, le=100),
    db: AsyncSession = Depends(get_db),
):
    return await catalog.search_lessons(db, q, difficulty=difficulty, category=category, limit=limit)


@router.get("/topics/{slug}", response_model=TopicRead)
async def topic_detail(slug: str, db: AsyncSession = Depends(get_db)):
    topic = await catalog.get_topic(db, slug)
    if not topic:
        raise HTTPException(status_code=404, detail="Topic not found")
    return topic


@router.get("/topics/{topic_slug}/lessons/{lesson_slug}", response_model=LessonRead)
async def lesson_detail(topic_slug: str, lesson_slug: str, db: AsyncSession = Depends(get_db)):
    lesson = await catalog.get_lesson(db, topic_slug, lesson_slug)
    if not lesson:
        raise HTTPException(status_code=404, detail="Lesson not found")
    return lesson
