# learnhub/services/seed.py
"""
Seed driver: content tree -> catalog store in one transaction.

    walk_topic_dirs -> load_topic_dir -> normalize_topic -> UpsertEngine

Any SeedError (or anything else) raised inside the transaction rolls the
whole load back, so the store keeps its previous content verbatim.
"""
from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass, field
from pathlib import Path
from typing import Sequence

from sqlalchemy.orm import sessionmaker

from learnhub.services.errors import STORE_FAILURES, ConfigError, StoreError
from learnhub.services.loader import load_topic_dir_async
from learnhub.services.normalizer import normalize_topic
from learnhub.services.upsert import CategorySeed, UpsertEngine
from learnhub.services.walker import CONTENT_MODULE, SkippedDir, walk_topic_dirs

logger = logging.getLogger(__name__)

DEFAULT_CATEGORIES: tuple[CategorySeed, ...] = (
    CategorySeed(
        "architecture", "Software Architecture",
        "Master system design from simple applications to complex distributed systems",
        "🏗️", 1,
    ),
    CategorySeed(
        "backend", "Backend Development",
        "Learn OOP, design patterns, and backend development in C#, Java, Python, or Node.js",
        "💻", 2,
    ),
    CategorySeed(
        "frontend", "Frontend Development",
        "Build modern user interfaces with React, hooks, and advanced patterns",
        "🎨", 3,
    ),
)


def _plural(n: int, one: str, many: str) -> str:
    return f"{n} {one if n == 1 else many}"


@dataclass
class SeedReport:
    categories: int = 0
    topics: int = 0
    lessons: int = 0
    code_examples: int = 0
    quiz_questions: int = 0
    skipped: list[SkippedDir] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    pruned: list[str] = field(default_factory=list)
    store_totals: dict[str, int] = field(default_factory=dict)
    full_clear: bool = False

    def headline(self) -> str:
        return ", ".join([
            _plural(self.categories, "category", "categories"),
            _plural(self.topics, "topic", "topics"),
            _plural(self.lessons, "lesson", "lessons"),
            _plural(self.code_examples, "example", "examples"),
            f"{self.quiz_questions} quiz",
        ])

    def render(self) -> str:
        lines = [f"Seed complete ({'full clear' if self.full_clear else 'subtree re-seed'}): {self.headline()}"]
        if self.store_totals:
            t = self.store_totals
            lines.append(
                "Store totals: "
                f"{t.get('categories', 0)} categories, {t.get('topics', 0)} topics, "
                f"{t.get('lessons', 0)} lessons, {t.get('code_examples', 0)} examples, "
                f"{t.get('quiz_questions', 0)} quiz"
            )
        if self.pruned:
            lines.append(f"Pruned topics: {', '.join(sorted(self.pruned))}")
        if self.warnings:
            lines.append(f"Warnings: {len(self.warnings)}")
        if self.skipped:
            lines.append(f"Skipped directories ({len(self.skipped)}):")
            lines.extend(f"  - {s.rel_path}: {s.reason}" for s in self.skipped)
        return "\n".join(lines)


async def run_seed(
    session_maker: sessionmaker,
    root: Path | str,
    *,
    full_clear: bool = False,
    prune: bool = False,
    categories: Sequence[CategorySeed] = DEFAULT_CATEGORIES,
) -> SeedReport:
    if not Path(root).is_dir():
        raise ConfigError(f"content root {root} is not a directory")
    report = SeedReport(full_clear=full_clear)
    current = None
    operation = "connect"
    try:
        async with session_maker() as db:
            async with db.begin():
                await db.connection()
                operation = "commit"
                engine = UpsertEngine(db)
                if full_clear:
                    await engine.clear_content()
                await engine.upsert_categories(categories)

                positions: dict[str, int] = defaultdict(int)
                for topic_dir in walk_topic_dirs(root, engine.category_ids, on_skip=report.skipped.append):
                    current = topic_dir.rel_path
                    loaded = await load_topic_dir_async(topic_dir)
                    if loaded is None:
                        report.skipped.append(SkippedDir(topic_dir.rel_path, f"no {CONTENT_MODULE}"))
                        continue
                    positions[topic_dir.category_slug] += 1
                    rows = normalize_topic(loaded, topic_dir, positions[topic_dir.category_slug])
                    report.warnings.extend(rows.warnings)
                    await engine.apply_topic(rows)
                current = None

                if prune:
                    report.pruned = await engine.prune_topics()
                report.store_totals = await engine.counts()
    except STORE_FAILURES as exc:
        # connect and commit failures surface here rather than in the engine
        raise StoreError(operation, current, exc) from exc

    report.categories = len(engine.loaded_categories)
    report.topics = engine.loaded["topics"]
    report.lessons = engine.loaded["lessons"]
    report.code_examples = engine.loaded["code_examples"]
    report.quiz_questions = engine.loaded["quiz_questions"]
    logger.info("Seed committed: %s", report.headline())
    return report
