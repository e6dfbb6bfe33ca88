# learnhub/services/walker.py
"""
Discover topic directories under a content root.

A topic directory is any directory holding a `content.py`. The layout is

    <root>/<category>/<difficulty>/.../<topic>/content.py

Results come back in lexicographic order of their path components, and
a topic directory is never searched further.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable, Iterator, Optional

from learnhub.models import Difficulty
from learnhub.services.errors import ConfigError

logger = logging.getLogger(__name__)

CONTENT_MODULE = "content.py"
_IGNORED_DIRS = {"__pycache__", "node_modules"}


@dataclass(frozen=True)
class TopicDir:
    category_slug: str
    difficulty: Difficulty
    path: Path
    rel_path: str  # posix, relative to the content root


@dataclass(frozen=True)
class SkippedDir:
    rel_path: str
    reason: str


def _subdirs(path: Path) -> list[Path]:
    return sorted(
        (p for p in path.iterdir() if p.is_dir() and not p.name.startswith(".") and p.name not in _IGNORED_DIRS),
        key=lambda p: p.name,
    )


def _classify(rel_parts: tuple[str, ...], known_categories: set[str]) -> tuple[Optional[str], Optional[Difficulty], str]:
    if len(rel_parts) < 2:
        return None, None, "topic directory must sit below <category>/<difficulty>/"
    category, level = rel_parts[0], rel_parts[1]
    if category not in known_categories:
        return None, None, f"unknown category {category!r}"
    try:
        difficulty = Difficulty(level)
    except ValueError:
        return None, None, f"unknown difficulty {level!r}"
    return category, difficulty, ""


def walk_topic_dirs(
    root: Path | str,
    known_categories: Iterable[str],
    on_skip: Optional[Callable[[SkippedDir], None]] = None,
) -> Iterator[TopicDir]:
    root = Path(root).resolve()
    if not root.is_dir():
        raise ConfigError(f"content root {root} is not a directory")
    known = set(known_categories)

    def _visit(path: Path) -> Iterator[TopicDir]:
        if (path / CONTENT_MODULE).is_file():
            rel = path.relative_to(root)
            rel_path = rel.as_posix() or "."
            category, difficulty, reason = _classify(rel.parts, known)
            if category is None:
                logger.warning("Skipping %s: %s", rel_path, reason)
                if on_skip:
                    on_skip(SkippedDir(rel_path, reason))
                return
            yield TopicDir(category, difficulty, path, rel_path)
            return
        for child in _subdirs(path):
            yield from _visit(child)

    yield from _visit(root)
