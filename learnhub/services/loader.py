# learnhub/services/loader.py
"""
Import the authored modules of one topic directory.

    content.py   -> topic (dict), lessons (list[dict])     required
    examples.py  -> examples (dict[lesson_slug, list])     optional
    quiz.py      -> quiz (dict[lesson_slug, list])         optional

Modules are run with runpy from their source file on every load and are not left in
sys.modules, so two topics may both ship a `content.py`.
"""
from __future__ import annotations

import asyncio
import hashlib
import logging
import runpy
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from functools import partial
from pathlib import Path
from typing import Any, Optional

from learnhub.services.errors import ContentError
from learnhub.services.walker import CONTENT_MODULE, TopicDir

logger = logging.getLogger(__name__)

EXAMPLES_MODULE = "examples.py"
QUIZ_MODULE = "quiz.py"


@dataclass
class LoadedTopic:
    rel_path: str
    topic: Mapping[str, Any]
    lessons: Sequence[Mapping[str, Any]]
    examples: Mapping[str, Sequence[Any]] = field(default_factory=dict)
    quiz: Mapping[str, Sequence[Any]] = field(default_factory=dict)


def _run_file(path: Path, rel_path: str) -> dict[str, Any]:
    digest = hashlib.sha1(str(path).encode("utf-8")).hexdigest()[:12]
    name = f"_learnhub_authored_{digest}_{path.stem}"
    try:
        # run_path compiles from source: no bytecode cache lands in the content tree
        return runpy.run_path(str(path), run_name=name)
    except Exception as exc:
        raise ContentError(rel_path, path.name, f"module raised on load: {exc!r}") from exc


def _require_attr(namespace: Mapping[str, Any], attr: str, rel_path: str, filename: str) -> Any:
    if attr not in namespace:
        raise ContentError(rel_path, filename, f"module does not define `{attr}`")
    return namespace[attr]


def _is_list(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


def _keyed_lists(value: Any, rel_path: str, filename: str, attr: str) -> Mapping[str, Sequence[Any]]:
    if not isinstance(value, Mapping):
        raise ContentError(rel_path, f"{filename}:{attr}", "expected a mapping of lesson slug to a list of records")
    for key, items in value.items():
        if not isinstance(key, str):
            raise ContentError(rel_path, f"{filename}:{attr}", f"key {key!r} is not a lesson slug string")
        if not _is_list(items):
            raise ContentError(rel_path, f"{filename}:{attr}[{key!r}]", "expected a list of records")
        for i, item in enumerate(items):
            if not isinstance(item, Mapping):
                raise ContentError(rel_path, f"{filename}:{attr}[{key!r}][{i}]", "expected a record (dict)")
    return value


def load_topic_dir(topic_dir: TopicDir) -> Optional[LoadedTopic]:
    """Load a topic directory; None when the required content module is gone."""
    rel = topic_dir.rel_path
    content_path = topic_dir.path / CONTENT_MODULE
    if not content_path.is_file():
        logger.warning("Skipping %s: no %s", rel, CONTENT_MODULE)
        return None

    content = _run_file(content_path, rel)
    topic = _require_attr(content, "topic", rel, CONTENT_MODULE)
    lessons = _require_attr(content, "lessons", rel, CONTENT_MODULE)
    if not isinstance(topic, Mapping):
        raise ContentError(rel, f"{CONTENT_MODULE}:topic", "expected a record (dict)")
    if not _is_list(lessons):
        raise ContentError(rel, f"{CONTENT_MODULE}:lessons", "expected a list of records")
    for i, lesson in enumerate(lessons):
        if not isinstance(lesson, Mapping):
            raise ContentError(rel, f"{CONTENT_MODULE}:lessons[{i}]", "expected a record (dict)")

    loaded = LoadedTopic(rel_path=rel, topic=topic, lessons=lessons)

    examples_path = topic_dir.path / EXAMPLES_MODULE
    if examples_path.is_file():
        namespace = _run_file(examples_path, rel)
        raw = _require_attr(namespace, "examples", rel, EXAMPLES_MODULE)
        loaded.examples = _keyed_lists(raw, rel, EXAMPLES_MODULE, "examples")

    quiz_path = topic_dir.path / QUIZ_MODULE
    if quiz_path.is_file():
        namespace = _run_file(quiz_path, rel)
        raw = _require_attr(namespace, "quiz", rel, QUIZ_MODULE)
        loaded.quiz = _keyed_lists(raw, rel, QUIZ_MODULE, "quiz")

    logger.debug(
        "Loaded %s: %d lessons, %d example keys, %d quiz keys",
        rel, len(lessons), len(loaded.examples), len(loaded.quiz),
    )
    return loaded


async def load_topic_dir_async(topic_dir: TopicDir) -> Optional[LoadedTopic]:
    """Run the blocking import in the default executor."""
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, partial(load_topic_dir, topic_dir))
