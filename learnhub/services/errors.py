"""Error taxonomy for loading authored content into the catalog store.

The seed driver is the only place that turns these into exit codes:
configuration errors fail before any I/O, content and store errors roll
back the whole load.
"""
from __future__ import annotations

from typing import Optional

from sqlalchemy.exc import SQLAlchemyError

# asyncpg reports refused or dropped connections as OSError, outside SQLAlchemy's hierarchy
STORE_FAILURES = (SQLAlchemyError, OSError)


class SeedError(Exception):
    exit_code = 1


class ConfigError(SeedError):
    exit_code = 2


class ContentError(SeedError):
    """A structural problem in an authored module.

    `location` is a dotted/indexed path such as ``content.py:lessons[1].title``.
    """

    def __init__(self, directory: str, location: str, message: str):
        self.directory = directory
        self.location = location
        self.message = message
        super().__init__(f"{directory}: {location}: {message}")


class DuplicateTopicError(ContentError):
    def __init__(self, directory: str, slug: str, first_directory: str):
        self.slug = slug
        self.first_directory = first_directory
        super().__init__(
            directory,
            "content.py:topic.slug",
            f"topic slug {slug!r} already loaded from {first_directory}",
        )


class StoreError(SeedError):
    def __init__(self, operation: str, directory: Optional[str] = None, cause: Optional[BaseException] = None):
        self.operation = operation
        self.directory = directory
        self.cause = cause
        where = f"{directory}: " if directory else ""
        detail = ""
        if cause is not None:
            # SQLAlchemy appends the statement and a docs link on further lines
            lines = str(cause).splitlines()
            detail = f": {lines[0] if lines else type(cause).__name__}"
        super().__init__(f"{where}store operation {operation!r} failed{detail}")
