"""Exceptions raised while loading a dataset or building the table.

Every error is fatal to the build: a partial entity table would silently
mis-decode valid HTML, so nothing catches these below the command line.
"""

from __future__ import annotations


class EntityTableError(Exception):
    """Base class for all dataset and table errors."""

    code = "entity-table-error"

    def __init__(self, message: str, name: str | None = None, record=None) -> None:
        self.message = message
        self.name = name
        self.record = record
        super().__init__(message)

    def __repr__(self):
        if self.name is not None:
            return f"{type(self).__name__}({self.message!r}, name={self.name!r})"
        return f"{type(self).__name__}({self.message!r})"

    def __str__(self):
        text = f"{self.code} - {self.message}"
        if self.name is not None:
            text += f" (entity {self.name!r})"
        if self.record is not None:
            text += f": {self.record!r}"
        return text


class MalformedEntity(EntityTableError, ValueError):
    """A record has a bad name, marker, codepoint count or codepoint value."""

    code = "malformed-entity"


class DuplicateEntity(MalformedEntity):
    """Strict mode: the same name appears twice with different codepoints."""

    code = "duplicate-entity"


class SourceUnavailable(EntityTableError, OSError):
    """The dataset cannot be located or opened."""

    code = "source-unavailable"


class SourceUnreadable(EntityTableError, ValueError):
    """The dataset was read but is not a parseable entity table."""

    code = "source-unreadable"
