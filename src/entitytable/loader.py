"""Reading entity datasets into ``CharacterReference`` records.

Two sources are supported: the WHATWG ``entities.json`` file, whose keys carry
the ``&`` marker, and Python's own ``html.entities.html5`` table, whose keys
do not (validate those with ``require_marker=False``).
"""

from __future__ import annotations

import html.entities
import json
from pathlib import Path

from .errors import MalformedEntity, SourceUnavailable, SourceUnreadable
from .records import CharacterReference


def resolve_dataset(path, anchor=None) -> Path:
    """Resolve a dataset path relative to the directory of ``anchor``.

    ``anchor`` is a file path (typically the module or script asking for the
    dataset). Absolute paths, or calls without an anchor, are returned as is.
    """
    path = Path(path)
    if anchor is None or path.is_absolute():
        return path
    return Path(anchor).parent / path


def references_from_json(data):
    """Yield records from a decoded ``entities.json`` object, in document order.

    Raises:
        SourceUnreadable: if ``data`` is not a JSON object
        MalformedEntity: if an entry has no ``codepoints`` list
    """
    if not isinstance(data, dict):
        raise SourceUnreadable(f"expected a JSON object of entities, got {type(data).__name__}")

    for name, record in data.items():
        codepoints = record.get("codepoints") if isinstance(record, dict) else None
        if not isinstance(codepoints, list):
            raise MalformedEntity("record has no codepoints list", name=name, record=record)
        yield CharacterReference(name, codepoints)


def parse_references(text: str, source: str = "<string>") -> list[CharacterReference]:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise SourceUnreadable(f"{source}:{e.lineno}:{e.colno}: {e.msg}") from e
    return list(references_from_json(data))


def load_references(path, anchor=None) -> list[CharacterReference]:
    """Read an ``entities.json`` file.

    Raises:
        SourceUnavailable: if the file cannot be opened or read
        SourceUnreadable: if it is not valid JSON or not a JSON object
        MalformedEntity: if an entry is missing its codepoints
    """
    path = resolve_dataset(path, anchor)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise SourceUnavailable(f"can't read {path}: {e.strerror or e}") from e
    except UnicodeDecodeError as e:
        raise SourceUnreadable(f"{path} is not UTF-8: {e.reason}") from e
    return parse_references(text, source=str(path))


def references_from_html5(table=None) -> list[CharacterReference]:
    """Build records from ``html.entities.html5`` (or a table shaped like it).

    Keys are names without the ``&`` marker, e.g. ``"amp;"`` and ``"amp"``;
    values are the decoded strings.
    """
    if table is None:
        table = html.entities.html5
    return [CharacterReference(name, [ord(char) for char in value]) for name, value in table.items()]
