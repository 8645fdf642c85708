"""Serializers for the finished table.

Both formats list keys in sorted order so regenerating from the same dataset
produces byte-identical output, whatever order the records arrived in.
"""

from __future__ import annotations

import json
from pathlib import Path

from .builder import iter_entries

FORMATS = ("python", "json")

HEADER = "# Generated by entitytable from the named character reference table. Do not edit.\n"


def emit_python(mapping, name: str = "NAMED_ENTITIES") -> str:
    """Render the table as a Python module defining one dict literal.

    Keys that are only prefixes keep the ``(0, 0)`` value; the module also
    defines ``NO_MATCH`` for consumers to compare against.
    """
    if not name.isidentifier():
        raise ValueError(f"not a valid Python identifier: {name!r}")

    lines = [HEADER, "NO_MATCH = (0, 0)\n", "\n", f"{name} = {{\n"]
    for entry in iter_entries(mapping):
        c0, c1 = entry.value
        lines.append(f"    {ascii(entry.key)}: ({c0}, {c1}),\n")
    lines.append("}\n")
    return "".join(lines)


def emit_json(mapping) -> str:
    table = {entry.key: list(entry.value) for entry in iter_entries(mapping)}
    return json.dumps(table, indent=1, sort_keys=True) + "\n"


def render(mapping, fmt: str = "python", name: str = "NAMED_ENTITIES") -> str:
    if fmt == "python":
        return emit_python(mapping, name=name)
    if fmt == "json":
        return emit_json(mapping)
    raise ValueError(f"unknown format {fmt!r}, expected one of {', '.join(FORMATS)}")


def write_table(mapping, path, fmt: str = "python", name: str = "NAMED_ENTITIES") -> Path:
    """Render ``mapping`` and write it to ``path`` as UTF-8."""
    path = Path(path)
    path.write_text(render(mapping, fmt=fmt, name=name), encoding="utf-8")
    return path
