"""Validation and normalization of single character reference records.

Turns a ``CharacterReference`` into the ``(name, (c0, c1))`` pair the map
builder consumes. Names lose their leading ``&`` marker (and, by default,
their trailing ``;``); a single codepoint is padded with ``0``.
"""

from __future__ import annotations

from .errors import MalformedEntity

DEFAULT_MARKER = "&"
DEFAULT_TERMINATOR = ";"

MAX_CODEPOINT = 0x10FFFF


def _check_codepoint(value, reference):
    # bool is an int subclass; True would otherwise pass as U+0001
    if not isinstance(value, int) or isinstance(value, bool):
        raise MalformedEntity(
            f"codepoint {value!r} is not an integer",
            name=reference.name,
            record=reference,
        )
    if value == 0:
        # U+0000 would be indistinguishable from the prefix sentinel
        raise MalformedEntity("codepoint 0 is reserved", name=reference.name, record=reference)
    if value < 0 or value > MAX_CODEPOINT:
        raise MalformedEntity(
            f"codepoint {value:#x} is outside the Unicode range",
            name=reference.name,
            record=reference,
        )
    return value


def normalize_name(
    name,
    marker: str = DEFAULT_MARKER,
    require_marker: bool = True,
    terminator: str = DEFAULT_TERMINATOR,
    keep_terminator: bool = False,
    reference=None,
) -> str:
    """Strip the marker (and optionally the terminator) from an entity name.

    Raises:
        MalformedEntity: if the name is not a string, the marker is required
            but absent, or nothing is left after stripping.
    """
    if not isinstance(name, str):
        raise MalformedEntity(f"entity name {name!r} is not a string", record=reference)

    if marker:
        if name.startswith(marker):
            name = name[len(marker) :]
        elif require_marker:
            raise MalformedEntity(f"entity name does not start with {marker!r}", name=name, record=reference)

    if terminator and not keep_terminator and name.endswith(terminator):
        name = name[: -len(terminator)]

    if not name:
        raise MalformedEntity("entity name is empty", name=name, record=reference)
    return name


def normalize_reference(
    reference,
    marker: str = DEFAULT_MARKER,
    require_marker: bool = True,
    terminator: str = DEFAULT_TERMINATOR,
    keep_terminator: bool = False,
) -> tuple[str, tuple[int, int]]:
    """Validate one record and return its normalized ``(name, (c0, c1))`` pair.

    Args:
        reference: the ``CharacterReference`` to check
        marker: leading character of names in the source (``&``)
        require_marker: fail when a name lacks ``marker``
        terminator: trailing character stripped from names (``;``)
        keep_terminator: keep ``terminator`` so ``amp;`` and ``amp`` stay distinct

    Raises:
        MalformedEntity: on a bad name, a codepoint count outside 1..2, or a
            codepoint that is not a non-zero Unicode scalar value.

    Returns:
        tuple: (name, (c0, c1)) with c1 = 0 for single-codepoint entities
    """
    name = normalize_name(
        reference.name,
        marker=marker,
        require_marker=require_marker,
        terminator=terminator,
        keep_terminator=keep_terminator,
        reference=reference,
    )

    codepoints = reference.codepoints
    if not isinstance(codepoints, (list, tuple)):
        raise MalformedEntity("codepoints is not a sequence", name=name, record=reference)
    if not 1 <= len(codepoints) <= 2:
        raise MalformedEntity(
            f"expected 1 or 2 codepoints, got {len(codepoints)}",
            name=name,
            record=reference,
        )

    first = _check_codepoint(codepoints[0], reference)
    second = _check_codepoint(codepoints[1], reference) if len(codepoints) == 2 else 0
    return name, (first, second)


def normalize_references(references, **options) -> list[tuple[str, tuple[int, int]]]:
    """Normalize every record, failing on the first malformed one.

    Keyword options are passed to ``normalize_reference``. The whole input is
    validated before anything is returned, so a bad record never yields a
    partial result.
    """
    return [normalize_reference(reference, **options) for reference in references]
