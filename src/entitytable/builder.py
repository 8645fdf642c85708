"""Prefix-closed entity map construction.

The table maps every entity name, and every proper prefix of every name, to a
two-codepoint pair. Prefixes that are not complete references map to
``SENTINEL`` so a scanner reading one character at a time can tell "keep
going" (key present) from "stop" (key absent) and remember the last key whose
value is a real match.

    >>> table = build_map([("amp", (38, 0))])
    >>> sorted(table.items())
    [('', (0, 0)), ('a', (0, 0)), ('am', (0, 0)), ('amp', (38, 0))]
"""

from __future__ import annotations

from types import MappingProxyType

from .errors import DuplicateEntity
from .records import SENTINEL, PrefixEntry
from .validate import normalize_references


class TableStats:
    __slots__ = ("entries", "longest_key", "matches", "prefixes")

    def __init__(self, entries, matches, prefixes, longest_key):
        self.entries = entries
        self.matches = matches
        self.prefixes = prefixes
        self.longest_key = longest_key

    def __repr__(self):
        return (
            f"TableStats(entries={self.entries}, matches={self.matches}, "
            f"prefixes={self.prefixes}, longest_key={self.longest_key!r})"
        )


def close_prefixes(mapping: dict[str, tuple[int, int]]) -> dict[str, tuple[int, int]]:
    """Add the root and every missing proper prefix of every key, in place.

    Works from a snapshot of the keys so prefixes inserted here are never
    rescanned. Existing keys keep their values: a prefix that is itself an
    entity (``not`` inside ``notin``) is never overwritten with the sentinel.
    """
    mapping[""] = SENTINEL
    for key in list(mapping):
        for n in range(1, len(key)):
            prefix = key[:n]
            if prefix not in mapping:
                mapping[prefix] = SENTINEL
    return mapping


def build_map(pairs, strict: bool = False):
    """Build the read-only prefix-closed map from normalized pairs.

    Args:
        pairs: iterable of ``(name, (c0, c1))`` from ``normalize_reference``
        strict: raise ``DuplicateEntity`` when a name repeats with different
            codepoints instead of letting the later record win

    Returns:
        MappingProxyType: key -> (c0, c1)
    """
    mapping: dict[str, tuple[int, int]] = {}
    for name, value in pairs:
        if strict:
            previous = mapping.get(name)
            if previous is not None and previous != value:
                raise DuplicateEntity(
                    f"redefined as {list(value)!r}, previously {list(previous)!r}",
                    name=name,
                )
        mapping[name] = value
    return MappingProxyType(close_prefixes(mapping))


def build_prefix_map(references, strict: bool = False, **options):
    """Validate ``CharacterReference`` records and build the closed map.

    Keyword options go to ``normalize_reference`` (``marker``,
    ``require_marker``, ``terminator``, ``keep_terminator``). Any malformed
    record aborts the build before the map exists.
    """
    return build_map(normalize_references(references, **options), strict=strict)


def iter_entries(mapping):
    """Yield the map as ``PrefixEntry`` records in key order."""
    for key in sorted(mapping):
        yield PrefixEntry(key, mapping[key])


def summarize(mapping) -> TableStats:
    matches = sum(1 for value in mapping.values() if value != SENTINEL)
    longest_key = max(sorted(mapping), key=len) if mapping else ""
    return TableStats(len(mapping), matches, len(mapping) - matches, longest_key)
