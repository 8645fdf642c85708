"""Record types passed between the loader, the builder and the emitters."""

from __future__ import annotations

# Value stored for keys that are a prefix of some entity name but not a
# complete reference themselves. No entity decodes to U+0000.
SENTINEL: tuple[int, int] = (0, 0)


class CharacterReference:
    """One named character reference as read from a dataset."""

    __slots__ = ("codepoints", "name")

    def __init__(self, name, codepoints):
        self.name = name
        self.codepoints = tuple(codepoints) if isinstance(codepoints, (list, tuple)) else codepoints

    def __repr__(self):
        return f"CharacterReference({self.name!r}, {list(self.codepoints)!r})"

    def __eq__(self, other):
        if not isinstance(other, CharacterReference):
            return NotImplemented
        return self.name == other.name and self.codepoints == other.codepoints

    __hash__ = None  # Unhashable since we define __eq__


class PrefixEntry:
    """A single key of the prefix-closed table and its codepoint pair."""

    __slots__ = ("key", "value")

    def __init__(self, key, value):
        self.key = key
        self.value = value

    @property
    def is_match(self):
        return self.value != SENTINEL

    def __repr__(self):
        return f"PrefixEntry({self.key!r}, {self.value!r})"

    def __eq__(self, other):
        if not isinstance(other, PrefixEntry):
            return NotImplemented
        return self.key == other.key and self.value == other.value

    def __hash__(self):
        return hash((self.key, self.value))
