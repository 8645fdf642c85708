from .builder import TableStats, build_map, build_prefix_map, close_prefixes, iter_entries, summarize
from .emit import emit_json, emit_python, write_table
from .errors import DuplicateEntity, EntityTableError, MalformedEntity, SourceUnavailable, SourceUnreadable
from .loader import load_references, parse_references, references_from_html5, references_from_json, resolve_dataset
from .lookup import decode_prefix, decode_value, longest_match
from .records import SENTINEL, CharacterReference, PrefixEntry
from .validate import normalize_reference, normalize_references

__all__ = [
    "SENTINEL",
    "CharacterReference",
    "DuplicateEntity",
    "EntityTableError",
    "MalformedEntity",
    "PrefixEntry",
    "SourceUnavailable",
    "SourceUnreadable",
    "TableStats",
    "build_map",
    "build_prefix_map",
    "close_prefixes",
    "decode_prefix",
    "decode_value",
    "emit_json",
    "emit_python",
    "iter_entries",
    "load_references",
    "longest_match",
    "normalize_reference",
    "normalize_references",
    "parse_references",
    "references_from_html5",
    "references_from_json",
    "resolve_dataset",
    "summarize",
    "write_table",
]
