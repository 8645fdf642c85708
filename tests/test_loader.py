"""Tests for reading entity datasets."""

import tempfile
import unittest
from pathlib import Path

from entitytable import (
    CharacterReference,
    MalformedEntity,
    SourceUnavailable,
    SourceUnreadable,
    build_prefix_map,
    load_references,
    parse_references,
    references_from_html5,
    references_from_json,
    resolve_dataset,
)

FIXTURES = Path(__file__).parent / "fixtures"


class TestReferencesFromJson(unittest.TestCase):
    def test_document_order(self):
        data = {"&lt;": {"codepoints": [60], "characters": "<"}, "&amp;": {"codepoints": [38]}}
        assert list(references_from_json(data)) == [
            CharacterReference("&lt;", [60]),
            CharacterReference("&amp;", [38]),
        ]

    def test_not_an_object(self):
        with self.assertRaises(SourceUnreadable):
            list(references_from_json([{"codepoints": [38]}]))

    def test_missing_codepoints(self):
        with self.assertRaises(MalformedEntity) as ctx:
            list(references_from_json({"&amp;": {"characters": "&"}}))
        assert ctx.exception.name == "&amp;"

    def test_record_not_an_object(self):
        with self.assertRaises(MalformedEntity):
            list(references_from_json({"&amp;": [38]}))

    def test_empty_codepoints_reach_validation(self):
        references = list(references_from_json({"&amp;": {"codepoints": []}}))
        with self.assertRaises(MalformedEntity):
            build_prefix_map(references)


class TestParseReferences(unittest.TestCase):
    def test_invalid_json_reports_position(self):
        with self.assertRaises(SourceUnreadable) as ctx:
            parse_references('{"&amp;": ', source="broken.json")
        assert "broken.json:1:" in str(ctx.exception)

    def test_valid_json(self):
        references = parse_references('{"&amp;": {"codepoints": [38]}}')
        assert references == [CharacterReference("&amp;", [38])]


class TestLoadReferences(unittest.TestCase):
    def test_fixture(self):
        references = load_references(FIXTURES / "entities_subset.json")
        assert len(references) == 13
        assert references[0] == CharacterReference("&AMP", [38])
        assert CharacterReference("&notinE;", [8953, 824]) in references

    def test_relative_to_anchor(self):
        references = load_references("fixtures/entities_subset.json", anchor=__file__)
        assert len(references) == 13

    def test_missing_file(self):
        with self.assertRaises(SourceUnavailable) as ctx:
            load_references(FIXTURES / "does-not-exist.json")
        assert isinstance(ctx.exception, OSError)
        assert "does-not-exist.json" in str(ctx.exception)

    def test_not_utf8(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "latin1.json"
            path.write_bytes(b'{"&not;": {"codepoints": [172], "characters": "\xac"}}')
            with self.assertRaises(SourceUnreadable):
                load_references(path)

    def test_fixture_table(self):
        table = build_prefix_map(load_references(FIXTURES / "entities_subset.json"))
        assert table["Not"] == (10988, 0)
        assert table["NotEqual"] == (8800, 0)
        assert table["not"] == (172, 0)
        assert table["notin"] == (8713, 0)
        assert table["noti"] == (0, 0)
        assert table["nGt"] == (8811, 8402)


class TestResolveDataset(unittest.TestCase):
    def test_without_anchor(self):
        assert resolve_dataset("entities.json") == Path("entities.json")

    def test_with_anchor(self):
        assert resolve_dataset("data/entities.json", anchor="/src/pkg/build.py") == Path("/src/pkg/data/entities.json")

    def test_absolute_path_ignores_anchor(self):
        absolute = Path(tempfile.gettempdir()) / "entities.json"
        assert resolve_dataset(absolute, anchor="/src/pkg/build.py") == absolute


class TestReferencesFromHtml5(unittest.TestCase):
    def test_custom_table(self):
        references = references_from_html5({"amp;": "&", "nGt;": "≫⃒"})
        assert references == [
            CharacterReference("amp;", [38]),
            CharacterReference("nGt;", [8811, 8402]),
        ]

    def test_stdlib_table(self):
        references = references_from_html5()
        assert CharacterReference("amp;", [38]) in references
        assert all(1 <= len(r.codepoints) <= 2 for r in references)
