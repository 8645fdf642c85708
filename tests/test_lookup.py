"""Tests for longest-match scanning over a closed table."""

import unittest

from entitytable import CharacterReference, build_prefix_map, decode_prefix, decode_value, longest_match, references_from_html5


class TestLongestMatch(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.table = build_prefix_map(references_from_html5(), require_marker=False)

    def test_exact_name(self):
        assert longest_match(self.table, "amp") == ("amp", (38, 0))

    def test_stops_at_missing_prefix(self):
        assert longest_match(self.table, "ampère") == ("amp", (38, 0))

    def test_prefers_longer_entity(self):
        assert longest_match(self.table, "notin") == ("notin", (8713, 0))

    def test_falls_back_to_shorter_entity(self):
        # "noti" is only a prefix, so the scan commits to "not"
        assert longest_match(self.table, "notit;") == ("not", (172, 0))

    def test_no_match(self):
        with self.assertRaises(KeyError):
            longest_match(self.table, "zzz")

    def test_prefix_only(self):
        with self.assertRaises(KeyError) as ctx:
            longest_match(self.table, "am")
        assert "no complete entity" in str(ctx.exception)
        assert "'am'" in str(ctx.exception)

    def test_empty_text(self):
        with self.assertRaises(KeyError):
            longest_match(self.table, "")

    def test_kept_terminator_table(self):
        table = build_prefix_map(
            [CharacterReference("&amp", [38]), CharacterReference("&amp;", [38]), CharacterReference("&ampx;", [1])],
            keep_terminator=True,
        )
        assert longest_match(table, "amp;rest") == ("amp;", (38, 0))
        assert longest_match(table, "ampxy") == ("amp", (38, 0))


class TestDecode(unittest.TestCase):
    def test_decode_value(self):
        assert decode_value((38, 0)) == "&"
        assert decode_value((8811, 8402)) == "≫⃒"

    def test_sentinel_does_not_decode(self):
        with self.assertRaises(ValueError):
            decode_value((0, 0))

    def test_decode_prefix(self):
        table = build_prefix_map([CharacterReference("&lt;", [60])])
        assert decode_prefix(table, "lt;b") == ("<", 2)
