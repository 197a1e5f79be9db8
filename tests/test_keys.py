#!/usr/bin/env python3
"""
test_keys.py - Test suite for line key functions
================================================

Tests the key functions used to merge text files sorted by something other
than the raw line, and their lookup by command-line name.
"""

import pytest
import surt

from collating_iterator.merge.keys import KEYS, field_key, get_key, numeric_key, surt_key


class TestFieldKey:
    def test_whitespace_fields(self):
        key = field_key(1)
        assert key("pt,arquivo)/ 20200101000000 {}\n") == "20200101000000"

    def test_custom_separator(self):
        key = field_key(2, sep="\t")
        assert key("a\tb\tc\n") == "c"

    def test_missing_field_sorts_first(self):
        assert field_key(3)("only two\n") == ""

    def test_negative_index(self):
        with pytest.raises(ValueError):
            field_key(-1)


class TestNumericKey:
    def test_integer_and_float(self):
        assert numeric_key("42 rest\n") == 42
        assert numeric_key("-1.5\n") == -1.5

    def test_orders_numerically(self):
        lines = ["100\n", "20\n", "3\n"]
        assert sorted(lines, key=numeric_key) == ["3\n", "20\n", "100\n"]

    def test_not_numeric(self):
        with pytest.raises(ValueError, match="Not a numeric line: 'abc def'"):
            numeric_key("abc def\n")

    def test_empty_line(self):
        with pytest.raises(ValueError):
            numeric_key("\n")


class TestSurtKey:
    def test_uses_first_field(self):
        line = "http://www.arquivo.pt/page 20200101000000\n"
        assert surt_key(line) == surt.surt("http://www.arquivo.pt/page")

    def test_orders_by_reversed_host(self):
        urls = ["http://aaa.pt/\n", "http://zzz.com/\n"]
        assert sorted(urls, key=surt_key) == ["http://zzz.com/\n", "http://aaa.pt/\n"]


class TestGetKey:
    def test_line_has_no_key_function(self):
        assert get_key("line") is None

    def test_named_keys(self):
        assert get_key("numeric") is numeric_key
        assert get_key("surt") is surt_key
        assert set(KEYS) == {"line", "numeric", "surt"}

    def test_field_key_by_name(self):
        assert get_key("field:0")("b a\n") == "b"

    @pytest.mark.parametrize("name", ["bogus", "field:", "field:x", "field:-1", ""])
    def test_invalid_names(self, name):
        with pytest.raises(ValueError):
            get_key(name)
