# -*- coding: utf-8 -*-
"""
规范化参数编码单元测试
"""

import sys
from pathlib import Path

# 添加src到路径
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "src"))

import pytest
from cfapi.auth.params import canonicalize, merge_params, serialize_value, to_query_string
from cfapi.exceptions import InvalidParameterError


class TestCanonicalize:
    """排序与编码"""

    def test_sorted_by_name(self):
        pairs = canonicalize({"time": 1, "apiKey": "k", "blogEntryId": 82347}, allow_reserved=True)
        assert [name for name, _ in pairs] == ["apiKey", "blogEntryId", "time"]

    def test_sorted_by_name_then_value(self):
        pairs = canonicalize({"b": "2", "a": "z"})
        assert pairs == [("a", "z"), ("b", "2")]
        assert pairs == sorted(pairs)

    def test_idempotent(self):
        params = {"handles": ["tourist", "Petr"], "count": 5, "showUnofficial": True}
        first = to_query_string(canonicalize(params))
        second = to_query_string(canonicalize(dict(reversed(list(params.items())))))
        assert first == second
        assert first.encode("utf-8") == second.encode("utf-8")

    def test_optional_none_omitted(self):
        pairs = canonicalize({"contestId": 1477, "from": None, "count": None})
        assert pairs == [("contestId", "1477")]

    def test_bool_and_int(self):
        pairs = dict(canonicalize({"gym": False, "onlyOnline": True, "count": 0}))
        assert pairs == {"gym": "false", "onlyOnline": "true", "count": "0"}

    def test_list_joined_not_repeated(self):
        pairs = canonicalize({"handles": ["tourist", "Petr"]})
        assert pairs == [("handles", "tourist;Petr")]

    def test_percent_encoding(self):
        pairs = dict(canonicalize({"tags": ["data structures", "2-sat"], "problemsetName": "a&b=c"}))
        assert pairs["tags"] == "data%20structures;2-sat"
        assert pairs["problemsetName"] == "a%26b%3Dc"

    def test_query_string(self):
        assert to_query_string([("a", "1"), ("b", "2")]) == "a=1&b=2"


class TestInvalidParameters:
    """调用方输入错误"""

    def test_empty_name_rejected(self):
        with pytest.raises(InvalidParameterError):
            canonicalize({"": "x"})

    @pytest.mark.parametrize("name", ["apiKey", "time", "apiSig"])
    def test_reserved_name_rejected(self, name):
        with pytest.raises(InvalidParameterError) as exc_info:
            canonicalize({name: "x"})
        assert exc_info.value.param == name

    def test_empty_list_rejected(self):
        with pytest.raises(InvalidParameterError):
            serialize_value("handles", [])

    def test_unsupported_type_rejected(self):
        with pytest.raises(InvalidParameterError):
            serialize_value("x", {"a": 1})

    def test_merge_duplicate_rejected(self):
        with pytest.raises(InvalidParameterError):
            merge_params({"a": 1}, {"a": 2})

    def test_merge(self):
        assert merge_params({"a": 1}, {"b": 2}) == {"a": 1, "b": 2}
