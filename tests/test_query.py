from enum import Enum

from relay_client.core.query import append_query_params, build_query_string


class Color(str, Enum):
    RED = "RED"


def test_scalars_serialized():
    assert build_query_string({"page": 1, "is_active": True}) == "page=1&is_active=true"


def test_false_is_lowercase():
    assert build_query_string({"auto_refresh": False}) == "auto_refresh=false"


def test_arrays_repeat_key():
    assert build_query_string({"tags": ["a", "b"]}) == "tags=a&tags=b"


def test_none_values_omitted():
    assert build_query_string({"page": None, "search": "x"}) == "search=x"
    assert build_query_string({"page": None}) == ""


def test_values_percent_encoded():
    assert build_query_string({"search": "a b&c"}) == "search=a+b%26c"


def test_enum_uses_value():
    assert build_query_string({"type": Color.RED}) == "type=RED"


def test_empty_mapping_leaves_url_unchanged():
    assert append_query_params("/api/workflows", {}) == "/api/workflows"
    assert append_query_params("/api/workflows", {"x": None}) == "/api/workflows"
    assert append_query_params("/api/workflows", None) == "/api/workflows"


def test_separator_depends_on_existing_query():
    assert append_query_params("/api/workflows", {"page": 1}) == "/api/workflows?page=1"
    assert (
        append_query_params("/api/workflows?sort=name", {"page": 1})
        == "/api/workflows?sort=name&page=1"
    )


def test_none_items_inside_lists_kept_as_null():
    assert build_query_string({"ids": [1, None, 2]}) == "ids=1&ids=null&ids=2"


def test_integral_floats_render_without_fraction():
    assert build_query_string({"ratio": 1.0, "weight": 0.5}) == "ratio=1&weight=0.5"
