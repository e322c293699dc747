from urllib.parse import parse_qsl, unquote

import pytest

from adobe_client.client.encoding import (
    build_query_string,
    encode_hierarchical_path,
    encode_segment,
    with_query,
)

RESERVED_IDS = ["a/b", "test id with spaces", "urn:aep:1", "user@example.com", "x?y#z&w"]


# --- 1. FLAT IDENTIFIERS ---
@pytest.mark.parametrize("identifier", RESERVED_IDS)
def test_encode_segment_escapes_reserved_characters(identifier):
    encoded = encode_segment(identifier)

    for char in "/ :@?#&":
        assert char not in encoded
    assert unquote(encoded) == identifier


def test_encode_segment_keeps_unreserved():
    assert encode_segment("AZaz09-_.~") == "AZaz09-_.~"


# --- 2. HIERARCHICAL PATHS ---
def test_encode_hierarchical_path_keeps_separators():
    assert (
        encode_hierarchical_path("/content/dam/my site/a&b")
        == "/content/dam/my%20site/a%26b"
    )


@pytest.mark.parametrize("path", ["content/dam/x", "/content/dam/x", "//content/dam/x"])
def test_encode_hierarchical_path_single_leading_slash(path):
    assert encode_hierarchical_path(path) == "/content/dam/x"


@pytest.mark.parametrize(
    "path", ["/content/dam/site/x", "/content/dam/a b/c:d@e", "/content/dam/ü/ö"]
)
def test_encode_hierarchical_path_round_trip(path):
    encoded = encode_hierarchical_path(path)

    assert " " not in encoded
    assert encoded.count("/") == path.count("/")
    assert unquote(encoded) == path


# --- 3. QUERY STRINGS ---
def test_build_query_string_empty():
    assert build_query_string({}) == ""
    assert build_query_string(None) == ""
    assert build_query_string({"a": None}) == ""


def test_build_query_string_form_encoding():
    query = build_query_string(
        {"sort": "updateTime:desc", "name": "my test", "snapshot.name": "a&b"}
    )

    assert query == "sort=updateTime%3Adesc&name=my+test&snapshot.name=a%26b"


def test_build_query_string_each_key_once():
    options = {"start": 0, "limit": 20, "recursive": True, "deep": False}

    pairs = parse_qsl(build_query_string(options))

    assert pairs == [("start", "0"), ("limit", "20"), ("recursive", "1"), ("deep", "0")]


def test_with_query():
    assert with_query("/audiences", {}) == "/audiences"
    assert with_query("/audiences", {"limit": 5}) == "/audiences?limit=5"
    assert with_query("/pages?path=x", {"limit": 5}) == "/pages?path=x&limit=5"


def test_build_query_string_expands_sequences():
    query = build_query_string({"property": ["a", "b c"], "flags": (True, None, False)})

    assert query == "property=a&property=b+c&flags=1&flags=0"
    assert parse_qsl(query) == [
        ("property", "a"),
        ("property", "b c"),
        ("flags", "1"),
        ("flags", "0"),
    ]
