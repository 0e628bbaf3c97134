import io
import logging

import pytest

from webhttpkit.http_utils import (
    NameValueCollection,
    consume,
    dump_headers,
    get_query_map,
    make_query_string,
    split_and_url_decode,
    split_text_plain_post,
)


def test_collection_names_are_case_insensitive():
    nvc = NameValueCollection()
    nvc.add("Content-Type", "text/html")
    assert nvc.get("content-type") == "text/html"
    assert nvc.has("CONTENT-TYPE")
    assert "content-TYPE" in nvc


def test_collection_add_keeps_duplicates():
    nvc = NameValueCollection()
    nvc.add("a", "1")
    nvc.add("A", "2")
    assert len(nvc) == 2
    assert nvc.get_all("a") == ["1", "2"]
    assert nvc.get("a") == "1"


def test_collection_set_replaces_first():
    nvc = NameValueCollection([("a", "1"), ("b", "2")])
    nvc.set("A", "9")
    nvc.set("c", "3")
    assert list(nvc) == [("a", "9"), ("b", "2"), ("c", "3")]


def test_collection_get_missing():
    nvc = NameValueCollection()
    with pytest.raises(KeyError):
        nvc.get("missing")
    assert nvc.get("missing", "fallback") == "fallback"


def test_collection_erase_and_clear():
    nvc = NameValueCollection([("a", "1"), ("A", "2"), ("b", "3")])
    nvc.erase("a")
    assert list(nvc) == [("b", "3")]
    nvc.clear()
    assert len(nvc) == 0
    assert not nvc.has("b")


def test_collection_copy_is_independent():
    nvc = NameValueCollection([("a", "1")])
    other = nvc.copy()
    other.add("b", "2")
    assert len(nvc) == 1
    assert len(other) == 2


def test_split_text_plain_post():
    result = split_text_plain_post("a=1\nb=2=3\nnoequals\n")
    assert list(result) == [("a", "1"), ("b", "2=3")]


def test_split_text_plain_post_empty():
    assert len(split_text_plain_post("")) == 0


def test_split_and_url_decode_basic():
    result = split_and_url_decode("a=1&&b=hello%20world&flag")
    assert list(result) == [("a", "1"), ("b", "hello world"), ("flag", "")]


def test_split_and_url_decode_keeps_plus():
    result = split_and_url_decode("q=a+b")
    assert result.get("q") == "a+b"


@pytest.mark.parametrize("bad", ["a=%zz", "a=%4", "a=%"])
def test_split_and_url_decode_bad_escape(bad):
    with pytest.raises(ValueError):
        split_and_url_decode(bad)


def test_get_query_map():
    result = get_query_map("http://example.com/path?x=1&y=a%2Bb")
    assert result.get("x") == "1"
    assert result.get("y") == "a+b"


@pytest.mark.parametrize("uri", ["", "http://example.com/path"])
def test_get_query_map_empty(uri):
    assert len(get_query_map(uri)) == 0


def test_make_query_string_escapes_reserved():
    assert make_query_string([("a", "b&c")]) == "a=b%26c"


def test_make_query_string_empty():
    assert make_query_string(NameValueCollection()) == ""


@pytest.mark.parametrize(
    "pairs",
    [
        [("a", "1"), ("b", "2")],
        [("key with space", "v=1;x+y&z")],
        [("unicode", "caf\u00e9"), ("sym", "%<>{}")],
    ],
)
def test_query_string_round_trip(pairs):
    encoded = make_query_string(pairs)
    assert list(split_and_url_decode(encoded)) == pairs


def test_make_query_string_output_is_ascii_without_spaces():
    encoded = make_query_string([("n", "x y\u00e9")])
    assert encoded.isascii()
    assert " " not in encoded


def test_dump_headers_logs_each_entry(caplog):
    request = NameValueCollection([("Host", "example.com")])
    response = NameValueCollection([("Server", "unit-server")])
    with caplog.at_level(logging.INFO, logger="webhttpkit.http_utils"):
        dump_headers(request, response, level=logging.INFO)
    assert len(caplog.records) == 2
    assert any("example.com" in message for message in caplog.messages)
    assert any("unit-server" in message for message in caplog.messages)


def test_dump_headers_respects_level(caplog):
    request = NameValueCollection([("Host", "example.com")])
    with caplog.at_level(logging.WARNING, logger="webhttpkit.http_utils"):
        dump_headers(request, level=logging.DEBUG)
    assert caplog.records == []


def test_consume_bytes():
    data = b"abcdef" * 5000
    stream = io.BytesIO(data)
    assert consume(stream) == len(data)
    assert stream.read() == b""


def test_consume_text():
    text = "hello"
    assert consume(io.StringIO(text)) == len(text)