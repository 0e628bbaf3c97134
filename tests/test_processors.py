import gzip
import io
import zlib

import pytest

from webhttpkit.http_utils import NameValueCollection
from webhttpkit.messages import GetRequest, Request, Response
from webhttpkit.processors import (
    ClientContext,
    DefaultClientHeaders,
    DefaultEncodingResponseStreamFilter,
    DefaultRedirectProcessor,
    HTTPError,
)
from webhttpkit.settings import ClientSessionSettings


def _redirect(status, location=None):
    headers = NameValueCollection()
    if location is not None:
        headers.add("Location", location)
    return Response(status=status, headers=headers)


def test_add_redirect_records_uri():
    context = ClientContext()
    context.add_redirect("http://example.com/a")
    assert context.redirects == ["http://example.com/a"]


def test_client_headers_user_agent_and_defaults():
    settings = ClientSessionSettings(user_agent="agent/1")
    settings.add_default_header("X-One", "1")
    context = ClientContext(settings=settings)
    request = GetRequest("http://example.com/")
    DefaultClientHeaders().request_filter(context, request)
    assert request.headers.get("User-Agent") == "agent/1"
    assert request.headers.get("X-One") == "1"


def test_client_headers_empty_user_agent_not_set():
    context = ClientContext(settings=ClientSessionSettings(user_agent=""))
    request = GetRequest("http://example.com/")
    DefaultClientHeaders().request_filter(context, request)
    assert not request.headers.has("User-Agent")


def test_redirect_request_filter_clears_resubmit():
    context = ClientContext(resubmit=True)
    DefaultRedirectProcessor().request_filter(context, GetRequest("http://example.com/"))
    assert context.resubmit is False


@pytest.mark.parametrize("status", [301, 302, 303, 307])
def test_redirect_follows_location(status):
    context = ClientContext()
    request = GetRequest("http://example.com/old")
    request.headers.set("Host", "example.com")
    DefaultRedirectProcessor().response_filter(
        context, request, _redirect(status, "http://example.com/new")
    )
    assert request.uri == "http://example.com/new"
    assert request.headers.get("Referrer") == "http://example.com/old"
    assert not request.headers.has("Host")
    assert context.redirects == ["http://example.com/new"]
    assert context.resubmit is True


def test_redirect_resolves_relative_location():
    context = ClientContext()
    request = GetRequest("http://example.com/dir/page")
    DefaultRedirectProcessor().response_filter(context, request, _redirect(302, "/other"))
    assert request.uri == "http://example.com/other"


@pytest.mark.parametrize("method", ["POST", "PUT"])
def test_redirect_converts_entity_methods_to_get(method):
    context = ClientContext()
    request = Request(method, "http://example.com/form")
    DefaultRedirectProcessor().response_filter(
        context, request, _redirect(303, "http://example.com/done")
    )
    assert request.method == "GET"


def test_redirect_without_location_raises():
    with pytest.raises(HTTPError, match="No location header"):
        DefaultRedirectProcessor().response_filter(
            ClientContext(), GetRequest("http://example.com/"), _redirect(301)
        )


def test_redirect_limit_raises():
    context = ClientContext(settings=ClientSessionSettings(max_redirects=1))
    context.add_redirect("http://example.com/first")
    with pytest.raises(HTTPError, match="Maximum redirects exceeded"):
        DefaultRedirectProcessor().response_filter(
            context,
            GetRequest("http://example.com/"),
            _redirect(302, "http://example.com/next"),
        )


def test_non_redirect_status_left_alone():
    context = ClientContext()
    request = GetRequest("http://example.com/a")
    DefaultRedirectProcessor().response_filter(
        context, request, _redirect(200, "http://example.com/b")
    )
    assert request.uri == "http://example.com/a"
    assert context.redirects == []
    assert context.resubmit is False


def test_encoding_request_filter_sets_accept_encoding():
    request = GetRequest("http://example.com/")
    DefaultEncodingResponseStreamFilter().request_filter(ClientContext(), request)
    assert request.headers.get("Accept-Encoding") == "gzip, deflate"


@pytest.mark.parametrize(
    "encoding, compress",
    [("gzip", gzip.compress), ("deflate", zlib.compress)],
)
def test_encoding_stream_round_trip(encoding, compress):
    payload = b"hello world " * 2000
    response = Response(headers=NameValueCollection([("Content-Encoding", encoding)]))
    stream = DefaultEncodingResponseStreamFilter().response_stream_filter(
        ClientContext(), GetRequest("http://example.com/"), response, io.BytesIO(compress(payload))
    )
    assert stream.read() == payload


def test_encoding_stream_untouched_without_header():
    source = io.BytesIO(b"raw")
    result = DefaultEncodingResponseStreamFilter().response_stream_filter(
        ClientContext(), GetRequest("http://example.com/"), Response(), source
    )
    assert result is source
    assert result.read() == b"raw"


def test_encoding_stream_unknown_encoding_untouched():
    source = io.BytesIO(b"raw")
    response = Response(headers=NameValueCollection([("Content-Encoding", "br")]))
    result = DefaultEncodingResponseStreamFilter().response_stream_filter(
        ClientContext(), GetRequest("http://example.com/"), response, source
    )
    assert result is source