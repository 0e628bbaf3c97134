"""Default request and response filters for an HTTP client."""

from __future__ import annotations

import io
import logging
import zlib
from dataclasses import dataclass, field
from typing import IO, Optional
from urllib.parse import urljoin

from webhttpkit.client_state import ClientState
from webhttpkit.messages import HTTP_GET, HTTP_POST, HTTP_PUT, Request, Response
from webhttpkit.settings import ClientSessionSettings

logger = logging.getLogger(__name__)

_REDIRECT_STATUSES = frozenset({301, 302, 303, 307})


class HTTPError(Exception):
    """An HTTP protocol error, optionally tied to a status code."""

    def __init__(self, message: str, status: Optional[int] = None) -> None:
        super().__init__(message)
        self.status = status


@dataclass
class ClientContext:
    """State carried across the filters of one client exchange."""

    settings: ClientSessionSettings = field(default_factory=ClientSessionSettings)
    redirects: list[str] = field(default_factory=list)
    resubmit: bool = False
    state: ClientState = ClientState.NONE

    def add_redirect(self, uri: str) -> None:
        """Record a redirect target."""
        self.redirects.append(uri)


class DefaultClientHeaders:
    """Applies the session's user agent and default headers to requests."""

    def request_filter(self, context: ClientContext, request: Request) -> None:
        settings = context.settings
        if settings.user_agent:
            request.headers.set("User-Agent", settings.user_agent)
        for name, value in settings.default_headers:
            request.headers.set(name, value)


class DefaultRedirectProcessor:
    """Follows 301, 302, 303 and 307 redirects up to the session limit."""

    def request_filter(self, context: ClientContext, request: Request) -> None:
        # A new request is being executed, so nothing is pending resubmission.
        context.resubmit = False

    def response_filter(
        self, context: ClientContext, request: Request, response: Response
    ) -> None:
        if response.status not in _REDIRECT_STATUSES:
            return
        if len(context.redirects) >= context.settings.max_redirects:
            raise HTTPError("Maximum redirects exceeded.")
        if not response.headers.has("Location"):
            raise HTTPError("No location header specified in redirect.")

        last_uri = request.uri
        target_uri = urljoin(last_uri, response.headers.get("Location"))
        logger.debug("Processing %d to %s", response.status, target_uri)

        request.headers.set("Referrer", last_uri)
        context.add_redirect(target_uri)
        request.headers.erase("Host")
        request.uri = target_uri

        # Entity-carrying requests are not re-sent to the new location.
        if request.method in (HTTP_POST, HTTP_PUT):
            logger.debug("Converting %s to GET during redirect.", request.method)
            request.method = HTTP_GET

        context.resubmit = True


class _InflatingReader(io.RawIOBase):
    """A raw stream that decompresses zlib or gzip data from a source."""

    def __init__(self, source: IO[bytes], wbits: int, chunk_size: int = 8192) -> None:
        super().__init__()
        self._source = source
        self._decompressor = zlib.decompressobj(wbits)
        self._chunk_size = chunk_size
        self._pending = b""
        self._exhausted = False

    def readable(self) -> bool:
        return True

    def readinto(self, buffer) -> int:
        while not self._pending and not self._exhausted:
            chunk = self._source.read(self._chunk_size)
            if chunk:
                self._pending = self._decompressor.decompress(chunk)
            else:
                self._pending = self._decompressor.flush()
                self._exhausted = True
        count = min(len(buffer), len(self._pending))
        buffer[:count] = self._pending[:count]
        self._pending = self._pending[count:]
        return count


class DefaultEncodingResponseStreamFilter:
    """Advertises and decodes gzip and deflate content encodings."""

    ACCEPT_ENCODING_HEADER = "Accept-Encoding"
    CONTENT_ENCODING_HEADER = "Content-Encoding"

    def request_filter(self, context: ClientContext, request: Request) -> None:
        request.headers.set(self.ACCEPT_ENCODING_HEADER, "gzip, deflate")

    def response_filter(
        self, context: ClientContext, request: Request, response: Response
    ) -> None:
        """Nothing to do on the response headers."""

    def response_stream_filter(
        self,
        context: ClientContext,
        request: Request,
        response: Response,
        stream: IO[bytes],
    ) -> IO[bytes]:
        """Return ``stream``, wrapped in a decoder if the response is encoded."""
        encoding = response.headers.get(self.CONTENT_ENCODING_HEADER, "")
        if encoding == "gzip":
            return io.BufferedReader(_InflatingReader(stream, 16 + zlib.MAX_WBITS))
        if encoding == "deflate":
            return io.BufferedReader(_InflatingReader(stream, zlib.MAX_WBITS))
        return stream