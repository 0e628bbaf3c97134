"""HTTP request and response messages."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from http import HTTPStatus
from typing import ClassVar, Union

from webhttpkit.http_utils import NameValueCollection

HTTP_1_0 = "HTTP/1.0"
HTTP_1_1 = "HTTP/1.1"

HTTP_GET = "GET"
HTTP_HEAD = "HEAD"
HTTP_POST = "POST"
HTTP_PUT = "PUT"

FormFields = Union[NameValueCollection, Mapping[str, str], Iterable[tuple[str, str]]]


@dataclass
class Request:
    """An HTTP request: method, target URI, protocol version and headers."""

    method: str
    uri: str
    http_version: str = HTTP_1_1
    headers: NameValueCollection = field(default_factory=NameValueCollection)


@dataclass
class FormRequest(Request):
    """A request that carries name/value form fields."""

    DEFAULT_MEDIA_TYPE: ClassVar[str] = "application/octet-stream"

    form: NameValueCollection = field(default_factory=NameValueCollection)

    def add_form_fields(self, fields: FormFields) -> None:
        """Add every name/value pair of ``fields``, keeping existing ones."""
        pairs = fields.items() if isinstance(fields, Mapping) else fields
        for name, value in pairs:
            self.form.add(name, value)

    def add_form_field(self, name: str, value: str) -> None:
        """Add a form field, keeping any existing field of the same name."""
        self.form.add(name, value)

    def set_form_field(self, name: str, value: str) -> None:
        """Set a form field, replacing an existing field of the same name."""
        self.form.set(name, value)

    def clear_form_fields(self) -> None:
        """Remove every form field."""
        self.form.clear()


class GetRequest(FormRequest):
    """A GET request whose form fields travel in the query string."""

    def __init__(self, uri: str, http_version: str = HTTP_1_1) -> None:
        super().__init__(HTTP_GET, uri, http_version)


class HeadRequest(FormRequest):
    """A HEAD request."""

    def __init__(self, uri: str, http_version: str = HTTP_1_1) -> None:
        super().__init__(HTTP_HEAD, uri, http_version)


def _reason_for(status: int) -> str:
    try:
        return HTTPStatus(status).phrase
    except ValueError:
        return ""


@dataclass
class Response:
    """An HTTP response status line and headers."""

    CONTENT_RANGE: ClassVar[str] = "Content-Range"
    BYTES_UNIT: ClassVar[str] = "bytes"

    status: int = 200
    reason: str = ""
    headers: NameValueCollection = field(default_factory=NameValueCollection)

    def __post_init__(self) -> None:
        if not self.reason:
            self.reason = _reason_for(self.status)

    @property
    def content_type(self) -> str:
        """The media type of the Content-Type header, lower case, without parameters."""
        raw = self.headers.get("Content-Type", "")
        return raw.split(";", 1)[0].strip().lower()

    def is_informational(self) -> bool:
        """Return True for a 1xx status."""
        return 100 <= self.status < 200

    def is_success(self) -> bool:
        """Return True for a 2xx status."""
        return 200 <= self.status < 300

    def is_redirection(self) -> bool:
        """Return True for a 3xx status."""
        return 300 <= self.status < 400

    def is_client_error(self) -> bool:
        """Return True for a 4xx status."""
        return 400 <= self.status < 500

    def is_server_error(self) -> bool:
        """Return True for a status of 500 or above."""
        return self.status >= 500

    def is_json(self) -> bool:
        """Return True if the content type is text/json or application/json."""
        return self.content_type in ("text/json", "application/json")

    def is_xml(self) -> bool:
        """Return True if the content type is text/xml or application/xml."""
        return self.content_type in ("text/xml", "application/xml")

    def is_pixels(self) -> bool:
        """Return True if the content type is an image type."""
        return self.content_type.partition("/")[0] == "image"

    def status_and_reason(self) -> str:
        """Return the status code followed by the reason phrase."""
        return f"{self.status} {self.reason}".rstrip()