"""Settings for an HTTP client session."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta
from typing import ClassVar

from webhttpkit.http_utils import NameValueCollection


@dataclass
class ClientSessionSettings:
    """Configuration shared by the requests of one client session.

    A ``minimum_bytes_per_progress_update`` of 0 disables progress updates;
    a zero ``maximum_progress_update_interval`` disables the interval limit.
    """

    DEFAULT_USER_AGENT: ClassVar[str] = "Mozilla/5.0 (compatible; Client/1.0)"
    DEFAULT_MAX_REDIRECTS: ClassVar[int] = 20
    DEFAULT_KEEPALIVE_TIMEOUT: ClassVar[timedelta] = timedelta(seconds=8)
    DEFAULT_TIMEOUT: ClassVar[timedelta] = timedelta(seconds=60)
    DEFAULT_MINIMUM_BYTES_PER_PROGRESS_UPDATE: ClassVar[int] = 1024
    DEFAULT_MAXIMUM_PROGRESS_UPDATE_INTERVAL: ClassVar[timedelta] = timedelta(seconds=1)

    user_agent: str = DEFAULT_USER_AGENT
    max_redirects: int = DEFAULT_MAX_REDIRECTS
    keep_alive: bool = True
    keep_alive_timeout: timedelta = DEFAULT_KEEPALIVE_TIMEOUT
    timeout: timedelta = DEFAULT_TIMEOUT
    minimum_bytes_per_progress_update: int = DEFAULT_MINIMUM_BYTES_PER_PROGRESS_UPDATE
    maximum_progress_update_interval: timedelta = DEFAULT_MAXIMUM_PROGRESS_UPDATE_INTERVAL
    default_headers: NameValueCollection = field(default_factory=NameValueCollection)

    def add_default_header(self, name: str, value: str) -> None:
        """Add a header to be sent with every request of the session."""
        self.default_headers.add(name, value)