"""A scheme, host and port triple."""

from __future__ import annotations

from dataclasses import dataclass

_SECURE_SCHEMES = frozenset({"https", "wss"})


@dataclass(frozen=True)
class HTTPHost:
    """Identifies an HTTP or WebSocket endpoint."""

    scheme: str
    host: str
    port: int

    def secure(self) -> bool:
        """Return True if the scheme is an encrypted one."""
        return self.scheme in _SECURE_SCHEMES

    def __str__(self) -> str:
        return f"[{self.scheme},{self.host},{self.port}]"