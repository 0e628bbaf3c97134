"""States an HTTP client passes through while executing a request."""

from __future__ import annotations

from enum import Enum, auto


class ClientState(Enum):
    """The phases of a client request/response exchange."""

    NONE = auto()
    DETECTING_PROXY = auto()
    RESOLVING_NAME = auto()
    CONNECTING_TO_SERVER = auto()
    NEGOTIATING_SSL = auto()
    SENDING_HEADERS = auto()
    SENDING_CONTENTS = auto()
    WAITING_FOR_RESPONSE = auto()
    RECEIVING_HEADERS = auto()
    RECEIVING_CONTENTS = auto()
    REDIRECTING = auto()

    def __str__(self) -> str:
        return self.name


def to_string(state: ClientState) -> str:
    """Return the canonical text name of ``state``."""
    if not isinstance(state, ClientState):
        raise TypeError(f"expected ClientState, got {type(state).__name__}")
    return state.name


def from_string(text: str) -> ClientState:
    """Return the state whose canonical name is ``text``.

    Raises ValueError if no state has that name.
    """
    try:
        return ClientState[text]
    except KeyError:
        raise ValueError(f"unknown client state: {text!r}") from None