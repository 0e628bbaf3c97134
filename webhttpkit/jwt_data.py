"""Header and payload data for JSON Web Tokens."""

from __future__ import annotations

import base64
import json
from collections.abc import Iterable
from enum import Enum
from typing import Any, ClassVar, Union


class JSONWebTokenData:
    """A JSON object holding the fields of one part of a token."""

    def __init__(self) -> None:
        self._data: dict[str, Any] = {}

    @property
    def data(self) -> dict[str, Any]:
        """The raw JSON fields."""
        return self._data

    def as_string(self, indent: int = -1) -> str:
        """Return the fields as JSON text.

        A negative ``indent`` gives compact output with no whitespace.
        """
        if indent < 0:
            return json.dumps(
                self._data, sort_keys=True, ensure_ascii=False, separators=(",", ":")
            )
        return json.dumps(
            self._data,
            sort_keys=True,
            ensure_ascii=False,
            indent=indent,
            separators=(",", ": "),
        )

    def as_base64url_encoded_string(self) -> str:
        """Return the compact JSON text in unpadded base64url encoding."""
        encoded = base64.urlsafe_b64encode(self.as_string().encode("utf-8"))
        return encoded.decode("ascii").rstrip("=")

    def clear(self, name: str) -> None:
        """Remove the field ``name`` if it is present."""
        self._data.pop(name, None)

    def set(self, name: str, value: Any) -> None:
        """Set the field ``name`` to ``value``."""
        self._data[name] = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JSONWebTokenData):
            return NotImplemented
        return type(self) is type(other) and self._data == other._data

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data!r})"


class JSONWebTokenHeader(JSONWebTokenData):
    """The header part of a JSON Web Token."""

    TYP: ClassVar[str] = "typ"
    CTY: ClassVar[str] = "cty"

    def set_type(self, type_: str) -> None:
        """Set the ``typ`` field."""
        self.set(self.TYP, type_)

    def set_content_type(self, content_type: str) -> None:
        """Set the ``cty`` field."""
        self.set(self.CTY, content_type)


class Algorithm(Enum):
    """Signature algorithms for a JSON Web Signature."""

    RS256 = "RS256"

    def __str__(self) -> str:
        return self.value


class JSONWebSignatureHeader(JSONWebTokenHeader):
    """The header of a signed JSON Web Token."""

    ALG: ClassVar[str] = "alg"
    JKU: ClassVar[str] = "jku"
    JWK: ClassVar[str] = "jwk"
    KID: ClassVar[str] = "kid"
    X5U: ClassVar[str] = "x5u"
    X5T: ClassVar[str] = "x5t"
    X5C: ClassVar[str] = "x5c"
    CRIT: ClassVar[str] = "crit"

    def set_algorithm(self, algorithm: Algorithm) -> None:
        """Set the ``alg`` field."""
        if not isinstance(algorithm, Algorithm):
            raise TypeError(f"expected Algorithm, got {type(algorithm).__name__}")
        self.set(self.ALG, algorithm.value)

    def set_key_id(self, key_id: str) -> None:
        """Set the ``kid`` field."""
        self.set(self.KID, key_id)


class JSONWebTokenPayload(JSONWebTokenData):
    """The claims part of a JSON Web Token."""

    ISS: ClassVar[str] = "iss"
    AUD: ClassVar[str] = "aud"
    JTI: ClassVar[str] = "jti"
    IAT: ClassVar[str] = "iat"
    EXP: ClassVar[str] = "exp"
    NBF: ClassVar[str] = "nbf"
    TYP: ClassVar[str] = "typ"
    SUB: ClassVar[str] = "sub"

    def set_issuer(self, issuer: str) -> None:
        """Set the ``iss`` claim."""
        self.set(self.ISS, issuer)

    def set_audience(self, audience: Union[str, Iterable[str]]) -> None:
        """Set the ``aud`` claim; several audiences are joined by spaces."""
        if isinstance(audience, str):
            self.set(self.AUD, audience)
        else:
            self.set(self.AUD, " ".join(audience))

    def set_id(self, id_: str) -> None:
        """Set the ``jti`` claim."""
        self.set(self.JTI, id_)

    def set_issued_at_time(self, time: int) -> None:
        """Set the ``iat`` claim, in seconds since the Unix epoch."""
        self.set(self.IAT, _epoch_seconds(time))

    def set_expiration_time(self, time: int) -> None:
        """Set the ``exp`` claim, in seconds since the Unix epoch."""
        self.set(self.EXP, _epoch_seconds(time))

    def set_not_before_time(self, time: int) -> None:
        """Set the ``nbf`` claim, in seconds since the Unix epoch."""
        self.set(self.NBF, _epoch_seconds(time))

    def set_type(self, type_: str) -> None:
        """Set the ``typ`` claim."""
        self.set(self.TYP, type_)

    def set_subject(self, subject: str) -> None:
        """Set the ``sub`` claim."""
        self.set(self.SUB, subject)


def _epoch_seconds(time: int) -> int:
    value = int(time)
    if value < 0:
        raise ValueError("epoch time must not be negative")
    return value