"""A server route that serves files from a document root."""

from __future__ import annotations

import logging
import mimetypes
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import ClassVar, Optional, Union
from urllib.parse import unquote, urlsplit

logger = logging.getLogger(__name__)

_DEFAULT_MEDIA_TYPE = "application/octet-stream"


class RouteError(Exception):
    """A request could not be served; ``status`` is the HTTP status to send."""

    def __init__(self, status: int, message: str = "") -> None:
        super().__init__(message or f"HTTP {status}")
        self.status = status


@dataclass
class FileSystemRouteSettings:
    """Settings for a FileSystemRoute.

    A relative ``document_root`` is taken relative to ``data_folder``.
    """

    DEFAULT_DOCUMENT_ROOT: ClassVar[str] = "DocumentRoot/"
    DEFAULT_INDEX: ClassVar[str] = "index.html"
    DEFAULT_HTTP_METHODS: ClassVar[frozenset[str]] = frozenset({"GET"})

    route_path_pattern: str = "/.*"
    require_secure_port: bool = False
    require_authentication: bool = False
    http_methods: frozenset[str] = DEFAULT_HTTP_METHODS
    default_index: str = DEFAULT_INDEX
    document_root: str = DEFAULT_DOCUMENT_ROOT
    auto_create_document_root: bool = False
    require_document_root_in_data_folder: bool = True
    data_folder: Union[str, Path] = field(default_factory=lambda: Path("data"))


def _absolute(path: Union[str, Path]) -> Path:
    return Path(os.path.abspath(path))


class FileSystemRoute:
    """Maps request URIs to files under the settings' document root."""

    def __init__(self, settings: Optional[FileSystemRouteSettings] = None) -> None:
        self.settings = settings if settings is not None else FileSystemRouteSettings()
        if self.settings.auto_create_document_root:
            self.document_root.mkdir(parents=True, exist_ok=True)

    @property
    def data_folder(self) -> Path:
        """The absolute data folder."""
        return _absolute(self.settings.data_folder)

    @property
    def document_root(self) -> Path:
        """The absolute document root."""
        return _absolute(self.data_folder / self.settings.document_root)

    def resolve_request_path(self, uri: str) -> Path:
        """Return the file that ``uri`` names.

        Raises RouteError with status 500 if the document root lies outside
        a required data folder, and 404 if the file is outside the document
        root or does not exist.
        """
        data_folder = self.data_folder
        document_root = self.document_root

        if (
            self.settings.require_document_root_in_data_folder
            and not document_root.is_relative_to(data_folder)
        ):
            logger.error("Document root is not a sub directory of the data folder.")
            raise RouteError(500, "document root is not inside the data folder")

        path = unquote(urlsplit(uri).path) or "/"
        wants_index = path.endswith("/")
        request_path = _absolute(str(document_root) + "/" + path.lstrip("/"))
        if wants_index:
            request_path = request_path / self.settings.default_index

        if not request_path.is_relative_to(document_root):
            logger.error("Requested document not inside the document root.")
            raise RouteError(404, "requested document is outside the document root")

        if not request_path.is_file():
            raise RouteError(404, f"file not found: {path}")

        return request_path

    def media_type_for(self, path: Union[str, Path]) -> str:
        """Return the media type for ``path``, guessed from its extension."""
        media_type, _ = mimetypes.guess_type(str(path), strict=False)
        return media_type or _DEFAULT_MEDIA_TYPE

    def error_page_for(self, status: int) -> Optional[Path]:
        """Return the ``<status>.html`` page in the document root, if there is one."""
        candidate = self.document_root / f"{int(status)}.html"
        return candidate if candidate.is_file() else None