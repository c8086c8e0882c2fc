"""Resource contracts and the local filesystem implementation."""

from __future__ import annotations

import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol
from urllib.parse import unquote, urlparse

from s3maven.modules.resourceloader.domain import ResourceFetchFailure


class Resource(Protocol):
    """A loadable artifact.

    ``filename`` is safe to use as a local file name; caches rely on it.
    """

    location: str

    @property
    def filename(self) -> str:  # pragma: no cover - interface
        ...

    def exists(self) -> bool:  # pragma: no cover - interface
        ...

    def fetch(self, target: Path) -> Path:  # pragma: no cover - interface
        ...


class ResourceLoader(Protocol):
    def get_resource(self, location: str) -> Resource:  # pragma: no cover - interface
        ...


@dataclass
class FileSystemResource:
    location: str
    path: Path

    @property
    def filename(self) -> str:
        return self.path.name

    @property
    def is_local(self) -> bool:
        return True

    def exists(self) -> bool:
        return self.path.is_file()

    def fetch(self, target: Path) -> Path:
        if not self.exists():
            raise ResourceFetchFailure(self.location, "file not found")
        if target.resolve() == self.path.resolve():
            return target
        target.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(self.path, target)
        return target


class FileSystemResourceLoader:
    """Default loader: plain paths and ``file:`` URIs."""

    def get_resource(self, location: str) -> FileSystemResource:
        if location.startswith("file:"):
            path = Path(unquote(urlparse(location).path))
        else:
            path = Path(location).expanduser()
        return FileSystemResource(location=location, path=path)
