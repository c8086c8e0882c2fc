"""Local cache of remote resources keyed by their file names."""

from __future__ import annotations

import logging
import os
import tempfile
import threading
from pathlib import Path
from typing import Dict

from s3maven.modules.resourceloader.domain import ResourceFetchFailure
from .base import Resource, ResourceLoader


class ResourceCache:
    """Download remote resources once and reuse the local copy afterwards.

    Fetches of the same target are serialized; each download goes to its own
    temporary file in the cache directory and is moved into place when done.
    """

    def __init__(self, loader: ResourceLoader, cache_dir: Path | str) -> None:
        self.loader = loader
        self.cache_dir = Path(cache_dir)
        self.cache_dir.mkdir(parents=True, exist_ok=True)
        self.log = logging.getLogger(self.__class__.__name__)
        self._locks: Dict[Path, threading.Lock] = {}
        self._locks_guard = threading.Lock()

    def target_for(self, resource: Resource) -> Path:
        name = resource.filename
        if not name or "/" in name or "\\" in name or name in {".", ".."}:
            raise ResourceFetchFailure(resource.location, f"'{name}' is not usable as a file name")
        return self.cache_dir / name

    def _lock_for(self, target: Path) -> threading.Lock:
        with self._locks_guard:
            return self._locks.setdefault(target, threading.Lock())

    def fetch(self, location: str, *, force: bool = False) -> Path:
        resource = self.loader.get_resource(location)
        if getattr(resource, "is_local", False):
            local = Path(getattr(resource, "path"))
            if not resource.exists():
                raise ResourceFetchFailure(location, "file not found")
            return local

        target = self.target_for(resource)
        with self._lock_for(target):
            if target.exists() and not force:
                self.log.info("Reusing cached resource %s -> %s", resource.location, target)
                return target
            self._download(resource, target)
        self.log.info("Cached resource %s -> %s", resource.location, target)
        return target

    def _download(self, resource: Resource, target: Path) -> None:
        fd, name = tempfile.mkstemp(prefix=f".{target.name}.", suffix=".part", dir=self.cache_dir)
        os.close(fd)
        partial = Path(name)
        try:
            resource.fetch(partial)
            os.replace(partial, target)
        except OSError as exc:
            raise ResourceFetchFailure(resource.location, str(exc)) from exc
        finally:
            partial.unlink(missing_ok=True)
