"""Scheme-based dispatch to resource loaders."""

from __future__ import annotations

import logging
import re
from typing import Dict, Mapping, Optional

from .base import FileSystemResourceLoader, Resource, ResourceLoader

log = logging.getLogger(__name__)

SCHEME_PATTERN = re.compile(r"^([a-zA-Z][a-zA-Z0-9+.\-]*):")


def scheme_of(location: str) -> Optional[str]:
    """Return the lower-cased scheme of ``location`` or ``None`` for plain paths.

    Single letters are treated as Windows drive names, not schemes.
    """
    match = SCHEME_PATTERN.match(location.strip())
    if not match or len(match.group(1)) == 1:
        return None
    return match.group(1).lower()


class DelegatingResourceLoader:
    def __init__(
        self,
        loaders: Mapping[str, ResourceLoader],
        default: Optional[ResourceLoader] = None,
    ) -> None:
        self._loaders: Dict[str, ResourceLoader] = {scheme.lower(): loader for scheme, loader in loaders.items()}
        self.default = default or FileSystemResourceLoader()

    @property
    def schemes(self) -> list[str]:
        return sorted(self._loaders)

    def register(self, scheme: str, loader: ResourceLoader) -> None:
        self._loaders[scheme.lower()] = loader

    def loader_for(self, location: str) -> ResourceLoader:
        scheme = scheme_of(location)
        if scheme is None or scheme == "file":
            return self.default
        loader = self._loaders.get(scheme)
        if loader is None:
            log.debug("No loader registered for scheme %s, using default", scheme)
            return self.default
        return loader

    def get_resource(self, location: str) -> Resource:
        location = location.strip()
        return self.loader_for(location).get_resource(location)
