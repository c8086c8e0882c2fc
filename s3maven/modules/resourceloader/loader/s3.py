"""S3 resources whose file names are safe for local caching.

S3 object keys may contain ``/``; on a filesystem that is a folder separator,
so a cache using the raw key as a file name would fail. Names are therefore
passed through :func:`sanitized` before they are exposed.
"""

from __future__ import annotations

import functools
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Optional

from botocore.exceptions import BotoCoreError, ClientError

from s3maven.modules.resourceloader.domain import (
    PATH_DELIMITER,
    S3_PROTOCOL_PREFIX,
    ResourceFetchFailure,
    S3ObjectLocation,
)
from .base import FileSystemResourceLoader, Resource, ResourceLoader

log = logging.getLogger(__name__)

NOT_FOUND_CODES = {"404", "NoSuchKey", "NotFound"}


def sanitize_filename(name: str, replacement: str = "_") -> str:
    return name.replace(PATH_DELIMITER, replacement)


def sanitized(name_fn: Callable[..., str], replacement: str = "_") -> Callable[..., str]:
    """Wrap ``name_fn`` so the names it returns carry no path delimiter."""

    @functools.wraps(name_fn)
    def wrapper(*args: Any, **kwargs: Any) -> str:
        return sanitize_filename(name_fn(*args, **kwargs), replacement)

    return wrapper


def object_key(resource: "S3Resource") -> str:
    return resource.key


@dataclass
class S3Resource:
    client: Any
    bucket: str
    key: str
    naming: Callable[["S3Resource"], str] = field(default=object_key)

    @property
    def location(self) -> str:
        return f"{S3_PROTOCOL_PREFIX}{self.bucket}{PATH_DELIMITER}{self.key}"

    @property
    def filename(self) -> str:
        return self.naming(self)

    @property
    def is_local(self) -> bool:
        return False

    def exists(self) -> bool:
        try:
            self.client.head_object(Bucket=self.bucket, Key=self.key)
        except ClientError as exc:
            code = exc.response.get("Error", {}).get("Code", "")
            if code in NOT_FOUND_CODES:
                return False
            raise ResourceFetchFailure(self.location, str(exc)) from exc
        except BotoCoreError as exc:
            raise ResourceFetchFailure(self.location, str(exc)) from exc
        return True

    def fetch(self, target: Path) -> Path:
        target.parent.mkdir(parents=True, exist_ok=True)
        log.info("Downloading %s -> %s", self.location, target)
        try:
            self.client.download_file(self.bucket, self.key, str(target))
        except (ClientError, BotoCoreError) as exc:
            raise ResourceFetchFailure(self.location, str(exc)) from exc
        return target


class S3ResourceLoader:
    """Load ``s3://`` locations; anything else goes to ``delegate``."""

    def __init__(
        self,
        client: Any,
        delegate: Optional[ResourceLoader] = None,
        naming: Callable[[S3Resource], str] = sanitized(object_key),
    ) -> None:
        self._client = client
        self.delegate = delegate or FileSystemResourceLoader()
        self.naming = naming

    def get_resource(self, location: str) -> Resource:
        if location.startswith(S3_PROTOCOL_PREFIX):
            parsed = S3ObjectLocation.parse(location)
            return S3Resource(self._client, parsed.bucket, parsed.key, naming=self.naming)
        return self.delegate.get_resource(location)
