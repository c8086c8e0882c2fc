"""Resolve maven coordinates to the newest matching jar in an S3 maven repository.

Given a repository such as ``s3://walbrook-maven/snapshot`` and coordinates
such as ``io.pivotal.walbrook:balance-source:0.0.3-SNAPSHOT``, the resolver
returns an absolute location like::

    s3://walbrook-maven/snapshot/io/pivotal/walbrook/balance-source/0.0.3-SNAPSHOT/balance-source-0.0.3-20160718.163849-6.jar

where the jar is the most recently modified binary in the version directory.
"""

from __future__ import annotations

import logging
import threading
from datetime import datetime
from typing import Any, List, Optional

from botocore.exceptions import BotoCoreError, ClientError

from s3maven.modules.resourceloader.domain import (
    PATH_DELIMITER,
    MavenCoordinate,
    MetadataFetchFailure,
    ObjectEntry,
    RepositoryLocation,
    ResolvedArtifactPath,
)
from .keys import assemble, build_version_directory_key, extract_name, name_pattern
from .lister import DirectoryLister
from .selector import select_latest


class S3MavenResourcePathResolver:
    """Stateless resolver bound to one repository location and one S3 client."""

    def __init__(
        self,
        client: Any,
        location: RepositoryLocation | str,
        *,
        metadata_workers: int = 1,
        listing_timeout: Optional[float] = None,
    ) -> None:
        if isinstance(location, str):
            location = RepositoryLocation.parse(location)
        self._client = client
        self.location = location
        self.metadata_workers = max(1, metadata_workers)
        self.listing_timeout = listing_timeout
        self.lister = DirectoryLister(client, location.bucket)
        self.log = logging.getLogger(self.__class__.__name__)

    def get_latest_resource_path(
        self,
        maven_resource: str,
        *,
        timeout: Optional[float] = None,
        cancel: Optional[threading.Event] = None,
    ) -> str:
        return self.resolve_latest(maven_resource, timeout=timeout, cancel=cancel).absolute_path

    def resolve_latest(
        self,
        maven_resource: str,
        *,
        timeout: Optional[float] = None,
        cancel: Optional[threading.Event] = None,
    ) -> ResolvedArtifactPath:
        coordinate = MavenCoordinate.parse(maven_resource)
        version_dir = build_version_directory_key(coordinate)

        resources = self.list_directory(
            version_dir + PATH_DELIMITER,
            timeout=timeout if timeout is not None else self.listing_timeout,
            cancel=cancel,
        )
        self.log.info("Listed %s: %s", version_dir, [entry.relative_name for entry in resources])

        selection = select_latest(
            resources,
            version_dir,
            self._last_modified,
            coordinate=str(coordinate),
            workers=self.metadata_workers,
        )
        latest = selection.unwrap()

        resolved = assemble(self.location, version_dir, latest.relative_name)
        self.log.info("Resolved %s -> %s", coordinate, resolved.absolute_path)
        return resolved

    def list_directory(
        self,
        directory: str,
        *,
        timeout: Optional[float] = None,
        cancel: Optional[threading.Event] = None,
    ) -> List[ObjectEntry]:
        """List ``directory`` (relative to the base directory) and return relative names."""
        prefix = self.location.key(directory)
        pattern = name_pattern(prefix)
        return [
            ObjectEntry(extract_name(entry.relative_name, prefix, pattern), entry.is_directory)
            for entry in self.lister.list(prefix, timeout=timeout, cancel=cancel)
        ]

    def _last_modified(self, resource: str) -> datetime:
        key = self.location.key(resource)
        try:
            metadata = self._client.head_object(Bucket=self.location.bucket, Key=key)
        except (ClientError, BotoCoreError) as exc:
            raise MetadataFetchFailure(key, str(exc)) from exc
        last_modified = metadata.get("LastModified")
        if last_modified is None:
            raise MetadataFetchFailure(key, "no LastModified in response")
        return last_modified
