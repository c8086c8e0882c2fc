"""Paginated prefix/delimiter listing over an S3 bucket."""

from __future__ import annotations

import logging
import threading
import time
from typing import Any, Dict, List, Optional

from botocore.exceptions import BotoCoreError, ClientError

from s3maven.modules.resourceloader.domain import (
    PATH_DELIMITER,
    ListingCancelled,
    ListingFailure,
    ObjectEntry,
)


class DirectoryLister:
    """List one "directory" level of a bucket, following continuation tokens.

    Keys deeper than one level are grouped by the store under common prefixes
    and reported as directory entries. Entries keep the raw key as their name.
    """

    def __init__(self, client: Any, bucket: str, delimiter: str = PATH_DELIMITER) -> None:
        self._client = client
        self.bucket = bucket
        self.delimiter = delimiter
        self.log = logging.getLogger(self.__class__.__name__)

    def list(
        self,
        prefix: str,
        *,
        timeout: Optional[float] = None,
        cancel: Optional[threading.Event] = None,
    ) -> List[ObjectEntry]:
        deadline = time.monotonic() + timeout if timeout is not None else None
        request: Dict[str, Any] = {
            "Bucket": self.bucket,
            "Prefix": prefix,
            "Delimiter": self.delimiter,
        }
        entries: List[ObjectEntry] = []
        pages = 0
        while True:
            if cancel is not None and cancel.is_set():
                raise ListingCancelled(prefix, f"cancelled after {pages} page(s)")
            if deadline is not None and time.monotonic() >= deadline:
                raise ListingCancelled(prefix, f"timed out after {pages} page(s)")
            try:
                page = self._client.list_objects_v2(**request)
            except (ClientError, BotoCoreError) as exc:
                raise ListingFailure(prefix, str(exc)) from exc
            pages += 1
            for common_prefix in page.get("CommonPrefixes") or []:
                entries.append(ObjectEntry(common_prefix["Prefix"], is_directory=True))
            for summary in page.get("Contents") or []:
                entries.append(ObjectEntry(summary["Key"]))
            token = page.get("NextContinuationToken")
            if not page.get("IsTruncated") or not token:
                break
            request["ContinuationToken"] = token
        self.log.debug("Listed s3://%s/%s: %d entries in %d page(s)", self.bucket, prefix, len(entries), pages)
        return entries
