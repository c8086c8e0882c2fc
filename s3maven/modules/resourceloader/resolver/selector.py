"""Filter listed names down to binary artifacts and pick the newest one."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime
from typing import Callable, Iterable, List, Sequence

from s3maven.modules.resourceloader.domain import (
    PATH_DELIMITER,
    CandidateArtifact,
    ObjectEntry,
    Selection,
)

BINARY_SUFFIX = ".jar"
COMPANION_SUFFIXES = ("javadoc.jar", "sources.jar")

log = logging.getLogger(__name__)

LastModifiedFetcher = Callable[[str], datetime]


def is_binary_artifact(name: str) -> bool:
    return name.endswith(BINARY_SUFFIX) and not name.endswith(COMPANION_SUFFIXES)


def filter_candidates(entries: Iterable[ObjectEntry]) -> List[str]:
    return [entry.relative_name for entry in entries if is_binary_artifact(entry.relative_name)]


def fetch_candidates(
    names: Sequence[str],
    version_dir_key: str,
    fetch_last_modified: LastModifiedFetcher,
    *,
    workers: int = 1,
) -> List[CandidateArtifact]:
    """Look up the last-modified time of every candidate.

    The first failing lookup propagates and aborts the whole batch.
    """

    def _one(name: str) -> CandidateArtifact:
        timestamp = fetch_last_modified(f"{version_dir_key}{PATH_DELIMITER}{name}")
        return CandidateArtifact(relative_name=name, last_modified=timestamp)

    max_workers = min(max(1, workers), len(names))
    if max_workers <= 1:
        return [_one(name) for name in names]

    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = [executor.submit(_one, name) for name in names]
        try:
            return [future.result() for future in futures]
        except Exception:
            for future in futures:
                future.cancel()
            raise


def select_latest(
    entries: Iterable[ObjectEntry],
    version_dir_key: str,
    fetch_last_modified: LastModifiedFetcher,
    *,
    coordinate: str = "",
    workers: int = 1,
) -> Selection:
    """Return the binary artifact with the greatest last-modified time.

    When two candidates carry the same timestamp either one may be returned;
    callers must not depend on which.
    """
    names = filter_candidates(entries)
    if not names:
        return Selection.missing(coordinate or version_dir_key, version_dir_key)

    candidates = fetch_candidates(names, version_dir_key, fetch_last_modified, workers=workers)
    latest = max(candidates, key=lambda candidate: candidate.last_modified)
    log.debug("Selected %s out of %d candidate(s) in %s", latest.relative_name, len(candidates), version_dir_key)
    return Selection.found(latest)
