"""Pure helpers turning coordinates into keys and keys back into names."""

from __future__ import annotations

import re

from s3maven.modules.resourceloader.domain import (
    PATH_DELIMITER,
    MavenCoordinate,
    RepositoryLocation,
    ResolvedArtifactPath,
)

RESOURCE_FORMAT = "{prefix}(.*)"


def build_version_directory_key(coordinate: MavenCoordinate) -> str:
    """Return ``group/path/artifactId/version`` for ``coordinate``."""
    return PATH_DELIMITER.join((coordinate.group_path, coordinate.artifact_id, coordinate.version))


def name_pattern(base_prefix: str) -> re.Pattern[str]:
    return re.compile(RESOURCE_FORMAT.format(prefix=re.escape(base_prefix)), re.DOTALL)


def extract_name(raw_key: str, base_prefix: str, pattern: re.Pattern[str] | None = None) -> str:
    """Strip ``base_prefix`` from the front of ``raw_key``.

    Keys that do not start with the prefix are returned unchanged.
    """
    match = (pattern or name_pattern(base_prefix)).match(raw_key)
    if match:
        return match.group(1)
    return raw_key


def assemble(location: RepositoryLocation, version_dir_key: str, filename: str) -> ResolvedArtifactPath:
    segments = [location.base_directory, version_dir_key.strip(PATH_DELIMITER), filename.strip(PATH_DELIMITER)]
    return ResolvedArtifactPath(bucket=location.bucket, key=PATH_DELIMITER.join(segments))
