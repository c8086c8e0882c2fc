"""Maven coordinates and the S3 repository they are resolved against."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from .exceptions import InvalidCoordinateFormat, UnsupportedLocation

PATH_DELIMITER = "/"
S3_PROTOCOL_PREFIX = "s3://"


@dataclass(frozen=True)
class MavenCoordinate:
    """A ``groupId:artifactId:version`` triple as accepted by the s3-maven scheme."""

    group_id: str
    artifact_id: str
    version: str

    @classmethod
    def parse(cls, value: str) -> "MavenCoordinate":
        parts = value.split(":")
        if len(parts) != 3 or not all(part.strip() for part in parts):
            raise InvalidCoordinateFormat(value)
        group_id, artifact_id, version = (part.strip() for part in parts)
        # every segment becomes exactly one path segment of the version directory
        if not all(group_id.split(".")) or PATH_DELIMITER in f"{group_id}{artifact_id}{version}":
            raise InvalidCoordinateFormat(value)
        return cls(group_id=group_id, artifact_id=artifact_id, version=version)

    @property
    def group_path(self) -> str:
        return self.group_id.replace(".", PATH_DELIMITER)

    def __str__(self) -> str:
        return f"{self.group_id}:{self.artifact_id}:{self.version}"


@dataclass(frozen=True)
class MavenArtifact:
    """Coordinates accepted by the ``maven://`` scheme.

    Format: ``groupId:artifactId[:extension[:classifier]]:version``.
    """

    group_id: str
    artifact_id: str
    version: str
    extension: str = "jar"
    classifier: Optional[str] = None

    @classmethod
    def parse(cls, value: str) -> "MavenArtifact":
        parts = [part.strip() for part in value.split(":")]
        if not 3 <= len(parts) <= 5 or not all(parts):
            raise InvalidCoordinateFormat(
                value, expected="groupId:artifactId[:extension[:classifier]]:version"
            )
        group_id, artifact_id = parts[0], parts[1]
        version = parts[-1]
        extension = parts[2] if len(parts) >= 4 else "jar"
        classifier = parts[3] if len(parts) == 5 else None
        return cls(
            group_id=group_id,
            artifact_id=artifact_id,
            version=version,
            extension=extension.lstrip("."),
            classifier=classifier,
        )

    @property
    def filename(self) -> str:
        suffix = f"-{self.classifier}" if self.classifier else ""
        return f"{self.artifact_id}-{self.version}{suffix}.{self.extension}"

    @property
    def path_segments(self) -> List[str]:
        group_path = self.group_id.replace(".", PATH_DELIMITER)
        return [group_path, self.artifact_id, self.version, self.filename]

    def __str__(self) -> str:
        parts = [self.group_id, self.artifact_id]
        if self.extension != "jar" or self.classifier:
            parts.append(self.extension)
        if self.classifier:
            parts.append(self.classifier)
        parts.append(self.version)
        return ":".join(parts)


@dataclass(frozen=True)
class S3ObjectLocation:
    """A parsed ``s3://bucket/key`` location."""

    bucket: str
    key: str

    @classmethod
    def parse(cls, location: str) -> "S3ObjectLocation":
        if not location.startswith(S3_PROTOCOL_PREFIX):
            raise UnsupportedLocation(f"'{location}' is not an s3:// location")
        stripped = location[len(S3_PROTOCOL_PREFIX):]
        bucket, _, key = stripped.partition(PATH_DELIMITER)
        if not bucket or not key:
            raise UnsupportedLocation(f"'{location}' must look like s3://bucket/key")
        return cls(bucket=bucket, key=key)

    @property
    def uri(self) -> str:
        return f"{S3_PROTOCOL_PREFIX}{self.bucket}{PATH_DELIMITER}{self.key}"


@dataclass(frozen=True)
class RepositoryLocation:
    """Root of an S3 maven repository, e.g. ``s3://walbrook-maven/snapshot``.

    ``base_directory`` is usually ``snapshot`` or ``release`` and is stored
    without leading or trailing delimiters.
    """

    bucket: str
    base_directory: str

    def __post_init__(self) -> None:
        if not self.bucket or PATH_DELIMITER in self.bucket:
            raise UnsupportedLocation(f"Invalid bucket name '{self.bucket}'")
        object.__setattr__(self, "base_directory", self.base_directory.strip(PATH_DELIMITER))
        if not self.base_directory:
            raise UnsupportedLocation(f"Repository in bucket '{self.bucket}' needs a base directory")

    @classmethod
    def parse(cls, location: str) -> "RepositoryLocation":
        parsed = S3ObjectLocation.parse(location.strip())
        return cls(bucket=parsed.bucket, base_directory=parsed.key)

    def key(self, relative: str) -> str:
        return f"{self.base_directory}{PATH_DELIMITER}{relative.lstrip(PATH_DELIMITER)}"

    def __str__(self) -> str:
        return f"{S3_PROTOCOL_PREFIX}{self.bucket}{PATH_DELIMITER}{self.base_directory}"
