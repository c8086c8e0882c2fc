"""Value objects produced while resolving the latest artifact of a version directory."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from .coordinate import PATH_DELIMITER, S3_PROTOCOL_PREFIX
from .exceptions import NoMatchingArtifact


@dataclass(frozen=True)
class ObjectEntry:
    """One item observed during a directory listing."""

    relative_name: str
    is_directory: bool = False


@dataclass(frozen=True)
class CandidateArtifact:
    relative_name: str
    last_modified: datetime


@dataclass(frozen=True)
class ResolvedArtifactPath:
    """Absolute ``s3://`` location of the selected artifact."""

    bucket: str
    key: str

    @property
    def absolute_path(self) -> str:
        return f"{S3_PROTOCOL_PREFIX}{self.bucket}{PATH_DELIMITER}{self.key}"

    @property
    def filename(self) -> str:
        return self.key.rsplit(PATH_DELIMITER, 1)[-1]

    def as_dict(self) -> dict[str, str]:
        return {
            "absolutePath": self.absolute_path,
            "bucket": self.bucket,
            "key": self.key,
            "fileName": self.filename,
        }

    def __str__(self) -> str:
        return self.absolute_path


@dataclass(frozen=True)
class Selection:
    """Outcome of candidate selection: either a candidate or the reason there is none."""

    candidate: Optional[CandidateArtifact] = None
    error: Optional[NoMatchingArtifact] = None

    @property
    def ok(self) -> bool:
        return self.candidate is not None

    @classmethod
    def found(cls, candidate: CandidateArtifact) -> "Selection":
        return cls(candidate=candidate)

    @classmethod
    def missing(cls, coordinate: str, directory: str) -> "Selection":
        return cls(error=NoMatchingArtifact(coordinate, directory))

    def unwrap(self) -> CandidateArtifact:
        if self.candidate is None:
            raise self.error or NoMatchingArtifact("<unknown>", "<unknown>")
        return self.candidate
