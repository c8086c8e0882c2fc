from .coordinate import (
    PATH_DELIMITER,
    S3_PROTOCOL_PREFIX,
    MavenArtifact,
    MavenCoordinate,
    RepositoryLocation,
    S3ObjectLocation,
)
from .exceptions import (
    InvalidCoordinateFormat,
    ListingCancelled,
    ListingFailure,
    MetadataFetchFailure,
    NoMatchingArtifact,
    ResourceFetchFailure,
    ResourceLoaderError,
    UnsupportedLocation,
)
from .models import CandidateArtifact, ObjectEntry, ResolvedArtifactPath, Selection

__all__ = [
    "PATH_DELIMITER",
    "S3_PROTOCOL_PREFIX",
    "MavenArtifact",
    "MavenCoordinate",
    "RepositoryLocation",
    "S3ObjectLocation",
    "InvalidCoordinateFormat",
    "ListingCancelled",
    "ListingFailure",
    "MetadataFetchFailure",
    "NoMatchingArtifact",
    "ResourceFetchFailure",
    "ResourceLoaderError",
    "UnsupportedLocation",
    "CandidateArtifact",
    "ObjectEntry",
    "ResolvedArtifactPath",
    "Selection",
]
