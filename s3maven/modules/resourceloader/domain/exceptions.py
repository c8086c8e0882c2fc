"""Errors raised while resolving and loading artifact resources."""

from __future__ import annotations


class ResourceLoaderError(RuntimeError):
    """Base class for every failure surfaced by the resource loader module."""


class InvalidCoordinateFormat(ResourceLoaderError, ValueError):
    """Raised when a coordinate string does not split into groupId:artifactId:version."""

    def __init__(self, coordinate: str, expected: str = "groupId:artifactId:version") -> None:
        self.coordinate = coordinate
        super().__init__(f"Invalid maven coordinate '{coordinate}', expected {expected}")


class ListingFailure(ResourceLoaderError):
    """The object store rejected or failed a directory listing."""

    def __init__(self, directory: str, reason: str | None = None) -> None:
        self.directory = directory
        super().__init__(self.describe(directory, reason))

    @staticmethod
    def describe(directory: str, reason: str | None) -> str:
        message = f"Unable to list '{directory}'"
        if reason:
            message = f"{message}: {reason}"
        return message


class ListingCancelled(ListingFailure):
    """A listing was aborted between pages by a timeout or cancellation signal."""

    @staticmethod
    def describe(directory: str, reason: str | None) -> str:
        return f"Listing of '{directory}' aborted: {reason}"


class NoMatchingArtifact(ResourceLoaderError):
    """Listing succeeded but no binary artifact survived the suffix filter."""

    def __init__(self, coordinate: str, directory: str) -> None:
        self.coordinate = coordinate
        self.directory = directory
        super().__init__(f"No binary artifact for '{coordinate}' found in '{directory}'")


class MetadataFetchFailure(ResourceLoaderError):
    """A last-modified lookup for a candidate artifact failed."""

    def __init__(self, key: str, reason: str | None = None) -> None:
        self.key = key
        message = f"Unable to read metadata of '{key}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class UnsupportedLocation(ResourceLoaderError, ValueError):
    """A resource location could not be interpreted by any loader."""


class ResourceFetchFailure(ResourceLoaderError):
    """Downloading a resource to the local filesystem failed."""

    def __init__(self, location: str, reason: str | None = None) -> None:
        self.location = location
        message = f"Unable to fetch '{location}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
