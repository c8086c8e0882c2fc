"""Loader for ``s3-maven://groupId:artifactId:version`` locations."""

from __future__ import annotations

from s3maven.modules.resourceloader.resolver import S3MavenResourcePathResolver
from .base import Resource
from .s3 import S3ResourceLoader

S3_MAVEN_PREFIX = "s3-maven://"


class S3MavenResourceLoader:
    def __init__(self, resolver: S3MavenResourcePathResolver, s3_loader: S3ResourceLoader) -> None:
        self.resolver = resolver
        self.s3_loader = s3_loader

    def resolve(self, location: str) -> str:
        coordinate = location.strip().removeprefix(S3_MAVEN_PREFIX).strip()
        return self.resolver.get_latest_resource_path(coordinate)

    def get_resource(self, location: str) -> Resource:
        return self.s3_loader.get_resource(self.resolve(location))
