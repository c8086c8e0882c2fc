"""Wiring of the S3 client, resolver and resource loaders."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Optional

import boto3
import httpx
from botocore import UNSIGNED
from botocore.config import Config

from s3maven.modules.resourceloader.loader import (
    DelegatingResourceLoader,
    FileSystemResourceLoader,
    MavenResourceLoader,
    ResourceCache,
    S3MavenResourceLoader,
    S3ResourceLoader,
)
from s3maven.modules.resourceloader.resolver import S3MavenResourcePathResolver
from .settings import Settings

log = logging.getLogger(__name__)


def build_s3_client(settings: Settings) -> Any:
    """Create the S3 client.

    Explicit keys are used only when both are configured; otherwise boto3
    searches its default chain (environment, shared credentials file,
    instance profile). With ``s3_anonymous`` requests are sent unsigned and
    no credentials are used at all.
    """
    kwargs: dict[str, Any] = {"config": Config(signature_version="s3v4")}
    if settings.s3_anonymous:
        kwargs["config"] = Config(signature_version=UNSIGNED)
        log.info("Anonymous S3 access configured, requests are unsigned")
    elif settings.aws_access_key_id and settings.aws_secret_access_key:
        kwargs["aws_access_key_id"] = settings.aws_access_key_id
        kwargs["aws_secret_access_key"] = settings.aws_secret_access_key
    else:
        log.info("No explicit AWS keys configured, using the default credential chain")
    if settings.aws_region:
        kwargs["region_name"] = settings.aws_region
    if settings.s3_endpoint_url:
        kwargs["endpoint_url"] = settings.s3_endpoint_url
    return boto3.client("s3", **kwargs)


@dataclass
class ServiceContainer:
    """Container that wires plain-Python services with shared settings."""

    settings: Settings
    s3_client: Optional[Any] = None
    http_client: Optional[httpx.Client] = None
    path_resolver: S3MavenResourcePathResolver = field(init=False)
    filesystem_loader: FileSystemResourceLoader = field(init=False)
    s3_loader: S3ResourceLoader = field(init=False)
    s3_maven_loader: S3MavenResourceLoader = field(init=False)
    maven_loader: MavenResourceLoader = field(init=False)
    resource_loader: DelegatingResourceLoader = field(init=False)
    resource_cache: ResourceCache = field(init=False)

    def __post_init__(self) -> None:
        if self.s3_client is None:
            self.s3_client = build_s3_client(self.settings)
        self.path_resolver = S3MavenResourcePathResolver(
            self.s3_client,
            self.settings.s3_maven_repository,
            metadata_workers=self.settings.s3_maven_metadata_workers,
            listing_timeout=self.settings.s3_maven_listing_timeout,
        )
        self.filesystem_loader = FileSystemResourceLoader()
        self.s3_loader = S3ResourceLoader(self.s3_client, delegate=self.filesystem_loader)
        self.s3_maven_loader = S3MavenResourceLoader(self.path_resolver, self.s3_loader)
        self.maven_loader = MavenResourceLoader(self.settings, client=self.http_client)
        self.resource_loader = DelegatingResourceLoader(
            {
                "s3": self.s3_loader,
                "s3-maven": self.s3_maven_loader,
                "maven": self.maven_loader,
            },
            default=self.filesystem_loader,
        )
        self.resource_cache = ResourceCache(self.resource_loader, self.settings.resource_cache_dir)
        log.info(
            "Resource loaders ready: schemes=%s s3-maven repository=%s cache=%s",
            self.resource_loader.schemes,
            self.path_resolver.location,
            self.resource_cache.cache_dir,
        )
