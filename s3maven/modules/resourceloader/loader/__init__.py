from .base import FileSystemResource, FileSystemResourceLoader, Resource, ResourceLoader
from .cache import ResourceCache
from .delegating import DelegatingResourceLoader, scheme_of
from .maven import MavenResource, MavenResourceLoader
from .s3 import S3Resource, S3ResourceLoader, object_key, sanitize_filename, sanitized
from .s3maven import S3_MAVEN_PREFIX, S3MavenResourceLoader

__all__ = [
    "FileSystemResource",
    "FileSystemResourceLoader",
    "Resource",
    "ResourceLoader",
    "ResourceCache",
    "DelegatingResourceLoader",
    "scheme_of",
    "MavenResource",
    "MavenResourceLoader",
    "S3Resource",
    "S3ResourceLoader",
    "object_key",
    "sanitize_filename",
    "sanitized",
    "S3_MAVEN_PREFIX",
    "S3MavenResourceLoader",
]
