from .keys import assemble, build_version_directory_key, extract_name
from .lister import DirectoryLister
from .path_resolver import S3MavenResourcePathResolver
from .selector import BINARY_SUFFIX, COMPANION_SUFFIXES, filter_candidates, is_binary_artifact, select_latest

__all__ = [
    "assemble",
    "build_version_directory_key",
    "extract_name",
    "DirectoryLister",
    "S3MavenResourcePathResolver",
    "BINARY_SUFFIX",
    "COMPANION_SUFFIXES",
    "filter_candidates",
    "is_binary_artifact",
    "select_latest",
]
