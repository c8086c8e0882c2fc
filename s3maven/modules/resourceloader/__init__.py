"""Resource loader module exports."""

from .controller import router as resources_router
from .resolver import S3MavenResourcePathResolver

__all__ = ["S3MavenResourcePathResolver", "resources_router"]
