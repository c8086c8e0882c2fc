"""FastAPI routes exposing resolution and caching of resources."""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException, Request

from s3maven.modules.resourceloader.domain import (
    InvalidCoordinateFormat,
    ListingFailure,
    MetadataFetchFailure,
    NoMatchingArtifact,
    ResourceFetchFailure,
    ResourceLoaderError,
    UnsupportedLocation,
)
from s3maven.modules.resourceloader.loader import S3_MAVEN_PREFIX, scheme_of

router = APIRouter(prefix="/resources", tags=["resources"])


def get_container(request: Request) -> Any:
    container = getattr(request.app.state, "container", None)
    if not container or not getattr(container, "resource_loader", None):
        raise HTTPException(status_code=500, detail="Resource loaders not initialized.")
    return container


def _raise_http(exc: ResourceLoaderError) -> None:
    if isinstance(exc, (InvalidCoordinateFormat, UnsupportedLocation)):
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    if isinstance(exc, NoMatchingArtifact):
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    if isinstance(exc, (ListingFailure, MetadataFetchFailure, ResourceFetchFailure)):
        raise HTTPException(status_code=502, detail=str(exc)) from exc
    raise HTTPException(status_code=500, detail=str(exc)) from exc


@router.get("/latest")
def resolve_latest(coordinate: str, container: Any = Depends(get_container)) -> Dict[str, str]:
    try:
        resolved = container.path_resolver.resolve_latest(coordinate.strip().removeprefix(S3_MAVEN_PREFIX).strip())
    except ResourceLoaderError as exc:
        _raise_http(exc)
    return resolved.as_dict()


@router.get("/describe")
def describe(location: str, container: Any = Depends(get_container)) -> Dict[str, Any]:
    try:
        resource = container.resource_loader.get_resource(location)
        return {
            "scheme": scheme_of(location) or "file",
            "location": resource.location,
            "fileName": resource.filename,
        }
    except ResourceLoaderError as exc:
        _raise_http(exc)


@router.post("/fetch")
def fetch(payload: Dict[str, Any], container: Any = Depends(get_container)) -> Dict[str, Any]:
    location = payload.get("location")
    if not isinstance(location, str) or not location.strip():
        raise HTTPException(status_code=400, detail="location is required")
    try:
        path = container.resource_cache.fetch(location, force=bool(payload.get("force")))
    except ResourceLoaderError as exc:
        _raise_http(exc)
    return {"location": location, "filePath": str(path), "fileName": path.name}
