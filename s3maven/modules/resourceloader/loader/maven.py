"""HTTP client to load artifacts from a remote maven repository."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

import httpx

from s3maven.modules.resourceloader.domain import MavenArtifact, ResourceFetchFailure
from s3maven.settings import Settings

MAVEN_PREFIX = "maven://"
PROGRESS_STEP_BYTES = 5 * 1024 * 1024

log = logging.getLogger(__name__)


@dataclass
class MavenResource:
    """An artifact hosted in a remote maven repository."""

    artifact: MavenArtifact
    url: str
    client: httpx.Client
    auth: Optional[Tuple[str, str]] = None

    @property
    def location(self) -> str:
        return f"{MAVEN_PREFIX}{self.artifact}"

    @property
    def filename(self) -> str:
        return self.artifact.filename

    @property
    def is_local(self) -> bool:
        return False

    def exists(self) -> bool:
        try:
            response = self.client.head(self.url, auth=self.auth)
        except httpx.HTTPError as exc:
            raise ResourceFetchFailure(self.location, str(exc)) from exc
        if response.status_code == 404:
            return False
        if response.is_error:
            raise ResourceFetchFailure(self.location, f"HTTP {response.status_code}")
        return True

    def fetch(self, target: Path) -> Path:
        target.parent.mkdir(parents=True, exist_ok=True)
        log.info("Downloading artifact %s url=%s", self.artifact, self.url)
        start_time = time.time()
        downloaded = 0
        try:
            with self.client.stream("GET", self.url, auth=self.auth) as response:
                response.raise_for_status()
                total = int(response.headers.get("content-length") or 0)
                next_percent = 10
                next_bytes_logged = PROGRESS_STEP_BYTES
                with open(target, "wb") as fh:
                    for chunk in response.iter_bytes(65536):
                        if not chunk:
                            continue
                        fh.write(chunk)
                        downloaded += len(chunk)
                        if total:
                            percent = int(downloaded * 100 / total)
                            if percent >= next_percent:
                                log.info("Download progress %s %s%% (%d/%d bytes)", self.artifact, percent, downloaded, total)
                                next_percent += 10
                        elif downloaded >= next_bytes_logged:
                            log.info("Download progress %s %d bytes", self.artifact, downloaded)
                            next_bytes_logged += PROGRESS_STEP_BYTES
        except httpx.HTTPError as exc:
            target.unlink(missing_ok=True)
            raise ResourceFetchFailure(self.location, str(exc)) from exc
        elapsed = max(time.time() - start_time, 1e-3)
        log.info(
            "Downloaded artifact %s -> %s (%d bytes, %.2f MB/s, %.2fs)",
            self.artifact,
            target,
            downloaded,
            (downloaded / 1024 / 1024) / elapsed,
            elapsed,
        )
        return target


class MavenResourceLoader:
    """Load ``maven://groupId:artifactId[:extension[:classifier]]:version`` locations."""

    def __init__(self, settings: Settings, client: Optional[httpx.Client] = None) -> None:
        self.base_url = settings.maven_remote_repository.rstrip("/")
        auth = None
        if settings.maven_username and settings.maven_password:
            auth = (settings.maven_username, settings.maven_password)
        self._auth = auth
        self._client = client or httpx.Client(timeout=30, verify=True, follow_redirects=True)

    def build_artifact_url(self, artifact: MavenArtifact) -> str:
        return f"{self.base_url}/{'/'.join(artifact.path_segments)}"

    def get_resource(self, location: str) -> MavenResource:
        artifact = MavenArtifact.parse(location.strip().removeprefix(MAVEN_PREFIX).strip())
        return MavenResource(
            artifact=artifact,
            url=self.build_artifact_url(artifact),
            client=self._client,
            auth=self._auth,
        )
