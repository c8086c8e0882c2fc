import httpx
import pytest
from fastapi.testclient import TestClient

from s3fakes import client_error
from s3maven.bootstrap import ServiceContainer
from s3maven.factory import create_app

COORDINATE = "io.pivotal.walbrook:balance-source:0.0.3-SNAPSHOT"
JAR_KEY = "snapshot/io/pivotal/walbrook/balance-source/0.0.3-SNAPSHOT/balance-source-0.0.3-20160718.163849-6.jar"


@pytest.fixture
def api(walbrook_client, settings):
    http_client = httpx.Client(transport=httpx.MockTransport(lambda request: httpx.Response(200, content=b"pom")))
    container = ServiceContainer(settings, s3_client=walbrook_client, http_client=http_client)
    return TestClient(create_app(settings, container=container))


def test_health(api):
    response = api.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_latest_returns_resolved_path(api):
    response = api.get("/resources/latest", params={"coordinate": COORDINATE})

    assert response.status_code == 200
    body = response.json()
    assert body["absolutePath"] == f"s3://walbrook-maven/{JAR_KEY}"
    assert body["fileName"] == "balance-source-0.0.3-20160718.163849-6.jar"


def test_latest_accepts_scheme_prefix(api):
    response = api.get("/resources/latest", params={"coordinate": f"s3-maven://{COORDINATE}"})

    assert response.status_code == 200


def test_latest_strips_only_leading_scheme_prefix(api):
    response = api.get("/resources/latest", params={"coordinate": f"{COORDINATE}s3-maven://"})

    assert response.status_code == 400


def test_latest_rejects_invalid_coordinate(api):
    response = api.get("/resources/latest", params={"coordinate": "io.pivotal.walbrook:balance-source"})

    assert response.status_code == 400


def test_latest_reports_missing_artifact(api):
    response = api.get("/resources/latest", params={"coordinate": "io.pivotal.walbrook:balance-source:9.9.9"})

    assert response.status_code == 404
    assert "9.9.9" in response.json()["detail"]


def test_latest_reports_listing_failure(api, walbrook_client):
    walbrook_client.list_error = client_error("AccessDenied")

    response = api.get("/resources/latest", params={"coordinate": COORDINATE})

    assert response.status_code == 502
    assert "Unable to list" in response.json()["detail"]


def test_describe_s3_maven_location(api):
    response = api.get("/resources/describe", params={"location": f"s3-maven://{COORDINATE}"})

    assert response.status_code == 200
    assert response.json() == {
        "scheme": "s3-maven",
        "location": f"s3://walbrook-maven/{JAR_KEY}",
        "fileName": JAR_KEY.replace("/", "_"),
    }


def test_fetch_caches_resource(api, settings):
    response = api.post("/resources/fetch", json={"location": "maven://org.example:demo:pom:1.0"})

    assert response.status_code == 200
    body = response.json()
    assert body["fileName"] == "demo-1.0.pom"
    assert body["filePath"].startswith(settings.resource_cache_dir)


def test_fetch_requires_location(api):
    response = api.post("/resources/fetch", json={})

    assert response.status_code == 400
