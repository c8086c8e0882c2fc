import pytest

from s3fakes import FakeS3Client, ts
from s3maven.settings import Settings


@pytest.fixture
def walbrook_client() -> FakeS3Client:
    """The walbrook snapshot repository with two builds of balance-source."""
    client = FakeS3Client("walbrook-maven")
    base = "snapshot/io/pivotal/walbrook/balance-source/0.0.3-SNAPSHOT/"
    client.put(base + "balance-source-0.0.3-20160718.163849-6.jar", ts("20160718.163849"))
    client.put(base + "balance-source-0.0.3-20160714.133004-1.jar", ts("20160714.133004"))
    client.put(base + "balance-source-0.0.3-20160718.163849-6.pom", ts("20160718.163849"))
    client.put(base + "maven-metadata.xml", ts("20160719.000000"))
    return client


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        _env_file=None,
        s3_maven_repository="s3://walbrook-maven/snapshot",
        maven_remote_repository="https://repo.example.com/maven2",
        resource_cache_dir=str(tmp_path / "cache"),
    )
