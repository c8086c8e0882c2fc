import threading

import pytest

from s3fakes import FakeS3Client, client_error, ts
from s3maven.modules.resourceloader.domain import ListingCancelled, ListingFailure
from s3maven.modules.resourceloader.resolver import DirectoryLister

PREFIX = "snapshot/io/pivotal/walbrook/balance-source/0.0.3-SNAPSHOT/"


def _populated_client(count: int, page_size: int) -> FakeS3Client:
    client = FakeS3Client("walbrook-maven", page_size=page_size)
    for idx in range(count):
        client.put(f"{PREFIX}balance-source-0.0.3-{idx:02d}.jar", ts("20160714.133004"))
    return client


def test_follows_continuation_tokens_until_complete():
    client = _populated_client(count=7, page_size=3)
    lister = DirectoryLister(client, "walbrook-maven")

    entries = lister.list(PREFIX)

    assert len(client.list_calls) == 3
    assert [entry.relative_name for entry in entries] == [
        f"{PREFIX}balance-source-0.0.3-{idx:02d}.jar" for idx in range(7)
    ]
    assert "ContinuationToken" not in client.list_calls[0]
    assert client.list_calls[1]["ContinuationToken"] == "3"
    assert client.list_calls[2]["ContinuationToken"] == "6"


def test_request_is_scoped_by_bucket_prefix_and_delimiter():
    client = _populated_client(count=1, page_size=10)

    DirectoryLister(client, "walbrook-maven").list(PREFIX)

    assert client.list_calls == [{"Bucket": "walbrook-maven", "Prefix": PREFIX, "Delimiter": "/"}]


def test_deeper_keys_are_reported_as_directories():
    client = FakeS3Client("walbrook-maven")
    client.put("snapshot/io/pivotal/walbrook/balance-source/maven-metadata.xml", ts("20160714.133004"))
    client.put("snapshot/io/pivotal/walbrook/balance-source/0.0.3-SNAPSHOT/a.jar", ts("20160714.133004"))
    client.put("snapshot/io/pivotal/walbrook/balance-source/0.0.4-SNAPSHOT/b.jar", ts("20160714.133004"))

    entries = DirectoryLister(client, "walbrook-maven").list("snapshot/io/pivotal/walbrook/balance-source/")

    directories = [entry.relative_name for entry in entries if entry.is_directory]
    files = [entry.relative_name for entry in entries if not entry.is_directory]
    assert directories == [
        "snapshot/io/pivotal/walbrook/balance-source/0.0.3-SNAPSHOT/",
        "snapshot/io/pivotal/walbrook/balance-source/0.0.4-SNAPSHOT/",
    ]
    assert files == ["snapshot/io/pivotal/walbrook/balance-source/maven-metadata.xml"]


def test_access_denied_becomes_listing_failure():
    client = _populated_client(count=1, page_size=10)
    client.list_error = client_error("AccessDenied")

    with pytest.raises(ListingFailure) as excinfo:
        DirectoryLister(client, "walbrook-maven").list(PREFIX)

    assert str(excinfo.value).startswith(f"Unable to list '{PREFIX}'")
    assert excinfo.value.directory == PREFIX
    assert "AccessDenied" in str(excinfo.value.__cause__)
    assert len(client.list_calls) == 1


def test_cancellation_is_checked_between_pages():
    client = _populated_client(count=6, page_size=2)
    cancel = threading.Event()
    original = client.list_objects_v2

    def cancel_after_first_page(**kwargs):
        response = original(**kwargs)
        cancel.set()
        return response

    client.list_objects_v2 = cancel_after_first_page

    with pytest.raises(ListingCancelled) as excinfo:
        DirectoryLister(client, "walbrook-maven").list(PREFIX, cancel=cancel)

    assert len(client.list_calls) == 1
    assert isinstance(excinfo.value, ListingFailure)


def test_expired_timeout_aborts_before_next_page():
    client = _populated_client(count=2, page_size=1)

    with pytest.raises(ListingCancelled):
        DirectoryLister(client, "walbrook-maven").list(PREFIX, timeout=0)

    assert client.list_calls == []
