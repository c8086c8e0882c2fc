"""Test doubles shared by the test modules."""

from datetime import datetime, timezone
from typing import Dict, List, Optional

from botocore.exceptions import ClientError


def client_error(code: str, operation: str = "ListObjectsV2", status: int = 403) -> ClientError:
    return ClientError(
        {"Error": {"Code": code, "Message": code}, "ResponseMetadata": {"HTTPStatusCode": status}},
        operation,
    )


class FakeS3Client:
    """In-memory stand-in for the boto3 S3 client calls the project uses."""

    def __init__(self, bucket: str, page_size: int = 1000) -> None:
        self.bucket = bucket
        self.page_size = page_size
        self.objects: Dict[str, tuple[datetime, bytes]] = {}
        self.list_calls: List[dict] = []
        self.head_calls: List[str] = []
        self.list_error: Optional[ClientError] = None
        self.head_errors: Dict[str, ClientError] = {}

    def put(self, key: str, last_modified: datetime, body: bytes = b"jar") -> None:
        self.objects[key] = (last_modified, body)

    def list_objects_v2(self, **kwargs):
        self.list_calls.append(dict(kwargs))
        if self.list_error is not None:
            raise self.list_error
        if kwargs["Bucket"] != self.bucket:
            raise client_error("NoSuchBucket", status=404)
        prefix = kwargs.get("Prefix", "")
        delimiter = kwargs.get("Delimiter")
        items: List[tuple[str, bool]] = []
        seen_prefixes = set()
        for key in sorted(self.objects):
            if not key.startswith(prefix):
                continue
            rest = key[len(prefix):]
            if delimiter and delimiter in rest:
                common = prefix + rest.split(delimiter, 1)[0] + delimiter
                if common not in seen_prefixes:
                    seen_prefixes.add(common)
                    items.append((common, True))
            else:
                items.append((key, False))
        start = int(kwargs.get("ContinuationToken") or 0)
        page = items[start:start + self.page_size]
        response = {
            "CommonPrefixes": [{"Prefix": name} for name, is_dir in page if is_dir],
            "Contents": [{"Key": name} for name, is_dir in page if not is_dir],
            "IsTruncated": start + self.page_size < len(items),
            "KeyCount": len(page),
        }
        if response["IsTruncated"]:
            response["NextContinuationToken"] = str(start + self.page_size)
        return response

    def head_object(self, Bucket: str, Key: str):
        self.head_calls.append(Key)
        if Key in self.head_errors:
            raise self.head_errors[Key]
        if Bucket != self.bucket or Key not in self.objects:
            raise client_error("404", operation="HeadObject", status=404)
        last_modified, body = self.objects[Key]
        return {"LastModified": last_modified, "ContentLength": len(body)}

    def download_file(self, bucket: str, key: str, filename: str) -> None:
        if bucket != self.bucket or key not in self.objects:
            raise client_error("404", operation="HeadObject", status=404)
        with open(filename, "wb") as fh:
            fh.write(self.objects[key][1])


def ts(value: str) -> datetime:
    return datetime.strptime(value, "%Y%m%d.%H%M%S").replace(tzinfo=timezone.utc)
