"""Create a bucket, upload a file to it and download it again."""

from __future__ import annotations

import io
from pathlib import Path
from typing import Any, BinaryIO, Protocol, Union

BUCKET_NAME = "aws-demo-test-bucket-95fd1"
REGION_NAME = "us-east-1"
DOWNLOAD_KEY = "test.txt"


class S3Error(Exception):
    """A storage operation failed."""


class S3Client(Protocol):
    def list_buckets(self) -> dict[str, Any]: ...

    def create_bucket(self, **kwargs: Any) -> Any: ...


class S3Uploader(Protocol):
    def upload(self, bucket: str, key: str, body: BinaryIO) -> Any: ...


class S3Downloader(Protocol):
    def download(self, writer: BinaryIO, bucket: str, key: str) -> int: ...


def create_s3_bucket(client: S3Client) -> None:
    """Create the bucket unless a bucket of that name already exists."""
    try:
        listing = client.list_buckets()
    except Exception as exc:
        raise S3Error(f"ListBuckets error: {exc}") from exc

    found = any(bucket.get("Name") == BUCKET_NAME for bucket in listing.get("Buckets") or [])
    if found:
        return
    try:
        client.create_bucket(
            Bucket=BUCKET_NAME,
            CreateBucketConfiguration={"LocationConstraint": REGION_NAME},
        )
    except Exception as exc:
        raise S3Error(f"CreateBucket error: {exc}") from exc


def upload_to_s3_bucket(uploader: S3Uploader, filename: Union[str, Path]) -> None:
    """Upload a local file to the bucket under its own name."""
    try:
        data = Path(filename).read_bytes()
    except OSError as exc:
        raise S3Error(f"ReadFile error: {exc}") from exc
    try:
        uploader.upload(BUCKET_NAME, str(filename), io.BytesIO(data))
    except Exception as exc:
        raise S3Error(f"Upload error: {exc}") from exc


def download_from_s3(downloader: S3Downloader) -> bytes:
    """Download the test object and return its contents."""
    buffer = io.BytesIO()
    try:
        num_bytes = downloader.download(buffer, BUCKET_NAME, DOWNLOAD_KEY)
    except Exception as exc:
        raise S3Error(f"Download error: {exc}") from exc
    data = buffer.getvalue()
    if num_bytes != len(data):
        raise S3Error(f"Numbytes received doesn't match: {num_bytes} vs {len(data)}")
    return data