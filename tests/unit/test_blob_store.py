import re
from pathlib import Path
from unittest.mock import MagicMock

import boto3
import pytest
from botocore.exceptions import ClientError
from moto import mock_aws

from app.config.settings import Settings
from app.storage.exceptions import BlobStoreError
from app.storage.factory import BlobStoreFactory
from app.storage.keys import build_blob_key
from app.storage.local_adapter import LocalBlobStore
from app.storage.s3_adapter import S3BlobStore


class TestBuildBlobKey:
    def test_key_is_time_prefixed_and_keeps_name(self) -> None:
        key = build_blob_key("report.pdf")
        assert re.fullmatch(r"\d{13}-[0-9a-f]{8}-report\.pdf", key)

    def test_keys_are_unique_for_same_name(self) -> None:
        keys = {build_blob_key("same.pdf") for _ in range(50)}
        assert len(keys) == 50

    def test_strips_directories_and_unsafe_characters(self) -> None:
        key = build_blob_key("../../etc/my report (final).docx")
        assert "/" not in key
        assert key.endswith("-my_report_final_.docx")

    def test_empty_name_falls_back(self) -> None:
        assert build_blob_key("").endswith("-file")


class TestLocalBlobStore:
    def test_writes_bytes_under_root(self, tmp_path: Path) -> None:
        store = LocalBlobStore(tmp_path)
        store.put("123-abc-file.pdf", b"%PDF data", "application/pdf")
        assert (tmp_path / "123-abc-file.pdf").read_bytes() == b"%PDF data"

    def test_creates_missing_root(self, tmp_path: Path) -> None:
        store = LocalBlobStore(tmp_path / "nested" / "root")
        store.put("key", b"x", "application/pdf")
        assert (tmp_path / "nested" / "root" / "key").exists()

    def test_rejects_keys_escaping_root(self, tmp_path: Path) -> None:
        store = LocalBlobStore(tmp_path / "root")
        with pytest.raises(BlobStoreError, match="escapes"):
            store.put("../outside", b"x", "application/pdf")

    def test_wraps_os_errors(self, tmp_path: Path) -> None:
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")
        store = LocalBlobStore(blocker)
        with pytest.raises(BlobStoreError) as exc_info:
            store.put("key", b"x", "application/pdf")
        assert isinstance(exc_info.value.__cause__, OSError)


class TestS3BlobStore:
    def test_put_object_with_content_type(self) -> None:
        with mock_aws():
            s3 = boto3.client("s3", region_name="us-east-1")
            s3.create_bucket(Bucket="documents")
            store = S3BlobStore(bucket="documents", region="us-east-1")

            store.put("1-a-file.pdf", b"%PDF data", "application/pdf")

            obj = s3.get_object(Bucket="documents", Key="1-a-file.pdf")
            assert obj["Body"].read() == b"%PDF data"
            assert obj["ContentType"] == "application/pdf"

    def test_missing_bucket_raises_blob_store_error(self) -> None:
        with mock_aws():
            store = S3BlobStore(bucket="missing", region="us-east-1")
            with pytest.raises(BlobStoreError, match="missing"):
                store.put("key", b"x", "application/pdf")

    def test_client_errors_are_wrapped(self) -> None:
        client = MagicMock()
        client.put_object.side_effect = ClientError(
            {"Error": {"Code": "AccessDenied", "Message": "denied"}}, "PutObject"
        )
        store = S3BlobStore(bucket="documents", client=client)
        with pytest.raises(BlobStoreError) as exc_info:
            store.put("key", b"x", "application/pdf")
        assert isinstance(exc_info.value.__cause__, ClientError)


class TestBlobStoreFactory:
    def test_creates_local_store(self, tmp_path: Path) -> None:
        store = BlobStoreFactory.create(
            Settings(storage_backend="local", storage_local_root=str(tmp_path))
        )
        assert isinstance(store, LocalBlobStore)

    def test_creates_s3_store(self) -> None:
        with mock_aws():
            store = BlobStoreFactory.create(
                Settings(storage_backend="S3", storage_s3_region="us-east-1")
            )
        assert isinstance(store, S3BlobStore)

    def test_raises_for_unknown_backend(self) -> None:
        with pytest.raises(ValueError, match="Unknown storage backend"):
            BlobStoreFactory.create(Settings(storage_backend="ftp"))
