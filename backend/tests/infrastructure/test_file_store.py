"""MaterialFileStore — chunked saves, size limit, confined resolution."""

import io

import pytest
from fastapi import UploadFile

from makesta.core.errors import FileTooLargeError
from makesta.infrastructure.file_store import MaterialFileStore


def _upload(content: bytes, filename: str = "modul.pdf") -> UploadFile:
    return UploadFile(file=io.BytesIO(content), filename=filename)


async def test_save_keeps_suffix_and_original_name(tmp_path):
    store = MaterialFileStore(tmp_path / "up", max_bytes=100)
    stored = await store.save(_upload(b"hello"))

    assert stored.size == 5
    assert stored.original_name == "modul.pdf"
    assert stored.path.endswith(".pdf")
    assert store.resolve(stored.path).read_bytes() == b"hello"


async def test_file_at_limit_accepted(tmp_path):
    store = MaterialFileStore(tmp_path, max_bytes=4)
    stored = await store.save(_upload(b"abcd"))
    assert stored.size == 4


async def test_oversized_file_rejected_and_removed(tmp_path):
    store = MaterialFileStore(tmp_path / "up", max_bytes=4)
    with pytest.raises(FileTooLargeError):
        await store.save(_upload(b"abcde"))
    assert list((tmp_path / "up").iterdir()) == []


def test_resolve_refuses_paths_outside_upload_dir(tmp_path):
    outside = tmp_path / "secret.txt"
    outside.write_text("x")
    store = MaterialFileStore(tmp_path / "up")
    store.ensure_dir()
    assert store.resolve(str(outside)) is None
    assert store.resolve(None) is None


async def test_delete_removes_file(tmp_path):
    store = MaterialFileStore(tmp_path)
    stored = await store.save(_upload(b"x"))
    store.delete(stored.path)
    assert store.resolve(stored.path) is None
