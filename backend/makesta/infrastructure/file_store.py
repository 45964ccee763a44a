"""Material File Store — writes uploaded material binaries to a local directory.

Invariants:
    - Uploads are copied in fixed-size chunks (never buffered whole in memory)
    - A file larger than max_bytes is rejected and its partial copy removed
    - Stored names are random (uuid4 hex + original suffix); the original
      filename is returned separately for Content-Disposition on download
    - resolve() only returns paths inside the upload directory

Design Decisions:
    - Upload directory and size limit injected through the constructor at
      startup (app.state), not read from globals
"""

import logging
import uuid
from dataclasses import dataclass
from pathlib import Path

from fastapi import UploadFile

from makesta.core.errors import FileTooLargeError

logger = logging.getLogger(__name__)

CHUNK_SIZE = 1024 * 1024


@dataclass(frozen=True)
class StoredFile:
    path: str
    size: int
    original_name: str | None


class MaterialFileStore:
    """Local-disk storage for material uploads."""

    def __init__(self, upload_dir: str | Path, max_bytes: int = 10 * 1024 * 1024):
        self.upload_dir = Path(upload_dir)
        self.max_bytes = max_bytes

    def ensure_dir(self) -> None:
        self.upload_dir.mkdir(parents=True, exist_ok=True)

    async def save(self, upload: UploadFile) -> StoredFile:
        """Stream an UploadFile to disk, enforcing the size limit."""
        self.ensure_dir()
        suffix = Path(upload.filename or "").suffix
        target = self.upload_dir / f"{uuid.uuid4().hex}{suffix}"
        size = 0
        try:
            with target.open("wb") as out:
                while chunk := await upload.read(CHUNK_SIZE):
                    size += len(chunk)
                    if size > self.max_bytes:
                        raise FileTooLargeError(self.max_bytes)
                    out.write(chunk)
        except BaseException:
            target.unlink(missing_ok=True)
            raise
        logger.info(f"Stored upload {target.name} ({size} bytes)")
        return StoredFile(path=str(target), size=size, original_name=upload.filename)

    def resolve(self, file_path: str | None) -> Path | None:
        """Return the on-disk path if it exists inside the upload dir, else None."""
        if not file_path:
            return None
        path = Path(file_path)
        try:
            path.resolve().relative_to(self.upload_dir.resolve())
        except ValueError:
            logger.warning(f"Refusing to serve file outside upload dir: {file_path}")
            return None
        return path if path.is_file() else None

    def delete(self, file_path: str | None) -> None:
        path = self.resolve(file_path)
        if path is not None:
            path.unlink(missing_ok=True)
