"""Material Routes — upload, listing, download, deletion.

Invariants:
    - Only organizers upload or delete; any authenticated user lists and downloads
    - title is required and non-empty (whitespace-only counts as empty)
    - download_count increments only when the file is present and about to be served
    - Deleting a material also removes its stored binary; a failed insert
      removes the binary it just stored
"""

import logging

from fastapi import APIRouter, Depends, File, Form, UploadFile, status
from fastapi.responses import FileResponse
from sqlalchemy.ext.asyncio import AsyncSession

from makesta.api.dependencies import (
    get_current_identity, get_file_store, require_roles,
)
from makesta.core.domain_types import Identity, Role
from makesta.core.errors import InputValidationError, ResourceNotFoundError
from makesta.infrastructure.database import get_db
from makesta.infrastructure.file_store import MaterialFileStore
from makesta.repositories.materials import MaterialRepository
from makesta.schemas.base import MessageResponse
from makesta.schemas.material import MaterialResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/materials", tags=["materials"])


@router.get(
    "", response_model=list[MaterialResponse],
    dependencies=[Depends(get_current_identity)],
)
async def list_materials(db: AsyncSession = Depends(get_db)):
    """All materials, newest first, with the uploader nested."""
    rows = await MaterialRepository(db).list()
    return [MaterialResponse.from_owned(row) for row in rows]


@router.post(
    "", response_model=MaterialResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_material(
    title: str = Form(""),
    description: str | None = Form(None),
    file: UploadFile | None = File(None),
    identity: Identity = Depends(require_roles(Role.ORGANIZER)),
    db: AsyncSession = Depends(get_db),
    store: MaterialFileStore = Depends(get_file_store),
):
    title = title.strip()
    if not title:
        raise InputValidationError("Material title is required", field="title")

    stored = None
    if file is not None and file.filename:
        stored = await store.save(file)

    repo = MaterialRepository(db)
    try:
        material = await repo.create(
            title=title,
            description=(description or "").strip() or None,
            file_path=stored.path if stored else None,
            file_name=stored.original_name if stored else None,
            file_size=stored.size if stored else None,
            uploaded_by=identity.user_id,
        )
    except Exception:
        if stored is not None:
            store.delete(stored.path)
        raise
    logger.info(
        f"Material '{title}' uploaded",
        extra={"material_id": material.id, "user_id": identity.user_id},
    )
    return MaterialResponse.from_owned(await repo.get_with_uploader(material.id))


@router.get(
    "/{material_id}/download",
    dependencies=[Depends(get_current_identity)],
)
async def download_material(
    material_id: int,
    db: AsyncSession = Depends(get_db),
    store: MaterialFileStore = Depends(get_file_store),
):
    """Stream the material binary and count the download."""
    repo = MaterialRepository(db)
    material = await repo.get(material_id)
    if material is None:
        raise ResourceNotFoundError("Material", material_id)

    path = store.resolve(material.file_path)
    if path is None:
        raise ResourceNotFoundError("Material file", material_id)

    await repo.increment_download_count(material_id)
    return FileResponse(
        path,
        filename=material.file_name or f"{material.title}{path.suffix}",
        media_type="application/octet-stream",
    )


@router.delete("/{material_id}", response_model=MessageResponse)
async def delete_material(
    material_id: int,
    identity: Identity = Depends(require_roles(Role.ORGANIZER)),
    db: AsyncSession = Depends(get_db),
    store: MaterialFileStore = Depends(get_file_store),
):
    repo = MaterialRepository(db)
    material = await repo.get(material_id)
    if material is None:
        raise ResourceNotFoundError("Material", material_id)
    file_path = material.file_path

    if not await repo.delete(material_id):
        raise ResourceNotFoundError("Material", material_id)
    store.delete(file_path)
    logger.info(
        "Material deleted",
        extra={"material_id": material_id, "user_id": identity.user_id},
    )
    return MessageResponse(message="Material deleted")
